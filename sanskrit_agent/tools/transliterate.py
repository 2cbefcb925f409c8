from indic_transliteration import sanscript


def devanagari_to_iast(text: str) -> str:
    """Transliterate Devanagari -> IAST."""
    return sanscript.transliterate(text, sanscript.DEVANAGARI, sanscript.IAST)


def iast_to_devanagari(text: str) -> str:
    """Transliterate IAST -> Devanagari (used for display only)."""
    return sanscript.transliterate(text, sanscript.IAST, sanscript.DEVANAGARI)


def slp1_to_iast(text: str) -> str:
    """Transliterate SLP1 (Monier-Williams headword keys) -> IAST."""
    return sanscript.transliterate(text, sanscript.SLP1, sanscript.IAST)
