"""
Script classification for Sanskrit input.

A code point is Devanagari if it lies in U+0900-U+097F and Latin if its Unicode
Script property is Latin (plain ASCII letters and the IAST diacritic letters).
Everything else (digits, punctuation, whitespace, combining marks) is neutral.
"""
import regex

from sanskrit_agent.agent.state import ScriptType

DEVANAGARI_RANGE_START = 0x0900
DEVANAGARI_RANGE_END = 0x097F

# Combining marks have Script=Inherited, so they never match
LATIN_SCRIPT_PATTERN = regex.compile(r"\p{Script=Latin}")


def is_devanagari_char(char: str) -> bool:
    return DEVANAGARI_RANGE_START <= ord(char) <= DEVANAGARI_RANGE_END


def is_latin_char(char: str) -> bool:
    return LATIN_SCRIPT_PATTERN.match(char) is not None


def classify(text: str) -> ScriptType:
    """
    Classify the writing system of `text`.

    Returns MIXED as soon as both scripts have been seen. Empty or all-neutral
    text defaults to IAST.
    """
    saw_devanagari = False
    saw_latin = False

    for char in text:
        if is_devanagari_char(char):
            saw_devanagari = True
        elif is_latin_char(char):
            saw_latin = True

        if saw_devanagari and saw_latin:
            return ScriptType.MIXED

    if saw_devanagari:
        return ScriptType.DEVANAGARI
    return ScriptType.IAST
