from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class ScriptType(str, Enum):
    DEVANAGARI = "devanagari"
    IAST = "iast"
    MIXED = "mixed"


@dataclass(frozen=True)
class NormalizationSuccess:
    iast: str
    original_script: ScriptType
    success = True


@dataclass(frozen=True)
class NormalizationFailure:
    error: str
    success = False


NormalizationResult = Union[NormalizationSuccess, NormalizationFailure]


@dataclass(frozen=True)
class DictionaryDefinition:
    source: str
    definition: str

    def to_dict(self) -> dict:
        return {"source": self.source, "definition": self.definition}


@dataclass(frozen=True)
class WordEntry:
    """
    One word (or compound member) of the analysed text.

    `dictionary_definitions` is None until the merge stage sets it; it stays None
    when enrichment was skipped or the dictionary was unavailable.
    """
    word: str
    meanings: List[str] = field(default_factory=list)
    grammatical_form: Optional[str] = None
    dictionary_definitions: Optional[List[DictionaryDefinition]] = None
    contextual_note: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"word": self.word}
        if self.grammatical_form is not None:
            data["grammaticalForm"] = self.grammatical_form
        data["meanings"] = list(self.meanings)
        if self.dictionary_definitions is not None:
            data["dictionaryDefinitions"] = [d.to_dict() for d in self.dictionary_definitions]
        if self.contextual_note is not None:
            data["contextualNote"] = self.contextual_note
        return data


@dataclass(frozen=True)
class WordAnalysis:
    """Validated output of the language model for one text."""
    words: List[WordEntry]
    alternative_translations: Optional[List[str]] = None


@dataclass(frozen=True)
class TranslationResult:
    original_text: List[str]
    iast_text: List[str]
    words: List[WordEntry]
    alternative_translations: Optional[List[str]] = None
    warnings: Optional[List[str]] = None

    @property
    def degraded(self) -> bool:
        return self.warnings is not None

    def to_dict(self) -> dict:
        data = {
            "originalText": list(self.original_text),
            "iastText": list(self.iast_text),
            "words": [w.to_dict() for w in self.words],
        }
        if self.alternative_translations is not None:
            data["alternativeTranslations"] = list(self.alternative_translations)
        if self.warnings is not None:
            data["warnings"] = list(self.warnings)
        return data
