"""
Translation pipeline: normalize -> word analysis (LLM) -> dictionary enrichment -> assembly.

The dictionary lookup keys are the model's word / compound-member decisions,
so enrichment only starts after the analysis has fully resolved.
"""
import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import List, Optional

from sanskrit_agent.agent.state import (
    NormalizationFailure,
    NormalizationSuccess,
    TranslationResult,
    WordAnalysis,
    WordEntry,
)
from sanskrit_agent.errors import DictionaryServiceError, InputError
from sanskrit_agent.llm.word_analyzer import WordAnalyzer
from sanskrit_agent.text.lines import split_lines
from sanskrit_agent.text.script_normalizer import ScriptNormalizer
from sanskrit_agent.tools.dict_lookup import DictionaryLookupTool

logger = logging.getLogger(__name__)

DICTIONARY_FALLBACK_WARNING = (
    "Dictionary service unavailable - showing LLM-only translations "
    "(semantic analysis-only mode, no dictionary definitions)"
)


@dataclass(frozen=True)
class EnrichmentOutcome:
    words: List[WordEntry]
    warnings: Optional[List[str]] = None


# ----------------------------------------------------
# Stages
# ----------------------------------------------------

def normalize_stage(raw_text: str, normalizer: ScriptNormalizer) -> NormalizationSuccess:
    normalized = normalizer.normalize(raw_text)
    if isinstance(normalized, NormalizationFailure):
        raise InputError(normalized.error)
    return normalized


def analysis_stage(iast_text: str, analyzer) -> WordAnalysis:
    # Errors propagate untouched: there is nothing to fall back to
    return analyzer.analyze(iast_text)


def lookup_keys(words: List[WordEntry]) -> List[str]:
    """Lookup keys in entry order, duplicates kept."""
    return [entry.word for entry in words]


def merge_definitions(words: List[WordEntry], definitions: Mapping) -> EnrichmentOutcome:
    """Attach definitions to every entry, or raise DictionaryServiceError without touching any."""
    per_word = {}
    for entry in words:
        value = definitions.get(entry.word)
        if value is None:
            value = []
        if not isinstance(value, (list, tuple)):
            raise DictionaryServiceError(f"rejected batch (definitions for {entry.word!r} are {type(value).__name__})")
        per_word[entry.word] = list(value)

    enriched = [replace(entry, dictionary_definitions=list(per_word[entry.word])) for entry in words]
    return EnrichmentOutcome(words=enriched)


def analysis_only_fallback(words: List[WordEntry]) -> EnrichmentOutcome:
    return EnrichmentOutcome(words=list(words), warnings=[DICTIONARY_FALLBACK_WARNING])


def enrich_with_dictionary(words: List[WordEntry], dictionary) -> EnrichmentOutcome:
    """
    Either every entry gets its definitions and no warning, or no entry is
    touched and exactly one warning is recorded. Never raises.
    """
    try:
        definitions = dictionary.lookup_many(lookup_keys(words))
        if not isinstance(definitions, Mapping):
            raise DictionaryServiceError(f"rejected batch ({type(definitions).__name__})")
        return merge_definitions(words, definitions)
    except Exception as e:
        logger.warning("Dictionary lookup failed, falling back to LLM-only mode: %s", e)
        return analysis_only_fallback(words)


def assemble_result(raw_text: str, normalized: NormalizationSuccess, analysis: WordAnalysis,
                    enrichment: EnrichmentOutcome) -> TranslationResult:
    return TranslationResult(
        original_text=split_lines(raw_text),
        iast_text=split_lines(normalized.iast),
        words=enrichment.words,
        alternative_translations=analysis.alternative_translations,
        warnings=enrichment.warnings or None,
    )


class TranslationOrchestrator:
    def __init__(self, analyzer, dictionary=None, normalizer: ScriptNormalizer = None):
        self.analyzer = analyzer
        self.dictionary = dictionary
        self.normalizer = normalizer or ScriptNormalizer()

    @classmethod
    def from_llm(cls, llm, db_path: str = None) -> "TranslationOrchestrator":
        return cls(WordAnalyzer(llm), DictionaryLookupTool(db_path))

    def translate(self, raw_text: str, use_dict: bool = True) -> TranslationResult:
        """
        Translate Devanagari or IAST text into a word-by-word breakdown.

        Raises InputError for mixed-script text and ModelServiceError when the
        analysis fails. Dictionary failures only add a warning.
        """
        logger.info("Step 1: Normalizing script...")
        normalized = normalize_stage(raw_text, self.normalizer)

        logger.info("Step 2: Word analysis (%s input)...", normalized.original_script.value)
        analysis = analysis_stage(normalized.iast, self.analyzer)

        if use_dict and self.dictionary is not None:
            logger.info("Step 3: Looking up %d words in dictionary...", len(analysis.words))
            enrichment = enrich_with_dictionary(analysis.words, self.dictionary)
        else:
            logger.info("Step 3: Dictionary lookup SKIPPED.")
            enrichment = EnrichmentOutcome(words=list(analysis.words))

        return assemble_result(raw_text, normalized, analysis, enrichment)
