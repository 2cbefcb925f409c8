import logging
from typing import Callable

from sanskrit_agent.agent.state import (
    NormalizationFailure,
    NormalizationResult,
    NormalizationSuccess,
    ScriptType,
)
from sanskrit_agent.text.script_classifier import classify
from sanskrit_agent.tools.transliterate import devanagari_to_iast

logger = logging.getLogger(__name__)

MIXED_SCRIPT_ERROR = (
    "Mixed script input is not supported. The text is partially Devanagari and "
    "partially IAST; please submit it in one script consistently."
)


class ScriptNormalizer:
    """
    Reduces Sanskrit input to IAST.

    Devanagari is converted with `converter`, IAST passes through untouched,
    mixed input is reported as a NormalizationFailure (never raised).
    """

    def __init__(self, converter: Callable[[str], str] = devanagari_to_iast):
        self.converter = converter

    def normalize(self, text: str) -> NormalizationResult:
        script = classify(text)

        if script == ScriptType.MIXED:
            logger.warning("Rejected mixed-script input (%d chars)", len(text))
            return NormalizationFailure(error=MIXED_SCRIPT_ERROR)

        if script == ScriptType.DEVANAGARI:
            return NormalizationSuccess(iast=self.converter(text), original_script=ScriptType.DEVANAGARI)

        return NormalizationSuccess(iast=text, original_script=ScriptType.IAST)
