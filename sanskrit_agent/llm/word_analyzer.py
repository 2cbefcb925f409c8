import logging

from sanskrit_agent.agent.state import WordAnalysis
from sanskrit_agent.errors import ModelServiceError
from sanskrit_agent.llm.prompts import WORD_ANALYSIS_SYSTEM, WORD_ANALYSIS_USER
from sanskrit_agent.llm.response_parser import ParseFailure, ResponseParser

logger = logging.getLogger(__name__)


class WordAnalyzer:
    """
    Semantic analysis through the language model.

    `llm` is anything with `complete(messages) -> completion dict`
    (QwenLocalLLM in production).
    """

    def __init__(self, llm, parser: ResponseParser = None):
        self.name = "WordAnalyzer"
        self.llm = llm
        self.parser = parser or ResponseParser()

    def build_messages(self, text: str) -> list:
        return [
            {"role": "system", "content": WORD_ANALYSIS_SYSTEM},
            {"role": "user", "content": WORD_ANALYSIS_USER.format(text=text)},
        ]

    def analyze(self, text: str) -> WordAnalysis:
        try:
            completion = self.llm.complete(self.build_messages(text))
        except ModelServiceError:
            raise
        except Exception as e:
            raise ModelServiceError(str(e)) from e

        outcome = self.parser.parse(completion)
        if isinstance(outcome, ParseFailure):
            logger.warning("Model reply rejected: %s", outcome.message)
            raise outcome.to_error()

        logger.debug("Model returned %d word entries", len(outcome.words))
        return outcome
