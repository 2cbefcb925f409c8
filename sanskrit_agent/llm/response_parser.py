"""
Validation of the language model's word-analysis reply.

The reply is untrusted text. Parsing runs as a fixed sequence of stages
(presence -> JSON extraction -> JSON parsing -> shape -> entries) and stops at
the first failure, returning a ParseFailure tagged with one FailureKind instead
of raising. WordAnalyzer turns failures into the matching ModelServiceError.
"""
import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from sanskrit_agent.agent.state import WordAnalysis, WordEntry
from sanskrit_agent.errors import (
    EmptyResponseError,
    InvalidEntryError,
    InvalidStructureError,
    ModelServiceError,
    ResponseParseError,
)

CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```")

REQUIRED_ENTRY_KEYS = ("word", "grammaticalForm", "meanings")


class FailureKind(str, Enum):
    EMPTY_RESPONSE = "empty_response"
    PARSE_ERROR = "parse_error"
    INVALID_STRUCTURE = "invalid_structure"
    INVALID_ENTRY = "invalid_entry"


_ERRORS = {
    FailureKind.EMPTY_RESPONSE: EmptyResponseError,
    FailureKind.PARSE_ERROR: ResponseParseError,
    FailureKind.INVALID_STRUCTURE: InvalidStructureError,
    FailureKind.INVALID_ENTRY: InvalidEntryError,
}


@dataclass(frozen=True)
class ParseFailure:
    kind: FailureKind
    detail: str = ""

    def to_error(self) -> ModelServiceError:
        return _ERRORS[self.kind](self.detail)

    @property
    def message(self) -> str:
        return str(self.to_error())


ParseOutcome = Union[WordAnalysis, ParseFailure]


class ResponseParser:

    def parse(self, completion: Any) -> ParseOutcome:
        """
        Parse a llama.cpp chat completion.

        Each choice is treated as a content block; the first choice carrying
        a non-empty string message is the textual block.
        """
        text = self._extract_text(completion)
        if text is None:
            return ParseFailure(FailureKind.EMPTY_RESPONSE)
        return self.parse_text(text)

    def parse_text(self, text: str) -> ParseOutcome:
        """Parse the textual reply of the model."""
        if not text or not text.strip():
            return ParseFailure(FailureKind.EMPTY_RESPONSE)

        json_text = self.extract_json(text)

        try:
            parsed = json.loads(json_text)
        except (ValueError, RecursionError) as e:
            return ParseFailure(FailureKind.PARSE_ERROR, str(e))

        if not isinstance(parsed, dict) or not isinstance(parsed.get("words"), list):
            return ParseFailure(FailureKind.INVALID_STRUCTURE, f"got {type(parsed).__name__}")

        words = []
        for index, raw_entry in enumerate(parsed["words"]):
            entry = self._validate_entry(raw_entry)
            if entry is None:
                return ParseFailure(FailureKind.INVALID_ENTRY, f"entry {index}")
            words.append(entry)

        return WordAnalysis(
            words=words,
            alternative_translations=self._alternatives(parsed.get("alternativeTranslations")),
        )

    @staticmethod
    def extract_json(text: str) -> str:
        """Return the inside of the first fenced code block, or the whole text."""
        match = CODE_BLOCK_PATTERN.search(text)
        if match:
            return match.group(1).strip()
        return text.strip()

    def _extract_text(self, completion: Any) -> Optional[str]:
        if isinstance(completion, str):
            return completion
        if not isinstance(completion, dict):
            return None

        choices = completion.get("choices") or []
        for choice in choices:
            if not isinstance(choice, dict):
                continue
            message = choice.get("message") or {}
            content = message.get("content") if isinstance(message, dict) else None
            if isinstance(content, str) and content.strip():
                return content
        return None

    def _validate_entry(self, raw_entry: Any) -> Optional[WordEntry]:
        if not isinstance(raw_entry, dict):
            return None
        if any(key not in raw_entry for key in REQUIRED_ENTRY_KEYS):
            return None

        meanings = raw_entry["meanings"]
        if isinstance(meanings, list):
            meanings = [str(m) for m in meanings]
        else:
            meanings = [str(meanings)]

        note = raw_entry.get("contextualNote")
        if note is not None and not isinstance(note, str):
            note = str(note)

        return WordEntry(
            word=str(raw_entry["word"]),
            grammatical_form=str(raw_entry["grammaticalForm"]),
            meanings=meanings,
            contextual_note=note,
        )

    def _alternatives(self, value: Any) -> Optional[List[str]]:
        if isinstance(value, list):
            return [str(v) for v in value]
        if isinstance(value, str):
            return [value]
        return None
