"""Tests for validation of the model's word-analysis reply."""
import json

import pytest

from sanskrit_agent.agent.state import WordAnalysis
from sanskrit_agent.errors import (
    EmptyResponseError,
    InvalidEntryError,
    InvalidStructureError,
    ModelServiceError,
    ResponseParseError,
)
from sanskrit_agent.llm.response_parser import FailureKind, ParseFailure, ResponseParser

PAYLOAD = {
    "words": [
        {"word": "yogaḥ", "grammaticalForm": "noun, masculine", "meanings": ["union", "yoga"],
         "contextualNote": "The subject of the sentence."},
        {"word": "citta", "grammaticalForm": "noun, neuter", "meanings": ["mind"]},
    ],
    "alternativeTranslations": ["Yoga is the stilling of the mind."],
}


def completion(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def parser():
    return ResponseParser()


class TestPresence:

    def test_no_choices(self, parser):
        outcome = parser.parse({"choices": []})
        assert isinstance(outcome, ParseFailure)
        assert outcome.kind == FailureKind.EMPTY_RESPONSE
        assert "Empty response" in outcome.message

    def test_missing_choices_key(self, parser):
        assert parser.parse({}).kind == FailureKind.EMPTY_RESPONSE

    def test_no_textual_block(self, parser):
        outcome = parser.parse({"choices": [{"message": {"role": "assistant", "content": None}}]})
        assert outcome.kind == FailureKind.EMPTY_RESPONSE

    def test_blank_text(self, parser):
        assert parser.parse(completion("   \n")).kind == FailureKind.EMPTY_RESPONSE

    def test_not_a_completion(self, parser):
        assert parser.parse(None).kind == FailureKind.EMPTY_RESPONSE
        assert parser.parse(42).kind == FailureKind.EMPTY_RESPONSE

    def test_first_textual_block_is_used(self, parser):
        outcome = parser.parse({"choices": [
            {"message": {"content": ""}},
            {"message": {"content": json.dumps(PAYLOAD)}},
        ]})
        assert isinstance(outcome, WordAnalysis)


class TestJsonExtraction:

    def test_fenced_and_raw_parse_identically(self, parser):
        raw = json.dumps(PAYLOAD, ensure_ascii=False)
        fenced = "Here is the analysis:\n```json\n" + raw + "\n```\nHope this helps."

        assert parser.parse(completion(raw)) == parser.parse(completion(fenced))

    def test_untagged_fence(self, parser):
        fenced = "```\n" + json.dumps(PAYLOAD) + "\n```"
        outcome = parser.parse_text(fenced)
        assert [w.word for w in outcome.words] == ["yogaḥ", "citta"]

    def test_extract_json_without_fence(self):
        assert ResponseParser.extract_json('  {"a": 1}  ') == '{"a": 1}'


class TestJsonParsing:

    def test_prose_is_parse_error(self, parser):
        outcome = parser.parse(completion("I am sorry, I cannot analyse this text."))
        assert outcome.kind == FailureKind.PARSE_ERROR
        assert "Failed to parse model response" in outcome.message

    def test_truncated_json_is_parse_error(self, parser):
        outcome = parser.parse_text('{"words": [{"word": "yoga"')
        assert outcome.kind == FailureKind.PARSE_ERROR

    def test_empty_fence_is_parse_error(self, parser):
        assert parser.parse_text("```json\n```").kind == FailureKind.PARSE_ERROR


class TestShape:

    def test_missing_words(self, parser):
        outcome = parser.parse_text('{"translation": "Yoga is..."}')
        assert outcome.kind == FailureKind.INVALID_STRUCTURE
        assert "missing words array" in outcome.message

    def test_words_not_a_list(self, parser):
        outcome = parser.parse_text('{"words": "yoga citta"}')
        assert outcome.kind == FailureKind.INVALID_STRUCTURE

    def test_top_level_array(self, parser):
        assert parser.parse_text('[{"word": "yoga"}]').kind == FailureKind.INVALID_STRUCTURE

    def test_empty_words_list_is_valid(self, parser):
        outcome = parser.parse_text('{"words": []}')
        assert outcome == WordAnalysis(words=[], alternative_translations=None)


class TestEntries:

    def test_entries_are_converted(self, parser):
        outcome = parser.parse(completion(json.dumps(PAYLOAD)))

        first, second = outcome.words
        assert first.word == "yogaḥ"
        assert first.grammatical_form == "noun, masculine"
        assert first.meanings == ["union", "yoga"]
        assert first.contextual_note == "The subject of the sentence."
        assert first.dictionary_definitions is None
        assert second.contextual_note is None
        assert outcome.alternative_translations == ["Yoga is the stilling of the mind."]

    def test_missing_key_fails_whole_reply(self, parser):
        payload = {"words": [
            {"word": "yogaḥ", "grammaticalForm": "noun", "meanings": ["union"]},
            {"word": "citta", "meanings": ["mind"]},
        ]}
        outcome = parser.parse_text(json.dumps(payload))
        assert outcome.kind == FailureKind.INVALID_ENTRY
        assert "Invalid word entry structure" in outcome.message
        assert "entry 1" in outcome.detail

    def test_non_object_entry(self, parser):
        outcome = parser.parse_text('{"words": ["yoga"]}')
        assert outcome.kind == FailureKind.INVALID_ENTRY

    def test_scalar_meaning_is_wrapped(self, parser):
        outcome = parser.parse_text('{"words": [{"word": "citta", "grammaticalForm": "noun", "meanings": "mind"}]}')
        assert outcome.words[0].meanings == ["mind"]

    def test_values_are_stringified(self, parser):
        outcome = parser.parse_text('{"words": [{"word": 1, "grammaticalForm": 2, "meanings": [3, "four"]}]}')
        entry = outcome.words[0]
        assert entry.word == "1"
        assert entry.grammatical_form == "2"
        assert entry.meanings == ["3", "four"]

    def test_null_contextual_note_is_absent(self, parser):
        outcome = parser.parse_text(
            '{"words": [{"word": "a", "grammaticalForm": "b", "meanings": [], "contextualNote": null}]}'
        )
        assert outcome.words[0].contextual_note is None

    def test_single_alternative_string_is_wrapped(self, parser):
        outcome = parser.parse_text('{"words": [], "alternativeTranslations": "Yoga is restraint."}')
        assert outcome.alternative_translations == ["Yoga is restraint."]

    def test_unusable_alternatives_are_dropped(self, parser):
        outcome = parser.parse_text('{"words": [], "alternativeTranslations": {"en": "x"}}')
        assert outcome.alternative_translations is None


class TestFailureErrors:
    """Each failure category maps to its own ModelServiceError subclass."""

    @pytest.mark.parametrize("kind, error_class, fragment", [
        (FailureKind.EMPTY_RESPONSE, EmptyResponseError, "Empty response from model"),
        (FailureKind.PARSE_ERROR, ResponseParseError, "Failed to parse model response"),
        (FailureKind.INVALID_STRUCTURE, InvalidStructureError, "missing words array"),
        (FailureKind.INVALID_ENTRY, InvalidEntryError, "Invalid word entry structure"),
    ])
    def test_to_error(self, kind, error_class, fragment):
        error = ParseFailure(kind, "detail").to_error()
        assert isinstance(error, error_class)
        assert isinstance(error, ModelServiceError)
        assert fragment in str(error)

    def test_messages_are_distinct(self):
        messages = {ParseFailure(kind).message for kind in FailureKind}
        assert len(messages) == len(FailureKind)

    @pytest.mark.parametrize("garbage", ["", "{", "[[[[", '{"words": [1, 2]}', "null", "true", "```", "\x00"])
    def test_never_raises(self, parser, garbage):
        outcome = parser.parse(completion(garbage))
        assert isinstance(outcome, (ParseFailure, WordAnalysis))
