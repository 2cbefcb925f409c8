"""Tests for the DuckDB dictionary tool."""
import pytest

from sanskrit_agent.agent.state import DictionaryDefinition
from sanskrit_agent.db.duckdb_conn import get_db_connection
from sanskrit_agent.db.mw_ingest import init_db_tables
from sanskrit_agent.errors import DictionaryServiceError
from sanskrit_agent.tools.dict_lookup import DictionaryLookupTool


@pytest.fixture
def lexicon_path(tmp_path):
    db_path = str(tmp_path / "lexicon.duckdb")
    init_db_tables(db_path)
    con = get_db_connection(db_path)
    try:
        con.executemany(
            "INSERT INTO mw_lexicon (lemma, gloss, raw_xml, source) VALUES (?, ?, ?, ?)",
            [
                ("yoga", "union, joining, meditation", "<H1/>", "Monier-Williams"),
                ("yoga", "Anwendung, Mittel", "", "PWG"),
                ("citta", "thought, mind", "", "Monier-Williams"),
                ("vṛtti", "", "<H1>turning, activity</H1>", "Monier-Williams"),
                ("nirodha", "x" * 2500, "", "Monier-Williams"),
            ],
        )
        con.execute("INSERT INTO mw_lexicon (lemma, gloss, raw_xml) VALUES ('dharma', 'law, duty', '')")
    finally:
        con.close()
    return db_path


class TestLookupMany:

    def test_found_words(self, lexicon_path):
        results = DictionaryLookupTool(lexicon_path).lookup_many(["citta", "yoga"])

        assert results["citta"] == [DictionaryDefinition("Monier-Williams", "thought, mind")]
        assert [d.source for d in results["yoga"]] == ["Monier-Williams", "PWG"]

    def test_exact_match_only(self, lexicon_path):
        results = DictionaryLookupTool(lexicon_path).lookup_many(["yogaḥ", "cit", "YOGA"])

        assert results == {"yogaḥ": [], "cit": [], "YOGA": []}

    def test_duplicates_collapse_to_one_key(self, lexicon_path):
        results = DictionaryLookupTool(lexicon_path).lookup_many(["citta", "citta"])
        assert list(results) == ["citta"]

    def test_empty_request(self, lexicon_path):
        assert DictionaryLookupTool(lexicon_path).lookup_many([]) == {}

    def test_blank_word(self, lexicon_path):
        assert DictionaryLookupTool(lexicon_path).lookup_many(["  "]) == {"  ": []}

    def test_raw_xml_used_when_gloss_empty(self, lexicon_path):
        results = DictionaryLookupTool(lexicon_path).lookup_many(["vṛtti"])
        assert results["vṛtti"][0].definition == "<H1>turning, activity</H1>"

    def test_long_definition_truncated(self, lexicon_path):
        definition = DictionaryLookupTool(lexicon_path).lookup_word("nirodha")[0].definition
        assert definition.endswith("... [truncated]")
        assert len(definition) == 2000 + len("... [truncated]")

    def test_default_source(self, lexicon_path):
        assert DictionaryLookupTool(lexicon_path).lookup_word("dharma") == [
            DictionaryDefinition("Monier-Williams", "law, duty")
        ]

    def test_devanagari_key(self, lexicon_path):
        results = DictionaryLookupTool(lexicon_path).lookup_many(["धर्म"])
        assert results == {"धर्म": [DictionaryDefinition("Monier-Williams", "law, duty")]}


class TestLookupFailures:

    def test_missing_database(self, tmp_path):
        tool = DictionaryLookupTool(str(tmp_path / "missing.duckdb"))
        with pytest.raises(DictionaryServiceError, match="Dictionary service failed"):
            tool.lookup_many(["yoga"])

    def test_missing_table(self, tmp_path):
        db_path = str(tmp_path / "empty.duckdb")
        get_db_connection(db_path).close()

        with pytest.raises(DictionaryServiceError):
            DictionaryLookupTool(db_path).lookup_many(["yoga"])
