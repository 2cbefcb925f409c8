import logging
from typing import Dict, List

import duckdb

from sanskrit_agent.agent.state import DictionaryDefinition
from sanskrit_agent.config import DEFAULT_DICTIONARY_SOURCE, DICT_TRUNCATE_LIMIT
from sanskrit_agent.db.duckdb_conn import get_db_connection
from sanskrit_agent.errors import DictionaryServiceError
from sanskrit_agent.text.script_classifier import is_devanagari_char
from sanskrit_agent.tools.transliterate import devanagari_to_iast

logger = logging.getLogger(__name__)


class DictionaryLookupTool:
    """
    Exact-match lookup of IAST words in the DuckDB lexicon.

    No stemming is applied: the word is looked up exactly as given.
    """

    def __init__(self, db_path: str = None):
        self.name = "DictionaryLookup"
        self.db_path = db_path
        self.TRUNCATE_LIMIT = DICT_TRUNCATE_LIMIT

    def _to_key(self, word: str) -> str:
        key = word.strip()
        if any(is_devanagari_char(c) for c in key):
            key = devanagari_to_iast(key)
        return key

    def _format(self, gloss, raw, source) -> DictionaryDefinition:
        content = gloss if gloss else raw
        if not content:
            content = "Entry found but empty."
        if len(content) > self.TRUNCATE_LIMIT:
            content = content[:self.TRUNCATE_LIMIT] + "... [truncated]"
        return DictionaryDefinition(source=source or DEFAULT_DICTIONARY_SOURCE, definition=content)

    def lookup_word(self, word: str) -> List[DictionaryDefinition]:
        return self.lookup_many([word]).get(word, [])

    def lookup_many(self, words: list) -> Dict[str, List[DictionaryDefinition]]:
        """
        Input: list of words (duplicates allowed)
        Output: {word: [DictionaryDefinition, ...]} with one key per distinct word;
                words without an entry map to an empty list.
        Raises DictionaryServiceError if the lexicon cannot be queried.
        """
        if not words:
            return {}

        keys = {w: self._to_key(w) for w in words}
        lookup_keys = sorted({k for k in keys.values() if k})

        rows = []
        if lookup_keys:
            try:
                con = get_db_connection(self.db_path, read_only=True)
            except duckdb.Error as e:
                raise DictionaryServiceError(str(e)) from e

            try:
                placeholders = ','.join(['?'] * len(lookup_keys))
                rows = con.execute(f"""
                    SELECT lemma, gloss, raw_xml, source
                    FROM mw_lexicon
                    WHERE lemma IN ({placeholders})
                    ORDER BY rowid
                """, lookup_keys).fetchall()
            except duckdb.Error as e:
                raise DictionaryServiceError(str(e)) from e
            finally:
                con.close()

        by_lemma: Dict[str, List[DictionaryDefinition]] = {}
        for lemma, gloss, raw, source in rows:
            by_lemma.setdefault(lemma, []).append(self._format(gloss, raw, source))

        logger.debug("Dictionary lookup: %d keys, %d found", len(lookup_keys), len(by_lemma))
        return {w: list(by_lemma.get(k, [])) for w, k in keys.items()}
