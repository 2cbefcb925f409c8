"""
Monier-Williams XML ingestion into the mw_lexicon table.

Headwords (`key1`) are SLP1 in the source XML; they are stored in IAST so the
dictionary tool can match the model's IAST words exactly.
"""
import logging
import xml.etree.ElementTree as ET

from tqdm import tqdm

from sanskrit_agent.config import DEFAULT_DICTIONARY_SOURCE
from sanskrit_agent.db.duckdb_conn import get_db_connection
from sanskrit_agent.db.schema import INIT_SQL
from sanskrit_agent.tools.transliterate import slp1_to_iast

logger = logging.getLogger(__name__)

ENTRY_TAGS = {"H1", "H1A", "H1B", "H1C", "H1E", "H2", "H2A", "H2B", "H2C", "H2E",
              "H3", "H3A", "H3B", "H3C", "H3E", "H4", "H4A", "H4B", "H4C", "H4E"}


def init_db_tables(db_path: str = None):
    """Make sure the tables exist."""
    con = get_db_connection(db_path)
    try:
        con.execute(INIT_SQL)
    finally:
        con.close()


def iter_mw_entries(xml_path):
    """Yield (lemma_iast, gloss, raw_xml) for every headword entry of mw.xml."""
    # iterparse keeps memory flat; mw.xml is large
    for _, elem in ET.iterparse(xml_path, events=("end",)):
        if elem.tag not in ENTRY_TAGS:
            continue

        h_tag = elem.find('h')
        key1 = h_tag.find('key1') if h_tag is not None else None
        if key1 is not None and key1.text:
            body_tag = elem.find('body')
            gloss = " ".join("".join(body_tag.itertext()).split()) if body_tag is not None else ""
            raw_xml = ET.tostring(elem, encoding='unicode')
            yield slp1_to_iast(key1.text.strip()), gloss, raw_xml

        elem.clear()


def ingest_mw_dict(xml_path, db_path: str = None, batch_size: int = 5000) -> int:
    """
    Replace the lexicon contents with the entries of `xml_path`. Returns the row count.

    The delete and all inserts run in one transaction: a failed ingest leaves
    the previous rows in place.
    """
    logger.info("Parsing MW Dictionary: %s", xml_path)
    init_db_tables(db_path)

    insert_sql = "INSERT INTO mw_lexicon (lemma, gloss, raw_xml, source) VALUES (?, ?, ?, ?)"
    con = get_db_connection(db_path)
    count = 0
    try:
        con.begin()
        try:
            con.execute("DELETE FROM mw_lexicon WHERE source = ?", [DEFAULT_DICTIONARY_SOURCE])

            batch_data = []
            for lemma, gloss, raw_xml in tqdm(iter_mw_entries(xml_path), desc="Ingesting MW"):
                batch_data.append((lemma, gloss, raw_xml, DEFAULT_DICTIONARY_SOURCE))
                if len(batch_data) >= batch_size:
                    con.executemany(insert_sql, batch_data)
                    count += len(batch_data)
                    batch_data = []

            if batch_data:
                con.executemany(insert_sql, batch_data)
                count += len(batch_data)
        except Exception:
            con.rollback()
            logger.error("MW ingest failed after %d rows; rolled back.", count)
            raise
        con.commit()
    finally:
        con.close()

    logger.info("Inserted %d dictionary entries.", count)
    return count
