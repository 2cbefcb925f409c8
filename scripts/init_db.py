import logging
import os
import sys
sys.path.append(os.getcwd()) # make sanskrit_agent importable

from sanskrit_agent.config import DB_PATH, setup_logging
from sanskrit_agent.db.duckdb_conn import get_db_connection
from sanskrit_agent.db.mw_ingest import init_db_tables

logger = logging.getLogger("init_db")

SAMPLE_ENTRIES = [
    ("dharma", "that which is established or firm, steadfast decree, statute, law; usage, custom, duty; virtue, religion"),
    ("yoga", "the act of yoking, joining; union; application, means; abstract contemplation, meditation"),
]


def init_db():
    logger.info("Initializing Database...")
    init_db_tables()

    # Sample rows so the dictionary tool can be tried before the MW ingest
    con = get_db_connection()
    try:
        for lemma, gloss in SAMPLE_ENTRIES:
            con.execute("DELETE FROM mw_lexicon WHERE lemma = ?", [lemma])
            con.execute("INSERT INTO mw_lexicon (lemma, gloss, raw_xml) VALUES (?, ?, ?)", [lemma, gloss, ""])
    finally:
        con.close()
    logger.info("Database initialized at %s", DB_PATH)


if __name__ == "__main__":
    setup_logging()
    init_db()
