import sys
from pathlib import Path

import duckdb
import streamlit as st

# Path setup
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.append(str(PROJECT_ROOT))

from sanskrit_agent.db.duckdb_conn import get_db_connection

st.set_page_config(page_title="Dictionary", layout="wide")
st.title("📚 Dictionary")

try:
    con = get_db_connection(read_only=True)
except duckdb.Error as e:
    st.error(f"Lexicon not available: {e}")
    st.info("Run `python scripts/init_db.py` or `python scripts/ingest_all.py` first.")
    st.stop()

try:
    count_dict = con.execute("SELECT COUNT(*) FROM mw_lexicon").fetchone()[0]
    st.metric("📖 Dictionary Entries", f"{count_dict:,}")

    st.markdown("---")

    search_term = st.text_input("Lookup Lemma in IAST (e.g., 'dharma', 'agni')", "")

    if search_term:
        df = con.execute("""
            SELECT lemma, source, gloss
            FROM mw_lexicon
            WHERE lemma ILIKE ?
            ORDER BY length(lemma), lemma
            LIMIT 20
        """, [f"{search_term.strip()}%"]).fetch_df()

        if not df.empty:
            st.dataframe(df, use_container_width=True)
        else:
            st.warning("No entries found.")
    else:
        st.info("Enter a word above to search. Showing random 5 entries:")
        df = con.execute("SELECT lemma, source, gloss FROM mw_lexicon ORDER BY RANDOM() LIMIT 5").fetch_df()
        st.table(df)
finally:
    con.close()
