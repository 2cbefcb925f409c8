# sanskrit_agent/db/schema.py

INIT_SQL = """
-- Lexicon (Monier-Williams and other sources)
-- lemma is stored in IAST so that exact-match lookup works on model output
CREATE TABLE IF NOT EXISTS mw_lexicon (
    lemma VARCHAR,       -- headword in IAST (e.g. dharma)
    gloss VARCHAR,       -- definition text
    raw_xml VARCHAR,     -- original XML entry
    source VARCHAR DEFAULT 'Monier-Williams'
);

-- Tables created before the source column existed
ALTER TABLE mw_lexicon ADD COLUMN IF NOT EXISTS source VARCHAR DEFAULT 'Monier-Williams';
"""
