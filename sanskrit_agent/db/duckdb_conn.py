import duckdb
from sanskrit_agent.config import DB_PATH


def get_db_connection(db_path: str = None, read_only: bool = False):
    """
    Get a DuckDB database connection.
    """
    con = duckdb.connect(db_path or DB_PATH, read_only=read_only)
    return con
