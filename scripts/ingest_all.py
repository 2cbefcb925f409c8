# scripts/ingest_all.py

import logging
import sys
from pathlib import Path

# Path setup
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.append(str(PROJECT_ROOT))
DATA_DIR = PROJECT_ROOT / "data"

from sanskrit_agent.config import setup_logging
from sanskrit_agent.db.mw_ingest import ingest_mw_dict

logger = logging.getLogger("ingest_all")


def main():
    xml_path = DATA_DIR / "mw_dict" / "mw.xml"
    if not xml_path.exists():
        logger.error("MW XML not found at %s", xml_path)
        return 1

    ingest_mw_dict(xml_path)
    logger.info("All Data Ingestion Complete!")
    return 0


if __name__ == "__main__":
    setup_logging()
    sys.exit(main())
