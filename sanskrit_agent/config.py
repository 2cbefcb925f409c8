import logging
import os
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

DB_PATH = os.getenv("SANSKRIT_AGENT_DB_PATH", os.path.join(PROJECT_ROOT, "translation.duckdb"))
MODEL_PATH = os.getenv(
    "SANSKRIT_AGENT_MODEL_PATH",
    os.path.join(PROJECT_ROOT, "models/Qwen2.5-7B-GGUF", "Qwen2.5-7B-Instruct-Q4_K_M.gguf"),
)

# llama.cpp generation settings
LLM_CONTEXT_WINDOW = int(os.getenv("SANSKRIT_AGENT_N_CTX", "8192"))
LLM_MAX_NEW_TOKENS = int(os.getenv("SANSKRIT_AGENT_MAX_NEW_TOKENS", "2048"))
LLM_TEMPERATURE = float(os.getenv("SANSKRIT_AGENT_TEMPERATURE", "0.2"))

# Dictionary
DICT_TRUNCATE_LIMIT = 2000
DEFAULT_DICTIONARY_SOURCE = "Monier-Williams"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging():
    """Configure root logging for entry points (Streamlit pages, scripts)."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
    )
