import re
from typing import List

LINE_BREAK_PATTERN = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """Split text on newlines, dropping lines that are blank after trimming."""
    return [line.strip() for line in LINE_BREAK_PATTERN.split(text) if line.strip()]
