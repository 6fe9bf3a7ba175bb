"""
Reference Latin texts bundled with the package.
"""
from __future__ import annotations

from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def load_text(name: str) -> str:
    """Read a bundled text file, normalized to single spaces."""
    path = DATA_DIR / name
    return " ".join(path.read_text(encoding="utf-8").split())


# Classical lorem ipsum paragraph; every facade output starts with it.
LOREM_IPSUM = load_text("lorem-ipsum.txt")

# Cicero, De finibus bonorum et malorum, the whole of book one (sections 1 to 72).
LIBER_PRIMUS = load_text("liber-primus.txt")
