# pokemon_data/utils/species_normalize.py
from __future__ import annotations

import re
import unicodedata


def ascii_slug(name: str) -> str:
    """
    Lowercase, hyphenated ASCII form of a display name:
    - gender symbols -> -f / -m
    - accents dropped
    - apostrophes, dots and colons removed
    - whitespace and underscores -> hyphens
    """
    s = (name or "").strip().lower()
    s = s.replace("♀", "-f").replace("♂", "-m")
    s = unicodedata.normalize("NFKD", s).encode("ascii", "ignore").decode("ascii")
    s = s.replace("'", "").replace("’", "").replace(".", "").replace(":", "")
    s = re.sub(r"[\s_]+", "-", s)
    s = re.sub(r"[^a-z0-9%\-]", "", s)
    s = re.sub(r"-+", "-", s)
    return s.strip("-")


def name_key(name: str) -> str:
    """Comparison key: the slug with every separator gone, so "Tapu Bulu",
    "TapuBulu" and "tapu-bulu" all agree."""
    return re.sub(r"[^a-z0-9]", "", ascii_slug(name))
