# 📦 engine/config.py
# ─────────────────────────────
# Scoring weights and the concern → specialization keyword vocabulary

import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, FrozenSet

import structlog
import yaml

log = structlog.get_logger()

WEIGHTS_PATH = Path(__file__).resolve().parent.parent / "config" / "weights.yml"
DEFAULT_KEYWORDS_PATH = Path(__file__).resolve().parent.parent / "config" / "concern_keywords.yml"


def load_weights(profile: str = "default", path=None) -> dict:
    """Return one weights profile from `config/weights.yml`."""
    with open(path or WEIGHTS_PATH, "r") as f:
        profiles = yaml.safe_load(f)
    if profile not in profiles:
        raise KeyError(f"Unknown weights profile: {profile}")
    return profiles[profile]


def load_concern_keywords(path=None) -> Mapping[str, FrozenSet[str]]:
    """
    Load the concern keyword table from YAML.

    Lookup order: explicit `path`, then `THERAMATCH_KEYWORDS_PATH`, then the
    table shipped in `config/`. Keywords are lower-cased; the result is
    read-only so one table can be shared by every request.
    """
    path = Path(path or os.getenv("THERAMATCH_KEYWORDS_PATH") or DEFAULT_KEYWORDS_PATH).expanduser()
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}

    table = {
        str(concern): frozenset(str(k).strip().lower() for k in (keywords or []) if str(k).strip())
        for concern, keywords in raw.items()
    }
    log.info("Loaded concern keyword table", path=str(path), concerns=len(table))
    return MappingProxyType(table)


def keywords_for(concern, table: Mapping[str, FrozenSet[str]]) -> FrozenSet[str]:
    """Keywords for one concern; unknown concerns have none."""
    return table.get(getattr(concern, "value", concern), frozenset())


DEFAULT_WEIGHTS = load_weights()
CONCERN_KEYWORDS = load_concern_keywords()
