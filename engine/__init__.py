# engine/__init__.py
# ─────────────────────────────
# Init file for TheraMatch engine package
# Exposes core components

from .filters import apply_all_filters
from .features import build_score_breakdown, score
from .reasons import explain
from .matcher import Matcher, rank

__all__ = [
    "apply_all_filters",
    "build_score_breakdown",
    "score",
    "explain",
    "Matcher",
    "rank",
]
