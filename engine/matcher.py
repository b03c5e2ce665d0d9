# 📦 engine/matcher.py
# ─────────────────────────────
# Ranking engine for TheraMatch: filter → score → sort → truncate → explain

from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP

import structlog

from engine import features, filters, reasons
from engine.config import CONCERN_KEYWORDS, DEFAULT_WEIGHTS
from schemas.schemas import RecommendOptions

log = structlog.get_logger()

DEFAULT_LIMIT = 10
MAX_LIMIT = 20


class Matcher:
    def __init__(self, assessment, therapists, options=None, weights=None, keywords=None):
        self.assessment = assessment
        self.therapists = list(therapists or [])
        self.options = self._coerce_options(options)
        self.weights = weights or DEFAULT_WEIGHTS
        self.keywords = CONCERN_KEYWORDS if keywords is None else keywords
        self.failed_ids = []
        self.total_found = 0

    @staticmethod
    def _coerce_options(options):
        if options is None:
            return RecommendOptions()
        if isinstance(options, Mapping):
            return RecommendOptions.model_validate(dict(options))
        return options

    def effective_limit(self):
        """Requested limit, never above MAX_LIMIT."""
        limit = getattr(self.options, "limit", None)
        if limit is None:
            limit = DEFAULT_LIMIT
        return max(0, min(int(limit), MAX_LIMIT))

    def run(self):
        candidates = self._apply_filters()
        self.total_found = len(candidates)

        if not candidates:
            log.warning("No therapists passed filters", pool=len(self.therapists))
            return []

        scored = [
            {"therapist": th, "match_score": self._score_candidate(th)}
            for th in candidates
        ]
        # reverse=True keeps input order among equal scores
        scored.sort(key=lambda m: m["match_score"], reverse=True)
        top = scored[: self.effective_limit()]

        for match in top:
            match["match_percentage"] = match_percentage(match["match_score"])
            match["match_reasons"] = self._explain_candidate(match["therapist"])

        log.info(
            "Ranked therapists",
            pool=len(self.therapists),
            scored=len(scored),
            returned=len(top),
            failed=len(self.failed_ids),
        )
        return top

    def _apply_filters(self):
        return [th for th in self.therapists if self._passes_filters(th)]

    def _passes_filters(self, th):
        """Filter one candidate; a record the filters cannot read is dropped."""
        try:
            return filters.apply_all_filters(th, self.options)
        except Exception as e:
            self.failed_ids.append(_therapist_id(th))
            log.error("Filtering failed, candidate dropped", therapist_id=_therapist_id(th), error=str(e))
            return False

    def _score_candidate(self, th):
        """Score one candidate; a malformed record degrades to 0.0."""
        try:
            return features.score(self.assessment, th, self.weights, self.keywords)
        except Exception as e:
            self.failed_ids.append(_therapist_id(th))
            log.error("Scoring failed, candidate degraded to 0", therapist_id=_therapist_id(th), error=str(e))
            return 0.0

    def _explain_candidate(self, th):
        try:
            return reasons.explain(self.assessment, th)
        except Exception as e:
            log.error("Match reasons failed", therapist_id=_therapist_id(th), error=str(e))
            return []


def match_percentage(match_score):
    """Display percentage: the score rounded to an integer, deliberately not capped at 100."""
    return int(Decimal(repr(float(match_score))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def assessment_summary(asm):
    """Echo of the assessment fields callers show next to the results."""
    def value(x):
        return getattr(x, "value", x)

    return {
        "concerns": [value(c) for c in getattr(asm, "concerns", None) or []],
        "impact_level": getattr(asm, "impact_level", None),
        "duration": value(getattr(asm, "duration", None)),
        "lifestyle": value(getattr(asm, "lifestyle", None)),
    }

def rank(assessment, candidates, options=None, weights=None, keywords=None):
    """Ranked, explained matches for one assessment."""
    return Matcher(assessment, candidates, options, weights, keywords).run()

def recommend_for_assessment(assessment, candidates, options=None):
    """
    Rank candidates and wrap them with the counts and assessment echo a
    response envelope needs.
    """
    matcher = Matcher(assessment, candidates, options)
    recommendations = matcher.run()

    return {
        "recommendations": recommendations,
        "total_found": matcher.total_found,
        "assessment_summary": assessment_summary(assessment),
        "failed_ids": matcher.failed_ids,
    }

def _therapist_id(th):
    return str(getattr(th, "id", None))
