# 📦 engine/features.py
# ─────────────────────────────
# Per-factor point calculations for the TheraMatch scoring engine
#
# Every factor is additive. A missing or empty therapist field contributes
# 0 points to its own factor and never affects the others.

from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP

from engine.config import CONCERN_KEYWORDS, DEFAULT_WEIGHTS, keywords_for

# (minimum years, fraction of the experience budget), checked top-down
HIGH_IMPACT_EXPERIENCE_TIERS = ((10, 1.0), (5, 0.7), (2, 0.4))
STANDARD_EXPERIENCE_TIERS = ((5, 1.0), (2, 0.7), (1, 0.4))
HIGH_IMPACT_LEVEL = 4

# (minimum available days, fraction of the availability budget)
AVAILABILITY_TIERS = ((5, 1.0), (3, 0.7), (1, 0.4))

TOP_RATING = 4.5
FAST_PACED_MIN_YEARS = 5
CHRONIC_MIN_YEARS = 7

HIGH_STRESS_LIFESTYLE = "High-stress, fast-paced"
RELAXED_LIFESTYLE = "Relaxed, low-stress"
CHRONIC_DURATION = "More than 1 year"


def specialization_points(asm, th, weights=DEFAULT_WEIGHTS, keywords=CONCERN_KEYWORDS):
    """Share of concerns covered by the therapist's specializations, plus a multi-concern bonus."""
    specs = _specializations(th)
    concerns = list(getattr(asm, "concerns", None) or [])
    if not specs or not concerns:
        return 0.0

    matched = sum(1 for c in concerns if _keywords_match(keywords_for(c, keywords), specs))
    points = matched / len(concerns) * weights["specialization"]
    if matched > 1:
        points += weights["bonuses"]["multi_concern"]
    return points

def experience_points(asm, th, weights=DEFAULT_WEIGHTS):
    """Tiered experience; high-impact cases need more years for the same tier."""
    years = _years(th)
    impact = getattr(asm, "impact_level", None) or 0
    tiers = HIGH_IMPACT_EXPERIENCE_TIERS if impact >= HIGH_IMPACT_LEVEL else STANDARD_EXPERIENCE_TIERS
    return _tiered(years, tiers) * weights["experience"]

def rating_points(th, weights=DEFAULT_WEIGHTS):
    """Linear in average rating, plus a flat bonus for top-rated therapists."""
    rating = _rating(th)
    if rating <= 0:
        return 0.0
    points = rating / 5 * weights["rating"]
    if rating >= TOP_RATING:
        points += weights["bonuses"]["top_rating"]
    return points

def verification_points(th, weights=DEFAULT_WEIGHTS):
    status = _value(getattr(th, "verification_status", None))
    if status == "verified":
        return float(weights["verification"])
    if status == "pending":
        return weights["verification"] * 0.5
    return 0.0

def available_days(th):
    """Number of weekdays with at least one time slot."""
    availability = getattr(th, "availability", None)
    if not isinstance(availability, Mapping):
        return 0
    return sum(1 for slots in availability.values() if isinstance(slots, (list, tuple)) and len(slots) > 0)

def availability_points(th, weights=DEFAULT_WEIGHTS):
    return _tiered(available_days(th), AVAILABILITY_TIERS) * weights["availability"]

def lifestyle_bonus(asm, th, weights=DEFAULT_WEIGHTS):
    lifestyle = _value(getattr(asm, "lifestyle", None))
    if lifestyle == HIGH_STRESS_LIFESTYLE:
        return float(weights["bonuses"]["fast_paced"]) if _years(th) >= FAST_PACED_MIN_YEARS else 0.0
    if lifestyle == RELAXED_LIFESTYLE:
        return float(weights["bonuses"]["student"]) if getattr(th, "is_student", False) else 0.0
    return 0.0

def chronicity_bonus(asm, th, weights=DEFAULT_WEIGHTS):
    if _value(getattr(asm, "duration", None)) == CHRONIC_DURATION and _years(th) >= CHRONIC_MIN_YEARS:
        return float(weights["bonuses"]["chronic"])
    return 0.0

# ─────────────────────────────
# Internal

def _value(x):
    return getattr(x, "value", x)

def _years(th):
    return getattr(th, "years_of_experience", None) or 0

def _rating(th):
    return float(getattr(th, "average_rating", None) or 0.0)

def _specializations(th):
    return [s.lower() for s in (getattr(th, "specializations", None) or []) if isinstance(s, str) and s.strip()]

def _keywords_match(keywords, specs):
    """Substring containment in either direction."""
    return any(k in s or s in k for k in keywords for s in specs)

def _tiered(value, tiers):
    for minimum, fraction in tiers:
        if value >= minimum:
            return fraction
    return 0.0

# ─────────────────────────────
# Full score

def round_score(value):
    """Two decimals, halves rounded away from zero."""
    return float(Decimal(repr(float(value))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

def build_score_breakdown(asm, th, weights=None, keywords=None):
    """Points contributed by each factor for one assessment-therapist pair."""
    weights = weights or DEFAULT_WEIGHTS
    keywords = CONCERN_KEYWORDS if keywords is None else keywords
    raw = {
        "specialization": specialization_points(asm, th, weights, keywords),
        "experience": experience_points(asm, th, weights),
        "rating": rating_points(th, weights),
        "verification": verification_points(th, weights),
        "availability": availability_points(th, weights),
        "lifestyle": lifestyle_bonus(asm, th, weights),
        "chronicity": chronicity_bonus(asm, th, weights),
    }
    return {k: float(v) for k, v in raw.items()}

def score(asm, th, weights=None, keywords=None):
    """Match score: sum of all factor points, not capped at 100."""
    return round_score(sum(build_score_breakdown(asm, th, weights, keywords).values()))
