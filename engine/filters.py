# 📦 engine/filters.py
# ─────────────────────────────
# Hard pre-filters applied before any candidate is scored

def _value(x):
    return getattr(x, "value", x)

def filter_by_verification(th, verified_only=False):
    """Verified only on request; rejected therapists never pass."""
    status = _value(getattr(th, "verification_status", None))
    if verified_only:
        return status == "verified"
    return status != "rejected"

def filter_by_min_rating(th, min_rating=None):
    """Missing rating counts as 0."""
    if min_rating is None:
        return True
    return (getattr(th, "average_rating", None) or 0.0) >= min_rating

def filter_by_rate(th, min_rate=None, max_rate=None):
    """Session rate window; unknown rates fail any requested bound."""
    if min_rate is None and max_rate is None:
        return True
    rate = getattr(th, "session_rate", None)
    if rate is None:
        return False
    if min_rate is not None and rate < min_rate:
        return False
    if max_rate is not None and rate > max_rate:
        return False
    return True

def filter_by_min_experience(th, min_experience=None):
    if min_experience is None:
        return True
    return (getattr(th, "years_of_experience", None) or 0) >= min_experience

def apply_all_filters(th, options):
    """Applies all hard filters sequentially."""
    return (
        filter_by_verification(th, getattr(options, "verified_only", False))
        and filter_by_min_rating(th, getattr(options, "min_rating", None))
        and filter_by_rate(th, getattr(options, "min_rate", None), getattr(options, "max_rate", None))
        and filter_by_min_experience(th, getattr(options, "min_experience", None))
    )
