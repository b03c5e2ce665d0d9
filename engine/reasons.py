# 📦 engine/reasons.py
# ─────────────────────────────
# Human-readable match reasons, in display order
#
# Concern matching here compares concern names directly with the therapist's
# specializations. It does not use the keyword table, so a concern can add
# points without being listed as a reason and the other way around.

from engine.features import available_days

HIGHLY_EXPERIENCED_YEARS = 10
EXPERIENCED_YEARS = 5
EXCELLENT_RATING = 4.5
HIGH_RATING = 4.0
HIGHLY_AVAILABLE_DAYS = 5


def _format_rating(rating):
    """Whole ratings without a trailing .0, others at full precision."""
    rating = float(rating)
    return str(int(rating)) if rating.is_integer() else repr(rating)


def matched_concern_names(asm, th):
    """Concern names contained in a specialization, or containing one."""
    specs = [s.lower() for s in (getattr(th, "specializations", None) or []) if isinstance(s, str) and s.strip()]
    names = []
    for concern in getattr(asm, "concerns", None) or []:
        name = str(getattr(concern, "value", concern))
        lower = name.lower()
        if any(lower in s or s in lower for s in specs):
            names.append(name)
    return names

def explain(asm, th):
    reasons = []

    concerns = matched_concern_names(asm, th)
    if concerns:
        reasons.append(f"Specializes in: {', '.join(concerns)}")

    years = getattr(th, "years_of_experience", None) or 0
    if years >= HIGHLY_EXPERIENCED_YEARS:
        reasons.append(f"Highly experienced ({years}+ years)")
    elif years >= EXPERIENCED_YEARS:
        reasons.append(f"Experienced ({years} years)")

    rating = getattr(th, "average_rating", None) or 0.0
    if rating >= EXCELLENT_RATING:
        reasons.append(f"Excellent rating ({_format_rating(rating)}/5)")
    elif rating >= HIGH_RATING:
        reasons.append(f"High rating ({_format_rating(rating)}/5)")

    status = getattr(th, "verification_status", None)
    if getattr(status, "value", status) == "verified":
        reasons.append("Verified therapist")

    if available_days(th) >= HIGHLY_AVAILABLE_DAYS:
        reasons.append("Highly available")

    return reasons
