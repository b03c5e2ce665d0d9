# 📦 /services/matcher_service.py

import asyncio

import structlog
from prometheus_client import Counter

from engine.features import build_score_breakdown, round_score
from engine.matcher import match_percentage, recommend_for_assessment
from engine.reasons import explain
from config.settings import settings

log = structlog.get_logger()

REQUEST_COUNTER = Counter("theramatch_requests_total", "Total /recommend requests made")
MATCHES_RETURNED_COUNTER = Counter("theramatch_matches_returned", "Number of matches returned per request")
FILTERED_OUT_COUNTER = Counter("theramatch_candidates_filtered_out", "Number of candidates removed by pre-filters")
SCORING_FAILURE_COUNTER = Counter("theramatch_scoring_failures", "Candidates dropped or degraded to 0 because their record could not be filtered or scored")


async def run_matcher(assessment, therapists, options=None, offload_threshold=None):
    """Rank candidates; pools above the configured threshold run in a worker thread."""
    if offload_threshold is None:
        offload_threshold = settings.thread_offload_threshold
    if len(therapists) > offload_threshold:
        result = await asyncio.to_thread(recommend_for_assessment, assessment, therapists, options)
    else:
        result = recommend_for_assessment(assessment, therapists, options)

    FILTERED_OUT_COUNTER.inc(len(therapists) - result["total_found"])
    if result["failed_ids"]:
        SCORING_FAILURE_COUNTER.inc(len(result["failed_ids"]))
    if result["recommendations"]:
        MATCHES_RETURNED_COUNTER.inc(len(result["recommendations"]))
    return result

async def run_explanation(assessment, therapist):
    breakdown = build_score_breakdown(assessment, therapist)
    score = round_score(sum(breakdown.values()))

    return {
        "therapist_id": str(therapist.id),
        "match_score": score,
        "match_percentage": match_percentage(score),
        "match_reasons": explain(assessment, therapist),
        "breakdown": {k: round_score(v) for k, v in breakdown.items()},
    }
