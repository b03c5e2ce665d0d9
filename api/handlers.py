from fastapi import APIRouter
from fastapi.responses import JSONResponse
from schemas.schemas import (
    RecommendRequest,
    RecommendResponse,
    ExplainRequest,
    ExplainResponse,
    ErrorResponse,
    HealthCheckResponse,
)
from services.matcher_service import (
    run_matcher,
    run_explanation,
    REQUEST_COUNTER,
)
from config.settings import settings
import structlog

log = structlog.get_logger()

router = APIRouter()


def _invalid_assessment(assessment):
    """Return an error response for assessments the engine should never see."""
    if not assessment.concerns:
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                status="error",
                message="At least one mental health concern is required."
            ).model_dump()
        )
    if not 1 <= assessment.impact_level <= 5:
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(
                status="error",
                message="Impact level must be between 1 and 5.",
                info={"impactLevel": assessment.impact_level}
            ).model_dump()
        )
    return None

@router.get("/", response_model=HealthCheckResponse)
async def healthcheck():
    return HealthCheckResponse(
        status="ok",
        message="TheraMatch recommendation engine live",
        version=settings.version
    )

@router.post("/recommend", response_model=RecommendResponse, responses={422: {"model": ErrorResponse}})
async def recommend(request: RecommendRequest):
    REQUEST_COUNTER.inc()

    error = _invalid_assessment(request.assessment)
    if error:
        return error

    result = await run_matcher(
        request.assessment,
        request.therapists,
        request.options,
    )

    if not result["recommendations"]:
        message = "No therapists found matching your criteria"
    else:
        message = "Therapist recommendations generated successfully"

    return RecommendResponse(
        status="success",
        message=message,
        data={
            "recommendations": result["recommendations"],
            "total_found": result["total_found"],
            "assessment_summary": result["assessment_summary"],
        }
    )

@router.post("/explain", response_model=ExplainResponse, responses={422: {"model": ErrorResponse}})
async def explain(request: ExplainRequest):
    error = _invalid_assessment(request.assessment)
    if error:
        return error

    explanation = await run_explanation(request.assessment, request.therapist)
    log.info("Explained match", therapist_id=explanation["therapist_id"], score=explanation["match_score"])

    return ExplainResponse(status="success", data=explanation)
