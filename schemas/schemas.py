# 📦 /schemas/schemas.py

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Accepts both snake_case and the camelCase keys used by the booking platform."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ─────────────────────────────
# Closed vocabularies

class Concern(str, Enum):
    ANXIETY = "Anxiety"
    DEPRESSION = "Depression"
    OVERTHINKING = "Overthinking"
    STRESS = "Stress"
    LOW_SELF_ESTEEM = "Low self-esteem"
    SELF_IMPROVEMENT = "Self-improvement"
    ANGER_ISSUES = "Anger issues"
    GRIEF_LOSS = "Grief/loss"
    SLEEP_DISTURBANCES = "Sleep disturbances"
    OCD = "OCD"
    SEXUAL_DYSFUNCTION = "Sexual dysfunction"
    BIPOLAR_DISORDER = "Bipolar disorder"
    ADDICTION = "Addiction"
    AUTISM_SPECTRUM_DISORDER = "Autism spectrum disorder"
    NONE_OF_THE_ABOVE = "None of the above"

class Lifestyle(str, Enum):
    HIGH_STRESS = "High-stress, fast-paced"
    MODERATELY_BUSY = "Moderately busy, some downtime"
    BALANCED = "Balanced between work and personal life"
    RELAXED = "Relaxed, low-stress"

class Duration(str, Enum):
    UNDER_A_MONTH = "Less than a month"
    ONE_TO_SIX_MONTHS = "1-6 months"
    SIX_MONTHS_TO_A_YEAR = "6 months - 1 year"
    OVER_A_YEAR = "More than 1 year"

class VerificationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"

class AgeGroup(str, Enum):
    AGE_18_24 = "18-24"
    AGE_25_34 = "25-34"
    AGE_35_44 = "35-44"
    AGE_45_54 = "45-54"
    AGE_55_64 = "55-64"
    AGE_65_PLUS = "65+"

class Occupation(str, Enum):
    STUDENT = "Student"
    FULL_TIME = "Employed (Full-time)"
    PART_TIME = "Employed (Part-time)"
    SELF_EMPLOYED = "Self-employed"
    UNEMPLOYED = "Unemployed"
    RETIRED = "Retired"

class ActivityLevel(str, Enum):
    SEDENTARY = "Sedentary (little to no exercise)"
    LIGHTLY_ACTIVE = "Lightly active (walking, yoga, stretching)"
    MODERATELY_ACTIVE = "Moderately active (exercise 3-4 days a week)"
    VERY_ACTIVE = "Very active (intense workouts, sports, daily exercise)"


# ─────────────────────────────
# Engine inputs

class TimeSlot(_CamelModel):
    start: str
    end: str

class PatientAssessment(_CamelModel):
    concerns: List[Concern]
    impact_level: int
    lifestyle: Optional[Lifestyle] = None
    duration: Optional[Duration] = None
    age_group: Optional[AgeGroup] = None
    occupation: Optional[Occupation] = None
    activity_level: Optional[ActivityLevel] = None
    other_concern: Optional[str] = None

class TherapistProfile(_CamelModel):
    id: str
    full_name: Optional[str] = None
    specializations: List[str] = []
    years_of_experience: int = Field(0, ge=0)
    average_rating: Optional[float] = Field(0.0, ge=0, le=5)
    verification_status: VerificationStatus = VerificationStatus.PENDING
    availability: Dict[str, List[Union[TimeSlot, str]]] = {}
    is_student: bool = False
    session_rate: Optional[float] = None

class RecommendOptions(_CamelModel):
    limit: int = 10
    min_rating: Optional[float] = None
    max_rate: Optional[float] = None
    min_rate: Optional[float] = None
    min_experience: Optional[int] = None
    verified_only: bool = False


# ─────────────────────────────
# Requests

class RecommendRequest(_CamelModel):
    assessment: PatientAssessment
    therapists: List[TherapistProfile] = []
    options: RecommendOptions = RecommendOptions()

class ExplainRequest(_CamelModel):
    assessment: PatientAssessment
    therapist: TherapistProfile


# ─────────────────────────────
# Responses

class MatchResult(_CamelModel):
    therapist: TherapistProfile
    match_score: float
    match_percentage: int
    match_reasons: List[str]

class AssessmentSummary(_CamelModel):
    concerns: List[str]
    impact_level: int
    duration: Optional[str] = None
    lifestyle: Optional[str] = None

class RecommendationData(_CamelModel):
    recommendations: List[MatchResult]
    total_found: int
    assessment_summary: AssessmentSummary

class RecommendResponse(BaseModel):
    status: str
    message: str
    data: RecommendationData

class ExplainData(_CamelModel):
    therapist_id: str
    match_score: float
    match_percentage: int
    match_reasons: List[str]
    breakdown: Dict[str, float]

class ExplainResponse(BaseModel):
    status: str
    data: ExplainData

class HealthCheckResponse(BaseModel):
    status: str
    message: str
    version: str

class ErrorResponse(BaseModel):
    status: str
    message: str
    info: Optional[str | dict] = None
