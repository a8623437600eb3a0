"""
Recommendation API Routes

Exposes the plan recommendation engine via REST API.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from config import RECOMMENDATION_DEFAULT_LIMIT, get_engine_config
from .logic.catalog import generate_mock_templates
from .logic.constants import ENGINE_VERSION
from .logic.contracts import PlanRecommendation
from .logic.engine import RecommendationEngine
from .logic.errors import RecommendationError


router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def get_engine() -> RecommendationEngine:
    return RecommendationEngine(get_engine_config())


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for recommendations endpoint."""
    profile: Dict[str, Any] = Field(
        ...,
        description="User training profile",
        json_schema_extra={
            "example": {
                "fitness_level": "beginner",
                "training_experience_months": 2,
                "available_training_days": 3,
                "primary_goal": "strength",
            }
        },
    )
    templates: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Template catalog to score; the built-in catalog when omitted",
    )
    # No ge=1 here: the engine rejects limits below 1 with a 400
    limit: int = Field(
        default=RECOMMENDATION_DEFAULT_LIMIT,
        description="Maximum recommendations to return (at least 1)",
    )


class ScoreRequest(BaseModel):
    """Request body for scoring a single template."""
    profile: Dict[str, Any]
    template: Dict[str, Any]


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get plan recommendations")
@router.post("/", summary="Get plan recommendations", include_in_schema=False)
def get_recommendations(
    request: RecommendationRequest,
    engine: RecommendationEngine = Depends(get_engine)
):
    """
    Rank plan templates for a user profile.

    **Request Body:**
    - `profile`: fitness level, experience months, available days, goal
    - `templates`: optional catalog (defaults to the built-in catalog)
    - `limit`: maximum recommendations to return

    **Response:**
    - Ranked recommendations with score breakdown, tier and reasoning
    - Summary counts and warnings
    """
    templates = request.templates if request.templates is not None else generate_mock_templates()

    try:
        output = engine.recommend(request.profile, templates, request.limit)
    except RecommendationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "summary": {
            "total_evaluated": output.total_templates_evaluated,
            "total_eligible": output.total_eligible,
            "total_recommended": output.total_recommended,
            "tier_counts": output.tier_counts,
            "processing_time_ms": output.processing_time_ms,
        },
        "recommendations": [_serialize_recommendation(r) for r in output.recommendations],
        "warnings": output.warnings,
        "engine_version": output.engine_version,
    }


@router.post("/score", summary="Score a single plan template")
def score_template(
    request: ScoreRequest,
    engine: RecommendationEngine = Depends(get_engine)
):
    try:
        recommendation = engine.score_single_template(request.profile, request.template)
    except RecommendationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _serialize_recommendation(recommendation)


@router.get("/templates", summary="List the built-in plan templates")
def list_templates():
    return [t.model_dump(mode="json") for t in generate_mock_templates()]


def _serialize_recommendation(rec: PlanRecommendation) -> Dict[str, Any]:
    """Convert PlanRecommendation to JSON-serializable dict."""
    return {
        "rank": rec.rank,
        "template": rec.template.model_dump(mode="json"),
        "total_score": rec.total_score,
        "tier": rec.tier.value,
        "completeness": rec.completeness.value,
        "is_eligible": rec.is_eligible,
        "breakdown": rec.breakdown.model_dump(),
        "dimension_scores": {
            d.dimension: {
                "score": d.score,
                "weight": d.weight,
                "weighted_score": round(d.weighted_score, 3),
                "explanation": d.explanation,
            }
            for d in rec.dimension_scores
        },
        "reasoning": rec.reasoning,
        "volume_modification": (
            rec.volume_modification.model_dump() if rec.volume_modification else None
        ),
    }


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {"status": "ok", "engine": "plan_recommendation", "version": ENGINE_VERSION}
