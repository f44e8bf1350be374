"""
FastAPI application for the CareerPath personality quiz.
Scores Big Five answers and matches them against the career catalog.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, StrictInt

from core.config import get_settings
from core.errors import ValidationError
from core.logger import configure_logging, get_logger

# Scoring and matching engine
from explanation.personality_analysis import (
    generate_career_recommendations,
    generate_personality_analysis,
    identify_development_areas,
    identify_strengths,
    overall_score,
)
from inference.answer_converter import calculate_scores
from ingestion.build_career_profiles import get_career_by_id, get_careers
from matching.engine import match_careers
from questionnaires.questions import get_questions

settings = get_settings()
configure_logging(settings.log_level)
logger = get_logger("api")

# ============================================================================
# CATALOGS (loaded and validated once at startup)
# ============================================================================

QUESTIONS = get_questions()
CAREERS = get_careers()

app = FastAPI(title="CareerPath API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class AssessmentSubmission(BaseModel):
    """Quiz answers from the frontend, one per question in catalog order"""
    answers: List[StrictInt]


class AssessmentResponse(BaseModel):
    """Scores, matches and analysis for a submitted quiz"""
    scores: Dict[str, int]
    overall_score: int
    matches: List[Dict[str, Any]]
    analysis: str
    strengths: List[str]
    development_areas: List[str]
    recommendations: List[str]


class MatchRequest(BaseModel):
    scores: Dict[str, Any]
    limit: Optional[int] = None


class MatchResponse(BaseModel):
    matches: List[Dict[str, Any]]


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get("/")
@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring"""
    return {
        "status": "healthy",
        "service": "careerpath-backend",
        "timestamp": datetime.now().isoformat(),
    }


# ============================================================================
# QUIZ ENDPOINTS
# ============================================================================

@app.get("/questions")
async def list_questions():
    """Question catalog in answer order. Scoring weights stay server-side."""
    return {"questions": [q.to_dict(include_weight=False) for q in QUESTIONS]}


@app.post("/assessment", response_model=AssessmentResponse)
async def submit_assessment(submission: AssessmentSubmission):
    """Score quiz answers and return the best matching careers"""
    try:
        scores = calculate_scores(submission.answers, QUESTIONS)
    except ValidationError as e:
        logger.info("Rejected assessment: %s", e)
        raise HTTPException(status_code=400, detail=e.errors)

    matches = match_careers(scores, CAREERS, limit=settings.top_n)

    return AssessmentResponse(
        scores=scores.to_dict(),
        overall_score=overall_score(scores),
        matches=[career.to_dict() for career in matches],
        analysis=generate_personality_analysis(scores),
        strengths=identify_strengths(scores),
        development_areas=identify_development_areas(scores),
        recommendations=generate_career_recommendations(scores),
    )


# ============================================================================
# CAREER ENDPOINTS
# ============================================================================

@app.post("/match", response_model=MatchResponse)
async def match(request: MatchRequest):
    """Match already computed trait scores against the catalog"""
    limit = settings.top_n if request.limit is None else request.limit
    if limit < 0:
        raise HTTPException(status_code=400, detail=["limit must not be negative"])

    try:
        matches = match_careers(request.scores, CAREERS, limit=limit)
    except ValidationError as e:
        logger.info("Rejected match request: %s", e)
        raise HTTPException(status_code=400, detail=e.errors)

    return MatchResponse(matches=[career.to_dict() for career in matches])


@app.get("/careers")
async def list_careers():
    return {"careers": [career.to_dict() for career in CAREERS]}


@app.get("/careers/{career_id}")
async def get_career(career_id: str):
    career = get_career_by_id(career_id, CAREERS)
    if career is None:
        raise HTTPException(status_code=404, detail="Career not found")
    return career.to_dict()


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
