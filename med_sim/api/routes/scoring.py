"""
MedSim — Scoring Routes

Правила нарахування балів (інформаційно).
"""

from dataclasses import asdict

from fastapi import APIRouter

from med_sim.schemas import ScoringRules

from ..config import config

router = APIRouter(tags=["Scoring"])


@router.get("/scoring-rules", response_model=ScoringRules)
async def scoring_rules() -> ScoringRules:
    """Бали за кожну категорію дій"""
    return ScoringRules(**asdict(config.scoring))
