"""Morpho Scoring - 체형(모포타입) 기반 운동 적합도 점수

사용 예시:
    from morpho_scoring import ScoringEngine
    from morpho_scoring.services import get_category_default

    engine = ScoringEngine()
    result = engine.score(profile, get_category_default("quadriceps", "Back Squat"))
    print(result.score, result.disadvantages)
"""

from morpho_scoring.services.scoring_engine import ScoringEngine, score_exercise
from morpho_scoring.models.output import ExerciseScore

__all__ = [
    "ScoringEngine",
    "score_exercise",
    "ExerciseScore",
]
