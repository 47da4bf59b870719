"""Shared module - 점수 엔진과 프로그램 생성기가 공유하는 모듈"""

from shared.models.morphotype import MorphotypeProfile, normalize_profile
from shared.models.recommendation import ExerciseRecommendation
from shared.models.exercise import Exercise

__all__ = [
    "MorphotypeProfile",
    "normalize_profile",
    "ExerciseRecommendation",
    "Exercise",
]
