"""Morpho Scoring 모델"""

from .output import ExerciseScore, ScoreBand
from .questionnaire import MorphoQuestion, QuestionOption

__all__ = ["ExerciseScore", "ScoreBand", "MorphoQuestion", "QuestionOption"]
