"""Shared models"""

from .morphotype import (
    MorphotypeProfile,
    StructureProfile,
    ProportionsProfile,
    MobilityProfile,
    InsertionsProfile,
    MetabolismProfile,
    SomatotypeScores,
    MobilityWork,
    LiftAnalysis,
    normalize_profile,
)
from .recommendation import (
    Dimension,
    DimensionImpact,
    ConditionalModification,
    ExerciseRecommendation,
)
from .exercise import Exercise, canonical_muscle_group
from .template import WorkoutTemplate, TemplateExercise

__all__ = [
    "MorphotypeProfile",
    "StructureProfile",
    "ProportionsProfile",
    "MobilityProfile",
    "InsertionsProfile",
    "MetabolismProfile",
    "SomatotypeScores",
    "MobilityWork",
    "LiftAnalysis",
    "normalize_profile",
    "Dimension",
    "DimensionImpact",
    "ConditionalModification",
    "ExerciseRecommendation",
    "Exercise",
    "canonical_muscle_group",
    "WorkoutTemplate",
    "TemplateExercise",
]
