"""Program Generator 모델"""

from .input import (
    Goal,
    Approach,
    Split,
    ProgramConfig,
    SPLIT_MIN_DAYS,
    validate_config_days,
)
from .output import GeneratedExercise, GeneratedWorkout, GeneratedProgram

__all__ = [
    "Goal",
    "Approach",
    "Split",
    "ProgramConfig",
    "SPLIT_MIN_DAYS",
    "validate_config_days",
    "GeneratedExercise",
    "GeneratedWorkout",
    "GeneratedProgram",
]
