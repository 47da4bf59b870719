"""Program Generator 서비스"""

from .split_resolver import (
    DayTemplate,
    SPLIT_DAYS,
    SPLIT_LABELS,
    MAX_PER_MUSCLE,
    resolve_days,
    max_exercises_per_workout,
)
from .goal_schemes import GoalScheme, GOAL_SCHEMES, GOAL_LABELS, APPROACH_LABELS
from .approach_policy import ApproachPolicy, Candidate
from .exercise_selector import ExerciseSelector, filter_for_day, STRENGTH_NOTE, CORRECTIVE_NOTE
from .template_service import save_program_as_templates, build_template, describe_config

__all__ = [
    "DayTemplate",
    "SPLIT_DAYS",
    "SPLIT_LABELS",
    "MAX_PER_MUSCLE",
    "resolve_days",
    "max_exercises_per_workout",
    "GoalScheme",
    "GOAL_SCHEMES",
    "GOAL_LABELS",
    "APPROACH_LABELS",
    "ApproachPolicy",
    "Candidate",
    "ExerciseSelector",
    "filter_for_day",
    "STRENGTH_NOTE",
    "CORRECTIVE_NOTE",
    "save_program_as_templates",
    "build_template",
    "describe_config",
]
