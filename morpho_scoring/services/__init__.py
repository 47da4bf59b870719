"""Morpho Scoring 서비스"""

from .category_defaults import (
    CATEGORY_DEFAULTS,
    CategoryRule,
    get_category_default,
    resolve_recommendation,
)
from .scoring_engine import ScoringEngine, score_exercise
from .presentation import (
    get_score_band,
    get_score_label,
    get_score_color,
    get_score_emoji,
    render_badge,
)
from .morphotype_calculator import (
    MORPHO_QUESTIONS,
    MorphotypeCalculator,
    calculate_morphotype,
    get_morpho_questions,
)

__all__ = [
    "CATEGORY_DEFAULTS",
    "CategoryRule",
    "get_category_default",
    "resolve_recommendation",
    "ScoringEngine",
    "score_exercise",
    "get_score_band",
    "get_score_label",
    "get_score_color",
    "get_score_emoji",
    "render_badge",
    "MORPHO_QUESTIONS",
    "MorphotypeCalculator",
    "calculate_morphotype",
    "get_morpho_questions",
]
