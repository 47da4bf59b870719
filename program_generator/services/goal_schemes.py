"""목표별 세트/반복/휴식 스킴"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class GoalScheme:
    sets: int
    reps: str
    rest_seconds: int
    tempo: Optional[str] = None


GOAL_SCHEMES: Dict[str, GoalScheme] = {
    "strength": GoalScheme(sets=5, reps="3-5", rest_seconds=180),
    "hypertrophy": GoalScheme(sets=4, reps="8-12", rest_seconds=90, tempo="3-1-2-0"),
    "metabolic": GoalScheme(sets=3, reps="15-20", rest_seconds=45),
    "powerbuilding": GoalScheme(sets=4, reps="6-8", rest_seconds=120),
    "athletic": GoalScheme(sets=4, reps="5-8", rest_seconds=90, tempo="explosive concentric"),
    "recomposition": GoalScheme(sets=3, reps="10-15", rest_seconds=60),
}

GOAL_LABELS: Dict[str, str] = {
    "strength": "Pure Strength",
    "hypertrophy": "Hypertrophy",
    "metabolic": "Metabolic Stress",
    "powerbuilding": "Powerbuilding",
    "athletic": "Athletic",
    "recomposition": "Recomposition",
}

APPROACH_LABELS: Dict[str, str] = {
    "leverage_strengths": "Leverage my strengths",
    "fix_weaknesses": "Fix my weaknesses",
    "balanced": "Balanced program",
}
