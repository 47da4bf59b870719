"""분할 구조 → 요일별 워크아웃 템플릿"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from program_generator.config import settings


@dataclass(frozen=True)
class DayTemplate:
    """하루 템플릿

    exclude_patterns: 해당 동작 패턴의 운동은 이 날 제외 (push 날에 pull 운동 등)
    """

    name: str
    muscles: Tuple[str, ...]
    exclude_patterns: Tuple[str, ...] = ()


_FULL_BODY = ("chest", "back", "shoulders", "legs", "arms")
_UPPER = ("chest", "back", "shoulders", "arms")
_PUSH = ("chest", "shoulders", "arms")
_PULL = ("back", "shoulders", "arms")

# 분할별 7일 템플릿 (앞에서부터 days_per_week개 사용)
SPLIT_DAYS: Dict[str, List[DayTemplate]] = {
    "full_body": [DayTemplate(f"Full Body {letter}", _FULL_BODY) for letter in "ABCDEFG"],
    "push_pull_legs": [
        DayTemplate("Push", _PUSH, ("pull",)),
        DayTemplate("Pull", _PULL, ("push",)),
        DayTemplate("Legs", ("legs",)),
        DayTemplate("Push 2", _PUSH, ("pull",)),
        DayTemplate("Pull 2", _PULL, ("push",)),
        DayTemplate("Legs 2", ("legs",)),
        DayTemplate("Push 3", _PUSH, ("pull",)),
    ],
    "upper_lower": [
        DayTemplate("Upper A", _UPPER),
        DayTemplate("Lower A", ("legs",)),
        DayTemplate("Upper B", _UPPER),
        DayTemplate("Lower B", ("legs",)),
        DayTemplate("Upper C", _UPPER),
        DayTemplate("Lower C", ("legs",)),
        DayTemplate("Upper D", _UPPER),
    ],
    "bro_split": [
        DayTemplate("Chest", ("chest",)),
        DayTemplate("Back", ("back",)),
        DayTemplate("Shoulders", ("shoulders",)),
        DayTemplate("Legs", ("legs",)),
        DayTemplate("Arms", ("arms",)),
        DayTemplate("Chest 2", ("chest",)),
        DayTemplate("Back 2", ("back",)),
    ],
}

# 근육군당 최대 운동 수
MAX_PER_MUSCLE: Dict[str, int] = {
    "full_body": 1,
    "push_pull_legs": 2,
    "upper_lower": 2,
    "bro_split": 4,
}

SPLIT_LABELS: Dict[str, str] = {
    "full_body": "Full Body",
    "push_pull_legs": "Push/Pull/Legs",
    "upper_lower": "Upper/Lower",
    "bro_split": "Bro Split",
}


def resolve_days(split: str, days_per_week: int) -> List[DayTemplate]:
    """분할 템플릿을 주당 일수만큼 자름 (최소 일수는 검증하지 않음)"""
    return SPLIT_DAYS[split][:max(0, days_per_week)]


def max_exercises_per_workout(split: str) -> int:
    if split == "full_body":
        return settings.full_body_max_exercises
    return settings.split_max_exercises
