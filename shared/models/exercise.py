"""운동 카탈로그 레코드 (공유)"""

from typing import List, Literal, Optional

from pydantic import Field, field_validator

from .morphotype import CamelModel
from .recommendation import ExerciseRecommendation

MuscleGroup = Literal["chest", "back", "shoulders", "legs", "arms", "core"]

# 세부 근육 부위 → 분할 기준 근육군
MUSCLE_GROUP_ALIASES = {
    "chest": "chest",
    "pecs": "chest",
    "pectoraux": "chest",
    "back": "back",
    "lats": "back",
    "traps": "back",
    "dos": "back",
    "shoulders": "shoulders",
    "delts": "shoulders",
    "deltoids": "shoulders",
    "épaules": "shoulders",
    "legs": "legs",
    "quadriceps": "legs",
    "quads": "legs",
    "hamstrings": "legs",
    "glutes": "legs",
    "calves": "legs",
    "adductors": "legs",
    "jambes": "legs",
    "arms": "arms",
    "biceps": "arms",
    "triceps": "arms",
    "forearms": "arms",
    "bras": "arms",
    "core": "core",
    "abs": "core",
    "abdominals": "core",
}


def canonical_muscle_group(value: str) -> str:
    """근육군 정규화 (알 수 없는 값은 소문자 그대로)"""
    key = value.strip().lower()
    return MUSCLE_GROUP_ALIASES.get(key, key)


class Exercise(CamelModel):
    """운동 카탈로그 항목"""

    id: str = Field(..., description="운동 ID")
    name: str = Field(..., description="운동명")
    muscle_group: str = Field(..., description="주 근육군")
    secondary_muscles: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    difficulty: Literal["beginner", "intermediate", "advanced"] = "intermediate"
    movement_pattern: Optional[
        Literal["push", "pull", "squat", "hinge", "lunge", "carry", "rotation", "isolation"]
    ] = None
    recommendation: Optional[ExerciseRecommendation] = Field(
        default=None, description="큐레이션된 모포 추천 (없으면 카테고리 기본값)"
    )

    @field_validator("equipment", mode="before")
    @classmethod
    def normalize_equipment(cls, v):
        if isinstance(v, str):
            return [v]
        return v or []

    @property
    def group(self) -> str:
        """분할 기준 근육군"""
        return canonical_muscle_group(self.muscle_group)
