"""프로그램 생성 출력 모델"""

from typing import List, Optional

from pydantic import Field

from shared.models.morphotype import CamelModel
from .input import ProgramConfig


class GeneratedExercise(CamelModel):
    """워크아웃 내 운동"""

    exercise_id: str
    exercise_name: str
    muscle_group: str
    sets: int
    reps: str
    rest_seconds: int
    tempo: Optional[str] = None
    morpho_score: int = Field(..., ge=0, le=100)
    notes: List[str] = Field(default_factory=list, description="접근 안내 + 수정 방법 + 첫 기술 큐")


class GeneratedWorkout(CamelModel):
    """하루 워크아웃"""

    name: str
    target_muscles: List[str] = Field(default_factory=list)
    exercises: List[GeneratedExercise] = Field(default_factory=list)


class GeneratedProgram(CamelModel):
    """생성된 프로그램 (워크아웃 수 = days_per_week)"""

    config: ProgramConfig
    workouts: List[GeneratedWorkout] = Field(default_factory=list)
