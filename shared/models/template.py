"""운동 템플릿 모델 (공유)

생성된 프로그램의 각 워크아웃을 재사용 가능한 템플릿으로 저장할 때 사용.
"""

from typing import List, Optional

from pydantic import Field

from .morphotype import CamelModel


class TemplateExercise(CamelModel):
    """템플릿 내 운동 항목"""

    exercise_id: str
    order_index: int = Field(..., ge=1, description="1부터 시작하는 순서")
    target_sets: int
    target_reps: str
    rest_seconds: int
    notes: Optional[str] = None


class WorkoutTemplate(CamelModel):
    """워크아웃 템플릿"""

    id: Optional[str] = Field(default=None, description="저장 시 발급")
    user_id: Optional[str] = None
    name: str
    description: str = ""
    target_muscles: List[str] = Field(default_factory=list)
    estimated_duration: int = Field(default=0, description="예상 소요 시간 (분)")
    exercises: List[TemplateExercise] = Field(default_factory=list)
