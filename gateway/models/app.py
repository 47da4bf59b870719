"""App-facing request/response models for Gateway endpoints."""

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from shared.models.morphotype import CamelModel
from morpho_scoring.models.output import ExerciseScore, ScoreBand
from program_generator.models.input import ProgramConfig
from program_generator.models.output import GeneratedProgram


class MorphologyAnswersRequest(CamelModel):
    """질문지 답변 제출"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "answers": {
                    "wrist_circumference": "medium",
                    "shoulder_hip_ratio": "wide",
                    "ribcage_depth": "deep",
                    "torso_length": "medium",
                    "arm_length": "long",
                    "femur_length": "long",
                    "knee_valgus": "none",
                    "ankle_mobility": "limited",
                    "posterior_chain": "average",
                    "wrist_mobility": "good",
                    "biceps_insertion": "high",
                    "calf_insertion": "medium",
                    "chest_insertion": "medium",
                    "weight_tendency": "balanced",
                    "natural_strength": "average",
                    "best_responders": "back_shoulders",
                }
            }
        },
    )

    answers: Dict[str, str] = Field(default_factory=dict, description="{questionKey: value}")


class ExerciseScoreRequest(CamelModel):
    """단일 운동 점수 요청

    profile이 있으면 그대로 사용, 없으면 user_id로 저장된 프로필 조회
    """

    user_id: Optional[str] = Field(default=None, description="사용자 ID")
    profile: Optional[Dict[str, Any]] = Field(default=None, description="모포타입 프로필 (부분 허용)")


class ExerciseScoreResponse(ExerciseScore):
    """운동 점수 응답 (점수 + UI 구간)"""

    exercise_id: str
    exercise_name: str
    recommendation_source: str = Field(..., description="curated | category_default | neutral")
    band: ScoreBand
    badge: str


class ProgramGenerateRequest(ProgramConfig):
    """프로그램 생성 요청"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "userId": "user-1",
                "goal": "hypertrophy",
                "approach": "balanced",
                "split": "ppl",
                "daysPerWeek": 3,
            }
        },
    )

    user_id: Optional[str] = Field(default=None, description="사용자 ID")
    profile: Optional[Dict[str, Any]] = Field(default=None, description="모포타입 프로필 (부분 허용)")

    def to_config(self) -> ProgramConfig:
        return ProgramConfig(
            goal=self.goal,
            approach=self.approach,
            split=self.split,
            days_per_week=self.days_per_week,
        )


class ProgramSaveRequest(CamelModel):
    """생성된 프로그램 템플릿 저장 요청"""

    user_id: Optional[str] = None
    program: GeneratedProgram


class ProgramSaveResponse(CamelModel):
    template_ids: List[str] = Field(default_factory=list)
