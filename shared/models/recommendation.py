"""운동별 모포 추천 모델 (공유)

어떤 체형 값이 해당 운동에 유리/불리한지, 불리 조건별 수정 방법,
항상 노출되는 기술 큐를 정의한다.
"""

from typing import Dict, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from .morphotype import CamelModel

Dimension = Literal[
    "global_type",
    "frame_size",
    "shoulder_to_hip",
    "ribcage_depth",
    "torso_length",
    "arm_length",
    "femur_length",
    "knee_valgus",
    "ankle_dorsiflexion",
    "posterior_chain",
    "wrist_mobility",
    "biceps_insertion",
    "calves_insertion",
    "chest_insertion",
    "weight_tendency",
    "natural_strength",
]

# 차원별 (허용 값, 중립 값) - 중립 값에는 입장을 선언할 수 없다
DIMENSION_VALUES: Dict[str, tuple] = {
    "global_type": (("longiligne", "breviligne", "balanced"), "balanced"),
    "frame_size": (("fine", "medium", "large"), "medium"),
    "shoulder_to_hip": (("narrow", "medium", "wide"), "medium"),
    "ribcage_depth": (("narrow", "medium", "deep"), "medium"),
    "torso_length": (("short", "medium", "long"), "medium"),
    "arm_length": (("short", "medium", "long"), "medium"),
    "femur_length": (("short", "medium", "long"), "medium"),
    "knee_valgus": (("none", "slight", "pronounced"), "none"),
    "ankle_dorsiflexion": (("limited", "average", "good"), "average"),
    "posterior_chain": (("limited", "average", "good"), "average"),
    "wrist_mobility": (("limited", "average", "good"), "average"),
    "biceps_insertion": (("low", "medium", "high"), "medium"),
    "calves_insertion": (("low", "medium", "high"), "medium"),
    "chest_insertion": (("low", "medium", "high"), "medium"),
    "weight_tendency": (("lean", "balanced", "gain-prone"), "balanced"),
    "natural_strength": (("below-average", "average", "above-average"), "average"),
}


class DimensionImpact(CamelModel):
    """단일 체형 차원의 영향

    예시:
        DimensionImpact(
            dimension="femur_length",
            favorable={"short": 15},
            unfavorable={"long": 12},
        )
    """

    dimension: Dimension
    favorable: Dict[str, int] = Field(default_factory=dict, description="유리한 값 → 가중치")
    unfavorable: Dict[str, int] = Field(default_factory=dict, description="불리한 값 → 가중치")

    @field_validator("favorable", "unfavorable")
    @classmethod
    def validate_magnitudes(cls, v: Dict[str, int]) -> Dict[str, int]:
        for value, magnitude in v.items():
            if not 0 <= magnitude <= 50:
                raise ValueError(f"가중치 범위 초과 ({value}: {magnitude}). 0-50만 허용")
        return v

    @model_validator(mode="after")
    def validate_values(self) -> "DimensionImpact":
        allowed, neutral = DIMENSION_VALUES[self.dimension]
        for value in list(self.favorable) + list(self.unfavorable):
            if value not in allowed:
                raise ValueError(f"{self.dimension}에 없는 값: {value}. 가능한 값: {allowed}")
            if value == neutral:
                raise ValueError(f"중립 값 '{neutral}'에는 유리/불리를 선언할 수 없습니다")
        overlap = set(self.favorable) & set(self.unfavorable)
        if overlap:
            raise ValueError(f"유리/불리 동시 선언: {sorted(overlap)}")
        return self


class ConditionalModification(CamelModel):
    """불리 조건에서만 노출되는 수정 방법"""

    dimension: Dimension
    values: List[str] = Field(..., min_length=1, description="트리거 값")
    text: str = Field(..., description="수정 방법")


class ExerciseRecommendation(CamelModel):
    """운동 모포 추천 (큐레이션 또는 카테고리 기본값)"""

    key: Optional[str] = Field(default=None, description="카테고리 키 또는 운동 ID")
    source: Literal["curated", "category_default", "neutral"] = "curated"
    impacts: List[DimensionImpact] = Field(default_factory=list)
    modifications: List[ConditionalModification] = Field(default_factory=list)
    cues: List[str] = Field(default_factory=list, description="기술 큐 (항상 노출)")

    @property
    def has_impacts(self) -> bool:
        return any(i.favorable or i.unfavorable for i in self.impacts)
