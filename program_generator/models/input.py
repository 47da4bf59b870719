"""프로그램 생성 입력 모델"""

from typing import Dict, Literal

from pydantic import Field, field_validator

from shared.models.morphotype import CamelModel

Goal = Literal["strength", "hypertrophy", "metabolic", "powerbuilding", "athletic", "recomposition"]
Approach = Literal["leverage_strengths", "fix_weaknesses", "balanced"]
Split = Literal["full_body", "push_pull_legs", "upper_lower", "bro_split"]

# 분할별 최소 주당 일수 (호출자 측 검증 전용, 생성기는 강제하지 않음)
SPLIT_MIN_DAYS: Dict[str, int] = {
    "full_body": 2,
    "push_pull_legs": 3,
    "upper_lower": 3,
    "bro_split": 4,
}

SPLIT_ALIASES = {
    "ppl": "push_pull_legs",
    "push-pull-legs": "push_pull_legs",
    "fullbody": "full_body",
    "full-body": "full_body",
    "upper-lower": "upper_lower",
    "bro": "bro_split",
}


class ProgramConfig(CamelModel):
    """프로그램 설정"""

    goal: Goal = Field(..., description="훈련 목표")
    approach: Approach = Field(default="balanced", description="전략 접근 방식")
    split: Split = Field(..., description="분할 구조")
    days_per_week: int = Field(..., ge=1, le=7, description="주당 훈련 일수")

    @field_validator("split", mode="before")
    @classmethod
    def normalize_split(cls, v):
        if isinstance(v, str):
            key = v.strip().lower()
            return SPLIT_ALIASES.get(key, key)
        return v


def validate_config_days(config: ProgramConfig) -> None:
    """분할별 최소 일수 검증 (gateway에서 400으로 변환)

    Raises:
        ValueError: 주당 일수가 분할 최소값 미만
    """
    minimum = SPLIT_MIN_DAYS[config.split]
    if config.days_per_week < minimum:
        raise ValueError(
            f"{config.split} 분할은 주 {minimum}일 이상 필요합니다 (요청: {config.days_per_week}일)"
        )
