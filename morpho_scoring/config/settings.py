"""Morpho Scoring 설정

환경 변수:
- SCORING_BASELINE: 중립 기준 점수 (기본값: 50)
- DISADVANTAGE_MULTIPLIER: 불리 조건 가중 배수 (기본값: 1.25, 1 미만 불가)
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class MorphoScoringSettings(BaseSettings):
    """점수 엔진 설정"""

    # 점수 기준
    scoring_baseline: int = Field(default=50, description="체형 의견 없음 = 50")
    disadvantage_multiplier: float = Field(
        default=1.25,
        description="불리 조건 가중치 배수 (유리 조건보다 같거나 크게)"
    )
    score_min: int = Field(default=0, description="최저 점수")
    score_max: int = Field(default=100, description="최고 점수")

    # 질문지 → 추천/회피 운동 목록
    recommend_threshold: int = Field(default=70, description="추천 운동 최소 점수")
    avoid_threshold: int = Field(default=35, description="회피 운동 최대 점수")

    @field_validator("disadvantage_multiplier")
    @classmethod
    def validate_multiplier(cls, v: float) -> float:
        if v < 1:
            raise ValueError(f"disadvantage_multiplier는 1 이상이어야 합니다: {v}")
        return v

    class Config:
        env_prefix = ""
        env_file = ".env"
        extra = "ignore"


settings = MorphoScoringSettings()
