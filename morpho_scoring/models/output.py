"""점수 엔진 출력 모델"""

from typing import List, Literal

from pydantic import Field

from shared.models.morphotype import CamelModel


class ExerciseScore(CamelModel):
    """운동 적합도 점수

    50 = 체형 의견 없음. 양 극단은 강한 적합/부적합에만 도달한다.
    """

    score: int = Field(..., ge=0, le=100, description="적합도 점수 (0-100)")
    advantages: List[str] = Field(default_factory=list, description="유리하게 매칭된 차원")
    disadvantages: List[str] = Field(default_factory=list, description="불리하게 매칭된 차원")
    modifications: List[str] = Field(
        default_factory=list,
        description="실제 해당되는 불리 조건의 수정 방법만"
    )
    cues: List[str] = Field(default_factory=list, description="기술 큐 (전체, 순서 유지)")


class ScoreBand(CamelModel):
    """UI 표시용 점수 구간"""

    key: Literal["excellent", "good", "neutral", "caution", "poor"]
    label: str
    color: Literal["success", "info", "warning", "error"]
    emoji: str
    min_score: int
