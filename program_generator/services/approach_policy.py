"""접근 방식별 후보 필터/정렬

- leverage_strengths: 점수 55 이상, 내림차순
- fix_weaknesses: 점수 40~75, 오름차순 (가장 약한 것부터)
- balanced: 필터 없음, 내림차순

필터 후 후보가 min_candidates 미만이면 근육군 필터 목록 전체를 내림차순으로 사용한다.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from langsmith import traceable

from shared.models.exercise import Exercise
from morpho_scoring.models.output import ExerciseScore
from program_generator.config import settings

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    """점수가 매겨진 후보 운동 (result는 프로필이 없으면 None)"""

    exercise: Exercise
    morpho_score: int
    result: Optional[ExerciseScore] = None

    @property
    def group(self) -> str:
        return self.exercise.group


class ApproachPolicy:
    """접근 방식 정책"""

    def __init__(
        self,
        leverage_min_score: Optional[int] = None,
        fix_min_score: Optional[int] = None,
        fix_max_score: Optional[int] = None,
        min_candidates: Optional[int] = None,
    ):
        self.leverage_min_score = leverage_min_score if leverage_min_score is not None else settings.leverage_min_score
        self.fix_min_score = fix_min_score if fix_min_score is not None else settings.fix_min_score
        self.fix_max_score = fix_max_score if fix_max_score is not None else settings.fix_max_score
        self.min_candidates = min_candidates if min_candidates is not None else settings.min_candidates

    @traceable(name="approach_selection")
    def order(self, approach: str, candidates: List[Candidate]) -> List[Candidate]:
        """
        접근 방식 적용

        Args:
            approach: leverage_strengths | fix_weaknesses | balanced
            candidates: 근육군 필터를 통과한 후보 (카탈로그 순서)

        Returns:
            선택 우선순위 순서의 후보 목록
        """
        # sorted는 안정 정렬: 동점이면 카탈로그 순서 유지
        if approach == "leverage_strengths":
            ordered = sorted(
                (c for c in candidates if c.morpho_score >= self.leverage_min_score),
                key=lambda c: c.morpho_score,
                reverse=True,
            )
        elif approach == "fix_weaknesses":
            ordered = sorted(
                (c for c in candidates if self.fix_min_score <= c.morpho_score <= self.fix_max_score),
                key=lambda c: c.morpho_score,
            )
        else:
            ordered = sorted(candidates, key=lambda c: c.morpho_score, reverse=True)

        if len(ordered) < self.min_candidates:
            if len(ordered) < len(candidates):
                logger.info(
                    f"{approach} 후보 부족 ({len(ordered)}/{len(candidates)}). 전체 목록 사용"
                )
            return sorted(candidates, key=lambda c: c.morpho_score, reverse=True)

        return ordered
