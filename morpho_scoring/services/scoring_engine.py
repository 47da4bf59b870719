"""모포타입 × 운동 적합도 점수 엔진

점수 흐름:
1. 프로필 정규화, 기준 점수 50
2. 차원별 영향 합산 (유리 +가중치, 불리 -가중치 × 배수)
3. [0, 100] 범위 고정 후 정수 반올림
4. 장점/단점 문장, 해당되는 수정 방법, 전체 기술 큐
"""

from typing import Dict, Iterable, List, Optional

from langsmith import traceable

from shared.models.exercise import Exercise
from shared.models.morphotype import ProfileInput, normalize_profile
from shared.models.recommendation import ExerciseRecommendation
from morpho_scoring.config import settings
from morpho_scoring.models.output import ExerciseScore
from morpho_scoring.services.category_defaults import (
    NEUTRAL_RECOMMENDATION,
    resolve_recommendation,
)

# 차원 → 문장용 명칭
DIMENSION_LABELS: Dict[str, str] = {
    "global_type": "build",
    "frame_size": "frame",
    "shoulder_to_hip": "shoulder-to-hip ratio",
    "ribcage_depth": "ribcage",
    "torso_length": "torso",
    "arm_length": "arms",
    "femur_length": "femurs",
    "knee_valgus": "knee valgus",
    "ankle_dorsiflexion": "ankle dorsiflexion",
    "posterior_chain": "posterior chain flexibility",
    "wrist_mobility": "wrist mobility",
    "biceps_insertion": "biceps insertion",
    "calves_insertion": "calf insertion",
    "chest_insertion": "chest insertion",
    "weight_tendency": "weight tendency",
    "natural_strength": "natural strength",
}


def describe_condition(dimension: str, value: str) -> str:
    """(차원, 값) → "Long femurs" 형태"""
    label = DIMENSION_LABELS.get(dimension, dimension.replace("_", " "))
    text = f"{value.replace('-', ' ')} {label}"
    return text[0].upper() + text[1:]


class ScoringEngine:
    """체형 기반 운동 점수 계산

    사용 예시:
        engine = ScoringEngine()
        result = engine.score(profile, recommendation)
        scores = engine.score_catalog(profile, exercises)
    """

    def __init__(
        self,
        baseline: Optional[int] = None,
        disadvantage_multiplier: Optional[float] = None,
    ):
        self.baseline = settings.scoring_baseline if baseline is None else baseline
        multiplier = (
            settings.disadvantage_multiplier
            if disadvantage_multiplier is None
            else disadvantage_multiplier
        )
        # 불리 조건은 유리 조건보다 약해질 수 없다
        self.disadvantage_multiplier = max(1.0, multiplier)

    def score(
        self,
        profile: ProfileInput,
        recommendation: Optional[ExerciseRecommendation],
    ) -> ExerciseScore:
        """
        단일 운동 점수 계산

        Args:
            profile: 모포타입 프로필 (부분/레거시 형식 허용)
            recommendation: 운동 추천 (None이면 중립)

        Returns:
            ExerciseScore
        """
        normalized = normalize_profile(profile)
        rec = recommendation or NEUTRAL_RECOMMENDATION
        values = normalized.dimension_values()

        total = float(self.baseline)
        advantages: List[str] = []
        disadvantages: List[str] = []
        unfavorable_hits = set()

        for impact in rec.impacts:
            value = values.get(impact.dimension)
            if value is None:
                continue

            if value in impact.favorable:
                total += impact.favorable[value]
                sentence = f"{describe_condition(impact.dimension, value)}: favorable for this movement"
                if sentence not in advantages:
                    advantages.append(sentence)
            elif value in impact.unfavorable:
                total -= impact.unfavorable[value] * self.disadvantage_multiplier
                unfavorable_hits.add((impact.dimension, value))
                sentence = f"{describe_condition(impact.dimension, value)}: unfavorable for this movement"
                if sentence not in disadvantages:
                    disadvantages.append(sentence)

        # 트리거 조건이 프로필에 있고, 실제로 불리하게 매칭된 경우만
        modifications: List[str] = []
        for mod in rec.modifications:
            value = values.get(mod.dimension)
            if value not in mod.values or (mod.dimension, value) not in unfavorable_hits:
                continue
            if mod.text not in modifications:
                modifications.append(mod.text)

        score = int(round(min(float(settings.score_max), max(float(settings.score_min), total))))

        return ExerciseScore(
            score=score,
            advantages=advantages,
            disadvantages=disadvantages,
            modifications=modifications,
            cues=list(rec.cues),
        )

    def score_exercise(self, profile: ProfileInput, exercise: Exercise) -> ExerciseScore:
        """카탈로그 운동 점수 (큐레이션 추천 우선, 없으면 카테고리 기본값)"""
        return self.score(profile, resolve_recommendation(exercise))

    @traceable(name="morpho_catalog_scoring")
    def score_catalog(
        self,
        profile: ProfileInput,
        exercises: Iterable[Exercise],
    ) -> Dict[str, ExerciseScore]:
        """
        여러 운동 점수 계산

        Returns:
            {운동 ID: ExerciseScore}
        """
        normalized = normalize_profile(profile)
        return {ex.id: self.score_exercise(normalized, ex) for ex in exercises}


_default_engine = ScoringEngine()


def score_exercise(
    profile: ProfileInput,
    recommendation: Optional[ExerciseRecommendation],
) -> ExerciseScore:
    """기본 설정 엔진으로 점수 계산"""
    return _default_engine.score(profile, recommendation)
