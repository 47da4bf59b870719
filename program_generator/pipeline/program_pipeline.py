"""프로그램 생성 파이프라인

전체 흐름:
1. 카탈로그 점수 계산 (프로필 없으면 균일 70)
2. 분할 템플릿을 주당 일수만큼 사용
3. 요일별: 근육군 필터 → 접근 방식 정렬 → 운동 선택
4. 목표 스킴 + 점수 기반 세트 조정, 안내 문구
"""

from typing import Iterable, List, Optional

from langsmith import traceable

from shared.models.exercise import Exercise
from shared.models.morphotype import ProfileInput
from morpho_scoring.services.scoring_engine import ScoringEngine
from program_generator.config import settings
from program_generator.models.input import ProgramConfig
from program_generator.models.output import GeneratedProgram, GeneratedWorkout
from program_generator.services.approach_policy import ApproachPolicy, Candidate
from program_generator.services.exercise_selector import ExerciseSelector, filter_for_day
from program_generator.services.goal_schemes import GOAL_SCHEMES
from program_generator.services.split_resolver import resolve_days


class ProgramGenerationPipeline:
    """프로그램 생성 파이프라인

    사용 예시:
        pipeline = ProgramGenerationPipeline()
        program = pipeline.generate(profile, config, exercises)
    """

    def __init__(
        self,
        engine: Optional[ScoringEngine] = None,
        policy: Optional[ApproachPolicy] = None,
        selector: Optional[ExerciseSelector] = None,
    ):
        self.engine = engine or ScoringEngine()
        self.policy = policy or ApproachPolicy()
        self.selector = selector or ExerciseSelector()

    @traceable(name="program_generation_pipeline")
    def generate(
        self,
        profile: ProfileInput,
        config: ProgramConfig,
        exercises: Iterable[Exercise],
    ) -> GeneratedProgram:
        """
        프로그램 생성

        Args:
            profile: 모포타입 프로필 (None이면 무프로필)
            config: 프로그램 설정 (최소 일수 검증은 호출자 책임)
            exercises: 운동 카탈로그

        Returns:
            GeneratedProgram (워크아웃 수 = days_per_week)
        """
        catalog = list(exercises)
        has_profile = profile is not None
        scores = self.engine.score_catalog(profile, catalog) if has_profile else {}
        scheme = GOAL_SCHEMES[config.goal]

        workouts: List[GeneratedWorkout] = []
        for day in resolve_days(config.split, config.days_per_week):
            candidates = [
                Candidate(
                    exercise=ex,
                    morpho_score=scores[ex.id].score if has_profile else settings.no_profile_score,
                    result=scores.get(ex.id),
                )
                for ex in filter_for_day(catalog, day)
            ]

            ordered = self.policy.order(config.approach, candidates) if candidates else []
            selected = self.selector.select(ordered, day, config.split)

            workouts.append(
                GeneratedWorkout(
                    name=day.name,
                    target_muscles=list(day.muscles),
                    exercises=[
                        self.selector.build(candidate, scheme, config.approach)
                        for candidate in selected
                    ],
                )
            )

        return GeneratedProgram(config=config, workouts=workouts)


def generate_program(
    profile: ProfileInput,
    config: ProgramConfig,
    exercises: Iterable[Exercise],
) -> GeneratedProgram:
    """기본 구성 파이프라인으로 프로그램 생성"""
    return ProgramGenerationPipeline().generate(profile, config, exercises)
