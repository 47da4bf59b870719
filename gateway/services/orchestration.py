"""오케스트레이션 서비스

저장소 + 점수 엔진 + 질문지 계산기 + 프로그램 파이프라인 연결.
사용자 식별은 하지 않는다 (user_id는 HTTP 계층에서 전달).
"""

import logging
from typing import Any, Dict, List, Optional

from shared.models.morphotype import MorphotypeProfile, ProfileInput
from shared.stores import (
    ExerciseCatalog,
    InMemoryProfileStore,
    InMemoryTemplateStore,
    JsonExerciseCatalog,
    ProfileStore,
    TemplateStore,
)
from morpho_scoring.services.category_defaults import resolve_recommendation
from morpho_scoring.services.morphotype_calculator import MorphotypeCalculator
from morpho_scoring.services.presentation import get_score_band, render_badge
from morpho_scoring.services.scoring_engine import ScoringEngine
from program_generator.models.input import ProgramConfig, validate_config_days
from program_generator.models.output import GeneratedProgram
from program_generator.pipeline import ProgramGenerationPipeline
from program_generator.services.template_service import save_program_as_templates
from gateway.config import settings
from gateway.models.app import ExerciseScoreResponse

logger = logging.getLogger(__name__)


class OrchestrationService:
    """Gateway 요청 처리

    사용 예시:
        service = OrchestrationService()
        profile = service.submit_questionnaire("user-1", answers)
        program = service.generate_program(config, user_id="user-1")
    """

    def __init__(
        self,
        profile_store: Optional[ProfileStore] = None,
        catalog: Optional[ExerciseCatalog] = None,
        template_store: Optional[TemplateStore] = None,
        engine: Optional[ScoringEngine] = None,
    ):
        self.profile_store = profile_store or InMemoryProfileStore()
        self.catalog = catalog or JsonExerciseCatalog(settings.exercise_catalog_path)
        self.template_store = template_store or InMemoryTemplateStore()
        self.engine = engine or ScoringEngine()
        self.calculator = MorphotypeCalculator(self.engine)
        self.program_pipeline = ProgramGenerationPipeline(engine=self.engine)

    # ------------------------------------------------------------------
    # 모포타입
    # ------------------------------------------------------------------

    def submit_questionnaire(self, user_id: str, answers: Dict[str, str]) -> MorphotypeProfile:
        """답변 → 프로필 계산 후 저장 (재응답 시 전체 덮어쓰기)"""
        profile = self.calculator.calculate(answers, user_id=user_id)
        stored = self.profile_store.upsert(user_id, profile)
        logger.info(f"모포타입 저장: user={user_id} global_type={stored.global_type}")
        return stored

    def get_profile(self, user_id: str) -> MorphotypeProfile:
        """
        Raises:
            KeyError: 저장된 프로필 없음
        """
        profile = self.profile_store.get(user_id)
        if profile is None:
            raise KeyError(f"모포타입 프로필 없음: {user_id}")
        return profile

    def _resolve_profile(
        self,
        user_id: Optional[str],
        profile: Optional[Dict[str, Any]],
    ) -> ProfileInput:
        """요청 프로필 우선, 없으면 저장된 프로필, 둘 다 없으면 None"""
        if profile is not None:
            return profile
        if user_id is not None:
            return self.profile_store.get(user_id)
        return None

    # ------------------------------------------------------------------
    # 점수
    # ------------------------------------------------------------------

    def score_exercise(
        self,
        exercise_id: str,
        user_id: Optional[str] = None,
        profile: Optional[Dict[str, Any]] = None,
    ) -> ExerciseScoreResponse:
        """
        Raises:
            KeyError: 카탈로그에 없는 운동
        """
        exercise = self.catalog.get(exercise_id)
        if exercise is None:
            raise KeyError(f"운동을 찾을 수 없습니다: {exercise_id}")

        recommendation = resolve_recommendation(exercise)
        result = self.engine.score(self._resolve_profile(user_id, profile), recommendation)

        return ExerciseScoreResponse(
            **result.model_dump(),
            exercise_id=exercise.id,
            exercise_name=exercise.name,
            recommendation_source=recommendation.source,
            band=get_score_band(result.score),
            badge=render_badge(result.score),
        )

    # ------------------------------------------------------------------
    # 프로그램
    # ------------------------------------------------------------------

    def generate_program(
        self,
        config: ProgramConfig,
        user_id: Optional[str] = None,
        profile: Optional[Dict[str, Any]] = None,
    ) -> GeneratedProgram:
        """
        Raises:
            ValueError: 주당 일수가 분할 최소값 미만
        """
        validate_config_days(config)
        return self.program_pipeline.generate(
            self._resolve_profile(user_id, profile),
            config,
            self.catalog.list_exercises(),
        )

    def save_program(self, program: GeneratedProgram, user_id: Optional[str] = None) -> List[str]:
        return save_program_as_templates(program, self.template_store, user_id=user_id)
