"""Gateway Service - 모포 점수 / 프로그램 생성 API 서버

사용법:
    PYTHONPATH=. python -m gateway.main

포트: 8000 (기본)
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import os

from dotenv import load_dotenv
load_dotenv(override=True)

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gateway.config import settings

# LangSmith 프로젝트 분리
os.environ.setdefault("LANGSMITH_PROJECT", settings.langsmith_project)

from gateway.models import (
    MorphologyAnswersRequest,
    ExerciseScoreRequest,
    ExerciseScoreResponse,
    ProgramGenerateRequest,
    ProgramSaveRequest,
    ProgramSaveResponse,
)
from gateway.services import OrchestrationService
from morpho_scoring.models.questionnaire import MorphoQuestion
from morpho_scoring.services.morphotype_calculator import get_morpho_questions
from program_generator.models.output import GeneratedProgram
from shared.models.morphotype import MorphotypeProfile
from shared.utils.logging import configure_logging, get_logger

logger = get_logger("gateway", settings.log_level)

# 오케스트레이션 서비스 (싱글톤, 테스트에서는 미리 주입 가능)
orchestration_service: OrchestrationService = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 라이프사이클 관리"""
    global orchestration_service
    configure_logging(settings.log_level)
    logger.info("Gateway Service 시작 중...")
    if orchestration_service is None:
        orchestration_service = OrchestrationService()
    logger.info("Gateway Service 준비 완료")
    yield
    logger.info("Gateway Service 종료")


app = FastAPI(
    title="Morphofit Gateway API",
    description="모포타입 기반 운동 점수 + 프로그램 생성 API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_payload(error: Exception, hint: str = None) -> dict:
    """오류 응답용 페이로드 (디버깅 도움용)"""
    message = error.args[0] if isinstance(error, KeyError) and error.args else str(error)
    return {
        "error": str(message),
        "type": type(error).__name__,
        "hint": hint,
    }


def _http_error(error: Exception, hint: str = None) -> HTTPException:
    """예외 → HTTP 상태 (ValueError 400, KeyError 404, 그 외 500)"""
    if isinstance(error, KeyError):
        status_code = 404
    elif isinstance(error, ValueError):
        status_code = 400
    else:
        logger.exception(f"처리 중 오류: {error}")
        status_code = 500
        hint = hint or "서버 로그를 확인하세요."
    return HTTPException(status_code=status_code, detail=_error_payload(error, hint))


@app.get("/health")
async def health_check():
    """헬스 체크"""
    return {
        "status": "healthy",
        "service": "gateway",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# =============================================================================
# 모포타입
# =============================================================================

@app.get("/api/v1/morphology/questions", response_model=list[MorphoQuestion])
async def morphology_questions():
    """모포타입 질문지 (16문항)"""
    return get_morpho_questions()


@app.post("/api/v1/morphology/{user_id}", response_model=MorphotypeProfile)
async def submit_morphology(user_id: str, request: MorphologyAnswersRequest):
    """질문지 답변 제출 → 프로필 계산/저장 (재응답 시 전체 덮어쓰기)"""
    try:
        return orchestration_service.submit_questionnaire(user_id, request.answers)
    except Exception as e:
        raise _http_error(e, hint="answers는 {questionKey: value} 형태여야 합니다.")


@app.get("/api/v1/morphology/{user_id}", response_model=MorphotypeProfile)
async def get_morphology(user_id: str):
    """저장된 모포타입 프로필 조회"""
    try:
        return orchestration_service.get_profile(user_id)
    except Exception as e:
        raise _http_error(e, hint="질문지를 먼저 제출하세요.")


# =============================================================================
# 운동 점수
# =============================================================================

@app.post("/api/v1/exercises/{exercise_id}/score", response_model=ExerciseScoreResponse)
async def score_exercise(exercise_id: str, request: ExerciseScoreRequest):
    """단일 운동 적합도 점수

    profile이 없고 저장된 프로필도 없으면 중립 점수(50)
    """
    try:
        return orchestration_service.score_exercise(
            exercise_id,
            user_id=request.user_id,
            profile=request.profile,
        )
    except Exception as e:
        raise _http_error(e, hint="exerciseId가 카탈로그에 있는지 확인하세요.")


# =============================================================================
# 프로그램
# =============================================================================

@app.post("/api/v1/programs/generate", response_model=GeneratedProgram)
async def generate_program(request: ProgramGenerateRequest):
    """훈련 프로그램 생성"""
    try:
        return orchestration_service.generate_program(
            request.to_config(),
            user_id=request.user_id,
            profile=request.profile,
        )
    except Exception as e:
        raise _http_error(e, hint="daysPerWeek가 분할 최소 일수 이상인지 확인하세요.")


@app.post("/api/v1/programs/save", response_model=ProgramSaveResponse)
async def save_program(request: ProgramSaveRequest):
    """생성된 프로그램을 워크아웃 템플릿으로 저장"""
    try:
        template_ids = orchestration_service.save_program(request.program, user_id=request.user_id)
        return ProgramSaveResponse(template_ids=template_ids)
    except Exception as e:
        raise _http_error(e)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Gateway Service 시작: http://{settings.gateway_host}:{settings.gateway_port}")
    uvicorn.run(
        "gateway.main:app",
        host=settings.gateway_host,
        port=settings.gateway_port,
        reload=settings.reload,
    )
