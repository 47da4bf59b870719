"""Gateway Models - 앱 요청/응답 모델"""

from .app import (
    MorphologyAnswersRequest,
    ExerciseScoreRequest,
    ExerciseScoreResponse,
    ProgramGenerateRequest,
    ProgramSaveRequest,
    ProgramSaveResponse,
)

__all__ = [
    "MorphologyAnswersRequest",
    "ExerciseScoreRequest",
    "ExerciseScoreResponse",
    "ProgramGenerateRequest",
    "ProgramSaveRequest",
    "ProgramSaveResponse",
]
