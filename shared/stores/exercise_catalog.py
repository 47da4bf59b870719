"""운동 카탈로그

data/exercises/catalog.json 형식:
    {
      "_comment": "...",
      "barbell_back_squat": {"name": "...", "muscleGroup": "quadriceps", ...},
      ...
    }
"_"로 시작하는 키는 메타데이터로 간주하고 건너뛴다.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from shared.models.exercise import Exercise

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent.parent / "data" / "exercises" / "catalog.json"


class ExerciseCatalog(Protocol):
    def list_exercises(self) -> List[Exercise]:
        ...

    def get(self, exercise_id: str) -> Optional[Exercise]:
        ...


class JsonExerciseCatalog:
    """JSON 파일 기반 카탈로그 (최초 조회 시 로드 후 캐시)"""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else DEFAULT_CATALOG_PATH
        self._cache: Optional[Dict[str, Exercise]] = None

    def _load(self) -> Dict[str, Exercise]:
        if self._cache is not None:
            return self._cache

        if not self.path.exists():
            raise FileNotFoundError(f"운동 카탈로그 파일을 찾을 수 없습니다: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        exercises: Dict[str, Exercise] = {}
        for exercise_id, data in raw.items():
            if exercise_id.startswith("_"):
                continue
            exercises[exercise_id] = Exercise.model_validate({**data, "id": exercise_id})

        logger.info(f"운동 카탈로그 로드: {len(exercises)}개 ({self.path.name})")
        self._cache = exercises
        return exercises

    def list_exercises(self) -> List[Exercise]:
        return list(self._load().values())

    def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._load().get(exercise_id)


class InMemoryExerciseCatalog:
    """메모리 카탈로그 (테스트용)"""

    def __init__(self, exercises: Iterable[Exercise] = ()):
        self._exercises: Dict[str, Exercise] = {e.id: e for e in exercises}

    def list_exercises(self) -> List[Exercise]:
        return list(self._exercises.values())

    def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._exercises.get(exercise_id)
