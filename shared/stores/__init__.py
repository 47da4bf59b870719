"""외부 저장소 인터페이스 + 기본 구현

핵심 로직은 사용자 식별을 하지 않는다. user_id는 항상 호출자가 넘긴다.
"""

from .profile_store import ProfileStore, InMemoryProfileStore
from .exercise_catalog import ExerciseCatalog, JsonExerciseCatalog, InMemoryExerciseCatalog
from .template_store import TemplateStore, InMemoryTemplateStore

__all__ = [
    "ProfileStore",
    "InMemoryProfileStore",
    "ExerciseCatalog",
    "JsonExerciseCatalog",
    "InMemoryExerciseCatalog",
    "TemplateStore",
    "InMemoryTemplateStore",
]
