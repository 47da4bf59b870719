"""워크아웃 템플릿 저장소"""

import uuid
from typing import Dict, List, Optional, Protocol

from shared.models.template import WorkoutTemplate


class TemplateStore(Protocol):
    """템플릿 저장소 (항상 신규 생성)"""

    def create(self, template: WorkoutTemplate) -> str:
        ...

    def get(self, template_id: str) -> Optional[WorkoutTemplate]:
        ...


class InMemoryTemplateStore:
    """메모리 템플릿 저장소"""

    def __init__(self):
        self._templates: Dict[str, WorkoutTemplate] = {}

    def create(self, template: WorkoutTemplate) -> str:
        template_id = str(uuid.uuid4())
        self._templates[template_id] = template.model_copy(update={"id": template_id})
        return template_id

    def get(self, template_id: str) -> Optional[WorkoutTemplate]:
        return self._templates.get(template_id)

    def list_for_user(self, user_id: Optional[str]) -> List[WorkoutTemplate]:
        return [t for t in self._templates.values() if t.user_id == user_id]
