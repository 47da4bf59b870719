"""모포타입 질문지 모델"""

from typing import List, Literal, Optional

from pydantic import Field

from shared.models.morphotype import CamelModel


class QuestionOption(CamelModel):
    """선택지"""

    label: str
    value: str
    description: Optional[str] = None


class MorphoQuestion(CamelModel):
    """단일 선택 질문 (질문 1개 = 프로필 필드 1개)"""

    id: str
    question_key: str = Field(..., description="답변 딕셔너리 키")
    question_text: str
    question_type: Literal["single_choice"] = "single_choice"
    category: Literal["structure", "proportions", "mobility", "insertions", "metabolism"]
    help_text: Optional[str] = None
    options: List[QuestionOption] = Field(default_factory=list)
    order_index: int
