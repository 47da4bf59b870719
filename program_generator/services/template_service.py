"""생성된 프로그램 → 워크아웃 템플릿 저장

워크아웃마다 새 템플릿을 만든다 (기존 템플릿 갱신 없음).
"""

import logging
from typing import List, Optional

from langsmith import traceable

from shared.models.template import TemplateExercise, WorkoutTemplate
from shared.stores.template_store import TemplateStore
from program_generator.config import settings
from program_generator.models.output import GeneratedProgram, GeneratedWorkout
from program_generator.services.goal_schemes import APPROACH_LABELS, GOAL_LABELS
from program_generator.services.split_resolver import SPLIT_LABELS

logger = logging.getLogger(__name__)


def describe_config(program: GeneratedProgram) -> str:
    """예: "Hypertrophy • Balanced program • Full Body" """
    config = program.config
    return " • ".join([
        GOAL_LABELS[config.goal],
        APPROACH_LABELS[config.approach],
        SPLIT_LABELS[config.split],
    ])


def build_template(
    workout: GeneratedWorkout,
    description: str,
    user_id: Optional[str] = None,
) -> WorkoutTemplate:
    return WorkoutTemplate(
        user_id=user_id,
        name=workout.name,
        description=description,
        target_muscles=list(workout.target_muscles),
        estimated_duration=len(workout.exercises) * settings.minutes_per_exercise,
        exercises=[
            TemplateExercise(
                exercise_id=ex.exercise_id,
                order_index=position,
                target_sets=ex.sets,
                target_reps=ex.reps,
                rest_seconds=ex.rest_seconds,
                notes=" | ".join(ex.notes) if ex.notes else None,
            )
            for position, ex in enumerate(workout.exercises, start=1)
        ],
    )


@traceable(name="save_program_templates")
def save_program_as_templates(
    program: GeneratedProgram,
    store: TemplateStore,
    user_id: Optional[str] = None,
) -> List[str]:
    """
    프로그램의 워크아웃을 템플릿으로 저장

    Args:
        program: 생성된 프로그램
        store: 템플릿 저장소
        user_id: 소유자 (호출자가 전달)

    Returns:
        생성된 템플릿 ID 목록 (워크아웃 순서)
    """
    description = describe_config(program)
    template_ids = [
        store.create(build_template(workout, description, user_id))
        for workout in program.workouts
    ]
    logger.info(f"템플릿 {len(template_ids)}개 저장 (user={user_id})")
    return template_ids
