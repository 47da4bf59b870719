"""하루 워크아웃 운동 선택 + 처방 생성

선택 순서:
1. 커버리지: 후보가 있는 대상 근육군마다 정책 순서상 첫 운동 1개
2. 채우기: 정책 순서대로 근육군 상한/워크아웃 상한까지
출력은 정책 순서를 유지한다.
"""

from typing import Dict, List, Optional

from shared.models.exercise import Exercise
from morpho_scoring.services.category_defaults import resolve_recommendation
from program_generator.config import settings
from program_generator.models.output import GeneratedExercise
from program_generator.services.approach_policy import Candidate
from program_generator.services.goal_schemes import GoalScheme
from program_generator.services.split_resolver import (
    DayTemplate,
    MAX_PER_MUSCLE,
    max_exercises_per_workout,
)

STRENGTH_NOTE = "Strength point: push the intensity"
CORRECTIVE_NOTE = "Corrective focus: technique first"


def filter_for_day(exercises: List[Exercise], day: DayTemplate) -> List[Exercise]:
    """대상 근육군 + 동작 패턴 제외 필터"""
    return [
        ex for ex in exercises
        if ex.group in day.muscles and ex.movement_pattern not in day.exclude_patterns
    ]


class ExerciseSelector:
    """근육군 상한을 지키며 운동을 고르고 세트/안내를 붙인다"""

    def select(self, ordered: List[Candidate], day: DayTemplate, split: str) -> List[Candidate]:
        per_muscle_cap = MAX_PER_MUSCLE[split]
        workout_cap = max_exercises_per_workout(split)

        chosen: Dict[int, Candidate] = {}
        muscle_counts: Dict[str, int] = {}

        def take(index: int, candidate: Candidate) -> None:
            chosen[index] = candidate
            muscle_counts[candidate.group] = muscle_counts.get(candidate.group, 0) + 1

        # 1. 커버리지
        for muscle in day.muscles:
            if len(chosen) >= workout_cap:
                break
            for index, candidate in enumerate(ordered):
                if candidate.group == muscle and index not in chosen:
                    take(index, candidate)
                    break

        # 2. 채우기
        for index, candidate in enumerate(ordered):
            if len(chosen) >= workout_cap:
                break
            if index in chosen:
                continue
            if muscle_counts.get(candidate.group, 0) >= per_muscle_cap:
                continue
            take(index, candidate)

        return [chosen[index] for index in sorted(chosen)]

    def build(self, candidate: Candidate, scheme: GoalScheme, approach: str) -> GeneratedExercise:
        """처방 생성 (세트 조정 + 안내 문구)"""
        score = candidate.morpho_score

        sets = scheme.sets
        if approach == "fix_weaknesses" and score < settings.weakness_bonus_threshold:
            sets = min(settings.max_sets, sets + 1)
        elif score < settings.poor_fit_threshold:
            sets = max(settings.min_sets, sets - 1)

        notes: List[str] = []
        if approach == "leverage_strengths" and score >= settings.strength_note_threshold:
            notes.append(STRENGTH_NOTE)
        elif approach == "fix_weaknesses" and score < settings.weakness_bonus_threshold:
            notes.append(CORRECTIVE_NOTE)

        if candidate.result is not None:
            notes.extend(candidate.result.modifications)
        first_cue = self._first_cue(candidate)
        if first_cue:
            notes.append(first_cue)

        ex = candidate.exercise
        return GeneratedExercise(
            exercise_id=ex.id,
            exercise_name=ex.name,
            muscle_group=ex.muscle_group,
            sets=sets,
            reps=scheme.reps,
            rest_seconds=scheme.rest_seconds,
            tempo=scheme.tempo,
            morpho_score=score,
            notes=notes,
        )

    def _first_cue(self, candidate: Candidate) -> Optional[str]:
        # 기술 큐는 프로필과 무관 (프로필이 없어도 노출)
        if candidate.result is not None:
            cues = candidate.result.cues
        else:
            cues = resolve_recommendation(candidate.exercise).cues
        return cues[0] if cues else None
