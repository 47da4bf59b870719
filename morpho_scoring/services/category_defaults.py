"""카테고리 기본 추천 (큐레이션 데이터가 없는 운동용)

규칙은 위에서 아래로 평가된다:
1. 구체적 변형 (floor press → 덤벨 벤치 → 벤치 → 편측 → 스쿼트 ...)
2. 근육군 폴백
3. 중립 기본값 (영향 없음)

영문/불어 운동명 키워드를 모두 인식한다.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from shared.models.exercise import Exercise
from shared.models.recommendation import (
    ConditionalModification,
    DimensionImpact,
    ExerciseRecommendation,
)


def _impact(dimension: str, favorable: Optional[Dict[str, int]] = None,
            unfavorable: Optional[Dict[str, int]] = None) -> DimensionImpact:
    return DimensionImpact(
        dimension=dimension,
        favorable=favorable or {},
        unfavorable=unfavorable or {},
    )


def _mod(dimension: str, values: List[str], text: str) -> ConditionalModification:
    return ConditionalModification(dimension=dimension, values=values, text=text)


def _default(key: str, impacts, modifications=(), cues=()) -> ExerciseRecommendation:
    return ExerciseRecommendation(
        key=key,
        source="category_default",
        impacts=list(impacts),
        modifications=list(modifications),
        cues=list(cues),
    )


# =============================================================================
# 카테고리별 기본 추천
# =============================================================================

CATEGORY_DEFAULTS: Dict[str, ExerciseRecommendation] = {
    # 하체 복합
    "squat": _default(
        "squat",
        impacts=[
            _impact("femur_length", {"short": 15}, {"long": 12}),
            _impact("torso_length", {"long": 8}, {"short": 6}),
            _impact("ankle_dorsiflexion", {"good": 8}, {"limited": 12}),
            _impact("knee_valgus", unfavorable={"slight": 5, "pronounced": 10}),
        ],
        modifications=[
            _mod("femur_length", ["long"], "Take a wider stance"),
            _mod("femur_length", ["long"], "Box squats keep depth consistent"),
            _mod("ankle_dorsiflexion", ["limited"], "Elevate heels (plates or lifting shoes)"),
            _mod("ankle_dorsiflexion", ["limited"], "Add ankle dorsiflexion drills"),
            _mod("knee_valgus", ["slight", "pronounced"], "Mini band around the knees"),
            _mod("knee_valgus", ["slight", "pronounced"], "Activate glutes before working sets"),
        ],
        cues=[
            "Brace before you descend",
            "Knees track over the toes",
            "Keep the whole foot planted",
        ],
    ),
    "deadlift": _default(
        "deadlift",
        impacts=[
            _impact("arm_length", {"long": 15}, {"short": 10}),
            _impact("femur_length", {"long": 5}),
            _impact("torso_length", {"short": 8}, {"long": 10}),
            _impact("posterior_chain", {"good": 8}, {"limited": 10}),
        ],
        modifications=[
            _mod("arm_length", ["short"], "Prefer sumo or trap bar"),
            _mod("arm_length", ["short"], "Pull from blocks to reduce range"),
            _mod("posterior_chain", ["limited"], "Start from an elevated bar position"),
        ],
        cues=[
            "Bar over mid-foot",
            "Push the floor away",
            "Lock the lats before the pull",
        ],
    ),
    "bench": _default(
        "bench",
        impacts=[
            _impact("arm_length", {"short": 8}, {"long": 12}),
            _impact("ribcage_depth", {"deep": 8}, {"narrow": 10}),
            _impact("shoulder_to_hip", {"wide": 5}, {"narrow": 8}),
            _impact("wrist_mobility", {"good": 8}, {"limited": 12}),
        ],
        modifications=[
            _mod("arm_length", ["long"], "Prefer dumbbells or floor press"),
            _mod("arm_length", ["long"], "A strong back arch is required"),
            _mod("ribcage_depth", ["narrow"], "Arch to compensate for a flat ribcage"),
            _mod("ribcage_depth", ["narrow"], "Dumbbells are often more comfortable"),
            _mod("wrist_mobility", ["limited"], "Use wrist wraps"),
            _mod("wrist_mobility", ["limited"], "Neutral grip with dumbbells"),
        ],
        cues=[
            "Retract and depress the shoulder blades",
            "Drive the feet into the floor",
            "Touch the lower chest under control",
        ],
    ),
    "bench_dumbbell": _default(
        "bench_dumbbell",
        impacts=[
            _impact("arm_length", {"short": 3}, {"long": 3}),
            _impact("ribcage_depth", {"deep": 5}, {"narrow": 3}),
            _impact("shoulder_to_hip", {"wide": 3}, {"narrow": 5}),
            _impact("wrist_mobility", {"good": 3}, {"limited": 3}),
        ],
        modifications=[
            _mod("arm_length", ["long"], "Customize the range, stop at a comfortable stretch"),
        ],
        cues=[
            "Lower the dumbbells to chest level",
            "Elbows at roughly 45 degrees",
        ],
    ),
    "floor_press": _default(
        "floor_press",
        impacts=[
            _impact("arm_length", {"long": 10}, {"short": 5}),
            _impact("ribcage_depth", {"narrow": 8}, {"deep": 5}),
            _impact("wrist_mobility", {"good": 5}, {"limited": 3}),
        ],
        cues=[
            "Pause with the triceps on the floor",
            "Press explosively from the dead stop",
        ],
    ),
    "unilateral": _default(
        "unilateral",
        impacts=[
            _impact("femur_length", {"short": 10}, {"long": 10}),
            _impact("arm_length", {"short": 3}),
            _impact("ankle_dorsiflexion", {"good": 10}, {"limited": 12}),
            _impact("knee_valgus", unfavorable={"slight": 5, "pronounced": 12}),
        ],
        modifications=[
            _mod("femur_length", ["long"], "Take a shorter stride"),
            _mod("femur_length", ["long"], "Hold a support for balance"),
            _mod("ankle_dorsiflexion", ["limited"], "Elevate the front heel"),
            _mod("knee_valgus", ["slight", "pronounced"], "Keep the front knee over the second toe"),
        ],
        cues=[
            "Control the descent on the working leg",
            "Stay tall through the torso",
        ],
    ),
    "row": _default(
        "row",
        impacts=[
            _impact("arm_length", {"long": 3}, {"short": 5}),
            _impact("posterior_chain", {"good": 5}, {"limited": 10}),
        ],
        modifications=[
            _mod("posterior_chain", ["limited"], "Use a chest-supported variation"),
            _mod("posterior_chain", ["limited"], "Limit the torso lean"),
        ],
        cues=[
            "Lead with the elbows",
            "Squeeze the shoulder blades at the top",
        ],
    ),
    "pullup": _default(
        "pullup",
        impacts=[
            _impact("arm_length", {"short": 5}, {"long": 5}),
            _impact("shoulder_to_hip", {"wide": 8}, {"narrow": 5}),
            _impact("frame_size", {"fine": 5}, {"large": 5}),
        ],
        modifications=[
            _mod("arm_length", ["long"], "Larger range of motion, use band assistance if needed"),
            _mod("frame_size", ["large"], "Use assisted or lat pulldown variations"),
        ],
        cues=[
            "Start from a dead hang",
            "Pull the elbows toward the hips",
        ],
    ),
    "overhead": _default(
        "overhead",
        impacts=[
            _impact("arm_length", {"short": 8}, {"long": 8}),
            _impact("shoulder_to_hip", {"wide": 10}, {"narrow": 6}),
            _impact("wrist_mobility", {"good": 6}, {"limited": 12}),
        ],
        modifications=[
            _mod("arm_length", ["long"], "Long range, build shoulder strength first"),
            _mod("wrist_mobility", ["limited"], "Use dumbbells or a neutral-grip bar"),
        ],
        cues=[
            "Squeeze glutes to protect the lower back",
            "Finish with the bar over mid-foot",
        ],
    ),
    "curl": _default(
        "curl",
        impacts=[
            _impact("biceps_insertion", {"high": 12}, {"low": 8}),
            _impact("wrist_mobility", {"good": 5}, {"limited": 12}),
        ],
        modifications=[
            _mod("wrist_mobility", ["limited"], "Use an EZ bar"),
            _mod("wrist_mobility", ["limited"], "Prefer dumbbell or hammer curls"),
        ],
        cues=[
            "Keep the elbows pinned",
            "Control the negative",
        ],
    ),
    "triceps": _default(
        "triceps",
        impacts=[
            _impact("arm_length", {"long": 3}),
            _impact("wrist_mobility", {"good": 5}, {"limited": 8}),
        ],
        modifications=[
            _mod("wrist_mobility", ["limited"], "Avoid heavy dips"),
            _mod("wrist_mobility", ["limited"], "Prefer rope or dumbbell variations"),
        ],
        cues=[
            "Keep the upper arm still",
            "Full lockout on every rep",
        ],
    ),
    "calf": _default(
        "calf",
        impacts=[
            _impact("calves_insertion", {"high": 12}, {"low": 10}),
            _impact("ankle_dorsiflexion", {"good": 5}, {"limited": 8}),
        ],
        modifications=[
            _mod("ankle_dorsiflexion", ["limited"], "Work a partial stretch and build range progressively"),
        ],
        cues=[
            "Pause at the bottom stretch",
            "Rise onto the big toe",
        ],
    ),
    "chest_fly": _default(
        "chest_fly",
        impacts=[
            _impact("arm_length", {"short": 5}, {"long": 8}),
            _impact("chest_insertion", {"high": 10}, {"low": 8}),
            _impact("ribcage_depth", {"deep": 5}, {"narrow": 5}),
        ],
        modifications=[
            _mod("arm_length", ["long"], "Limit the bottom range"),
            _mod("arm_length", ["long"], "Floor variation to reduce the range"),
        ],
        cues=[
            "Soft elbows throughout",
            "Hug a wide tree at the top",
        ],
    ),
    "leg_press": _default(
        "leg_press",
        impacts=[
            _impact("femur_length", {"short": 5}, {"long": 3}),
            _impact("ankle_dorsiflexion", {"good": 3}),
        ],
        modifications=[
            _mod("femur_length", ["long"], "Place the feet higher on the platform"),
            _mod("femur_length", ["long"], "Use less depth"),
        ],
        cues=[
            "Keep the lower back on the pad",
            "Do not lock the knees at the top",
        ],
    ),
}

NEUTRAL_RECOMMENDATION = ExerciseRecommendation(key="neutral", source="neutral")

# 질문지 결과의 추천/회피 운동 목록용 대표 운동명
CATEGORY_LABELS: Dict[str, str] = {
    "squat": "Back squat",
    "deadlift": "Conventional deadlift",
    "bench": "Barbell bench press",
    "bench_dumbbell": "Dumbbell bench press",
    "floor_press": "Floor press",
    "unilateral": "Lunges and split squats",
    "row": "Barbell row",
    "pullup": "Pull-ups",
    "overhead": "Overhead press",
    "curl": "Biceps curl",
    "triceps": "Triceps extension",
    "calf": "Calf raise",
    "chest_fly": "Chest fly",
    "leg_press": "Leg press",
}


# =============================================================================
# 규칙 테이블
# =============================================================================

def _has_keyword(text: str, keywords: Tuple[str, ...]) -> bool:
    """단어 경계 기준 키워드 매칭 (복수형 -s 허용: fentes, haltères, rows)"""
    return any(
        re.search(rf"(?<!\w){re.escape(k)}s?(?!\w)", text)
        for k in keywords
    )


@dataclass(frozen=True)
class CategoryRule:
    """카테고리 매칭 규칙

    name_keywords 중 하나가 운동명에 단어 단위로 있고, with_keywords가 있으면 그 중 하나도 있어야 한다.
    exclude_keywords가 하나라도 있으면 제외. muscle_groups는 근육군 폴백 규칙용 (부분 문자열 매칭, delt → delts).
    """

    key: str
    name_keywords: Tuple[str, ...] = ()
    with_keywords: Tuple[str, ...] = ()
    exclude_keywords: Tuple[str, ...] = ()
    muscle_groups: Tuple[str, ...] = ()

    def matches(self, muscle_group: str, name: str) -> bool:
        if self.muscle_groups:
            return any(g in muscle_group for g in self.muscle_groups)
        if not _has_keyword(name, self.name_keywords):
            return False
        if self.with_keywords and not _has_keyword(name, self.with_keywords):
            return False
        return not _has_keyword(name, self.exclude_keywords)


CATEGORY_RULES: List[CategoryRule] = [
    # 구체적 변형 우선 (순서 중요)
    CategoryRule("floor_press", name_keywords=("floor press",)),
    CategoryRule(
        "bench_dumbbell",
        name_keywords=("bench", "incline", "développé"),
        with_keywords=("dumbbell", "haltère"),
        exclude_keywords=("épaules", "militaire", "fly"),
    ),
    CategoryRule("bench", name_keywords=("bench", "développé couché")),
    CategoryRule(
        "unilateral",
        name_keywords=(
            "lunge", "fente", "split squat", "bulgarian", "bulgare",
            "single-leg", "single leg", "unilateral", "unilatéral", "step-up", "step up",
        ),
    ),
    CategoryRule("squat", name_keywords=("squat",)),
    CategoryRule("deadlift", name_keywords=("deadlift", "soulevé")),
    CategoryRule("row", name_keywords=("row", "tirage"), exclude_keywords=("upright row",)),
    CategoryRule("pullup", name_keywords=("pull-up", "pullup", "pull up", "chin-up", "traction")),
    CategoryRule(
        "overhead",
        name_keywords=("overhead", "military", "shoulder press", "militaire", "développé épaules"),
    ),
    CategoryRule("curl", name_keywords=("curl",), exclude_keywords=("leg curl", "nordic", "hamstring")),
    CategoryRule("triceps", name_keywords=("triceps", "skull crusher", "extension bras")),
    CategoryRule("calf", name_keywords=("calf", "mollet")),
    CategoryRule(
        "chest_fly",
        name_keywords=("pec", "fly", "écarté"),
        exclude_keywords=("reverse fly", "rear delt", "oiseau"),
    ),
    CategoryRule("leg_press", name_keywords=("leg press", "presse à cuisses")),

    # 근육군 폴백
    CategoryRule("squat", muscle_groups=("quadriceps", "quads", "jambes", "legs")),
    CategoryRule("row", muscle_groups=("back", "dos", "lats")),
    CategoryRule("chest_fly", muscle_groups=("chest", "pec", "poitrine")),
    CategoryRule("curl", muscle_groups=("biceps",)),
    CategoryRule("triceps", muscle_groups=("triceps",)),
    CategoryRule("overhead", muscle_groups=("shoulders", "épaules", "delt")),
    CategoryRule("calf", muscle_groups=("calves", "mollets")),
    CategoryRule("deadlift", muscle_groups=("hamstrings", "ischio")),
]


def get_category_default(muscle_group: Optional[str], exercise_name: Optional[str]) -> ExerciseRecommendation:
    """근육군 + 운동명 → 카테고리 기본 추천

    어떤 규칙에도 맞지 않으면 영향이 없는 중립 추천을 반환한다 (점수 50).
    """
    name = (exercise_name or "").lower()
    group = (muscle_group or "").lower()

    for rule in CATEGORY_RULES:
        if rule.matches(group, name):
            return CATEGORY_DEFAULTS[rule.key]

    return NEUTRAL_RECOMMENDATION


def resolve_recommendation(exercise: Exercise) -> ExerciseRecommendation:
    """큐레이션 추천 우선, 없으면 카테고리 기본값"""
    if exercise.recommendation is not None:
        return exercise.recommendation
    return get_category_default(exercise.muscle_group, exercise.name)
