"""카테고리 기본 추천 + 추천 모델 검증 테스트"""

import pytest
from pydantic import ValidationError

from shared.models.recommendation import DimensionImpact
from morpho_scoring.services.category_defaults import (
    CATEGORY_DEFAULTS,
    CATEGORY_LABELS,
    CATEGORY_RULES,
    get_category_default,
    resolve_recommendation,
)


@pytest.mark.parametrize(
    "muscle_group, name, expected",
    [
        ("chest", "Barbell Floor Press", "floor_press"),
        ("chest", "Dumbbell Bench Press", "bench_dumbbell"),
        ("chest", "Incline Dumbbell Press", "bench_dumbbell"),
        ("chest", "Barbell Bench Press", "bench"),
        ("quadriceps", "Bulgarian Split Squat", "unilateral"),
        ("glutes", "Walking Lunge", "unilateral"),
        ("quadriceps", "Barbell Back Squat", "squat"),
        ("back", "Conventional Deadlift", "deadlift"),
        ("back", "Seated Cable Row", "row"),
        ("shoulders", "Upright Row", "overhead"),
        ("lats", "Pull-Up", "pullup"),
        ("shoulders", "Standing Overhead Press", "overhead"),
        ("biceps", "Dumbbell Hammer Curl", "curl"),
        ("triceps", "EZ-Bar Skull Crusher", "triceps"),
        ("calves", "Standing Calf Raise", "calf"),
        ("chest", "Cable Chest Fly", "chest_fly"),
        ("quadriceps", "Leg Press", "leg_press"),
        # 근육군 폴백
        ("lats", "Lat Pulldown", "row"),
        ("delts", "Dumbbell Lateral Raise", "overhead"),
        ("hamstrings", "Lying Leg Curl", "deadlift"),
        # 불어 운동명
        ("pectoraux", "Développé couché", "bench"),
        ("pectoraux", "Développé couché haltères", "bench_dumbbell"),
        ("jambes", "Fentes avant", "unilateral"),
        # 단어 단위 매칭 (narrow 안의 row 무시)
        ("quadriceps", "Narrow Stance Leg Press", "leg_press"),
        ("chest", "Narrow Grip Push-Up", "chest_fly"),
        ("back", "Barbell Rows", "row"),
        # 후면 삼각근 / 햄스트링 변형
        ("shoulders", "Reverse Fly", "overhead"),
        ("shoulders", "Rear Delt Fly", "overhead"),
        ("hamstrings", "Nordic Hamstring Curl", "deadlift"),
        ("hamstrings", "Seated Hamstring Curl", "deadlift"),
    ],
)
def test_rule_resolution(muscle_group, name, expected):
    assert get_category_default(muscle_group, name).key == expected


def test_keyword_inside_another_word_does_not_match():
    # narrow 안의 row, speculative 안의 pec는 키워드가 아니다
    assert get_category_default("abs", "Narrow Plank").source == "neutral"
    assert get_category_default("abs", "Speculative Crunch").source == "neutral"


def test_unknown_exercise_is_neutral():
    rec = get_category_default("abs", "Front Plank")

    assert rec.source == "neutral"
    assert rec.impacts == []
    assert not rec.has_impacts


def test_missing_inputs_are_neutral():
    assert get_category_default(None, None).source == "neutral"


def test_every_rule_points_to_a_default():
    for rule in CATEGORY_RULES:
        assert rule.key in CATEGORY_DEFAULTS
    assert set(CATEGORY_LABELS) == set(CATEGORY_DEFAULTS)


def test_defaults_are_marked_as_category_defaults():
    for key, rec in CATEGORY_DEFAULTS.items():
        assert rec.key == key
        assert rec.source == "category_default"
        assert rec.has_impacts


def test_unilateral_favors_short_limbs():
    impacts = {i.dimension: i for i in CATEGORY_DEFAULTS["unilateral"].impacts}

    assert "short" in impacts["femur_length"].favorable
    assert "long" in impacts["femur_length"].unfavorable


def test_overhead_needs_wrist_mobility_and_favors_wide_shoulders():
    impacts = {i.dimension: i for i in CATEGORY_DEFAULTS["overhead"].impacts}

    assert "limited" in impacts["wrist_mobility"].unfavorable
    assert "wide" in impacts["shoulder_to_hip"].favorable


def test_resolve_prefers_curated(catalog):
    squat = catalog.get("barbell_back_squat")
    front_squat = catalog.get("front_squat")

    assert resolve_recommendation(squat).source == "curated"
    assert resolve_recommendation(front_squat) is CATEGORY_DEFAULTS["squat"]


class TestDimensionImpactValidation:

    def test_stance_on_neutral_value_rejected(self):
        with pytest.raises(ValidationError):
            DimensionImpact(dimension="femur_length", favorable={"medium": 5})

    def test_magnitude_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            DimensionImpact(dimension="femur_length", unfavorable={"long": 60})

    def test_unknown_value_rejected(self):
        with pytest.raises(ValidationError):
            DimensionImpact(dimension="ankle_dorsiflexion", unfavorable={"stiff": 10})

    def test_value_on_both_sides_rejected(self):
        with pytest.raises(ValidationError):
            DimensionImpact(dimension="arm_length", favorable={"long": 5}, unfavorable={"long": 5})

    def test_unknown_dimension_rejected(self):
        with pytest.raises(ValidationError):
            DimensionImpact(dimension="neck_length", favorable={"long": 5})
