"""프로그램 생성 테스트"""

from collections import Counter

import pytest

from shared.models.exercise import canonical_muscle_group
from shared.stores import InMemoryExerciseCatalog
from morpho_scoring.models.output import ExerciseScore
from program_generator import ProgramGenerationPipeline, generate_program
from program_generator.models.input import ProgramConfig, validate_config_days
from program_generator.services.approach_policy import ApproachPolicy, Candidate
from program_generator.services.exercise_selector import (
    CORRECTIVE_NOTE,
    STRENGTH_NOTE,
    ExerciseSelector,
)
from program_generator.services.goal_schemes import GOAL_SCHEMES
from program_generator.services.split_resolver import MAX_PER_MUSCLE, max_exercises_per_workout
from tests.conftest import make_exercise


def _candidates(*scores):
    return [
        Candidate(exercise=make_exercise(f"ex_{i}", f"Exercise {i}", "chest", "push"), morpho_score=score)
        for i, score in enumerate(scores)
    ]


def _scores(candidates):
    return [c.morpho_score for c in candidates]


class TestProgramConfig:

    def test_ppl_alias(self):
        config = ProgramConfig(goal="hypertrophy", split="ppl", days_per_week=3)

        assert config.split == "push_pull_legs"
        assert config.approach == "balanced"

    def test_camel_case_input(self):
        config = ProgramConfig.model_validate({"goal": "strength", "split": "upper_lower", "daysPerWeek": 4})

        assert config.days_per_week == 4

    @pytest.mark.parametrize("split, minimum", [
        ("full_body", 2),
        ("push_pull_legs", 3),
        ("upper_lower", 3),
        ("bro_split", 4),
    ])
    def test_validate_config_days(self, split, minimum):
        validate_config_days(ProgramConfig(goal="strength", split=split, days_per_week=minimum))
        with pytest.raises(ValueError):
            validate_config_days(ProgramConfig(goal="strength", split=split, days_per_week=minimum - 1))


class TestApproachPolicy:

    def test_leverage_strengths(self):
        ordered = ApproachPolicy().order("leverage_strengths", _candidates(90, 45, 60, 30, 70))
        assert _scores(ordered) == [90, 70, 60]

    def test_fix_weaknesses(self):
        ordered = ApproachPolicy().order("fix_weaknesses", _candidates(90, 45, 60, 30, 70))
        assert _scores(ordered) == [45, 60, 70]

    def test_balanced(self):
        ordered = ApproachPolicy().order("balanced", _candidates(90, 45, 60, 30, 70))
        assert _scores(ordered) == [90, 70, 60, 45, 30]

    def test_fallback_when_too_few_candidates(self):
        ordered = ApproachPolicy().order("leverage_strengths", _candidates(20, 90, 30, 10))
        assert _scores(ordered) == [90, 30, 20, 10]

    def test_sort_is_stable(self):
        candidates = _candidates(70, 70, 70)
        ordered = ApproachPolicy().order("balanced", candidates)
        assert [c.exercise.id for c in ordered] == ["ex_0", "ex_1", "ex_2"]


class TestExerciseSelector:

    def _result(self):
        return ExerciseScore(score=50, modifications=["Mod A"], cues=["Cue 1", "Cue 2"])

    def test_fix_weaknesses_adds_a_set_with_ceiling(self):
        selector = ExerciseSelector()
        candidate = _candidates(55)[0]

        assert selector.build(candidate, GOAL_SCHEMES["hypertrophy"], "fix_weaknesses").sets == 5
        assert selector.build(candidate, GOAL_SCHEMES["strength"], "fix_weaknesses").sets == 5

    def test_poor_fit_removes_a_set_with_floor(self):
        selector = ExerciseSelector()

        assert selector.build(_candidates(45)[0], GOAL_SCHEMES["hypertrophy"], "balanced").sets == 3
        assert selector.build(_candidates(10)[0], GOAL_SCHEMES["metabolic"], "balanced").sets == 2
        assert selector.build(_candidates(50)[0], GOAL_SCHEMES["hypertrophy"], "balanced").sets == 4

    def test_notes_order(self):
        candidate = Candidate(
            exercise=make_exercise("squat", "Back Squat", "quadriceps", "squat"),
            morpho_score=50,
            result=self._result(),
        )

        built = ExerciseSelector().build(candidate, GOAL_SCHEMES["hypertrophy"], "fix_weaknesses")

        assert built.notes == [CORRECTIVE_NOTE, "Mod A", "Cue 1"]

    def test_strength_note(self):
        candidate = _candidates(85)[0]

        built = ExerciseSelector().build(candidate, GOAL_SCHEMES["strength"], "leverage_strengths")

        assert built.notes[0] == STRENGTH_NOTE

    def test_scheme_is_copied(self):
        built = ExerciseSelector().build(_candidates(70)[0], GOAL_SCHEMES["athletic"], "balanced")

        assert (built.reps, built.rest_seconds, built.tempo) == ("5-8", 90, "explosive concentric")


class TestPipeline:

    @pytest.mark.parametrize("split, days", [
        ("full_body", 3),
        ("push_pull_legs", 6),
        ("upper_lower", 4),
        ("bro_split", 5),
    ])
    def test_program_completeness(self, exercises, split, days):
        config = ProgramConfig(goal="hypertrophy", approach="balanced", split=split, days_per_week=days)
        profile = {"proportions": {"femurLength": "long"}, "mobility": {"wristMobility": "limited"}}

        program = generate_program(profile, config, exercises)

        assert len(program.workouts) == days
        for workout in program.workouts:
            assert 0 < len(workout.exercises) <= max_exercises_per_workout(split)
            counts = Counter(canonical_muscle_group(e.muscle_group) for e in workout.exercises)
            assert max(counts.values()) <= MAX_PER_MUSCLE[split]
            assert set(counts) <= set(workout.target_muscles)

    def test_neutral_hypertrophy_balanced(self, exercises):
        config = ProgramConfig(goal="hypertrophy", approach="balanced", split="full_body", days_per_week=2)

        for profile in (None, {}):
            program = generate_program(profile, config, exercises)
            for workout in program.workouts:
                for exercise in workout.exercises:
                    assert exercise.sets == 4
                    assert exercise.reps == "8-12"
                    assert exercise.rest_seconds == 90
                    assert exercise.tempo == "3-1-2-0"

    def test_no_profile_scores_70(self, exercises):
        config = ProgramConfig(goal="strength", split="full_body", days_per_week=1)

        program = generate_program(None, config, exercises)
        workout = program.workouts[0]

        assert {e.morpho_score for e in workout.exercises} == {70}
        # 동점이면 카탈로그 순서, 풀바디는 근육군당 1개
        assert [e.exercise_id for e in workout.exercises] == [
            "barbell_back_squat",
            "barbell_bench_press",
            "pull_up",
            "overhead_press",
            "barbell_curl",
        ]
        # 프로필이 없어도 첫 기술 큐는 노출
        assert workout.exercises[0].notes == ["Brace before you descend"]

    def test_fallback_never_starves(self, long_femur_profile, long_femur_catalog):
        config = ProgramConfig(
            goal="hypertrophy", approach="leverage_strengths", split="full_body", days_per_week=1,
        )

        program = generate_program(long_femur_profile, config, long_femur_catalog.list_exercises())
        exercises = program.workouts[0].exercises

        assert len(exercises) == 3
        assert {e.morpho_score for e in exercises} == {30}
        assert {e.sets for e in exercises} == {3}

    def test_push_and_pull_days_exclude_opposite_patterns(self, catalog):
        config = ProgramConfig(goal="hypertrophy", split="ppl", days_per_week=3)

        program = generate_program(None, config, catalog.list_exercises())
        push, pull, legs = program.workouts

        assert [w.name for w in program.workouts] == ["Push", "Pull", "Legs"]
        assert all(catalog.get(e.exercise_id).movement_pattern != "pull" for e in push.exercises)
        assert all(catalog.get(e.exercise_id).movement_pattern != "push" for e in pull.exercises)
        assert [e.exercise_id for e in push.exercises] == [
            "barbell_bench_press",
            "dumbbell_bench_press",
            "overhead_press",
            "dumbbell_shoulder_press",
            "barbell_curl",
            "hammer_curl",
        ]
        assert all(canonical_muscle_group(e.muscle_group) == "legs" for e in legs.exercises)

    def test_limited_ankle_surfaces_heel_elevation(self, limited_ankle_profile, catalog):
        pool = [catalog.get(i) for i in ("barbell_back_squat", "front_squat", "barbell_bench_press")]
        config = ProgramConfig(goal="strength", approach="fix_weaknesses", split="full_body", days_per_week=1)

        program = generate_program(limited_ankle_profile, config, pool)
        squat = next(e for e in program.workouts[0].exercises if e.exercise_id == "barbell_back_squat")

        # 35점은 약점 보완 범위(40~75) 밖이지만 후보 부족으로 전체 목록 사용
        assert squat.morpho_score == 35
        assert squat.sets == 5
        assert squat.notes == [
            CORRECTIVE_NOTE,
            "Elevate heels (plates or lifting shoes)",
            "Brace before you descend",
        ]

    def test_empty_pool_gives_empty_workouts(self):
        core_only = InMemoryExerciseCatalog([make_exercise("plank", "Front Plank", "abs", "isolation")])
        config = ProgramConfig(goal="metabolic", split="bro_split", days_per_week=4)

        program = generate_program(None, config, core_only.list_exercises())

        assert len(program.workouts) == 4
        assert all(w.exercises == [] for w in program.workouts)

    def test_days_below_minimum_are_not_enforced(self, exercises):
        config = ProgramConfig(goal="strength", split="bro_split", days_per_week=2)

        program = ProgramGenerationPipeline().generate(None, config, exercises)

        assert [w.name for w in program.workouts] == ["Chest", "Back"]

    def test_generation_is_deterministic(self, exercises, long_femur_profile):
        config = ProgramConfig(goal="powerbuilding", approach="fix_weaknesses", split="upper_lower", days_per_week=4)

        first = generate_program(long_femur_profile, config, exercises)
        second = generate_program(long_femur_profile, config, exercises)

        assert first == second
