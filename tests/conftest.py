"""공용 픽스처"""

import os
import sys
from pathlib import Path

import pytest

# 테스트 중 LangSmith 트레이싱 비활성화
os.environ["LANGSMITH_TRACING"] = "false"
os.environ["LANGCHAIN_TRACING_V2"] = "false"

sys.path.insert(0, str(Path(__file__).parent.parent))

from shared.models.exercise import Exercise
from shared.models.recommendation import DimensionImpact, ExerciseRecommendation
from shared.stores import InMemoryExerciseCatalog, JsonExerciseCatalog


def make_exercise(exercise_id, name, muscle_group, movement_pattern=None, recommendation=None):
    return Exercise(
        id=exercise_id,
        name=name,
        muscle_group=muscle_group,
        movement_pattern=movement_pattern,
        recommendation=recommendation,
    )


@pytest.fixture
def catalog():
    """data/exercises/catalog.json"""
    return JsonExerciseCatalog()


@pytest.fixture
def exercises(catalog):
    return catalog.list_exercises()


@pytest.fixture
def long_femur_recommendation():
    return ExerciseRecommendation(
        key="long_femur_penalty",
        impacts=[DimensionImpact(dimension="femur_length", unfavorable={"long": 16})],
    )


@pytest.fixture
def long_femur_catalog(long_femur_recommendation):
    """긴 대퇴골 프로필에서 모두 30점이 되는 운동 3개"""
    return InMemoryExerciseCatalog([
        make_exercise("goblet_squat", "Goblet Squat", "quadriceps", "squat", long_femur_recommendation),
        make_exercise("machine_press", "Machine Chest Press", "chest", "push", long_femur_recommendation),
        make_exercise("cable_row", "Cable Row", "back", "pull", long_femur_recommendation),
    ])


@pytest.fixture
def long_femur_profile():
    return {"proportions": {"femurLength": "long"}}


@pytest.fixture
def limited_ankle_profile():
    return {"mobility": {"ankleDorsiflexion": "limited"}}
