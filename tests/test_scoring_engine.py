"""점수 엔진 테스트"""

import pytest

from shared.models.recommendation import (
    ConditionalModification,
    DimensionImpact,
    ExerciseRecommendation,
)
from morpho_scoring import ScoringEngine, score_exercise
from morpho_scoring.services.category_defaults import CATEGORY_DEFAULTS
from morpho_scoring.services.scoring_engine import describe_condition
from tests.conftest import make_exercise


class TestNeutrality:

    def test_no_recommendation_scores_50(self, long_femur_profile):
        result = score_exercise(long_femur_profile, None)

        assert result.score == 50
        assert result.advantages == []
        assert result.disadvantages == []
        assert result.modifications == []
        assert result.cues == []

    @pytest.mark.parametrize("key", sorted(CATEGORY_DEFAULTS))
    def test_neutral_profile_scores_50(self, key):
        rec = CATEGORY_DEFAULTS[key]
        result = score_exercise(None, rec)

        assert result.score == 50
        assert result.advantages == []
        assert result.disadvantages == []
        assert result.modifications == []
        assert result.cues == rec.cues


class TestArithmetic:

    def test_unfavorable_uses_multiplier(self, long_femur_profile, long_femur_recommendation):
        assert score_exercise(long_femur_profile, long_femur_recommendation).score == 30

    def test_favorable_adds_magnitude(self):
        rec = ExerciseRecommendation(
            impacts=[DimensionImpact(dimension="arm_length", favorable={"long": 10})],
        )
        assert score_exercise({"proportions": {"armLength": "long"}}, rec).score == 60

    def test_contributions_are_additive(self):
        rec = CATEGORY_DEFAULTS["squat"]
        profile = {
            "proportions": {"femurLength": "short", "torsoLength": "long"},
            "mobility": {"ankleDorsiflexion": "good"},
        }
        # 50 + 15 + 8 + 8
        assert score_exercise(profile, rec).score == 81

    def test_multiplier_never_below_one(self, long_femur_profile, long_femur_recommendation):
        engine = ScoringEngine(disadvantage_multiplier=0.5)

        assert engine.disadvantage_multiplier == 1.0
        assert engine.score(long_femur_profile, long_femur_recommendation).score == 34

    def test_custom_baseline(self):
        assert ScoringEngine(baseline=60).score(None, None).score == 60


class TestBoundedness:

    def test_clamped_at_zero(self):
        rec = ExerciseRecommendation(impacts=[
            DimensionImpact(dimension="femur_length", unfavorable={"long": 50}),
            DimensionImpact(dimension="arm_length", unfavorable={"long": 50}),
        ])
        profile = {"proportions": {"femurLength": "long", "armLength": "long"}}

        assert score_exercise(profile, rec).score == 0

    def test_clamped_at_hundred(self):
        rec = ExerciseRecommendation(impacts=[
            DimensionImpact(dimension="femur_length", favorable={"short": 50}),
            DimensionImpact(dimension="arm_length", favorable={"short": 50}),
        ])
        profile = {"proportions": {"femurLength": "short", "armLength": "short"}}

        assert score_exercise(profile, rec).score == 100

    def test_every_category_stays_in_range_for_extreme_profiles(self):
        extremes = [
            {
                "structure": {"frameSize": "large", "shoulderToHip": "narrow", "ribcageDepth": "narrow"},
                "proportions": {"torsoLength": "short", "armLength": "long", "femurLength": "long", "kneeValgus": "pronounced"},
                "mobility": {"ankleDorsiflexion": "limited", "posteriorChain": "limited", "wristMobility": "limited"},
                "insertions": {"biceps": "low", "calves": "low", "chest": "low"},
            },
            {
                "structure": {"frameSize": "fine", "shoulderToHip": "wide", "ribcageDepth": "deep"},
                "proportions": {"torsoLength": "long", "armLength": "short", "femurLength": "short"},
                "mobility": {"ankleDorsiflexion": "good", "posteriorChain": "good", "wristMobility": "good"},
                "insertions": {"biceps": "high", "calves": "high", "chest": "high"},
            },
        ]
        for profile in extremes:
            for rec in CATEGORY_DEFAULTS.values():
                assert 0 <= score_exercise(profile, rec).score <= 100


class TestModificationGating:

    def test_limited_ankle_against_squat(self, limited_ankle_profile):
        result = score_exercise(limited_ankle_profile, CATEGORY_DEFAULTS["squat"])

        assert result.score == 35
        assert "Elevate heels (plates or lifting shoes)" in result.modifications
        assert "Limited ankle dorsiflexion: unfavorable for this movement" in result.disadvantages
        # 트리거되지 않은 차원의 수정 방법은 노출되지 않음
        assert "Take a wider stance" not in result.modifications
        assert "Mini band around the knees" not in result.modifications

    def test_trigger_value_matched_favorably_is_hidden(self):
        rec = ExerciseRecommendation(
            impacts=[DimensionImpact(dimension="femur_length", favorable={"short": 5}, unfavorable={"long": 10})],
            modifications=[
                ConditionalModification(dimension="femur_length", values=["long", "short"], text="Adjust stance"),
            ],
        )

        assert score_exercise({"proportions": {"femurLength": "short"}}, rec).modifications == []
        assert score_exercise({"proportions": {"femurLength": "long"}}, rec).modifications == ["Adjust stance"]

    def test_trigger_without_impact_is_hidden(self):
        rec = ExerciseRecommendation(
            modifications=[ConditionalModification(dimension="wrist_mobility", values=["limited"], text="Wraps")],
        )

        assert score_exercise({"mobility": {"wristMobility": "limited"}}, rec).modifications == []

    def test_duplicate_modifications_are_collapsed(self):
        rec = ExerciseRecommendation(
            impacts=[DimensionImpact(dimension="knee_valgus", unfavorable={"slight": 5})],
            modifications=[
                ConditionalModification(dimension="knee_valgus", values=["slight"], text="Mini band"),
                ConditionalModification(dimension="knee_valgus", values=["slight", "pronounced"], text="Mini band"),
            ],
        )

        assert score_exercise({"proportions": {"kneeValgus": "slight"}}, rec).modifications == ["Mini band"]


class TestCues:

    def test_cues_are_returned_in_full(self, limited_ankle_profile, long_femur_profile):
        rec = CATEGORY_DEFAULTS["squat"]
        for profile in (None, {}, limited_ankle_profile, long_femur_profile):
            assert score_exercise(profile, rec).cues == rec.cues


class TestCatalog:

    def test_score_catalog_keys_by_exercise_id(self, exercises, limited_ankle_profile):
        scores = ScoringEngine().score_catalog(limited_ankle_profile, exercises)

        assert set(scores) == {ex.id for ex in exercises}
        # 큐레이션 스쿼트도 발목 제한이 불리
        assert scores["barbell_back_squat"].score < 50
        assert scores["plank"].score == 50

    def test_curated_recommendation_takes_priority(self):
        curated = ExerciseRecommendation(
            key="custom",
            impacts=[DimensionImpact(dimension="frame_size", favorable={"large": 20})],
        )
        exercise = make_exercise("custom_squat", "Custom Squat", "quadriceps", "squat", curated)

        result = ScoringEngine().score_exercise({"structure": {"frameSize": "large"}}, exercise)

        assert result.score == 70
        assert result.advantages == ["Large frame: favorable for this movement"]


def test_describe_condition():
    assert describe_condition("femur_length", "long") == "Long femurs"
    assert describe_condition("natural_strength", "above-average") == "Above average natural strength"
