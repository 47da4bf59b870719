"""점수 표시 구간 테스트"""

import pytest

from morpho_scoring.services.presentation import (
    SCORE_BANDS,
    get_score_band,
    get_score_color,
    get_score_emoji,
    get_score_label,
    is_neutral_or_better,
    render_badge,
)


@pytest.mark.parametrize(
    "score, key",
    [
        (100, "excellent"),
        (85, "excellent"),
        (84, "good"),
        (70, "good"),
        (69, "neutral"),
        (50, "neutral"),
        (49, "caution"),
        (35, "caution"),
        (34, "poor"),
        (0, "poor"),
    ],
)
def test_band_boundaries(score, key):
    assert get_score_band(score).key == key


def test_bands_are_monotonic():
    thresholds = [band.min_score for band in SCORE_BANDS]
    assert thresholds == sorted(thresholds, reverse=True)

    previous = None
    for score in range(101):
        index = SCORE_BANDS.index(get_score_band(score))
        if previous is not None:
            assert index <= previous
        previous = index


def test_neutral_baselines_are_neutral_or_better():
    # 엔진 기준점(50)과 무프로필 점수(70)
    assert is_neutral_or_better(50)
    assert is_neutral_or_better(70)
    assert not is_neutral_or_better(49)


def test_label_color_emoji():
    assert get_score_label(90) == "Excellent fit"
    assert get_score_color(90) == "success"
    assert get_score_color(55) == "info"
    assert get_score_color(40) == "warning"
    assert get_score_color(10) == "error"
    assert get_score_emoji(10) == "🔴"


def test_render_badge():
    assert render_badge(72) == "🟢 Good fit (72/100)"
    assert render_badge(35) == "🟠 Use caution (35/100)"
