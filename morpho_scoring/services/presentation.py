"""점수 → UI 표시 구간

구간은 단조적이며, 중립 기준(엔진 50, 생성기 무프로필 70) 모두
"neutral 이상" 구간에 들어간다.
"""

from typing import List

from morpho_scoring.models.output import ScoreBand

# 높은 구간부터 (min_score 내림차순)
SCORE_BANDS: List[ScoreBand] = [
    ScoreBand(key="excellent", label="Excellent fit", color="success", emoji="🟢", min_score=85),
    ScoreBand(key="good", label="Good fit", color="success", emoji="🟢", min_score=70),
    ScoreBand(key="neutral", label="Neutral", color="info", emoji="⚪", min_score=50),
    ScoreBand(key="caution", label="Use caution", color="warning", emoji="🟠", min_score=35),
    ScoreBand(key="poor", label="Poorly suited", color="error", emoji="🔴", min_score=0),
]


def get_score_band(score: int) -> ScoreBand:
    """점수가 속한 구간 (범위 밖 점수는 양 끝 구간)"""
    for band in SCORE_BANDS:
        if score >= band.min_score:
            return band
    return SCORE_BANDS[-1]


def get_score_label(score: int) -> str:
    return get_score_band(score).label


def get_score_color(score: int) -> str:
    return get_score_band(score).color


def get_score_emoji(score: int) -> str:
    return get_score_band(score).emoji


def is_neutral_or_better(score: int) -> bool:
    return get_score_band(score).key in ("excellent", "good", "neutral")


def render_badge(score: int) -> str:
    """예: "🟢 Good fit (72/100)" """
    band = get_score_band(score)
    return f"{band.emoji} {band.label} ({score}/100)"
