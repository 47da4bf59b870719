"""Morpho Scoring 설정"""

from .settings import settings, MorphoScoringSettings

__all__ = ["settings", "MorphoScoringSettings"]
