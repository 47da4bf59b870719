"""Program Generator 설정"""

from .settings import settings, ProgramGeneratorSettings

__all__ = ["settings", "ProgramGeneratorSettings"]
