"""Gateway 설정"""

from .settings import settings, GatewaySettings

__all__ = ["settings", "GatewaySettings"]
