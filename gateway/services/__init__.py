"""Gateway 서비스"""

from .orchestration import OrchestrationService

__all__ = ["OrchestrationService"]
