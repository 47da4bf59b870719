"""Gateway 설정

환경 변수:
- GATEWAY_HOST / GATEWAY_PORT: 서버 바인딩 (기본값: 0.0.0.0:8000)
- EXERCISE_CATALOG_PATH: 운동 카탈로그 JSON 경로 (기본값: data/exercises/catalog.json)
- LOG_LEVEL: 로그 레벨 (기본값: INFO)
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class GatewaySettings(BaseSettings):
    """Gateway 서버 설정"""

    gateway_host: str = Field(default="0.0.0.0", description="호스트")
    gateway_port: int = Field(default=8000, description="포트")
    reload: bool = Field(default=False, description="개발용 자동 리로드")

    exercise_catalog_path: Optional[Path] = Field(
        default=None,
        description="운동 카탈로그 경로 (없으면 기본 data/exercises/catalog.json)"
    )

    log_level: str = Field(default="INFO", description="로그 레벨")
    langsmith_project: str = Field(default="morphofit-gateway", description="LangSmith 프로젝트")

    class Config:
        env_prefix = ""
        env_file = ".env"
        extra = "ignore"


settings = GatewaySettings()
