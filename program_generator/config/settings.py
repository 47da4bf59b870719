"""Program Generator 설정

환경 변수:
- NO_PROFILE_SCORE: 프로필이 없을 때 모든 운동에 주는 점수 (기본값: 70)
- MIN_CANDIDATES: 접근 방식 필터 후 최소 후보 수, 미달 시 전체 목록 사용 (기본값: 3)
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class ProgramGeneratorSettings(BaseSettings):
    """프로그램 생성 설정"""

    # 프로필 없음 = 일반적으로 잘 맞는다고 가정 (엔진 기준 50과 별개)
    no_profile_score: int = Field(default=70, description="무프로필 균일 점수")
    min_candidates: int = Field(default=3, description="필터 후 최소 후보 수")

    # 접근 방식 필터
    leverage_min_score: int = Field(default=55, description="강점 활용 최소 점수")
    fix_min_score: int = Field(default=40, description="약점 보완 최소 점수")
    fix_max_score: int = Field(default=75, description="약점 보완 최대 점수")

    # 세트 조정 / 안내 문구
    weakness_bonus_threshold: int = Field(default=60, description="약점 보완 +1세트 기준 (미만)")
    poor_fit_threshold: int = Field(default=50, description="부적합 -1세트 기준 (미만)")
    strength_note_threshold: int = Field(default=80, description="강점 안내 기준 (이상)")
    max_sets: int = Field(default=5, description="세트 상한")
    min_sets: int = Field(default=2, description="세트 하한")

    # 워크아웃 구성
    full_body_max_exercises: int = Field(default=8, description="풀바디 워크아웃당 최대 운동 수")
    split_max_exercises: int = Field(default=6, description="분할 워크아웃당 최대 운동 수")
    minutes_per_exercise: int = Field(default=8, description="템플릿 예상 시간 (운동당 분)")

    class Config:
        env_prefix = ""
        env_file = ".env"
        extra = "ignore"


settings = ProgramGeneratorSettings()
