"""Program Generator - 모포타입 점수 기반 훈련 프로그램 생성

사용 예시:
    from program_generator import generate_program
    from program_generator.models import ProgramConfig

    config = ProgramConfig(goal="hypertrophy", approach="balanced", split="ppl", days_per_week=3)
    program = generate_program(profile, config, catalog.list_exercises())
"""

from program_generator.pipeline import ProgramGenerationPipeline, generate_program
from program_generator.models import ProgramConfig, GeneratedProgram

__all__ = [
    "ProgramGenerationPipeline",
    "generate_program",
    "ProgramConfig",
    "GeneratedProgram",
]
