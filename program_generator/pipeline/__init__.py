"""Program Generator 파이프라인"""

from .program_pipeline import ProgramGenerationPipeline, generate_program

__all__ = ["ProgramGenerationPipeline", "generate_program"]
