"""
Generation module - Out-of-process AI image conversion.
"""

from rishah.generation.base import (
    GenerationError,
    GenerationFailedError,
    GenerationJob,
    GeneratorConfig,
    GeneratorNotFoundError,
    InvalidImageDataError,
    NoOutputError,
    OutputStyle,
    program_dir,
)
from rishah.generation.pipeline import (
    GenerationPipeline,
    describe_image,
    extract_result_line,
)


__all__ = [
    "GenerationError",
    "GenerationFailedError",
    "GenerationJob",
    "GenerationPipeline",
    "GeneratorConfig",
    "GeneratorNotFoundError",
    "InvalidImageDataError",
    "NoOutputError",
    "OutputStyle",
    "describe_image",
    "extract_result_line",
    "program_dir",
]
