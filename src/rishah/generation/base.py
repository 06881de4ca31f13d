"""
Generation Base - Job description, configuration and errors.

This module provides the data structures shared by the generation pipeline:
- OutputStyle: Styles understood by the bundled generator script
- GeneratorConfig: Where to find the generator and how to launch it
- GenerationJob: One staged invocation of the generator
- GenerationError and subclasses: External-process failures
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rishah.core.errors import BridgeError


class OutputStyle(Enum):
    """Output styles the generator script knows about."""
    ALL = "all"
    MERMAID = "mermaid"
    DESCRIPTION = "description"
    SVG = "svg"


def program_dir() -> Path:
    """
    Get the directory the running program was launched from.

    For a frozen bundle this is the executable's directory; otherwise the
    directory of the launched script.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    if sys.argv and sys.argv[0]:
        return Path(sys.argv[0]).resolve().parent
    return Path(sys.executable).resolve().parent


@dataclass
class GeneratorConfig:
    """
    Location and launch command of the external generator.

    Attributes:
        dir_name: Generator directory, looked up next to the program first
            and then in the working directory
        script_name: Script inside the generator directory
        launcher: Command prefix that runs the script
        program_dir: Override for the program directory (None = detect)
        temp_root: Parent for job directories (None = system default)
    """
    dir_name: str = "copilot"
    script_name: str = "generate.ts"
    launcher: list[str] = field(default_factory=lambda: ["npx", "tsx"])
    program_dir: Path | None = None
    temp_root: Path | None = None

    def get_program_dir(self) -> Path:
        return self.program_dir if self.program_dir is not None else program_dir()


@dataclass
class GenerationJob:
    """
    One staged generator run.

    The working directory is owned by the job and removed when it ends.
    """
    image_bytes: bytes
    output_style: str
    work_dir: Path
    script_path: Path | None = None

    @property
    def input_path(self) -> Path:
        return self.work_dir / "input.png"

    @property
    def output_dir(self) -> Path:
        return self.work_dir / "output"

    def command(self, launcher: list[str]) -> list[str]:
        """Build the generator command line."""
        if self.script_path is None:
            raise GenerationError("generator script has not been resolved")
        return [
            *launcher,
            str(self.script_path),
            str(self.input_path),
            str(self.output_dir),
            self.output_style,
        ]


class GenerationError(BridgeError):
    """Error during AI generation."""
    pass


class InvalidImageDataError(GenerationError):
    """Image payload could not be decoded."""
    pass


class GeneratorNotFoundError(GenerationError):
    """Generator script missing at the resolved location."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = str(path)


class GenerationFailedError(GenerationError):
    """Generator could not be launched or exited with an error."""

    def __init__(self, message: str, output: str = "", returncode: int | None = None):
        super().__init__(message)
        self.output = output
        self.returncode = returncode

    def __str__(self) -> str:
        message = super().__str__()
        if self.output:
            return f"{message}\n{self.output.rstrip()}"
        return message


class NoOutputError(GenerationError):
    """Generator exited successfully without printing a result."""
    pass
