"""
Generation Pipeline - Run the external AI image-to-diagram generator.

Each call stages the image in its own temporary directory, runs the
generator script as a subprocess and returns the last line it printed.
The generator is expected to print progress lines followed by one JSON
line; that line is handed back untouched.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from rishah.core.errors import InvalidPayloadError
from rishah.core.files import decode_base64
from rishah.generation.base import (
    GenerationError,
    GenerationFailedError,
    GenerationJob,
    GeneratorConfig,
    GeneratorNotFoundError,
    InvalidImageDataError,
    NoOutputError,
    OutputStyle,
)

logger = logging.getLogger(__name__)


def describe_image(data: bytes) -> str:
    """Short description of image bytes for logging."""
    try:
        with Image.open(BytesIO(data)) as img:
            return f"{img.format} {img.width}x{img.height}"
    except (UnidentifiedImageError, OSError, SyntaxError, Image.DecompressionBombError):
        return f"unrecognised image ({len(data)} bytes)"


def extract_result_line(output: str) -> str:
    """
    Get the last non-blank line of generator output.

    Raises:
        NoOutputError: If the output has no non-blank lines
    """
    # Only "\n" ends a line; JSON text may carry U+2028 and friends unescaped
    lines = [line.removesuffix("\r") for line in output.split("\n")]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise NoOutputError("no output from generation script")
    return lines[-1]


class GenerationPipeline:
    """
    Stage, run and collect one generator job per call.

    Usage:
        pipeline = GenerationPipeline()
        result_json = pipeline.generate(image_b64, "mermaid")
    """

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()

    def find_generator_dir(self) -> Path:
        """
        Get the generator directory.

        Prefers the directory next to the program (packaged layout) and
        falls back to the working directory (development layout).
        """
        bundled = self.config.get_program_dir() / self.config.dir_name
        if bundled.exists():
            return bundled

        try:
            cwd = Path(os.getcwd())
        except OSError:
            return Path(self.config.dir_name)
        return cwd / self.config.dir_name

    def find_script(self) -> Path:
        """
        Resolve the generator script path.

        Raises:
            GeneratorNotFoundError: If the script does not exist
        """
        script_path = self.find_generator_dir() / self.config.script_name
        if not script_path.exists():
            raise GeneratorNotFoundError(
                f"generator script not found at {script_path} - "
                f"ensure the {self.config.dir_name} directory is set up",
                script_path,
            )
        return script_path

    def generate(self, image_base64: str, output_style: OutputStyle | str) -> str:
        """
        Run the generator on an image.

        Args:
            image_base64: Base64-encoded PNG image
            output_style: Style token, passed through without validation

        Returns:
            The generator's final output line, expected to be JSON

        Raises:
            InvalidImageDataError: If the image payload cannot be decoded
            GeneratorNotFoundError: If the generator script is missing
            GenerationFailedError: If the generator fails to run or exits non-zero
            NoOutputError: If the generator prints nothing
            GenerationError: If the job directory cannot be staged
        """
        try:
            image_bytes = decode_base64(image_base64)
        except InvalidPayloadError as e:
            raise InvalidImageDataError(f"failed to decode image data: {e}") from e

        if isinstance(output_style, OutputStyle):
            output_style = output_style.value

        logger.info(f"Starting generation job: style={output_style}, image={describe_image(image_bytes)}")

        with tempfile.TemporaryDirectory(prefix="rishah-ai-", dir=self.config.temp_root) as tmpdir:
            job = GenerationJob(
                image_bytes=image_bytes,
                output_style=output_style,
                work_dir=Path(tmpdir),
            )
            self._stage(job)
            job.script_path = self.find_script()
            output = self._run(job)

        return extract_result_line(output)

    def _stage(self, job: GenerationJob) -> None:
        """Write the input image and create the output directory."""
        try:
            job.input_path.write_bytes(job.image_bytes)
        except OSError as e:
            raise GenerationError(f"failed to write temp image {job.input_path}: {e}") from e

        try:
            job.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise GenerationError(f"failed to create output directory {job.output_dir}: {e}") from e

    def _run(self, job: GenerationJob) -> str:
        """Run the generator and return its combined stdout/stderr."""
        cmd = job.command(self.config.launcher)
        # npx is npx.cmd on Windows
        executable = shutil.which(cmd[0])
        if executable is None:
            raise GenerationFailedError(f"generation failed: launcher not found: {cmd[0]}")
        cmd[0] = executable
        generator_dir = job.script_path.parent
        logger.debug(f"Running generator: {' '.join(cmd)} (cwd={generator_dir})")

        try:
            result = subprocess.run(
                cmd,
                cwd=generator_dir,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise GenerationFailedError(f"generation failed: {e}") from e

        if result.returncode != 0:
            logger.error(f"Generator exited with code {result.returncode}")
            raise GenerationFailedError(
                f"generation failed: exit status {result.returncode}",
                output=result.stdout or "",
                returncode=result.returncode,
            )

        logger.info("Generation job finished")
        return result.stdout or ""
