"""
Application Config - Runtime settings read from the environment.
"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

from rishah.generation.base import GeneratorConfig, program_dir


DEFAULT_LAUNCHER = "npx tsx"


@dataclass
class AppConfig:
    """Settings for the application shell and the generator."""
    title: str = "Rishah"
    width: int = 800
    height: int = 600
    log_level: str = "INFO"
    frontend_url: str | None = None  # None = bundled frontend/dist/index.html
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    def get_frontend_url(self) -> str:
        if self.frontend_url:
            return self.frontend_url
        return (program_dir() / "frontend" / "dist" / "index.html").as_uri()

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> AppConfig:
        """
        Build config from RISHAH_* environment variables.

        Recognised variables:
            RISHAH_LOG_LEVEL: Logging level name
            RISHAH_FRONTEND_URL: URL loaded into the web view
            RISHAH_GENERATOR_LAUNCHER: Command that runs the generator script
        """
        env = os.environ if environ is None else environ

        launcher = shlex.split(env.get("RISHAH_GENERATOR_LAUNCHER", DEFAULT_LAUNCHER))
        generator = GeneratorConfig(launcher=launcher or shlex.split(DEFAULT_LAUNCHER))

        return cls(
            log_level=env.get("RISHAH_LOG_LEVEL", "INFO").upper(),
            frontend_url=env.get("RISHAH_FRONTEND_URL") or None,
            generator=generator,
        )
