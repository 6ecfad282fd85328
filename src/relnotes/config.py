"""Runtime settings for the relnotes command line tool."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Settings resolved from the environment (and a local .env file)."""

    log_level: str = "INFO"
    output_dir: str = "release_notes"
    dry_run: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            log_level=os.getenv("RELNOTES_LOG_LEVEL", cls.log_level).upper(),
            output_dir=os.getenv("RELNOTES_OUTPUT_DIR", cls.output_dir),
            dry_run=os.getenv("RELNOTES_DRY_RUN", "").strip().lower() in _TRUTHY,
        )
