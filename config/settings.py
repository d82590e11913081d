"""
Configuration settings loader.
Loads environment variables from .env file and exposes the scoring engine options.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env
project_root = Path(__file__).parent.parent
env_path = project_root / '.env'
load_dotenv(dotenv_path=env_path)


_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable ('true'/'false', '1'/'0', ...)."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


class Settings:
    """Application settings for the metric scoring engine."""

    def __init__(self):
        # Logging
        self.LOG_MODE: str = os.getenv('LOG_MODE', 'standalone').lower()
        self.LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()

        # Optional benchmark override file (JSON). Built-in tables are used when unset.
        benchmarks_path = os.getenv('BENCHMARKS_PATH', '').strip()
        self.BENCHMARKS_PATH: Optional[Path] = Path(benchmarks_path) if benchmarks_path else None

        # Bounds-check zero/negative denominators in the ratio pipeline
        self.RATIO_GUARD: bool = _env_flag('RATIO_GUARD', True)

        # Runner input/output directories (relative to project root unless absolute)
        self.DATA_DIR: Path = self._resolve_dir(os.getenv('DATA_DIR', 'data'))
        self.OUTPUT_DIR: Path = self._resolve_dir(os.getenv('OUTPUT_DIR', 'generated_data'))

    @staticmethod
    def _resolve_dir(value: str) -> Path:
        path = Path(value)
        if not path.is_absolute():
            path = project_root / path
        return path

    def describe(self) -> dict:
        """Summarize the active settings for logging."""
        return {
            'log_mode': self.LOG_MODE,
            'log_level': self.LOG_LEVEL,
            'benchmarks_path': str(self.BENCHMARKS_PATH) if self.BENCHMARKS_PATH else 'built-in',
            'ratio_guard': self.RATIO_GUARD,
            'data_dir': str(self.DATA_DIR),
            'output_dir': str(self.OUTPUT_DIR),
        }


# Global settings instance
settings = Settings()
