"""Pytest configuration and fixtures."""
from __future__ import annotations

import os
import subprocess
import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

import resultant
from resultant.shared.config import Settings, get_settings

SRC_DIR = Path(resultant.__file__).resolve().parents[1]

RunPython = Callable[..., "subprocess.CompletedProcess[str]"]


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make each test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with debug logging."""
    return Settings(
        unwrap_message="Tried to unwrap a Fail result",
        log_level="DEBUG",
    )


@pytest.fixture
def run_python(tmp_path: Path) -> RunPython:
    """Run code in a fresh interpreter that can import resultant.

    The interpreter starts in ``tmp_path`` so no stray ``.env`` file is read.
    """

    def run(code: str, **env: str) -> subprocess.CompletedProcess[str]:
        full_env = {
            k: v for k, v in os.environ.items() if not k.upper().startswith("RESULTANT_")
        }
        full_env.update(env)
        full_env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(SRC_DIR), os.environ.get("PYTHONPATH", "")) if p
        )
        return subprocess.run(
            [sys.executable, "-c", textwrap.dedent(code)],
            cwd=tmp_path,
            env=full_env,
            capture_output=True,
            text=True,
            check=False,
        )

    return run
