"""Shared test fixtures for noisemap tests."""

import tempfile
from pathlib import Path

import pytest

from noisemap.config import GenerationParameters


@pytest.fixture
def small_params() -> GenerationParameters:
    """32x24 map with a few octaves."""
    return GenerationParameters(
        width=32,
        height=24,
        seed=42,
        scale=8.0,
        octaves=4,
        persistence=0.5,
        lacunarity=2.0,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_toml() -> str:
    """Sample config as TOML string."""
    return """
[noise]
width = 64
height = 48
seed = 7
scale = 12.5
octaves = 3
persistence = 0.4
lacunarity = 2.5
offset = [10.0, -4.0]
"""


@pytest.fixture
def config_file(temp_dir, sample_config_toml):
    """Create a temporary config file."""
    config_path = temp_dir / "noise.toml"
    config_path.write_text(sample_config_toml)
    return config_path
