"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest
import yaml

from framecode.rates import FPS_2997


@pytest.fixture
def rng() -> random.Random:
    """Return a seeded random generator for reproducible random timecodes."""
    return random.Random(20231201)


@pytest.fixture
def tmp_config_dir(tmp_path: Path) -> Path:
    """Create a temporary directory holding a drop-frame framecode.yaml."""
    config_dir = tmp_path / "show"
    config_dir.mkdir()
    config = {"profile": "ntsc-df", "fps": FPS_2997, "drop_frame": True}
    with open(config_dir / "framecode.yaml", "w") as f:
        yaml.dump(config, f)
    return config_dir
