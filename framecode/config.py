"""
framecode.config - YAML config loading, profile merging, validation.

Handles loading framecode.yaml, applying frame rate profile defaults,
and validating the rate and drop-frame settings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError, field_validator, model_validator

from framecode.exceptions import ConfigError, InvalidRateError
from framecode.logging import get_logger
from framecode.rates import FPS_2997, FPS_23976, is_drop_frame_fps, parse_rate
from framecode.timecode import Timecode

logger = get_logger(__name__)

CONFIG_FILENAME = "framecode.yaml"

BUILTIN_PROFILES: dict[str, dict[str, Any]] = {
    "pal": {"fps": 25.0, "drop_frame": False},
    "film": {"fps": 24.0, "drop_frame": False},
    "film-ntsc": {"fps": FPS_23976, "drop_frame": False},
    "ntsc": {"fps": FPS_2997, "drop_frame": False},
    "ntsc-df": {"fps": FPS_2997, "drop_frame": True},
}


class FramecodeConfig(BaseModel):
    """Resolved timecode settings."""

    profile: str = "pal"
    fps: float = 25.0
    drop_frame: bool = False

    config_path: Path | None = None

    @field_validator("fps", mode="before")
    @classmethod
    def validate_fps(cls, v: Any) -> float:
        try:
            fps = parse_rate(v)
        except InvalidRateError as e:
            raise ValueError(str(e)) from e
        # 29.97 written as a decimal means the NTSC rate.
        if is_drop_frame_fps(fps):
            return FPS_2997
        return fps

    @model_validator(mode="after")
    def validate_drop_frame(self) -> FramecodeConfig:
        if self.drop_frame and not is_drop_frame_fps(self.fps):
            raise ValueError(f"drop_frame requires 29.97 fps, got {self.fps:g}")
        return self

    def new_timecode(self, frame: int = 0) -> Timecode:
        """Create a timecode with the configured frame rate and drop-frame flag."""
        return Timecode(self.fps, frame, self.drop_frame)


def load_profile(name: str, profiles_dir: Path | None = None) -> dict[str, Any]:
    """Load a profile by name, checking custom profiles first."""
    if profiles_dir and profiles_dir.exists():
        profile_file = profiles_dir / f"{name}.yaml"
        if profile_file.exists():
            with open(profile_file) as f:
                try:
                    profile = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"Malformed profile {profile_file}: {e}") from e
            if not isinstance(profile, dict):
                raise ConfigError(f"Profile {profile_file} must contain a mapping")
            return profile
    if name in BUILTIN_PROFILES:
        return BUILTIN_PROFILES[name].copy()
    raise ConfigError(f"Unknown profile: {name}")


def merge_config(project_config: dict[str, Any], profile: dict[str, Any]) -> dict[str, Any]:
    """Merge config with profile defaults. Config values take precedence."""
    merged = profile.copy()
    for key, value in project_config.items():
        if value is not None:
            merged[key] = value
    return merged


def find_config(start: Path | None = None) -> Path | None:
    """Find the nearest framecode.yaml in start or one of its parents."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path) -> FramecodeConfig:
    """Load and validate configuration from a file or a directory holding one."""
    config_file = path / CONFIG_FILENAME if path.is_dir() else path
    if not config_file.exists():
        raise ConfigError(f"No {CONFIG_FILENAME} found at {path}")

    with open(config_file) as f:
        try:
            raw_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed {config_file}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    profile_name = raw_config.get("profile", "pal")
    profiles_dir = config_file.parent / "profiles"
    profile = load_profile(profile_name, profiles_dir if profiles_dir.exists() else None)

    merged = merge_config(raw_config, profile)
    merged["config_path"] = config_file
    logger.debug("Loaded %s with profile %s", config_file, profile_name)

    try:
        return FramecodeConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e


def create_default_config(profile: str = "pal") -> dict[str, Any]:
    """Create a default config dict for the given profile."""
    if profile not in BUILTIN_PROFILES:
        raise ConfigError(f"Unknown profile: {profile}")
    return merge_config(BUILTIN_PROFILES[profile], {"profile": profile})


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
