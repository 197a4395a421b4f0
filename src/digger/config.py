from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .errors import InvalidArguments

logger = logging.getLogger(__name__)

ENV_SEED = "DIGGER_SEED"
ENV_MAX_TRIES = "DIGGER_MAX_TRIES"


def _check_seed(seed: Any) -> Optional[Union[int, str]]:
    if seed is None or isinstance(seed, str) or (isinstance(seed, int) and not isinstance(seed, bool)):
        return seed
    raise InvalidArguments(f"Seed must be an integer or a string, got {seed!r}")


@dataclass
class GenerationSettings:
    """Knobs for one generation run.

    - width/height: grid dimensions, including the outer border ring.
    - seed: int, string or None (a random seed is drawn and logged).
    - room_min_size/room_max_size: inclusive range for each interior room side.
    - corridor_min_length/corridor_max_length: inclusive range for corridor length draws.
    - max_tries: room-or-corridor attempts per growth point before it is dropped.
    """

    width: int = 80
    height: int = 25
    seed: Optional[Union[int, str]] = None
    room_min_size: int = 3
    room_max_size: int = 6
    corridor_min_length: int = 2
    corridor_max_length: int = 6
    max_tries: int = 5

    def validate(self) -> "GenerationSettings":
        _check_seed(self.seed)
        if self.width < 3 or self.height < 3:
            raise InvalidArguments(
                f"Grid must be at least 3x3 to hold the entrance, got {self.width}x{self.height}"
            )
        if self.room_min_size < 1 or self.corridor_min_length < 1:
            raise InvalidArguments("Room sizes and corridor lengths must be at least 1")
        if self.room_min_size > self.room_max_size:
            raise InvalidArguments(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        if self.corridor_min_length > self.corridor_max_length:
            raise InvalidArguments(
                f"corridor_min_length ({self.corridor_min_length}) exceeds "
                f"corridor_max_length ({self.corridor_max_length})"
            )
        if self.max_tries < 1:
            raise InvalidArguments(f"max_tries must be at least 1, got {self.max_tries}")
        return self

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        if not path.exists():
            raise InvalidArguments(f"Config file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise InvalidArguments(f"Malformed config file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise InvalidArguments(f"Config file {path} must contain a mapping")
        return data

    @staticmethod
    def _load_defaults() -> dict:
        try:
            text = resources.files("digger").joinpath("default_settings.yaml").read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            return dataclasses.asdict(GenerationSettings())
        return yaml.safe_load(text) or {}

    @staticmethod
    def _as_int(key: str, raw: Any) -> int:
        # YAML yields ints and the environment yields strings; floats and bools are rejected
        if isinstance(raw, bool) or not isinstance(raw, (int, str)):
            raise InvalidArguments(f"Setting {key!r} must be an integer, got {raw!r}")
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidArguments(f"Setting {key!r} must be an integer, got {raw!r}") from exc

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> "GenerationSettings":
        known = {f.name for f in dataclasses.fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown setting %r", key)
        values: Dict[str, Any] = {}
        for key in known & set(data):
            raw = data[key]
            if key == "seed":
                values[key] = _check_seed(raw)
            else:
                values[key] = cls._as_int(key, raw)
        return cls(**values)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "GenerationSettings":
        """Load settings from built-in defaults, an optional YAML file and the environment."""
        data = cls._load_defaults()
        if user_path is not None:
            data.update(cls._load_yaml(user_path))
            logger.info("Loaded user settings from %s", user_path)
        data.update(cls._env_overrides())
        settings = cls._from_dict(data)
        logger.debug("Settings merged: %s", settings)
        return settings

    @staticmethod
    def _env_overrides() -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        seed = os.getenv(ENV_SEED)
        if seed:
            overrides["seed"] = seed
        max_tries = os.getenv(ENV_MAX_TRIES)
        if max_tries:
            overrides["max_tries"] = max_tries
        return overrides

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


__all__ = ["GenerationSettings", "ENV_SEED", "ENV_MAX_TRIES"]
