"""Engine configuration."""
from __future__ import annotations

import dataclasses
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from .exceptions import InvalidConfigError


@dataclass(frozen=True)
class EngineConfig:
    """Parameters fixed for the lifetime of a search player.

    Attributes:
        lookahead: Exact-lookahead horizon in real moves (n).
        playouts: Random playouts per sampled leaf (p).
        playout_length: Step bound of each playout in real moves (k).
        seed: Seed for the sampler's random source; None draws from the OS.
    """

    lookahead: int = 2
    playouts: int = 20
    playout_length: int = 10
    seed: int | None = None

    @property
    def lookahead_plies(self) -> int:
        # Each real move spans two plies under two-sided alternation.
        return 2 * self.lookahead

    @property
    def playout_plies(self) -> int:
        return 2 * self.playout_length

    def validate(self) -> None:
        """Validate configuration parameters."""
        for name in ("lookahead", "playouts", "playout_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(name, value, "must be an integer")
            if value < 1:
                raise InvalidConfigError(name, value, "must be positive")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfigError("seed", self.seed, "must be an integer or null")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EngineConfig:
        """Create from dictionary, ignoring unknown keys."""
        data = dict(data)
        if isinstance(data.get("engine"), dict):
            data = dict(data["engine"])

        known_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}
        config = cls(**filtered_data)
        config.validate()
        return config

    @classmethod
    def from_yaml(cls, path: str | Path) -> EngineConfig:
        """Load configuration from YAML file."""
        import yaml

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise InvalidConfigError("config", data, "must be a mapping")
        return cls.from_dict(data)


__all__ = ["EngineConfig"]
