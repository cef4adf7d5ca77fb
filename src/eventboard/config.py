"""Environment-driven service settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "EVENTBOARD_"


@dataclass(slots=True, frozen=True)
class Settings:
    """Runtime configuration for the events service."""

    data_dir: Path = Path("data")
    events_file: str = "events.json"
    images_file: str = "images.json"
    public_dir: Path = Path("public")
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @property
    def events_path(self) -> Path:
        return self.data_dir / self.events_file

    @property
    def images_path(self) -> Path:
        return self.data_dir / self.images_file

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        defaults = cls()

        def value(name: str, default: str) -> str:
            return env.get(f"{ENV_PREFIX}{name}", default).strip() or default

        raw_port = value("PORT", str(defaults.port))
        try:
            port = int(raw_port)
        except ValueError as exc:
            msg = f"{ENV_PREFIX}PORT must be an integer, got {raw_port!r}"
            raise ValueError(msg) from exc
        if not 0 < port < 65536:
            msg = f"{ENV_PREFIX}PORT out of range: {port}"
            raise ValueError(msg)

        return cls(
            data_dir=Path(value("DATA_DIR", str(defaults.data_dir))),
            events_file=value("EVENTS_FILE", defaults.events_file),
            images_file=value("IMAGES_FILE", defaults.images_file),
            public_dir=Path(value("PUBLIC_DIR", str(defaults.public_dir))),
            host=value("HOST", defaults.host),
            port=port,
            log_level=value("LOG_LEVEL", defaults.log_level).upper(),
        )
