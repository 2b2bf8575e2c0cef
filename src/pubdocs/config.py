"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_REFRESH_MINUTES = 10


@dataclass(slots=True)
class AppConfig:
    root: Path | None = None
    host: str = "127.0.0.1"
    port: int = 8080
    refresh_interval_minutes: int = DEFAULT_REFRESH_MINUTES
    title: str = "Public documents"

    def resolve_root(self, base_dir: Path | None = None) -> Path:
        """Return the absolute index root, resolving relative roots against ``base_dir``."""
        if self.root is None:
            raise ValueError("No index root configured")
        root = Path(self.root).expanduser()
        if not root.is_absolute() and base_dir is not None:
            root = base_dir / root
        return Path(os.path.abspath(root))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        root = env.get("PUBDOCS_ROOT")
        return cls(
            root=Path(root) if root else None,
            host=env.get("PUBDOCS_HOST", defaults.host),
            port=int(env.get("PUBDOCS_PORT", defaults.port)),
            refresh_interval_minutes=int(
                env.get("PUBDOCS_REFRESH_MINUTES", defaults.refresh_interval_minutes)
            ),
        )
