from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppPaths:
    """Holds the file-system locations used by the form builder."""

    base_dir: Path

    @property
    def credentials_file(self) -> Path:
        return self.base_dir / "credentials.json"

    @property
    def token_file(self) -> Path:
        return self.base_dir / "token.json"

    @property
    def env_file(self) -> Path:
        return self.base_dir / ".env"

    def ensure(self) -> None:
        """Create the base directory if it does not exist."""
        self.base_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def default(cls) -> "AppPaths":
        return cls(base_dir=Path.cwd())
