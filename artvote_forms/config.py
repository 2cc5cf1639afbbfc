from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from dotenv import dotenv_values

from .paths import AppPaths

DEFAULT_IMAGE_HOST_URL = "https://freeimage.host/api/1/upload"
DEFAULT_PLACEHOLDER_URL = "https://picsum.photos/800"
DEFAULT_UPLOAD_TIMEOUT = 1000.0
DEFAULT_MAX_VOTES = 3


class ConfigError(RuntimeError):
    """Raised when the configuration file or the CLI input is invalid."""


@dataclass
class ContestRequest:
    pokemon: str
    number: int
    categories: List[str] = field(default_factory=list)


@dataclass
class AppConfig:
    api_key: str
    image_host_url: str = DEFAULT_IMAGE_HOST_URL
    placeholder_url: str = DEFAULT_PLACEHOLDER_URL
    upload_timeout: float = DEFAULT_UPLOAD_TIMEOUT
    max_votes: int = DEFAULT_MAX_VOTES

    @property
    def upload_url(self) -> str:
        return f"{self.image_host_url}?key={self.api_key}&action=upload"


def parse_contest_number(raw: str) -> int:
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise ConfigError(f"Unable to parse contest number: {raw!r}") from exc


def build_contest_request(
    pokemon: str, number: str, categories: Sequence[str]
) -> ContestRequest:
    pokemon = pokemon.strip()
    if not pokemon:
        raise ConfigError("A pokemon name is required.")
    cleaned = [item.strip() for item in categories if item.strip()]
    if not cleaned:
        raise ConfigError("At least one category name is required.")
    return ContestRequest(
        pokemon=pokemon,
        number=parse_contest_number(number),
        categories=cleaned,
    )


def _optional(values: Dict[str, Optional[str]], key: str) -> Optional[str]:
    value = values.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def load_config(paths: AppPaths) -> AppConfig:
    env_path = paths.env_file
    if not env_path.exists():
        raise ConfigError(
            f"No .env file found at {env_path}. Create it with an API_KEY=<image host key> line."
        )

    values = dotenv_values(env_path)

    api_key = _optional(values, "API_KEY")
    if not api_key:
        raise ConfigError(f"{env_path} is missing 'API_KEY'.")

    upload_timeout_raw = _optional(values, "UPLOAD_TIMEOUT")
    try:
        upload_timeout = (
            float(upload_timeout_raw)
            if upload_timeout_raw
            else DEFAULT_UPLOAD_TIMEOUT
        )
    except ValueError as exc:
        raise ConfigError("UPLOAD_TIMEOUT must be numeric.") from exc

    max_votes_raw = _optional(values, "MAX_VOTES")
    try:
        max_votes = int(max_votes_raw) if max_votes_raw else DEFAULT_MAX_VOTES
    except ValueError as exc:
        raise ConfigError("MAX_VOTES must be an integer.") from exc
    if max_votes < 1:
        raise ConfigError("MAX_VOTES must be at least 1.")

    return AppConfig(
        api_key=api_key,
        image_host_url=_optional(values, "IMAGE_HOST_URL") or DEFAULT_IMAGE_HOST_URL,
        placeholder_url=_optional(values, "PLACEHOLDER_IMAGE_URL")
        or DEFAULT_PLACEHOLDER_URL,
        upload_timeout=upload_timeout,
        max_votes=max_votes,
    )
