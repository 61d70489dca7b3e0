from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path


DEFAULT_HOST = "https://api.crossingminds.com"
DEFAULT_USER_AGENT = "xminds-python-client/0.1.0"
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_BULK_TIMEOUT_SECONDS = 30


class ConfigurationError(ValueError):
    pass


@dataclass(frozen=True)
class ClientSettings:
    host: str = DEFAULT_HOST
    user_agent: str = DEFAULT_USER_AGENT
    refresh_token: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    bulk_timeout_seconds: float = DEFAULT_BULK_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        # endpoint paths start with "/"
        object.__setattr__(self, "host", self.host.rstrip("/"))

    @staticmethod
    def from_options(
        host: str | None = None,
        user_agent: str | None = None,
        refresh_token: str | None = None,
    ) -> "ClientSettings":
        settings = ClientSettings(
            host=host or DEFAULT_HOST,
            user_agent=user_agent or DEFAULT_USER_AGENT,
            refresh_token=refresh_token or "",
        )
        settings.validate()
        return settings

    @staticmethod
    def from_env() -> "ClientSettings":
        _load_dotenv_if_present()

        try:
            timeout_seconds = float(os.getenv("XMINDS_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))
            bulk_timeout_seconds = float(
                os.getenv("XMINDS_BULK_TIMEOUT_SECONDS", str(DEFAULT_BULK_TIMEOUT_SECONDS))
            )
        except ValueError as exc:
            raise ConfigurationError(f"Timeouts must be numbers: {exc}") from exc

        settings = ClientSettings(
            host=os.getenv("XMINDS_HOST", "").strip() or DEFAULT_HOST,
            user_agent=os.getenv("XMINDS_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
            refresh_token=os.getenv("XMINDS_REFRESH_TOKEN", "").strip(),
            timeout_seconds=timeout_seconds,
            bulk_timeout_seconds=bulk_timeout_seconds,
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        if not self.host.startswith(("http://", "https://")):
            raise ConfigurationError("XMINDS_HOST must start with 'http://' or 'https://'")

        if not self.user_agent:
            raise ConfigurationError("XMINDS_USER_AGENT must not be empty")

        if self.timeout_seconds <= 0:
            raise ConfigurationError("XMINDS_TIMEOUT_SECONDS must be greater than 0")

        if self.bulk_timeout_seconds <= 0:
            raise ConfigurationError("XMINDS_BULK_TIMEOUT_SECONDS must be greater than 0")


def _load_dotenv_if_present() -> None:
    """Fill unset variables from ``XMINDS_ENV_FILE`` and ``./.env``."""
    paths = [Path.cwd() / ".env"]
    explicit = os.getenv("XMINDS_ENV_FILE", "").strip()
    if explicit:
        paths.insert(0, Path(explicit).expanduser())

    loaded: set[Path] = set()
    for path in paths:
        if not path.is_file() or path.resolve() in loaded:
            continue
        loaded.add(path.resolve())
        try:
            lines = path.read_text(encoding="utf-8").splitlines()
        except OSError:
            continue
        for line in lines:
            entry = _parse_env_line(line)
            if entry is not None:
                os.environ.setdefault(*entry)


def _parse_env_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = (part.strip() for part in line.split("=", 1))
    if not key:
        return None
    return key, value.strip("\"'")
