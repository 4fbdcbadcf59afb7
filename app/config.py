from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "TreeSettings",
    "parse_bool",
]

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(raw: str, name: str) -> bool:
    """Parse a boolean environment value ("true"/"false", "1"/"0", ...)."""
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false)")


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw, 10)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer") from e


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    return default if raw is None else parse_bool(raw, name)


class TreeSettings(BaseModel):
    """Runtime configuration for the link-tree server.

    The two tree bounds are fixed for the lifetime of a process and passed
    explicitly into the app factory and the responder.
    """

    model_config = ConfigDict(frozen=True)

    host: str = "localhost"
    port: int = Field(3000, ge=1, le=65535)
    max_depth: int = Field(5, ge=0)
    children_per_page: int = Field(3, ge=0)
    public_url: str | None = None  # prefix for absolute links; defaults to http://host:port
    collapse_slashes: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of {valid_levels}")
        return v_upper

    @property
    def link_prefix(self) -> str:
        """Scheme/host/port written in front of every child path."""
        if self.public_url:
            return self.public_url.rstrip("/")
        return f"http://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, **overrides) -> TreeSettings:
        """Build settings from TREE_* environment variables.

        Keyword overrides that are not None win over the environment, which is
        how the CLI layers its flags on top. An overridden variable is never
        read, so a bad value in it cannot block startup.
        """
        overrides = {k: v for k, v in overrides.items() if v is not None}
        readers = {
            "host": lambda: os.getenv("TREE_HOST", "localhost"),
            "port": lambda: _int_from_env("TREE_PORT", 3000),
            "max_depth": lambda: _int_from_env("TREE_MAX_DEPTH", 5),
            "children_per_page": lambda: _int_from_env("TREE_CHILDREN_PER_PAGE", 3),
            "public_url": lambda: os.getenv("TREE_PUBLIC_URL") or None,
            "collapse_slashes": lambda: _bool_from_env("TREE_COLLAPSE_SLASHES", True),
            "log_level": lambda: os.getenv("LOG_LEVEL", "INFO"),
        }
        values = {key: read() for key, read in readers.items() if key not in overrides}
        values.update(overrides)
        return cls(**values)
