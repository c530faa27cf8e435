"""
Pydantic models for validating site branding and publishing configuration.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ValidationError, field_validator

from ..util.time import DEFAULT_DATE_FORMAT


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class SiteConfig(BaseModel):
    """
    Branding and addressing shared by every generated document.

    Attributes:
        site_name: Brand shown in titles, headers and footers.
        tagline: Short slogan under the brand.
        public_root: Base URL that world folders are published beneath.
        repo_name: Repository folder that world folders live in.
        reference_url: Outbound "Live Reference System" link.
        output_root: Directory the site writer lays documents out in.
        date_format: strftime pattern for creation dates.
        escape_user_content: HTML-escape user-authored text instead of injecting it verbatim.
    """
    site_name: str = "Infinity Spark"
    tagline: str = "Turn Ideas Into Worlds"
    public_root: str = "https://pewpi-infinity.github.io/infinity-spark"
    repo_name: str = "infinity-spark"
    reference_url: str = "https://pewpi-infinity.github.io/infinity-spark-tour/"
    output_root: Optional[Path] = None
    date_format: str = DEFAULT_DATE_FORMAT
    escape_user_content: bool = False

    model_config = {
        "extra": "forbid",
    }

    @field_validator("public_root")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("public_root must not be empty")
        return value

    @field_validator("repo_name")
    @classmethod
    def _validate_repo_name(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("repo_name must not be empty")
        return value

    @property
    def index_url(self) -> str:
        """Public URL of the master index."""
        return f"{self.public_root}/"

    def world_url(self, world_id: str) -> str:
        return f"{self.public_root}/{world_id}/"

    def world_repo_path(self, world_id: str) -> str:
        return f"{self.repo_name}/{world_id}"


DEFAULT_SITE = SiteConfig()


def load_config(path: Path | str) -> SiteConfig:
    """
    Load and validate a TOML config file into a SiteConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated SiteConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    # Allow the settings to sit under a [site] table as well as at the root.
    if isinstance(raw_data.get("site"), dict):
        if len(raw_data) > 1:
            raise ConfigError("Put every setting inside [site] or none of them.")
        raw_data = raw_data["site"]

    try:
        return SiteConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
