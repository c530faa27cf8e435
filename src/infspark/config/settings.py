"""
Environment override loading.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv

from .models import DEFAULT_SITE, SiteConfig


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class EnvironmentOverrides(BaseModel):
    """
    Publishing values that may be supplied through the environment or `.env`.

    Attributes:
        public_root: Replaces SiteConfig.public_root.
        repo_name: Replaces SiteConfig.repo_name.
        log_level: Replaces the CLI --log-level option.
    """
    public_root: Optional[str] = Field(default=None, alias="INFSPARK_PUBLIC_ROOT")
    repo_name: Optional[str] = Field(default=None, alias="INFSPARK_REPO_NAME")
    log_level: Optional[str] = Field(default=None, alias="INFSPARK_LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
    }


def get_overrides() -> EnvironmentOverrides:
    """
    Read override values from the current environment.
    """
    values = {field.alias: os.getenv(field.alias) for field in EnvironmentOverrides.model_fields.values()}
    return EnvironmentOverrides(**values)


def apply_overrides(site: Optional[SiteConfig] = None) -> SiteConfig:
    """
    Return a copy of site (or the defaults) with environment overrides applied.
    """
    base = site or DEFAULT_SITE
    overrides = get_overrides()
    updates = {
        key: value
        for key, value in (("public_root", overrides.public_root), ("repo_name", overrides.repo_name))
        if value
    }
    if not updates:
        return base
    # Re-validate so trailing slashes and blanks are normalised like file values.
    return SiteConfig.model_validate({**base.model_dump(), **updates})
