"""
Settings model used to configure the SDK from the environment.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SNAPKIT_ENV_FILENAME = "snapkit.env"
SNAPKIT_ORG_ENV = "SNAPKIT_ORG"
# name used by the Next.js loader, accepted so the same env files keep working
NEXT_PUBLIC_SNAPKIT_ORG_ENV = "NEXT_PUBLIC_SNAPKIT_ORG"


class SnapkitSettings(BaseSettings):
    """
    Settings model for Snapkit configuration via environment variables
    or other settings sources supported by `pydantic-settings`.
    """

    SNAPKIT_ORG: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(SNAPKIT_ORG_ENV, NEXT_PUBLIC_SNAPKIT_ORG_ENV),
    )

    model_config = SettingsConfigDict(
        env_file=SNAPKIT_ENV_FILENAME,
        env_ignore_empty=True,
        extra="ignore",
    )
