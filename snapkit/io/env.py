"""
Helpers for loading Snapkit configuration from the environment.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from snapkit.io.settings import SNAPKIT_ORG_ENV, SnapkitSettings

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a required configuration value is not set."""


def load_settings(env_file: Optional[Union[str, Path]] = None) -> SnapkitSettings:
    """
    Read settings from the process environment and an env file.

    :param env_file: Env file to read instead of ``snapkit.env`` in the working directory.
    :type env_file: str or Path, optional
    :returns: Fresh settings instance
    :rtype: :class:`SnapkitSettings`
    """
    if env_file is None:
        return SnapkitSettings()
    return SnapkitSettings(_env_file=env_file)


def get_organization_name(env_file: Optional[Union[str, Path]] = None) -> str:
    """
    Organization name from configuration.

    Raises:
        ConfigurationError: If the organization variable is absent or empty.
    """
    settings = load_settings(env_file)
    if not settings.SNAPKIT_ORG:
        raise ConfigurationError(f"{SNAPKIT_ORG_ENV} environment variable is not set")
    logger.debug(f"Using Snapkit organization {settings.SNAPKIT_ORG!r}")
    return settings.SNAPKIT_ORG
