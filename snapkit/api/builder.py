from pathlib import Path
from typing import Any, Mapping, Optional, Union

from snapkit.dto.transform import TransformOptions
from snapkit.io.env import get_organization_name
from snapkit.io.url import build_base_url, build_snapkit_image_url


class SnapkitImageURL:
    """
    Snapkit image URL builder bound to one organization.

    :Usage example:

     .. code-block:: python

        from snapkit import SnapkitImageURL, TransformOptions

        builder = SnapkitImageURL("my-org")
        image_url = builder.build(
            "https://cdn.cloudfront.net/image.jpg",
            TransformOptions(w=300, h=200, fit="cover", format="webp"),
        )
    """

    def __init__(self, organization_name: str):
        self._organization_name = organization_name

    @property
    def organization_name(self) -> str:
        """Organization name used as the Snapkit subdomain."""
        return self._organization_name

    @property
    def base_url(self) -> str:
        return build_base_url(self._organization_name)

    def build(
        self,
        url: str,
        transform: Optional[Union[TransformOptions, Mapping[str, Any]]] = None,
    ) -> str:
        """Generate Snapkit image proxy URL for the given source image."""
        return build_snapkit_image_url(self._organization_name, url, transform)

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> "SnapkitImageURL":
        """Create builder from environment variables."""
        return cls(get_organization_name(env_file))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._organization_name!r})"
