from typing import Optional

from pydantic import Field

from snapkit.dto.base import BaseOptions
from snapkit.dto.transform import LoaderTransformOptions, TransformOptions


class BuildRequest(BaseOptions):
    organization_name: str = Field(..., description="Organization name (Snapkit subdomain)")
    url: str = Field(..., description="Source image URL")
    transform: Optional[TransformOptions] = Field(default=None, description="Image transformations")

    def to_url(self) -> str:
        from snapkit.io.url import build_snapkit_image_url

        return build_snapkit_image_url(self.organization_name, self.url, self.transform)


class LoaderConfig(BaseOptions):
    """Configuration captured by a loader created with ``create_snapkit_loader``."""

    organization_name: str = Field(..., description="Organization name (Snapkit subdomain)")
    transform: Optional[LoaderTransformOptions] = Field(
        default=None, description="Transformations applied to every image"
    )


class LoaderParams(BaseOptions):
    """Per-request parameters handed to a loader by the image pipeline."""

    src: str
    width: int
    quality: Optional[int] = None
