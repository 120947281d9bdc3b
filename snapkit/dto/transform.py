import enum
from typing import Optional, Union

from pydantic import Field, StrictBool

from snapkit.dto.base import BaseOptions


class Fit(str, enum.Enum):
    """Resize modes."""

    CONTAIN = "contain"
    COVER = "cover"
    FILL = "fill"
    INSIDE = "inside"
    OUTSIDE = "outside"


class Format(str, enum.Enum):
    """Output formats."""

    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"
    AVIF = "avif"


class Extract(BaseOptions):
    """Region extraction, always applied as a whole."""

    x: int
    y: int
    width: int
    height: int


class _CommonTransformOptions(BaseOptions):
    # fit and format accept any string so that values added on the service
    # side keep working before the enums catch up
    fit: Optional[Union[Fit, str]] = Field(default=None, description="Resize mode")
    format: Optional[Union[Format, str]] = Field(default=None, description="Output format")
    rotation: Optional[int] = Field(default=None, description="Rotation angle (degrees)")
    blur: Optional[float] = Field(default=None, description="Blur strength (0.3-1000)")
    grayscale: Optional[StrictBool] = Field(default=None, description="Convert to grayscale")
    flip: Optional[StrictBool] = Field(default=None, description="Flip vertically")
    flop: Optional[StrictBool] = Field(default=None, description="Flip horizontally")
    extract: Optional[Extract] = Field(default=None, description="Region extraction")
    dpr: Optional[float] = Field(default=None, description="Device pixel ratio (1.0-4.0)")
    quality: Optional[int] = Field(default=None, description="Image quality (1-100)")


class TransformOptions(_CommonTransformOptions):
    """
    Requested image transformations.

    Every field is optional; ``None`` means "not requested", so ``w=0`` or
    ``grayscale=False`` are kept apart from an unset field.
    """

    w: Optional[int] = Field(default=None, description="Image width (pixels)")
    h: Optional[int] = Field(default=None, description="Image height (pixels)")

    def to_transform_string(self) -> str:
        """Serialize into the ``transform`` query value."""
        from snapkit.ops.transform import build_transform_string

        return build_transform_string(self)

    @property
    def is_empty(self) -> bool:
        return self.to_transform_string() == ""


class LoaderTransformOptions(_CommonTransformOptions):
    """
    Transformations configured on a loader.

    Width comes from the image pipeline on every request, so ``w`` and ``h``
    are not accepted here.
    """
