"""
Public package interface for the Snapkit image URL SDK.

The module exposes the URL builder (`build_snapkit_image_url`,
`SnapkitImageURL`), the image loader adapters (`create_snapkit_loader`,
`snapkit_loader`) and the option types they accept.
"""

from snapkit.api.builder import SnapkitImageURL
from snapkit.api.loader import create_snapkit_loader, snapkit_loader
from snapkit.dto.request import BuildRequest, LoaderConfig, LoaderParams
from snapkit.dto.transform import (
    Extract,
    Fit,
    Format,
    LoaderTransformOptions,
    TransformOptions,
)
from snapkit.io.env import ConfigurationError
from snapkit.io.url import build_snapkit_image_url
from snapkit.ops.transform import build_transform_string

__all__ = [
    "BuildRequest",
    "ConfigurationError",
    "Extract",
    "Fit",
    "Format",
    "LoaderConfig",
    "LoaderParams",
    "LoaderTransformOptions",
    "SnapkitImageURL",
    "TransformOptions",
    "build_snapkit_image_url",
    "build_transform_string",
    "create_snapkit_loader",
    "snapkit_loader",
]
