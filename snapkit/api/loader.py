"""
Image loader adapters.

A loader maps the per-request parameters of an image pipeline (source,
rendered width and, optionally, quality) onto a Snapkit proxy URL, the way
``next/image`` custom loaders do.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Union

from snapkit.dto.request import LoaderConfig, LoaderParams
from snapkit.dto.transform import Format, TransformOptions
from snapkit.io.env import get_organization_name
from snapkit.io.url import build_snapkit_image_url

DEFAULT_FORMAT = Format.WEBP.value

Loader = Callable[..., str]


def _loader_params(
    src: Union[str, LoaderParams], width: Optional[int], quality: Optional[int]
) -> LoaderParams:
    if isinstance(src, LoaderParams):
        return src
    return LoaderParams(src=src, width=width, quality=quality)


def build_loader_transform(
    config: LoaderConfig, width: int, quality: Optional[int] = None
) -> TransformOptions:
    """
    Merge pipeline parameters into the configured transformations.

    Width always comes from the pipeline. Format falls back to webp and a
    quality set on the config wins over the one passed by the pipeline.
    """
    configured: Dict[str, Any] = {}
    if config.transform is not None:
        configured = config.transform.model_dump(exclude_none=True)

    configured["w"] = width
    if not configured.get("format"):
        configured["format"] = DEFAULT_FORMAT
    if configured.get("quality") is None and quality is not None:
        configured["quality"] = quality
    return TransformOptions.model_validate(configured)


def create_snapkit_loader(config: Union[LoaderConfig, Mapping[str, Any]]) -> Loader:
    """
    Snapkit loader factory.

    :param config: Loader configuration; a mapping is validated into :class:`LoaderConfig`.
    :type config: LoaderConfig or dict
    :returns: Loader accepting ``(src, width, quality=None)``
    :rtype: Callable[..., str]
    :Usage example:

     .. code-block:: python

        from snapkit import create_snapkit_loader

        loader = create_snapkit_loader(
            {"organization_name": "my-org", "transform": {"fit": "cover"}}
        )
        loader(src="https://cdn.cloudfront.net/image.jpg", width=300)
        # Output: https://my-org.snapkit.dev/image?url=...&transform=w%3A300%2Cfit%3Acover%2Cformat%3Awebp
    """
    if not isinstance(config, LoaderConfig):
        config = LoaderConfig.model_validate(config)

    def snapkit_loader(
        src: Union[str, LoaderParams],
        width: Optional[int] = None,
        quality: Optional[int] = None,
    ) -> str:
        params = _loader_params(src, width, quality)
        transform = build_loader_transform(config, params.width, params.quality)
        return build_snapkit_image_url(config.organization_name, params.src, transform)

    return snapkit_loader


def snapkit_loader(
    src: Union[str, LoaderParams],
    width: Optional[int] = None,
    quality: Optional[int] = None,
) -> str:
    """
    Default loader reading the organization name from ``SNAPKIT_ORG``.

    Raises:
        ConfigurationError: If ``SNAPKIT_ORG`` is not set.
    """
    loader = create_snapkit_loader(LoaderConfig(organization_name=get_organization_name()))
    return loader(src, width, quality)
