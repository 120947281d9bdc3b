import logging
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode

from snapkit.dto.transform import TransformOptions
from snapkit.ops.transform import build_transform_string

SNAPKIT_DOMAIN = "snapkit.dev"
IMAGE_PATH = "/image"

logger = logging.getLogger(__name__)


def build_base_url(organization_name: str) -> str:
    """
    Returns the image endpoint for an organization.
    The organization name is used verbatim as the subdomain label.
    """
    return f"https://{organization_name}.{SNAPKIT_DOMAIN}{IMAGE_PATH}"


def build_snapkit_image_url(
    organization_name: str,
    url: str,
    transform: Optional[Union[TransformOptions, Mapping[str, Any]]] = None,
) -> str:
    """
    Build Snapkit image proxy URL.

    :param organization_name: Organization name (used as Snapkit subdomain).
    :type organization_name: str
    :param url: Original image URL (CloudFront, etc.).
    :type url: str
    :param transform: Image transformation options.
    :type transform: TransformOptions or dict, optional
    :returns: Complete image proxy URL
    :rtype: :class:`str`
    :Usage example:

     .. code-block:: python

        from snapkit import TransformOptions, build_snapkit_image_url

        image_url = build_snapkit_image_url(
            "my-org",
            "https://cdn.cloudfront.net/image.jpg",
            TransformOptions(w=300, h=200, fit="cover", format="webp"),
        )
        # Output: https://my-org.snapkit.dev/image?url=https%3A%2F%2Fcdn.cloudfront.net%2Fimage.jpg&transform=w%3A300%2Ch%3A200%2Cfit%3Acover%2Cformat%3Awebp
    """
    base_url = build_base_url(organization_name)

    params: Dict[str, str] = {"url": url}
    if transform is not None:
        transform_string = build_transform_string(transform)
        if transform_string:
            params["transform"] = transform_string

    image_url = f"{base_url}?{urlencode(params)}"
    logger.debug(f"Built image URL {image_url}")
    return image_url
