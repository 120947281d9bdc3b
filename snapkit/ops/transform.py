"""
Serialization of transform options into the ``transform`` query value.

The token is a comma-separated list in a fixed order::

    w, h, fit, format, rotation, blur, dpr, quality, grayscale, flip, flop, extract

Valued entries are written as ``key:value``, boolean flags as the bare key and
region extraction as ``extract:x-y-width-height``. The order is observable by
the image service and must not change.
"""

from __future__ import annotations

import enum
import re
from typing import Any, List, Mapping, Union

from snapkit.dto.transform import TransformOptions

VALUE_FIELDS = ("w", "h", "fit", "format", "rotation", "blur", "dpr", "quality")
FLAG_FIELDS = ("grayscale", "flip", "flop")

_EXPONENT = re.compile(r"e([+-])0*(\d)")


def format_number(value: Union[int, float]) -> str:
    """
    Render a number the same way on every call.

    Integers are written as-is, floats use the shortest round-tripping
    decimal with a trailing ``.0`` dropped (``2.0`` -> ``"2"``). Exponents
    carry no leading zeros (``1e-07`` -> ``"1e-7"``).
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return _EXPONENT.sub(r"e\1\2", repr(value))
    return str(value)


def _format_value(value: Any) -> str:
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def build_transform_string(options: Union[TransformOptions, Mapping[str, Any]]) -> str:
    """
    Convert transform options to the ``transform`` query value.

    :param options: Transformation options; a mapping is validated into :class:`TransformOptions`.
    :type options: TransformOptions or dict
    :returns: Token such as ``"w:100,h:100,fit:cover"``, or ``""`` when nothing is requested.
    :rtype: :class:`str`
    """
    if not isinstance(options, TransformOptions):
        options = TransformOptions.model_validate(options)

    parts: List[str] = []

    for name in VALUE_FIELDS:
        value = getattr(options, name)
        # empty fit or format counts as not requested
        if value is not None and value != "":
            parts.append(f"{name}:{_format_value(value)}")

    # flags carry no value and only True counts
    for name in FLAG_FIELDS:
        if getattr(options, name) is True:
            parts.append(name)

    if options.extract is not None:
        e = options.extract
        parts.append(f"extract:{e.x}-{e.y}-{e.width}-{e.height}")

    return ",".join(parts)
