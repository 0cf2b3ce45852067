"""Attributes attached to images through their titles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ImageAttributeError(ValueError):
    """An image attribute could not be parsed."""


@dataclass(frozen=True)
class ImageAttributes:
    """Attributes of an image; ``width`` is a percentage of the screen."""

    width: Optional[int] = None

    @property
    def width_ratio(self) -> Optional[float]:
        """The width as a ratio between 0 and 1, if set."""
        return None if self.width is None else self.width / 100


def parse_percent(text: str) -> int:
    """Parse a percentage such as ``50%``."""
    if not text.endswith("%"):
        raise ImageAttributeError(f"invalid width: no '%' in {text!r}")
    digits = text[:-1]
    if not digits.isdigit():
        raise ImageAttributeError(f"invalid width: {text!r} is not a number")
    value = int(digits)
    if value > 100:
        raise ImageAttributeError(f"invalid width: {value} is larger than 100")
    return value


def _parse_attribute(text: str, width: Optional[int]) -> Optional[int]:
    key, sep, value = text.partition(":")
    if not sep:
        raise ImageAttributeError("no attribute given")
    if key in ("width", "w"):
        return parse_percent(value)
    raise ImageAttributeError(f"unknown attribute: '{key}'")


def parse_image_attributes(text: str, attribute_prefix: str = "image:") -> ImageAttributes:
    """Parse comma separated attributes that start with ``attribute_prefix``."""
    width: Optional[int] = None
    for attribute in text.split(","):
        if attribute_prefix:
            position = attribute.find(attribute_prefix)
            if position != 0:
                continue
            suffix = attribute[len(attribute_prefix):]
        else:
            suffix = attribute
            if not suffix:
                continue
        width = _parse_attribute(suffix, width)
    return ImageAttributes(width=width)