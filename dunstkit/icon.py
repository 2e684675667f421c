"""Loading, converting and scaling of notification icons."""

from __future__ import annotations

import hashlib
import logging
import os
import sys
from collections.abc import Sequence
from urllib.parse import unquote, urlsplit

from PIL import Image

__all__ = [
    "image_to_cairo_data",
    "icon_scale",
    "get_image_from_file",
    "get_image_from_icon",
    "icon_get_for_name",
    "icon_get_for_data",
]

_log = logging.getLogger(__name__)

_SUFFIXES = (".svg", ".png", ".xpm")

if sys.byteorder == "little":
    _CAIRO_B, _CAIRO_G, _CAIRO_R, _CAIRO_A = 0, 1, 2, 3
else:
    _CAIRO_A, _CAIRO_R, _CAIRO_G, _CAIRO_B = 0, 1, 2, 3


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA", "PA", "RGBa", "La") or "transparency" in image.info


def image_to_cairo_data(image: Image.Image) -> bytes:
    """Return the pixels as cairo ARGB32/RGB24 data in native byte order.

    Each row is ``4 * width`` bytes long. Colours of images with alpha
    are premultiplied; images without alpha get a fully opaque alpha.
    """
    alpha = _has_alpha(image)
    rgba = image.convert("RGBA" if alpha else "RGB")
    channels = 4 if alpha else 3
    raw = rgba.tobytes()
    out = bytearray(rgba.width * rgba.height * 4)

    for index, pixel in enumerate(zip(*[iter(raw)] * channels)):
        base = index * 4
        if alpha:
            r, g, b, a = pixel
            factor = a / 0xFF
            out[base + _CAIRO_R] = int(r * factor + 0.5)
            out[base + _CAIRO_G] = int(g * factor + 0.5)
            out[base + _CAIRO_B] = int(b * factor + 0.5)
            out[base + _CAIRO_A] = a
        else:
            r, g, b = pixel
            out[base + _CAIRO_R] = r
            out[base + _CAIRO_G] = g
            out[base + _CAIRO_B] = b
            out[base + _CAIRO_A] = 0xFF
    return bytes(out)


def icon_scale(image: Image.Image | None, max_icon_size: int) -> Image.Image | None:
    """Shrink the image so its larger side fits max_icon_size (0 disables)."""
    if image is None:
        return None

    w, h = image.size
    larger = max(w, h)
    if max_icon_size and larger > max_icon_size:
        scaled_w = scaled_h = max_icon_size
        if w >= h:
            scaled_h = (max_icon_size * h) // w
        else:
            scaled_w = (max_icon_size * w) // h
        image = image.resize((scaled_w, scaled_h), Image.Resampling.BILINEAR)
    return image


def get_image_from_file(filename: str | os.PathLike[str]) -> Image.Image | None:
    """Load an image from a path, expanding a leading '~'; None on failure."""
    path = os.path.expanduser(os.fspath(filename))
    try:
        with Image.open(path) as opened:
            opened.load()
            return opened.copy()
    except (OSError, ValueError, Image.DecompressionBombError) as error:
        _log.warning("%s", error)
        return None


def _filename_from_uri(uri: str) -> str | None:
    parts = urlsplit(uri)
    if parts.scheme != "file" or parts.netloc not in ("", "localhost"):
        return None
    if parts.query or parts.fragment:
        return None
    path = unquote(parts.path)
    if not path.startswith("/"):
        return None
    return path


def get_image_from_icon(iconname: str | None, icon_path: str) -> Image.Image | None:
    """Load an icon given as file URI, absolute path or name searched in icon_path.

    icon_path holds folders separated by ':'; in each of them the
    suffixes .svg, .png and .xpm are tried in that order.
    """
    if not iconname:
        return None

    if iconname.startswith("file://"):
        path = _filename_from_uri(iconname)
        if path is not None:
            iconname = path

    if iconname[0] in "/~":
        return get_image_from_file(iconname)

    for folder in icon_path.split(":"):
        for suffix in _SUFFIXES:
            candidate = f"{folder}/{iconname}{suffix}"
            if os.access(candidate, os.R_OK):
                image = get_image_from_file(candidate)
                if image is not None:
                    return image

    _log.warning("No icon found in path: '%s'", iconname)
    return None


def icon_get_for_name(name: str, icon_path: str) -> tuple[Image.Image, str] | None:
    """Return the icon for a name together with its identifier (the name)."""
    image = get_image_from_icon(name, icon_path)
    if image is None:
        return None
    return image, name


def _valid_raw_tuple(data: object) -> bool:
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)) or len(data) != 7:
        return False
    *numbers, payload = data
    if not all(isinstance(value, int) for value in numbers):
        return False
    return isinstance(payload, (bytes, bytearray, memoryview))


def icon_get_for_data(data: object) -> tuple[Image.Image, str] | None:
    """Build an image from raw notification image data.

    data is ``(width, height, rowstride, has_alpha, bits_per_sample,
    n_channels, bytes)`` as defined by the notification spec; the last
    row carries no padding. Returns the image and an MD5 identifier of
    the unpadded pixel data, or None if the data is invalid.
    """
    if not _valid_raw_tuple(data):
        _log.warning("Invalid data for pixbuf given.")
        return None

    width, height, rowstride, has_alpha, bits_per_sample, n_channels, payload = data
    payload = bytes(payload)

    pixelstride = (n_channels * bits_per_sample + 7) // 8
    len_expected = (height - 1) * rowstride + width * pixelstride
    if len(payload) != len_expected:
        _log.warning(
            "Expected image data to be of length %d but got a length of %d",
            len_expected,
            len(payload),
        )
        return None

    row_len = pixelstride * width
    if (
        bits_per_sample != 8
        or width <= 0
        or height <= 0
        or n_channels != (4 if has_alpha else 3)
        or rowstride < row_len
    ):
        _log.warning("Cannot serialise raw icon data into pixbuf.")
        return None

    packed = b"".join(
        payload[row * rowstride: row * rowstride + row_len] for row in range(height)
    )
    mode = "RGBA" if has_alpha else "RGB"
    image = Image.frombytes(mode, (width, height), packed)
    return image, hashlib.md5(packed).hexdigest()