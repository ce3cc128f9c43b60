# primkit/gpu/textures.py
from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from pathlib import Path

import moderngl
import numpy as np
from numpy.typing import NDArray
from PIL import Image

from primkit.errors import InvalidParameterError
from primkit.geometry.sampler import require_count
from primkit.settings import RGBA, CheckerSettings
from primkit.types import TextureData

logger = logging.getLogger(__name__)

_DEFAULT = CheckerSettings()


@dataclass(slots=True)
class TextureHandle:
    """Wraps a ModernGL texture and its label."""

    texture: moderngl.Texture
    label: str


def checker_pixels(
    size: int = _DEFAULT.size,
    tiles: int = _DEFAULT.tiles,
    color_a: RGBA = _DEFAULT.color_a,
    color_b: RGBA = _DEFAULT.color_b,
) -> NDArray[np.uint8]:
    """
    Square RGBA checkerboard of `tiles` x `tiles` cells.

    Cell (x, y) is `color_a` when x + y is even and `color_b` otherwise.
    Returns an array of shape (size, size, 4).
    """
    size = require_count("size", size)
    tiles = require_count("tiles", tiles)
    if tiles > size:
        raise InvalidParameterError("tiles", tiles, f"cannot exceed size {size}")
    for name, color in (("color_a", color_a), ("color_b", color_b)):
        _require_rgba(name, color)

    cell = size // tiles
    ys, xs = np.indices((size, size))
    odd = ((xs // cell + ys // cell) % 2).astype(bool)

    pixels = np.empty((size, size, 4), dtype=np.uint8)
    pixels[~odd] = np.asarray(color_a, dtype=np.uint8)
    pixels[odd] = np.asarray(color_b, dtype=np.uint8)
    return pixels


def _require_rgba(name: str, color: RGBA) -> None:
    if len(color) != 4 or not all(
        isinstance(c, numbers.Integral) and not isinstance(c, bool) and 0 <= c <= 255
        for c in color
    ):
        raise InvalidParameterError(name, color, "expected four integers in 0..255")


def checker_texture_data(settings: CheckerSettings | None = None) -> TextureData:
    settings = settings or CheckerSettings()
    pixels = checker_pixels(
        settings.size, settings.tiles, settings.color_a, settings.color_b
    )
    return TextureData(
        data=pixels.tobytes(),
        width=settings.size,
        height=settings.size,
        components=4,
    )


def checker_image(settings: CheckerSettings | None = None) -> Image.Image:
    data = checker_texture_data(settings)
    return Image.frombytes("RGBA", (data.width, data.height), data.data)


def save_checker_png(path: str | Path, settings: CheckerSettings | None = None) -> Path:
    path = Path(path)
    checker_image(settings).save(path, format="PNG")
    logger.debug("wrote checker texture to %s", path)
    return path


def create_checker_texture(
    ctx: moderngl.Context,
    settings: CheckerSettings | None = None,
    *,
    label: str = "checker",
) -> TextureHandle:
    """Upload a checkerboard as a mip-mapped, repeating RGBA8 texture."""
    settings = settings or CheckerSettings()
    data = checker_texture_data(settings)

    texture = ctx.texture((data.width, data.height), data.components, data=data.data)
    texture.filter = (moderngl.LINEAR_MIPMAP_LINEAR, moderngl.LINEAR)
    texture.repeat_x = True
    texture.repeat_y = True
    texture.build_mipmaps()

    logger.debug(
        "created checker texture %dx%d with %d tiles",
        settings.size,
        settings.size,
        settings.tiles,
    )
    return TextureHandle(texture=texture, label=label)
