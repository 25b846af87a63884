# Copyright (C) 2025 Gil Benezer
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Raster Sink

Writes finished rasters to disk with Pillow:
- Indexed multi-frame GIF for animations
- Single indexed or truecolor images (format chosen from the file suffix)

Errors opening or writing the output (``OSError``) propagate to the caller;
nothing is retried and partially written files are not cleaned up.
"""

import logging
from pathlib import Path
from typing import List, Union

import numpy as np
from PIL import Image

from lorenzanim.rendering.palette import palette_to_bytes
from lorenzanim.types.core import PixelBuffer, RGBColor, RGBImage
from lorenzanim.types.trajectories import FrameSequence

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def indexed_to_image(pixels: PixelBuffer, palette: List[RGBColor]) -> Image.Image:
    """
    Wrap an indexed buffer as a Pillow "P" image with the given palette.

    Raises
    ------
    ValueError
        If ``pixels`` is not a 2D array
    """
    if pixels.ndim != 2:
        raise ValueError(f"Indexed buffer must be 2D, got shape {pixels.shape}")
    height, width = pixels.shape
    data = np.ascontiguousarray(pixels, dtype=np.uint8).tobytes()
    image = Image.frombytes("P", (width, height), data)
    image.putpalette(palette_to_bytes(palette))
    return image


def save_animation(sequence: FrameSequence, path: PathLike, loop: int = 0) -> Path:
    """
    Encode a frame sequence as an animated GIF.

    Parameters
    ----------
    sequence : FrameSequence
        Frames with per-frame durations in hundredths of a second
    path : str or Path
        Output file
    loop : int
        GIF loop count (0 = forever)

    Returns
    -------
    Path
        The written file

    Raises
    ------
    ValueError
        If the sequence has no frames
    OSError
        If the file cannot be created or written
    """
    frames = sequence["frames"]
    if not frames:
        raise ValueError("Cannot encode an animation with no frames")

    path = Path(path)
    palette = sequence["palette"]
    images = [indexed_to_image(frame["pixels"], palette) for frame in frames]
    durations = [frame["duration"] * 10 for frame in frames]

    logger.info("Encoding GIF (%d frames) to %s", len(images), path)
    images[0].save(
        path,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=durations,
        loop=loop,
    )
    return path


def save_indexed_image(pixels: PixelBuffer, palette: List[RGBColor], path: PathLike) -> Path:
    """Write one indexed buffer; the format follows the file suffix."""
    path = Path(path)
    indexed_to_image(pixels, palette).save(path)
    logger.info("Saved indexed image to %s", path)
    return path


def save_rgb_image(image: RGBImage, path: PathLike) -> Path:
    """Write one (height, width, 3) uint8 image; the format follows the file suffix."""
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"RGB image must have shape (height, width, 3), got {image.shape}")
    path = Path(path)
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(path)
    logger.info("Saved image to %s", path)
    return path


__all__ = [
    "indexed_to_image",
    "save_animation",
    "save_indexed_image",
    "save_rgb_image",
]
