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
Trajectory and Frame Result Types

Defines the containers passed between the animation driver, the frame
builder and the raster sink:
- Trails (bounded point histories)
- Frames and frame sequences
- Sensitivity comparison results

Result types are TypedDict, so they can be built, inspected and
serialized as plain dictionaries.

Usage
-----
>>> from lorenzanim.types.trajectories import Frame, FrameSequence
>>>
>>> sequence: FrameSequence = run_animation(800, 600, 100)
>>> print(len(sequence["frames"]))  # 100
>>> print(sequence["frames"][0]["duration"])  # hundredths of a second
"""

from typing import List, Sequence

from typing_extensions import TypedDict

from .core import PixelBuffer, Point3D, RGBColor

Trail = Sequence[Point3D]
"""
Ordered point history, oldest first.

Anything indexable with len() works: a TrailBuffer, a deque or a list.
"""


class Frame(TypedDict):
    """
    One rendered animation frame.

    Attributes
    ----------
    pixels : PixelBuffer
        Indexed-color raster (height, width)
    duration : int
        Display time in hundredths of a second
    """

    pixels: PixelBuffer
    duration: int


class FrameSequence(TypedDict):
    """
    Ordered frames handed to the raster sink.

    Attributes
    ----------
    frames : List[Frame]
        Frames in display order (append-only during a run)
    width : int
        Frame width in pixels
    height : int
        Frame height in pixels
    palette : List[RGBColor]
        256-entry palette shared by every frame
    """

    frames: List[Frame]
    width: int
    height: int
    palette: List[RGBColor]


class SensitivitySample(TypedDict):
    """
    One row of a sensitivity comparison.

    Attributes
    ----------
    time : float
        Elapsed simulated time of the reference system
    x_reference : float
        x coordinate of the unperturbed system
    x_perturbed : float
        x coordinate of the perturbed system
    difference : float
        Absolute difference |x_perturbed - x_reference|
    """

    time: float
    x_reference: float
    x_perturbed: float
    difference: float


class SensitivityResult(TypedDict):
    """
    Divergence of two nearly identical Lorenz trajectories.

    Attributes
    ----------
    initial_difference : float
        Perturbation applied to x0
    samples : List[SensitivitySample]
        Sampled comparison rows
    """

    initial_difference: float
    samples: List[SensitivitySample]


__all__ = [
    "Trail",
    "Frame",
    "FrameSequence",
    "SensitivitySample",
    "SensitivityResult",
]
