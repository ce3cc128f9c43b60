# primkit/geometry/topology.py
"""
Vertex layouts and triangle index generation.

A topology decides where a surface is sampled and how the samples are
joined into triangles. Triangles wind counter-clockwise when seen from
outside the surface, so the right-hand-rule face normal agrees with the
analytic normal the surface reports.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from primkit.geometry.sampler import FanSurface, ParametricSurface, require_count
from primkit.types import VertexAttributes


class Topology(ABC):
    @property
    @abstractmethod
    def vertex_count(self) -> int:
        """Number of shared vertices this topology samples."""

    @property
    @abstractmethod
    def triangle_count(self) -> int:
        ...

    @abstractmethod
    def sample(self, surface: ParametricSurface) -> VertexAttributes:
        """Evaluate `surface` at every vertex of this topology, in index order."""

    @abstractmethod
    def indices(self) -> NDArray[np.uint32]:
        """Flat triangle list; every consecutive triple is one triangle."""


class GridTopology(Topology):
    """
    A (rows + 1) x (cols + 1) vertex grid, row-major.

    The last column and the last row repeat the first ones in parameter
    space (u or v equal to 1.0) so seams get their own vertices and UVs run
    from 0 to 1 without wrapping.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = require_count("rows", rows)
        self.cols = require_count("cols", cols)

    @property
    def vertex_count(self) -> int:
        return (self.rows + 1) * (self.cols + 1)

    @property
    def triangle_count(self) -> int:
        return 2 * self.rows * self.cols

    def parameters(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        u = np.arange(self.rows + 1, dtype=np.float64) / self.rows
        v = np.arange(self.cols + 1, dtype=np.float64) / self.cols
        return np.repeat(u, self.cols + 1), np.tile(v, self.rows + 1)

    def sample(self, surface: ParametricSurface) -> VertexAttributes:
        u, v = self.parameters()
        return surface.evaluate(u, v)

    def indices(self) -> NDArray[np.uint32]:
        row = np.arange(self.rows, dtype=np.int64)[:, None]
        col = np.arange(self.cols, dtype=np.int64)[None, :]

        first = row * (self.cols + 1) + col
        second = first + self.cols + 1

        # Both triangles share the second -> first + 1 diagonal.
        tris = np.stack(
            [first, first + 1, second, first + 1, second + 1, second], axis=-1
        )
        return tris.reshape(-1).astype(np.uint32)


class FanTopology(Topology):
    """
    An apex (index 0) followed by a closed ring of ``segments + 1`` vertices.

    Ring vertex ``segments + 1`` sits on the seam and duplicates ring
    vertex 1 in position.
    """

    def __init__(self, segments: int) -> None:
        self.segments = require_count("segments", segments)

    @property
    def vertex_count(self) -> int:
        return self.segments + 2

    @property
    def triangle_count(self) -> int:
        return self.segments

    def parameters(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        u = np.arange(self.segments + 1, dtype=np.float64) / self.segments
        return u, np.zeros_like(u)

    def sample(self, surface: ParametricSurface) -> VertexAttributes:
        if not isinstance(surface, FanSurface):
            raise TypeError(
                f"{type(surface).__name__} has no apex and cannot be meshed as a fan"
            )
        u, v = self.parameters()
        return surface.apex().concat(surface.evaluate(u, v))

    def indices(self) -> NDArray[np.uint32]:
        ring = np.arange(1, self.segments + 1, dtype=np.int64)
        tris = np.stack([np.zeros_like(ring), ring + 1, ring], axis=-1)
        return tris.reshape(-1).astype(np.uint32)
