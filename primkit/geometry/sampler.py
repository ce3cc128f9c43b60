# primkit/geometry/sampler.py
"""
Parametric surface equations for the built-in primitives.

Every surface is evaluated on normalised grid coordinates ``(u, v)`` in
``[0, 1]``: ``u`` runs along the outer traversal axis and ``v`` along the
inner one. Surfaces map those onto their own angles and heights, so the
same topology code can drive all of them.
"""
from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import ArrayLike, NDArray

from primkit.errors import InvalidParameterError
from primkit.types import VertexAttributes

TWO_PI = 2.0 * math.pi


def require_positive(name: str, value: float) -> float:
    """Validate a linear dimension (radius, height, ...)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(name, value, "expected a real number")
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "must be finite")
    if value <= 0:
        raise InvalidParameterError(name, value, "must be greater than zero")
    return float(value)


def require_count(name: str, value: int) -> int:
    """Validate a band/segment count."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(name, value, "expected an integer")
    if value < 1:
        raise InvalidParameterError(name, value, "must be at least 1")
    return int(value)


def _stack(*columns: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.stack(columns, axis=-1).astype(np.float64, copy=False)


class ParametricSurface(ABC):
    """A surface that yields position, normal, uv and tangent per (u, v)."""

    @abstractmethod
    def evaluate(self, u: ArrayLike, v: ArrayLike) -> VertexAttributes:
        """
        Evaluate the surface at matching arrays of normalised coordinates.
        Must be a pure function of the surface parameters and inputs.
        """


class FanSurface(ParametricSurface):
    """A surface meshed as a fan around a single apex vertex."""

    @abstractmethod
    def apex(self) -> VertexAttributes:
        """Attributes of the apex, as a one-row attribute set."""


class SphereSurface(ParametricSurface):
    """
    UV sphere. ``u`` is latitude (theta in [0, pi], north pole first) and
    ``v`` is longitude (phi in [0, 2pi]).
    """

    def __init__(self, radius: float, lat_bands: int, long_bands: int) -> None:
        self.radius = require_positive("radius", radius)
        self.lat_bands = require_count("lat_bands", lat_bands)
        self.long_bands = require_count("long_bands", long_bands)

    def evaluate(self, u: ArrayLike, v: ArrayLike) -> VertexAttributes:
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)

        theta = u * math.pi
        phi = v * TWO_PI
        sin_t, cos_t = np.sin(theta), np.cos(theta)
        sin_p, cos_p = np.sin(phi), np.cos(phi)

        normals = _stack(sin_t * cos_p, cos_t, sin_t * sin_p)
        return VertexAttributes(
            positions=normals * self.radius,
            normals=normals,
            uvs=_stack(v, u),
            tangents=_stack(-sin_p, np.zeros_like(phi), cos_p),
        )


class CylinderSurface(ParametricSurface):
    """
    Open cylinder side wall (no caps). ``u`` is the angle around the Y
    axis, ``v`` selects the ring: 0 is the bottom, 1 the top.
    """

    def __init__(self, radius: float, height: float, segments: int) -> None:
        self.radius = require_positive("radius", radius)
        self.height = require_positive("height", height)
        self.segments = require_count("segments", segments)

    def evaluate(self, u: ArrayLike, v: ArrayLike) -> VertexAttributes:
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)

        theta = u * TWO_PI
        sin_t, cos_t = np.sin(theta), np.cos(theta)
        y = (v - 0.5) * self.height
        zeros = np.zeros_like(theta)

        return VertexAttributes(
            positions=_stack(self.radius * cos_t, y, self.radius * sin_t),
            normals=_stack(cos_t, zeros, sin_t),
            uvs=_stack(u, v),
            tangents=_stack(-sin_t, zeros, cos_t),
        )


class ConeSurface(FanSurface):
    """
    Cone side surface (no base cap). ``u`` is the angle around the Y axis,
    ``v`` runs up the slant from the base ring (0) to the apex (1).

    Side normals are the exact slant normal, constant along ``v``.
    """

    def __init__(self, radius: float, height: float, segments: int) -> None:
        self.radius = require_positive("radius", radius)
        self.height = require_positive("height", height)
        self.segments = require_count("segments", segments)

    @property
    def slant(self) -> float:
        return math.hypot(self.radius, self.height)

    def evaluate(self, u: ArrayLike, v: ArrayLike) -> VertexAttributes:
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)

        theta = u * TWO_PI
        sin_t, cos_t = np.sin(theta), np.cos(theta)
        ring = self.radius * (1.0 - v)
        y = v * self.height - 0.5 * self.height
        zeros = np.zeros_like(theta)

        slant = self.slant
        normals = _stack(
            self.height * cos_t / slant,
            np.full_like(theta, self.radius / slant),
            self.height * sin_t / slant,
        )

        return VertexAttributes(
            positions=_stack(ring * cos_t, y, ring * sin_t),
            normals=normals,
            uvs=_stack(u, v),
            tangents=_stack(-sin_t, zeros, cos_t),
        )

    def apex(self) -> VertexAttributes:
        return VertexAttributes(
            positions=np.array([[0.0, 0.5 * self.height, 0.0]]),
            normals=np.array([[0.0, 1.0, 0.0]]),
            uvs=np.array([[0.5, 1.0]]),
            tangents=np.array([[1.0, 0.0, 0.0]]),
        )


class TorusSurface(ParametricSurface):
    """
    Torus around the Y axis. ``u`` is the major-circle angle theta, ``v``
    the tube angle phi.
    """

    def __init__(
        self,
        major_radius: float,
        minor_radius: float,
        radial_segments: int,
        tubular_segments: int,
    ) -> None:
        self.major_radius = require_positive("major_radius", major_radius)
        self.minor_radius = require_positive("minor_radius", minor_radius)
        self.radial_segments = require_count("radial_segments", radial_segments)
        self.tubular_segments = require_count(
            "tubular_segments", tubular_segments
        )

    def evaluate(self, u: ArrayLike, v: ArrayLike) -> VertexAttributes:
        u = np.asarray(u, dtype=np.float64)
        v = np.asarray(v, dtype=np.float64)

        theta = u * TWO_PI
        phi = v * TWO_PI
        sin_t, cos_t = np.sin(theta), np.cos(theta)
        sin_p, cos_p = np.sin(phi), np.cos(phi)

        ring = self.major_radius + self.minor_radius * cos_p

        # The tangent follows the major circle only; it ignores the tube angle.
        return VertexAttributes(
            positions=_stack(ring * cos_t, self.minor_radius * sin_p, ring * sin_t),
            normals=_stack(cos_p * cos_t, sin_p, cos_p * sin_t),
            uvs=_stack(u, v),
            tangents=_stack(-sin_t, np.zeros_like(theta), cos_t),
        )
