# primkit/geometry/primitives.py
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from primkit.errors import InvalidParameterError
from primkit.geometry.expander import expand
from primkit.geometry.sampler import (
    ConeSurface,
    CylinderSurface,
    ParametricSurface,
    SphereSurface,
    TorusSurface,
)
from primkit.geometry.topology import FanTopology, GridTopology, Topology
from primkit.settings import PrimitiveDefaults
from primkit.types import MeshBuffers, PrimitiveKind

logger = logging.getLogger(__name__)


def build_mesh(surface: ParametricSurface, topology: Topology) -> MeshBuffers:
    """Sample `surface` over `topology`, triangulate, and expand to streams."""
    attributes = topology.sample(surface)
    indices = topology.indices()
    mesh = expand(attributes, indices)

    logger.debug(
        "built %s over %s: %d shared -> %d expanded vertices",
        type(surface).__name__,
        type(topology).__name__,
        len(attributes),
        mesh.vertex_count,
    )
    return mesh


def sphere(
    radius: float = 0.5, lat_bands: int = 24, long_bands: int = 24
) -> MeshBuffers:
    surface = SphereSurface(radius, lat_bands, long_bands)
    # Cells wind (first, first + 1, second); (first, second, first + 1) would face inward.
    return build_mesh(surface, GridTopology(surface.lat_bands, surface.long_bands))


def cylinder(
    radius: float = 0.3, height: float = 0.8, segments: int = 32
) -> MeshBuffers:
    surface = CylinderSurface(radius, height, segments)
    # Two vertices per angular sample: bottom ring then top ring.
    return build_mesh(surface, GridTopology(surface.segments, 1))


def cone(radius: float = 0.4, height: float = 0.7, segments: int = 32) -> MeshBuffers:
    surface = ConeSurface(radius, height, segments)
    return build_mesh(surface, FanTopology(surface.segments))


def torus(
    major_radius: float = 0.25,
    minor_radius: float = 0.1,
    radial_segments: int = 32,
    tubular_segments: int = 24,
) -> MeshBuffers:
    surface = TorusSurface(
        major_radius, minor_radius, radial_segments, tubular_segments
    )
    # Outward winding as for the sphere, not (first, second, first + 1).
    return build_mesh(
        surface, GridTopology(surface.radial_segments, surface.tubular_segments)
    )


BUILDERS: Dict[PrimitiveKind, Callable[..., MeshBuffers]] = {
    PrimitiveKind.SPHERE: sphere,
    PrimitiveKind.CYLINDER: cylinder,
    PrimitiveKind.CONE: cone,
    PrimitiveKind.TORUS: torus,
}


def parameter_names(kind: PrimitiveKind | str) -> tuple[str, ...]:
    """Keyword parameters accepted by `generate` for `kind`."""
    builder = BUILDERS[_as_kind(kind)]
    return tuple(inspect.signature(builder).parameters)


def generate(
    kind: PrimitiveKind | str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    defaults: Optional[PrimitiveDefaults] = None,
    **overrides: Any,
) -> MeshBuffers:
    """
    Generate the non-indexed mesh streams for one primitive.

    Parameters missing from `params` and `overrides` are taken from
    `defaults` (the stock `PrimitiveDefaults` when omitted).

    Raises:
        InvalidParameterError: unknown kind, unknown parameter name, or a
            parameter out of range. Nothing is sampled in that case.
    """
    kind = _as_kind(kind)
    defaults = defaults or PrimitiveDefaults()

    merged = defaults.params(kind)
    merged.update(params or {})
    merged.update(overrides)

    allowed = parameter_names(kind)
    for name in merged:
        if name not in allowed:
            raise InvalidParameterError(
                name, merged[name], f"not a {kind} parameter"
            )

    mesh = BUILDERS[kind](**merged)
    logger.debug("generated %s %s: %d triangles", kind, merged, mesh.triangle_count)
    return mesh


def _as_kind(kind: PrimitiveKind | str) -> PrimitiveKind:
    try:
        return PrimitiveKind(kind)
    except ValueError:
        raise InvalidParameterError(
            "kind", kind, f"expected one of {[k.value for k in PrimitiveKind]}"
        ) from None
