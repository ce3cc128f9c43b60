# primkit/geometry/__init__.py
from primkit.geometry.expander import expand
from primkit.geometry.primitives import (
    build_mesh,
    cone,
    cylinder,
    generate,
    sphere,
    torus,
)
from primkit.geometry.sampler import (
    ConeSurface,
    CylinderSurface,
    FanSurface,
    ParametricSurface,
    SphereSurface,
    TorusSurface,
)
from primkit.geometry.topology import FanTopology, GridTopology, Topology

__all__ = [
    "ConeSurface",
    "CylinderSurface",
    "FanSurface",
    "FanTopology",
    "GridTopology",
    "ParametricSurface",
    "SphereSurface",
    "Topology",
    "TorusSurface",
    "build_mesh",
    "cone",
    "cylinder",
    "expand",
    "generate",
    "sphere",
    "torus",
]
