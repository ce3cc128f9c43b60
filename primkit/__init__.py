# primkit/__init__.py
from primkit.errors import InvalidParameterError, PrimkitError
from primkit.geometry import cone, cylinder, generate, sphere, torus
from primkit.settings import CheckerSettings, PrimitiveDefaults, PrimkitSettings
from primkit.types import (
    AttributeKind,
    MeshBuffers,
    MeshData,
    PrimitiveKind,
    TextureData,
    VertexAttributes,
    VertexLayout,
)

__all__ = [
    "AttributeKind",
    "CheckerSettings",
    "InvalidParameterError",
    "MeshBuffers",
    "MeshData",
    "PrimitiveDefaults",
    "PrimitiveKind",
    "PrimkitError",
    "PrimkitSettings",
    "TextureData",
    "VertexAttributes",
    "VertexLayout",
    "cone",
    "cylinder",
    "generate",
    "sphere",
    "torus",
]
