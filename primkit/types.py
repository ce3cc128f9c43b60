# primkit/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

AABB = Tuple[Tuple[float, float, float], Tuple[float, float, float]]


class PrimitiveKind(StrEnum):
    SPHERE = "sphere"
    CYLINDER = "cylinder"
    CONE = "cone"
    TORUS = "torus"


class AttributeKind(StrEnum):
    POSITION = "position"
    NORMAL = "normal"
    UV = "uv"
    TANGENT = "tangent"


# Components per vertex for each attribute stream.
ATTRIBUTE_WIDTHS = {
    AttributeKind.POSITION: 3,
    AttributeKind.NORMAL: 3,
    AttributeKind.UV: 2,
    AttributeKind.TANGENT: 3,
}


@dataclass(frozen=True)
class VertexLayout:
    """Describes vertex attributes for VAO creation."""

    attributes: List[str]  # e.g. ["in_pos", "in_normal", "in_uv"]
    format: str  # moderngl buffer format string e.g. "3f 3f 2f"
    stride_bytes: int  # e.g. 32


@dataclass(frozen=True)
class MeshData:
    """Interleaved mesh payload, ready for a single-buffer GPU upload."""

    vertices: bytes
    vertex_layout: VertexLayout
    aabb: AABB
    indices: Optional[bytes] = None
    index_count: int = 0


@dataclass(frozen=True)
class TextureData:
    """Raw texture data and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # 3 (RGB) or 4 (RGBA)


@dataclass(frozen=True, eq=False)
class VertexAttributes:
    """
    Shared-vertex attribute set produced by sampling a surface.

    Row ``i`` of every array belongs to grid vertex ``i``; row order is the
    grid traversal order (outer loop x inner loop).
    """

    positions: NDArray[np.float64]  # (N, 3)
    normals: NDArray[np.float64]  # (N, 3)
    uvs: NDArray[np.float64]  # (N, 2)
    tangents: NDArray[np.float64]  # (N, 3)

    def __len__(self) -> int:
        return int(self.positions.shape[0])

    def concat(self, other: VertexAttributes) -> VertexAttributes:
        return VertexAttributes(
            positions=np.concatenate([self.positions, other.positions]),
            normals=np.concatenate([self.normals, other.normals]),
            uvs=np.concatenate([self.uvs, other.uvs]),
            tangents=np.concatenate([self.tangents, other.tangents]),
        )


@dataclass(frozen=True, eq=False)
class MeshBuffers:
    """
    Non-indexed attribute streams for one generated mesh.

    All four arrays are flat float32 with lengths 3n, 3n, 2n and 3n, where
    n is ``vertex_count``. Each consecutive group of three vertices is one
    triangle.
    """

    positions: NDArray[np.float32]
    normals: NDArray[np.float32]
    uvs: NDArray[np.float32]
    tangents: NDArray[np.float32]
    vertex_count: int

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3

    def stream(self, kind: AttributeKind | str) -> NDArray[np.float32]:
        """Return the flat array for one attribute stream."""
        kind = AttributeKind(kind)
        if kind is AttributeKind.POSITION:
            return self.positions
        if kind is AttributeKind.NORMAL:
            return self.normals
        if kind is AttributeKind.UV:
            return self.uvs
        return self.tangents

    def aabb(self) -> AABB:
        pts = self.positions.reshape(-1, 3)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return (
            (float(lo[0]), float(lo[1]), float(lo[2])),
            (float(hi[0]), float(hi[1]), float(hi[2])),
        )

    def interleaved(self) -> NDArray[np.float32]:
        """Pack the streams per vertex as pos(3) normal(3) uv(2) tangent(3)."""
        n = self.vertex_count
        out = np.empty((n, 11), dtype=np.float32)
        out[:, 0:3] = self.positions.reshape(n, 3)
        out[:, 3:6] = self.normals.reshape(n, 3)
        out[:, 6:8] = self.uvs.reshape(n, 2)
        out[:, 8:11] = self.tangents.reshape(n, 3)
        return out.reshape(-1)

    def to_mesh_data(self) -> MeshData:
        layout = VertexLayout(
            attributes=["in_pos", "in_normal", "in_uv", "in_tangent"],
            format="3f 3f 2f 3f",
            stride_bytes=11 * 4,
        )
        return MeshData(
            vertices=self.interleaved().tobytes(),
            vertex_layout=layout,
            aabb=self.aabb(),
        )
