# primkit/export.py
from __future__ import annotations

import logging
from pathlib import Path

from primkit.types import MeshBuffers

logger = logging.getLogger(__name__)


def save_obj(path: str | Path, mesh: MeshBuffers, name: str = "primitive") -> Path:
    """
    Write the expanded stream as Wavefront OBJ.

    Vertices are written exactly as streamed (no welding), so vertex i,
    texcoord i and normal i line up and face k is vertices 3k..3k+2.
    """
    path = Path(path)
    n = mesh.vertex_count
    positions = mesh.positions.reshape(n, 3)
    uvs = mesh.uvs.reshape(n, 2)
    normals = mesh.normals.reshape(n, 3)

    with open(path, "w", encoding="utf-8") as f:
        f.write(f"o {name}\n")
        for x, y, z in positions:
            f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")
        for u, v in uvs:
            f.write(f"vt {u:.6f} {v:.6f}\n")
        for nx, ny, nz in normals:
            f.write(f"vn {nx:.6f} {ny:.6f} {nz:.6f}\n")
        for tri in range(mesh.triangle_count):
            a, b, c = (3 * tri + k + 1 for k in range(3))
            f.write(f"f {a}/{a}/{a} {b}/{b}/{b} {c}/{c}/{c}\n")

    logger.debug("wrote %d triangles to %s", mesh.triangle_count, path)
    return path
