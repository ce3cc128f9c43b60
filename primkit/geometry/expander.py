# primkit/geometry/expander.py
from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from primkit.types import MeshBuffers, VertexAttributes


def expand(attributes: VertexAttributes, indices: ArrayLike) -> MeshBuffers:
    """
    Flatten a shared-vertex attribute set into non-indexed streams.

    Each index, in order, copies its vertex's attributes into the next
    output slot, so every triangle owns three contiguous vertices.

    Raises:
        ValueError: if the index list does not describe whole triangles.
    """
    idx = np.asarray(indices, dtype=np.int64).reshape(-1)
    if idx.size % 3 != 0:
        raise ValueError(
            f"Index count must be a multiple of 3, got {idx.size}"
        )

    def gather(values: np.ndarray) -> np.ndarray:
        return np.ascontiguousarray(values[idx], dtype=np.float32).reshape(-1)

    return MeshBuffers(
        positions=gather(attributes.positions),
        normals=gather(attributes.normals),
        uvs=gather(attributes.uvs),
        tangents=gather(attributes.tangents),
        vertex_count=int(idx.size),
    )
