# primkit/gpu/manager.py
from __future__ import annotations

import logging
from typing import Any, Dict, NewType, Optional

import moderngl

from primkit.geometry.primitives import generate
from primkit.gpu.upload import GpuMesh, upload_mesh
from primkit.settings import PrimkitSettings
from primkit.types import PrimitiveKind

logger = logging.getLogger(__name__)

MeshId = NewType("MeshId", str)


class PrimitiveMeshManager:
    """Generates, uploads and caches primitive meshes for one GL context."""

    def __init__(
        self, gl: moderngl.Context, settings: Optional[PrimkitSettings] = None
    ) -> None:
        self._gl = gl
        self._settings = settings or PrimkitSettings()
        self._meshes: Dict[MeshId, GpuMesh] = {}

    def load_defaults(self) -> None:
        """Register one mesh per primitive kind as ``primkit.<kind>``."""
        for kind in PrimitiveKind:
            self.create(MeshId(f"primkit.{kind}"), kind, label=kind.title())

    def create(
        self,
        mesh_id: MeshId,
        kind: PrimitiveKind | str,
        *,
        label: str = "",
        **params: Any,
    ) -> GpuMesh:
        """Generate a primitive and store its GPU buffers under mesh_id."""
        if mesh_id in self._meshes:
            raise KeyError(f"Mesh '{mesh_id}' already exists")

        mesh = generate(kind, params, defaults=self._settings.primitives)
        handle = upload_mesh(self._gl, mesh, label=label or str(mesh_id))

        self._meshes[mesh_id] = handle
        logger.info(
            "created mesh '%s' (%s, %d vertices)", mesh_id, kind, mesh.vertex_count
        )
        return handle

    def get(self, mesh_id: MeshId) -> GpuMesh:
        """Retrieve an existing mesh handle."""
        try:
            return self._meshes[mesh_id]
        except KeyError:
            raise KeyError(f"Mesh '{mesh_id}' not found")

    def __contains__(self, mesh_id: MeshId) -> bool:
        return mesh_id in self._meshes

    def release(self) -> None:
        for handle in self._meshes.values():
            handle.release()
        self._meshes.clear()
