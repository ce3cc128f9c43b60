# primkit/gpu/__init__.py
from primkit.gpu.manager import MeshId, PrimitiveMeshManager
from primkit.gpu.textures import (
    TextureHandle,
    checker_pixels,
    checker_texture_data,
    create_checker_texture,
    save_checker_png,
)
from primkit.gpu.upload import GpuMesh, upload_mesh

__all__ = [
    "GpuMesh",
    "MeshId",
    "PrimitiveMeshManager",
    "TextureHandle",
    "checker_pixels",
    "checker_texture_data",
    "create_checker_texture",
    "save_checker_png",
    "upload_mesh",
]
