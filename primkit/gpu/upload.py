# primkit/gpu/upload.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

import moderngl
import numpy as np
from numpy.typing import NDArray

from primkit.types import ATTRIBUTE_WIDTHS, AttributeKind, MeshBuffers

logger = logging.getLogger(__name__)

# Shader input names each stream binds to.
ATTRIBUTE_NAMES: Dict[AttributeKind, str] = {
    AttributeKind.POSITION: "in_pos",
    AttributeKind.NORMAL: "in_normal",
    AttributeKind.UV: "in_uv",
    AttributeKind.TANGENT: "in_tangent",
}


@dataclass(slots=True)
class GpuMesh:
    """GPU-side primitive: one buffer per attribute stream."""

    vbo: moderngl.Buffer
    nbo: moderngl.Buffer
    uvbo: moderngl.Buffer
    tbo: moderngl.Buffer
    vertex_count: int
    label: str = ""
    vao_cache: Dict[int, moderngl.VertexArray] = field(default_factory=dict)

    def buffer(self, kind: AttributeKind | str) -> moderngl.Buffer:
        kind = AttributeKind(kind)
        if kind is AttributeKind.POSITION:
            return self.vbo
        if kind is AttributeKind.NORMAL:
            return self.nbo
        if kind is AttributeKind.UV:
            return self.uvbo
        return self.tbo

    def vertex_array(
        self, ctx: moderngl.Context, program: moderngl.Program
    ) -> moderngl.VertexArray:
        """Create or reuse a VAO binding the streams `program` consumes."""
        key = id(program)

        vao = self.vao_cache.get(key)
        if vao is not None:
            return vao

        program_attribs = set()
        for name in program:
            if isinstance(program[name], moderngl.Attribute):
                program_attribs.add(name)

        content = []
        for kind, attr_name in ATTRIBUTE_NAMES.items():
            if attr_name in program_attribs:
                fmt = f"{ATTRIBUTE_WIDTHS[kind]}f"
                content.append((self.buffer(kind), fmt, attr_name))

        if not content:
            raise RuntimeError(
                f"No compatible vertex attributes between mesh '{self.label}' "
                f"and program {id(program)}"
            )

        vao = ctx.vertex_array(program, content)
        self.vao_cache[key] = vao
        return vao

    def release(self) -> None:
        for vao in self.vao_cache.values():
            vao.release()
        self.vao_cache.clear()
        for buf in (self.vbo, self.nbo, self.uvbo, self.tbo):
            buf.release()


def upload_stream(
    ctx: moderngl.Context, kind: AttributeKind | str, data: NDArray[np.float32]
) -> moderngl.Buffer:
    """Upload one flat float32 attribute stream as a static buffer."""
    kind = AttributeKind(kind)
    buf = ctx.buffer(data.tobytes())
    logger.debug("uploaded %s stream (%d bytes)", kind, data.nbytes)
    return buf


def upload_mesh(ctx: moderngl.Context, mesh: MeshBuffers, *, label: str = "") -> GpuMesh:
    """
    Upload a finished mesh, one buffer per stream in the order position,
    normal, uv, tangent.
    """
    buffers = {
        kind: upload_stream(ctx, kind, mesh.stream(kind)) for kind in AttributeKind
    }
    return GpuMesh(
        vbo=buffers[AttributeKind.POSITION],
        nbo=buffers[AttributeKind.NORMAL],
        uvbo=buffers[AttributeKind.UV],
        tbo=buffers[AttributeKind.TANGENT],
        vertex_count=mesh.vertex_count,
        label=label,
    )
