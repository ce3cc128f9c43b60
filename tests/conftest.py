import pytest


class FakeBuffer:
    def __init__(self, data: bytes):
        self.data = data
        self.released = False

    def release(self):
        self.released = True


class FakeTexture:
    def __init__(self, size, components, data):
        self.size = size
        self.components = components
        self.data = data
        self.filter = None
        self.repeat_x = False
        self.repeat_y = False
        self.mipmaps = False

    def build_mipmaps(self):
        self.mipmaps = True


class FakeVertexArray:
    def __init__(self, program, content):
        self.program = program
        self.content = content
        self.released = False

    def release(self):
        self.released = True


class FakeContext:
    """Records the calls the GPU helpers make on a moderngl.Context."""

    def __init__(self):
        self.buffers = []
        self.textures = []
        self.vertex_arrays = []

    def buffer(self, data):
        buf = FakeBuffer(data)
        self.buffers.append(buf)
        return buf

    def texture(self, size, components, data=None):
        tex = FakeTexture(size, components, data)
        self.textures.append(tex)
        return tex

    def vertex_array(self, program, content):
        vao = FakeVertexArray(program, content)
        self.vertex_arrays.append(vao)
        return vao


@pytest.fixture
def ctx():
    """Returns a fresh recording context for each test."""
    return FakeContext()
