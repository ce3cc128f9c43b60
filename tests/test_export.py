from primkit.export import save_obj
from primkit.geometry.primitives import sphere


def test_save_obj_writes_unwelded_stream(tmp_path):
    mesh = sphere(1.0, 2, 3)
    path = save_obj(tmp_path / "sphere.obj", mesh, name="ball")

    lines = path.read_text().splitlines()
    assert lines[0] == "o ball"
    assert sum(1 for line in lines if line.startswith("v ")) == mesh.vertex_count
    assert sum(1 for line in lines if line.startswith("vt ")) == mesh.vertex_count
    assert sum(1 for line in lines if line.startswith("vn ")) == mesh.vertex_count

    faces = [line for line in lines if line.startswith("f ")]
    assert len(faces) == mesh.triangle_count
    assert faces[0] == "f 1/1/1 2/2/2 3/3/3"
    last = mesh.vertex_count
    assert faces[-1].endswith(f"{last}/{last}/{last}")
