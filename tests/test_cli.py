import pytest
from PIL import Image

from primkit.__main__ import main


def test_cli_summary(capsys):
    assert main(["cylinder", "-p", "segments=4", "-p", "height=2", "-p", "radius=1"]) == 0

    out = capsys.readouterr().out
    assert "[cylinder] 24 vertices (8 triangles)" in out
    assert "Bounds Y:   -1.000 to 1.000" in out


def test_cli_writes_files(tmp_path, capsys):
    obj = tmp_path / "cone.obj"
    png = tmp_path / "checker.png"

    main(
        [
            "cone",
            "--param",
            "segments=6",
            "--obj",
            str(obj),
            "--checker",
            str(png),
            "--checker-size",
            "16",
            "--checker-tiles",
            "4",
        ]
    )

    lines = obj.read_text().splitlines()
    assert sum(1 for line in lines if line.startswith("f ")) == 6
    with Image.open(png) as img:
        assert img.size == (16, 16)


@pytest.mark.parametrize(
    "argv",
    [
        ["sphere", "-p", "radius=-1"],
        ["sphere", "-p", "radius"],
        ["sphere", "-p", "radius=big"],
        ["torus", "-p", "segments=3"],
        ["cube"],
    ],
)
def test_cli_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
