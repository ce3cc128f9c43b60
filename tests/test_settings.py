import pytest

from primkit.settings import PrimitiveDefaults, PrimkitSettings, TorusDefaults
from primkit.types import PrimitiveKind


def test_defaults_match_builder_signatures():
    defaults = PrimitiveDefaults()

    assert defaults.params("sphere") == {"radius": 0.5, "lat_bands": 24, "long_bands": 24}
    assert defaults.params(PrimitiveKind.CYLINDER) == {
        "radius": 0.3,
        "height": 0.8,
        "segments": 32,
    }
    assert defaults.params("cone") == {"radius": 0.4, "height": 0.7, "segments": 32}
    assert defaults.params("torus") == {
        "major_radius": 0.25,
        "minor_radius": 0.1,
        "radial_segments": 32,
        "tubular_segments": 24,
    }


def test_params_returns_a_copy():
    defaults = PrimitiveDefaults(torus=TorusDefaults(radial_segments=3))
    params = defaults.params("torus")
    params["radial_segments"] = 99

    assert defaults.torus.radial_segments == 3


def test_master_settings():
    settings = PrimkitSettings()
    assert settings.checker.size == 256
    assert settings.checker.tiles == 8


def test_unknown_kind():
    with pytest.raises(ValueError):
        PrimitiveDefaults().params("pyramid")
