import math

import numpy as np
import pytest

from primkit.errors import InvalidParameterError
from primkit.geometry.sampler import (
    ConeSurface,
    CylinderSurface,
    SphereSurface,
    TorusSurface,
)


def test_sphere_poles_and_equator():
    s = SphereSurface(2.0, 4, 4)
    attrs = s.evaluate([0.0, 0.5, 1.0], [0.0, 0.0, 0.0])

    np.testing.assert_allclose(attrs.positions[0], (0.0, 2.0, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.positions[1], (2.0, 0.0, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.positions[2], (0.0, -2.0, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.normals, attrs.positions / 2.0)


def test_sphere_uv_is_longitude_then_latitude():
    attrs = SphereSurface(1.0, 2, 2).evaluate([0.25], [0.75])
    np.testing.assert_allclose(attrs.uvs[0], (0.75, 0.25))


def test_sphere_tangent_follows_longitude():
    phi = 0.3
    attrs = SphereSurface(1.0, 2, 2).evaluate([0.5], [phi / (2 * math.pi)])
    np.testing.assert_allclose(
        attrs.tangents[0], (-math.sin(phi), 0.0, math.cos(phi)), atol=1e-12
    )


def test_cylinder_rings():
    attrs = CylinderSurface(1.5, 3.0, 8).evaluate([0.0, 0.0], [0.0, 1.0])

    np.testing.assert_allclose(attrs.positions[0], (1.5, -1.5, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.positions[1], (1.5, 1.5, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.normals[0], (1.0, 0.0, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.uvs, [(0.0, 0.0), (0.0, 1.0)])


def test_cone_slant_normal_is_unit_and_outward():
    cone = ConeSurface(0.4, 0.7, 16)
    u = np.linspace(0.0, 1.0, 17)
    attrs = cone.evaluate(u, np.zeros_like(u))

    lengths = np.linalg.norm(attrs.normals, axis=1)
    np.testing.assert_allclose(lengths, 1.0, atol=1e-12)

    radial = attrs.positions[:, [0, 2]]
    assert np.all(np.sum(radial * attrs.normals[:, [0, 2]], axis=1) > 0)
    np.testing.assert_allclose(attrs.normals[:, 1], 0.4 / math.hypot(0.4, 0.7))


def test_cone_apex():
    apex = ConeSurface(0.4, 0.7, 16).apex()

    assert len(apex) == 1
    np.testing.assert_allclose(apex.positions[0], (0.0, 0.35, 0.0))
    np.testing.assert_allclose(apex.normals[0], (0.0, 1.0, 0.0))
    np.testing.assert_allclose(apex.uvs[0], (0.5, 1.0))


def test_torus_outer_and_inner_equator():
    t = TorusSurface(1.0, 0.25, 8, 8)
    attrs = t.evaluate([0.0, 0.0], [0.0, 0.5])

    np.testing.assert_allclose(attrs.positions[0], (1.25, 0.0, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.positions[1], (0.75, 0.0, 0.0), atol=1e-12)
    np.testing.assert_allclose(attrs.normals[1], (-1.0, 0.0, 0.0), atol=1e-12)


def test_torus_uv_is_major_then_tube():
    attrs = TorusSurface(1.0, 0.25, 8, 8).evaluate([0.125], [0.5])
    np.testing.assert_allclose(attrs.uvs[0], (0.125, 0.5))


@pytest.mark.parametrize(
    "factory",
    [
        lambda: SphereSurface(0.0, 4, 4),
        lambda: SphereSurface(1.0, 0, 4),
        lambda: SphereSurface(1.0, 4, -2),
        lambda: CylinderSurface(-1.0, 1.0, 4),
        lambda: CylinderSurface(1.0, 0.0, 4),
        lambda: ConeSurface(1.0, 1.0, 0),
        lambda: TorusSurface(1.0, float("nan"), 4, 4),
        lambda: TorusSurface(1.0, 0.5, 4, 2.5),
        lambda: SphereSurface(1.0, True, 4),
    ],
)
def test_invalid_parameters_rejected(factory):
    with pytest.raises(InvalidParameterError):
        factory()


def test_invalid_parameter_error_names_the_parameter():
    with pytest.raises(InvalidParameterError, match="height") as exc:
        CylinderSurface(1.0, -2.0, 4)

    assert exc.value.name == "height"
    assert isinstance(exc.value, ValueError)


ANGLES = np.array([0.0, 0.1, 0.25, 0.5, 0.8, 1.0])


def around_y(u):
    theta = u * 2 * math.pi
    return np.stack([-np.sin(theta), np.zeros_like(theta), np.cos(theta)], axis=-1)


@pytest.mark.parametrize("v", [0.0, 1.0])
def test_cylinder_tangent_follows_angle(v):
    attrs = CylinderSurface(0.5, 2.0, 8).evaluate(ANGLES, np.full_like(ANGLES, v))
    np.testing.assert_allclose(attrs.tangents, around_y(ANGLES), atol=1e-12)


def test_cone_ring_tangents_and_uvs():
    attrs = ConeSurface(0.4, 0.7, 8).evaluate(ANGLES, np.zeros_like(ANGLES))

    np.testing.assert_allclose(attrs.tangents, around_y(ANGLES), atol=1e-12)
    np.testing.assert_allclose(attrs.uvs[:, 0], ANGLES)
    np.testing.assert_allclose(attrs.uvs[:, 1], 0.0)
    np.testing.assert_allclose(attrs.positions[:, 1], -0.35)


def test_cone_apex_tangent():
    apex = ConeSurface(0.4, 0.7, 8).apex()
    np.testing.assert_allclose(apex.tangents[0], (1.0, 0.0, 0.0))


def test_torus_tangent_follows_major_circle():
    t = TorusSurface(1.0, 0.25, 8, 8)
    attrs = t.evaluate(ANGLES, np.full_like(ANGLES, 0.3))
    np.testing.assert_allclose(attrs.tangents, around_y(ANGLES), atol=1e-12)


def test_torus_tangent_ignores_tube_angle():
    t = TorusSurface(1.0, 0.25, 8, 8)
    v = np.linspace(0.0, 1.0, 9)
    attrs = t.evaluate(np.full_like(v, 0.2), v)

    np.testing.assert_allclose(attrs.tangents, np.tile(attrs.tangents[0], (9, 1)))
    np.testing.assert_allclose(attrs.tangents[0], around_y(np.array([0.2]))[0], atol=1e-12)
