import numpy as np
import pytest

from vecproj.lib.linalg import (
    DegenerateBasisError,
    Vector2D,
    Vector3D,
    Vector4D,
    ZeroVectorError,
    decompose,
    dot,
    project,
    project_unit,
    reject,
    scalar_component,
)
from vecproj.lib.utils.demo_data import random_vector

TOL = 1e-5


def _random_pairs(n=25, seed=0):
    rng = np.random.default_rng(seed)
    for cls in (Vector2D, Vector3D, Vector4D):
        for _ in range(n):
            yield random_vector(rng, cls, -10.0, 10.0), random_vector(rng, cls, -10.0, 10.0)


def test_projection_is_not_commutative():
    a = Vector3D(1.0, 1.0, 0.0)
    b = Vector3D(1.0, 0.0, 0.0)
    assert project(a, b) == Vector3D(1.0, 0.0, 0.0)
    assert project(b, a) == Vector3D(0.5, 0.5, 0.0)
    assert project(a, b) != project(b, a)


def test_projection_is_multiple_of_basis():
    for a, b in _random_pairs():
        k = dot(a, b) / dot(b, b)
        assert project(a, b).approx_equal(k * b, TOL)


def test_rejection_is_perpendicular_to_basis():
    for a, b in _random_pairs():
        scale = max(1.0, a.magnitude() * b.magnitude())
        assert abs(dot(reject(a, b), b)) <= TOL * scale


def test_projection_plus_rejection_recovers_vector():
    for a, b in _random_pairs():
        assert (project(a, b) + reject(a, b)).approx_equal(a, TOL)


def test_cart_on_track_keeps_only_track_component():
    push = Vector3D(2.5, -1.0, 3.0)
    track = Vector3D(1.0, 0.0, 0.0)
    assert project(push, track) == Vector3D(2.5, 0.0, 0.0)
    # pushing at a right angle to the track does nothing
    assert project(Vector3D(0.0, 4.0, -2.0), track) == Vector3D()


def test_projection_of_parallel_vector_is_itself():
    b = Vector2D(3.0, -4.0)
    a = 2.0 * b
    assert project(a, b).approx_equal(a)
    assert reject(a, b).approx_equal(Vector2D())


def test_zero_basis_is_rejected():
    a = Vector3D(1.0, 2.0, 3.0)
    zero = Vector3D(0.0, 0.0, 0.0)
    with pytest.raises(DegenerateBasisError):
        project(a, zero)
    with pytest.raises(DegenerateBasisError):
        reject(a, zero)
    with pytest.raises(DegenerateBasisError):
        scalar_component(a, zero)
    with pytest.raises(ValueError):
        decompose(a, zero)
    assert not issubclass(DegenerateBasisError, ZeroVectorError)


def test_zero_vector_projects_to_zero():
    b = Vector4D(1.0, 2.0, 3.0, 4.0)
    assert project(Vector4D(), b) == Vector4D()


def test_mismatched_dimensions_raise():
    with pytest.raises(TypeError):
        project(Vector2D(1.0, 2.0), Vector3D(1.0, 2.0, 3.0))


def test_project_unit_matches_project_for_unit_basis():
    a = Vector3D(3.0, 4.0, 5.0)
    b_hat = Vector3D(0.0, 1.0, 0.0)
    assert project_unit(a, b_hat) == Vector3D(0.0, 4.0, 0.0)
    b = Vector3D(1.0, 2.0, 2.0)
    assert project_unit(a, b.normalize()).approx_equal(project(a, b))


def test_scalar_component():
    assert scalar_component(Vector3D(3.0, 4.0, 0.0), Vector3D(2.0, 0.0, 0.0)) == pytest.approx(3.0)
    assert scalar_component(Vector2D(-1.0, 5.0), Vector2D(1.0, 0.0)) == pytest.approx(-1.0)


def test_decompose_splits_into_parts():
    parallel, perp = decompose(Vector3D(1.0, 1.0, 0.0), Vector3D(1.0, 0.0, 0.0))
    assert parallel == Vector3D(1.0, 0.0, 0.0)
    assert perp == Vector3D(0.0, 1.0, 0.0)


def test_tiny_nonzero_basis_is_not_degenerate():
    a = Vector3D(1.0, 0.0, 0.0)
    b = Vector3D(1e-30, 0.0, 0.0)
    assert project(a, b).approx_equal(Vector3D(1.0, 0.0, 0.0))
    assert reject(a, b).approx_equal(Vector3D())
    assert scalar_component(a, b) == pytest.approx(1.0)
