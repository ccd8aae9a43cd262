import numpy as np
import pytest
from lds import (
    SequenceParams,
    generate_points,
    make_generator,
    sample,
    Circle2D,
    CylinN,
    Hopf4D,
    SphereN,
    VanDerCorput,
)


def test_make_generator_kinds():
    assert isinstance(make_generator("vdc", [2]), VanDerCorput)
    assert isinstance(make_generator("circle", [5, 7]), Circle2D)
    assert isinstance(make_generator("sphere3_hopf", [2, 3, 5]), Hopf4D)
    assert isinstance(make_generator("CYLIN_N", [2, 3, 5]), CylinN)
    assert isinstance(make_generator("sphere_n", [2, 3, 5, 7]), SphereN)


def test_make_generator_rejects_bad_input():
    with pytest.raises(ValueError):
        make_generator("torus", [2, 3])
    with pytest.raises(ValueError):
        make_generator("sphere", [2])
    with pytest.raises(ValueError):
        make_generator("sphere_n", [2])


def test_sample_shapes():
    assert sample(VanDerCorput(2), 8).shape == (8,)
    pts = sample(make_generator("sphere_n", [2, 3, 5, 7]), 16)
    assert pts.shape == (16, 5)
    assert np.allclose(np.sum(pts * pts, axis=1), 1.0)


def test_generate_points_default_is_2d_halton():
    pts = generate_points(count=4)
    assert pts.shape == (4, 2)
    assert pts[0, 0] == 0.5
    assert pts[0, 1] == pytest.approx(1.0 / 3.0)


def test_generate_points_seed_offsets_sequence():
    full = generate_points(SequenceParams(kind="cylin_n", dim=3, count=20))
    tail = generate_points(SequenceParams(kind="cylin_n", dim=3, count=10, seed=10))
    assert full.shape == (20, 4)
    assert np.array_equal(full[10:], tail)


def test_generate_points_halton_n_uses_primes():
    pts = generate_points(SequenceParams(kind="halton_n", dim=4, count=1))
    assert np.allclose(pts[0], [0.5, 1.0 / 3.0, 0.2, 1.0 / 7.0])


def test_generate_points_explicit_bases():
    pts = generate_points(kind="sphere_n", bases=[2, 3, 5, 7], count=1)
    assert pts[0, 0] == pytest.approx(0.6092711237)


def test_generate_points_vdc():
    pts = generate_points(kind="vdc", bases=[2], count=3)
    assert np.array_equal(pts, [0.5, 0.25, 0.75])


def test_generate_points_zero_count():
    pts = generate_points(kind="sphere", count=0)
    assert pts.shape == (0, 3)


def test_generate_points_validation():
    with pytest.raises(ValueError):
        generate_points(kind="sphere_n", dim=1)
    with pytest.raises(ValueError):
        generate_points(kind="halton", bases=[1, 3])
    with pytest.raises(ValueError):
        generate_points(count=-1)
    with pytest.raises(ValueError):
        generate_points(seed=-3)
    with pytest.raises(ValueError):
        generate_points(kind="cube")


def test_generate_points_verbose(capsys):
    generate_points(kind="disk", count=5, verbose=True)
    out = capsys.readouterr().out
    assert "disk" in out
    assert "5 points" in out


def test_params_resolved_bases():
    assert SequenceParams(kind="sphere3").resolved_bases() == [2, 3, 5]
    assert SequenceParams(kind="cylin_n", dim=5).resolved_bases() == [2, 3, 5, 7, 11]
    assert SequenceParams(kind="circle", bases=[7, 11]).resolved_bases() == [7]
    d = SequenceParams(kind="halton_n", dim=3).as_dict()
    assert d["kind"] == "halton_n"
    assert d["dim"] == 3


def test_generate_points_sphere_n_two_bases():
    pts = generate_points(kind="sphere_n", dim=2, count=8)
    assert pts.shape == (8, 3)
    assert np.allclose(np.sum(pts * pts, axis=1), 1.0)
    assert SequenceParams(kind="sphere_n", dim=2).resolved_bases() == [2, 3]
