import math
import pytest
from lds import vdc, VanDerCorput, Circle2D, Disk, Halton, Sphere3D, Hopf4D


def test_vdc_base2_digits_reversed():
    assert vdc(1, 2) == 0.5
    assert vdc(2, 2) == 0.25
    assert vdc(3, 2) == 0.75
    assert vdc(11, 2) == pytest.approx(0.8125)  # 1011 -> 0.1101


def test_vdc_in_unit_interval():
    for base in (2, 3, 5, 7, 10):
        for k in range(1, 500):
            v = vdc(k, base)
            assert 0.0 <= v < 1.0


def test_vdc_zero_index():
    assert vdc(0, 3) == 0.0


def test_vdcorput_pop_and_reseed():
    gen = VanDerCorput(2)
    assert gen.pop() == 0.5
    assert gen.pop() == 0.25
    gen.reseed(0)
    assert gen.pop() == 0.5
    gen.reseed(10)
    assert gen.pop() == vdc(11, 2)
    assert gen.base == 2


def test_circle():
    cgen = Circle2D(2)
    x, y = cgen.pop()
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(-1.0)


def test_circle_unit_norm():
    cgen = Circle2D(3)
    for _ in range(200):
        x, y = cgen.pop()
        assert x * x + y * y == pytest.approx(1.0)


def test_disk_inside_unit_disk():
    dgen = Disk([2, 3])
    x, y = dgen.pop()
    # theta = pi, radius = sqrt(1/3)
    assert y == pytest.approx(-math.sqrt(1.0 / 3.0))
    for _ in range(200):
        x, y = dgen.pop()
        assert x * x + y * y < 1.0


def test_halton():
    hgen = Halton([2, 3])
    assert hgen.pop() == (0.5, 1.0 / 3.0)
    assert hgen.pop() == (0.25, 2.0 / 3.0)


def test_halton_reseed_applies_to_both_axes():
    hgen = Halton([2, 3])
    hgen.reseed(5)
    assert hgen.pop() == (vdc(6, 2), vdc(6, 3))


def test_sphere():
    sgen = Sphere3D([2, 3])
    s0, s1, s2 = sgen.pop()
    assert s0 == pytest.approx(0.8660254038)
    assert s2 == pytest.approx(0.0)


def test_sphere_unit_norm():
    sgen = Sphere3D([2, 3])
    for _ in range(200):
        p = sgen.pop()
        assert sum(c * c for c in p) == pytest.approx(1.0)


def test_sphere3_hopf():
    shfgen = Hopf4D([2, 3, 5])
    s0, s1, s2, s3 = shfgen.pop()
    assert s0 == pytest.approx(-0.2236067977)


def test_sphere3_hopf_unit_norm():
    shfgen = Hopf4D([2, 3, 5])
    for _ in range(200):
        p = shfgen.pop()
        assert sum(c * c for c in p) == pytest.approx(1.0)


def test_fresh_generators_agree():
    a = Sphere3D([2, 3])
    b = Sphere3D([2, 3])
    for _ in range(50):
        assert a.pop() == b.pop()


def test_reseed_is_a_pure_reset():
    a = Hopf4D([2, 3, 5])
    for _ in range(17):
        a.pop()
    a.reseed(3)
    b = Hopf4D([2, 3, 5])
    b.reseed(3)
    for _ in range(10):
        assert a.pop() == b.pop()
