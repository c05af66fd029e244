import pytest

from frac import Rational

R = Rational
Zero, One, Infinity = Rational.Zero, Rational.One, Rational.Infinity

def test_square_and_cube():
    assert R(48, 7).square() == R(2304, 49)
    assert R(48, 7).cube() == R(110592, 343)
    assert R(-2, 5).square() == R(4, 25)
    assert R(-2, 5).cube() == R(-8, 125)
    assert Infinity.square() == Infinity

def test_pow():
    assert R(49, 25).pow(0.5) == R(7, 5)
    assert R(1, 4).pow(0.5) == R(1, 2)
    assert R(2).pow(0.5) == R(1393, 985)
    assert R(7).pow(0.5) == R(2024, 765)
    assert R(7).pow(3) == 343
    assert R(1, 4).pow(-2) == 16
    assert R(7).pow(-2) == R(1, 49)
    assert R(2, 3).pow(2.0) == R(4, 9)
    # Left alone: zero to a negative power, infinity to a positive one
    assert Zero.pow(-2) == Zero
    assert Infinity.pow(0.5) == Infinity
    assert Infinity.pow(-2) == Zero
    assert R(2, 3)**0.5 == R(2, 3).pow(0.5)

def test_pow_negative_base():
    # Real part of the principal value
    assert R(-25, 49).pow(0.5) == Zero
    assert R(-2).pow(2) == 4
    assert R(-2).pow(3) == -8

def test_pow_c():
    assert R(49, 25).pow_c(0.5) == (R(7, 5), Zero)
    assert R(-25, 49).pow_c(0.5) == (Zero, R(5, 7))
    assert Infinity.pow_c(0.5) == (Infinity, Zero)
    assert Infinity.pow_c(-1) == (Zero, Zero)
    assert Zero.pow_c(-1) == (Zero, Zero)

def test_roots():
    assert R(49, 25).sqrt() == R(7, 5)
    assert R(2).sqrt() == R(1393, 985)
    assert R(-25, 49).sqrt() == Zero
    assert Infinity.sqrt() == Infinity
    assert R(-25, 49).sqrt_c() == (Zero, R(5, 7))
    assert R(49, 25).sqrt_c() == (R(7, 5), Zero)
    assert R(8, 27).cbrt() == R(2, 3)
    assert R(-8, 27).cbrt() == R(-2, 3)
    assert R(64).cbrt() == 4
    assert Infinity.cbrt() == Infinity

def test_perfect_powers():
    for r in (R(1, 4), R(49, 25), R(-25, 49), Zero, Infinity, R(9)):
        assert r.is_perfect_square()
    for r in (R(7), R(3, 2), R(8, 27)):
        assert not r.is_perfect_square()
    for r in (R(8, 27), R(-8, 27), Zero, Infinity, R(64)):
        assert r.is_perfect_cube()
    for r in (R(7), R(-25, 49), R(1, 4)):
        assert not r.is_perfect_cube()

def test_frexp():
    assert R(7).frexp() == (R(7, 8), 3)
    assert R(48, 7).frexp() == (R(6, 7), 3)
    assert R(1, 4).frexp() == (R(1, 2), -1)
    assert R(-2, 5).frexp() == (R(-4, 5), -1)
    assert Zero.frexp() == (Zero, 0)
    assert Infinity.frexp() == (Infinity, 0)

def test_ldexp():
    assert R(7).ldexp(-4) == R(7, 16)
    assert R(1, 4).ldexp(-4) == R(1, 64)
    assert R(2, 5).ldexp(3) == R(16, 5)
    assert Infinity.ldexp(3) == Infinity
    with pytest.raises(TypeError):
        R(1, 4).ldexp(1.5)

def test_simplify_root():
    assert R(56, 45).simplify_root(2) == (R(2, 3), R(14, 5))
    assert R(56, 45).simplify_sqrt() == (R(2, 3), R(14, 5))
    assert R(392, 10125).simplify_sqrt() == (R(14, 45), R(2, 5))
    assert R(392, 10125).simplify_cbrt() == (R(2, 15), R(49, 3))
    assert R(56, 135).simplify_cbrt() == (R(2, 3), R(7, 5))
    assert R(56, 45).simplify_cbrt() == (R(2), R(7, 45))
    assert R(8, 27).simplify_cbrt() == (R(2, 3), One)
    assert R(-25, 49).simplify_sqrt() == (R(5, 7), R(-1))
    assert R(25641, 76924).simplify_sqrt() == (R(3, 2), R(2849, 19231))
    assert R(7).simplify_sqrt() == (One, R(7))
    assert Zero.simplify_sqrt() == (One, Zero)
    assert Infinity.simplify_sqrt() == (One, Infinity)
    for r in (R(56, 45), R(392, 10125), R(-25, 49), R(8, 27)):
        for n in (2, 3):
            factor, remainder = r.simplify_root(n)
            assert factor**n*remainder == r
