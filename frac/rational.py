'''
Provide exact rational numbers that interoperate with integers, floats
and mpmath objects.

A Rational is always kept in lowest terms with the sign carried by the
numerator, so two equal fractions always have the same numerator and
denominator.  A denominator of 0 is allowed and means infinity:  1/0 is
positive infinity and -1/0 negative infinity.  0/0 is not a number and
can't be made.

Arithmetic with an integer or another Rational is exact.  Arithmetic
with a float (or mpf) is done in floating point and the result is
turned back into a fraction with frac(), so it is only as good as the
tolerance.

The integer width, the tolerance used to approximate floats and the
floating point precision are properties of the class.  Rational has a
64 bit width and a tolerance of 1e-6; use Rational.kind() to get a
class with other settings.

Copyright (c) 2009, Don Peterson
Copyright (c) 2011, Vernon Mauery
All rights reserved.

Redistribution and use in source and binary forms, with or
without modification, are permitted provided that the following
conditions are met:

* Redistributions of source code must retain the above copyright
notice, this list of conditions and the following disclaimer.
* Redistributions in binary form must reproduce the above
copyright notice, this list of conditions and the following
disclaimer in the documentation and/or other materials provided
with the distribution.
* The names of the contributors may not be used to endorse or
promote products derived from this software without specific
prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
"AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT
OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE,
DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY
THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT
(INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
'''

import operator
from functools import reduce
from fractions import Fraction
from mpmath import mpf, mpc, inf, power, sqrt, cbrt, frexp, ldexp, \
    re, im, nint, workprec
from .integer import isint, gcd, int_range, check_width, extract_root_factor
from .approx import stern_brocot
from .debug import fln

class UndefinedFraction(ZeroDivisionError): pass

def isreal(x):
    return isinstance(x, float) or isinstance(x, mpf)

def _iterations(error_exp):
    '''Default limit on the Stern-Brocot search.  After k steps low and
    high are at most 1/k apart, so 1/tolerance steps are always enough.
    '''
    return 2*10**max(-error_exp, 0) + 100

def _fmod(x, y):
    'Remainder of x/y with the sign of x, as C does it.'
    if y == 0:
        raise ZeroDivisionError("%sFloat modulo by zero" % fln())
    r = abs(x) % abs(y)
    if x < 0:
        return -r
    return r

def _real_cbrt(x):
    'Real cube root; negative for negative x.'
    x = mpf(x)
    if x < 0:
        return -cbrt(-x)
    return cbrt(x)

_kinds = {}

class Rational(object):
    # The settings of a kind.  Don't change them here; get a new kind
    # with Rational.kind() instead.
    bits = 64               # Integer width, 0 for unlimited
    error_exp = -6          # Tolerance is 10**error_exp
    prec = 53               # Bits of floating point precision
    max_iterations = _iterations(error_exp)

    def __init__(self, a=0, b=1):
        if b == 1:
            if isinstance(a, Rational):
                # Copy construction
                a, b = a.n, a.d
            elif isinstance(a, Fraction):
                a, b = a.numerator, a.denominator
            elif isreal(a):
                r = self.frac(a)
                self.n, self.d, self.initial = r.n, r.d, r.initial
                return
        if not isint(a) or not isint(b):
            raise TypeError("%sCan't make a fraction from '%s' and '%s'" % \
                (fln(), str(a), str(b)))
        self.initial = (check_width(a, self.bits), check_width(b, self.bits))
        g = gcd(a, b)
        if g == 0:
            raise UndefinedFraction("%s0/0 is not a number" % fln())
        if b < 0:
            self.n = check_width(a//-g, self.bits)
        else:
            self.n = a//g
        self.d = check_width(abs(b)//g, self.bits)

    @classmethod
    def kind(cls, bits=64, error_exp=-6, prec=53, max_iterations=0):
        '''Return the Rational class with the given settings:

            bits            Width of the numerator and denominator.  If
                            0, they are unlimited python integers.
                            Otherwise a result that doesn't fit raises
                            IntegerOverflow.
            error_exp       Floats are approximated to within
                            10**error_exp.
            prec            Bits of precision for the floating point
                            arithmetic; 53 behaves like C doubles.
            max_iterations  Limit for the Stern-Brocot search.  If 0,
                            it is worked out from error_exp.

        Asking twice for the same settings gives the same class.  Each
        class has its own Zero, One and Infinity constants.
        '''
        int_range(bits)
        if not isint(error_exp):
            raise ValueError("%sError exponent must be an integer" % fln())
        if not isint(prec) or prec < 2:
            raise ValueError("%sPrecision must be an integer >= 2" % fln())
        if not isint(max_iterations) or max_iterations < 0:
            msg = "%sMaximum iterations must be an integer >= 0"
            raise ValueError(msg % fln())
        if not max_iterations:
            max_iterations = _iterations(error_exp)
        key = (bits, error_exp, prec, max_iterations)
        if key not in _kinds:
            settings = {
                "bits" : bits,
                "error_exp" : error_exp,
                "prec" : prec,
                "max_iterations" : max_iterations,
            }
            _kinds[key] = _constants(type("Rational", (Rational,), settings))
        return _kinds[key]

    @classmethod
    def frac(cls, x, digits=0, max_iterations=0):
        '''Converts a float or mpf to a Rational approximation using a
        Stern-Brocot search and returns a Rational object.  The search
        ends with the first fraction whose difference from x is no more
        than the class' tolerance.

        digits sets the tolerance to 10**(-digits).  If it is 0, then
        the class' error is used.

        Set max_iterations to a postive nonzero value to change the
        limit on the number of iterations.  NonConvergence is raised if
        no fraction is found within the limit.
        '''
        return stern_brocot(x, cls, digits, max_iterations)

    def _approx(self, op, x):
        '''Apply op to our value and x in floating point and convert the
        result back to a fraction.
        '''
        with workprec(self.prec):
            return self.frac(op(self.mpf(), mpf(x)))

    def _trunc(self):
        'Our value truncated towards zero, via floating point.'
        with workprec(self.prec):
            return check_width(int(self.mpf()), self.bits)

    def numer(self):
        return self.n

    def denom(self):
        return self.d

    def mpf(self):
        if self.d == 0:
            if self.n < 0:
                return -inf
            return inf
        return mpf(self.n)/mpf(self.d)

    def mpc(self):
        return mpc(self.mpf(), 0)

    def __float__(self):
        return float(self.mpf())

    def is_int(self):
        return self.d == 1

    def is_neg(self):
        return self.n < 0

    def __bool__(self):
        return self.n != 0

    def __abs__(self):
        return self.__class__(abs(self.n), self.d)

    def __pos__(self):
        return self.__class__(self)

    def __neg__(self):
        return self.__class__(-self.n, self.d)

    def invert(self):
        '1/self.  0 and infinity are each other\'s inverse.'
        return self.__class__(self.d, self.n)

    def inc(self):
        'Add one; the denominator is unchanged.'
        return self.__class__(self.n + self.d, self.d)

    def dec(self):
        'Subtract one; the denominator is unchanged.'
        return self.__class__(self.n - self.d, self.d)

    def __add__(self, other):
        if isinstance(other, Rational):
            return self.__class__(self.n*other.d + self.d*other.n,
                                  self.d*other.d)
        elif isint(other):
            check_width(other, self.bits)
            return self.__class__(self.n + self.d*other, self.d)
        elif isreal(other):
            if self.d == 0:
                return self
            return self._approx(operator.add, other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Rational) or isint(other) or isreal(other):
            return self + (-other)
        return NotImplemented

    def __rsub__(self, other):
        if isint(other) or isreal(other):
            return -self + other
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Rational):
            return self.__class__(self.n*other.n, self.d*other.d)
        elif isint(other):
            check_width(other, self.bits)
            return self.__class__(self.n*other, self.d)
        elif isreal(other):
            if self.d == 0:
                return self
            return self._approx(operator.mul, other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Rational):
            return self.__class__(self.n*other.d, self.d*other.n)
        elif isint(other):
            check_width(other, self.bits)
            return self.__class__(self.n, self.d*other)
        elif isreal(other):
            if self.d == 0:
                return self
            return self._approx(operator.truediv, other)
        return NotImplemented

    def __rtruediv__(self, other):
        if isint(other):
            check_width(other, self.bits)
            return self.__class__(other*self.d, self.n)
        elif isreal(other):
            if self.n == 0:
                return self.invert()
            with workprec(self.prec):
                return self.frac(mpf(other)*self.invert().mpf())
        return NotImplemented

    def __mod__(self, other):
        '''Remainder after truncating division, so it has our sign.
        Infinity when either side is infinite or the divisor is zero.
        '''
        if isinstance(other, Rational):
            if other.n == 0 or other.d == 0 or self.d == 0:
                return self.Infinity
            return self - (self/other)._trunc()*other
        elif isint(other):
            check_width(other, self.bits)
            if self.d == 0 or other == 0:
                return self.Infinity
            return self - (self/other)._trunc()*other
        elif isreal(other):
            if self.d == 0:
                return self
            return self._approx(_fmod, other)
        return NotImplemented

    def __rmod__(self, other):
        if isint(other):
            return self.__class__(other) % self
        elif isreal(other):
            if self.d == 0:
                return self
            with workprec(self.prec):
                return self.frac(_fmod(mpf(other), self.mpf()))
        return NotImplemented

    def __pow__(self, exp):
        '''Integer powers are exact; a float exponent is the same as
        pow(exp).  As with pow(), infinity to a power >= 0 is infinity,
        but 0 to a negative integer power is infinity rather than 0.
        '''
        if isint(exp):
            if exp >= 0 and self.d == 0:
                return self
            if exp < 0:
                return self.invert()**(-exp)
            return self.__class__(self.n**exp, self.d**exp)
        elif isreal(exp):
            return self.pow(exp)
        return NotImplemented

    # Comparisons.  Equality is exact equality of the numerator and the
    # denominator; the orderings cross multiply.
    def __eq__(self, other):
        if isinstance(other, Rational):
            return self.n == other.n and self.d == other.d
        elif isint(other):
            return self.n == other and self.d == 1
        return NotImplemented

    def __hash__(self):
        if self.d == 1:
            return hash(self.n)
        return hash((self.n, self.d))

    def _cross(self, other):
        '''Return a pair of numbers that compare the same way as we do
        with other, or None if other isn't a number we know.
        '''
        if isinstance(other, Rational):
            return (check_width(self.n*other.d, self.bits),
                    check_width(other.n*self.d, self.bits))
        elif isint(other):
            return self.n, check_width(other*self.d, self.bits)
        elif isreal(other):
            with workprec(self.prec):
                return self.mpf(), mpf(other)
        return None

    def __lt__(self, other):
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other):
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other):
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other):
        pair = self._cross(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __str__(self):
        if self.d == 1:
            if self.n < 0:
                return "(%d)" % self.n
            return "%d" % self.n
        return "(%d/%d)" % (self.n, self.d)

    def __repr__(self):
        return "Rational(%d, %d)" % (self.n, self.d)

    # Exponents and roots.  Except for square(), cube() and the
    # simplify_*() methods these go through floating point.
    def _pow_is_self(self, exp):
        return (exp < 0 and self.n == 0) or (exp >= 0 and self.d == 0)

    def pow(self, exp):
        '''Raise to the power exp and approximate the result.  0 to a
        negative power and infinity to a positive one are returned
        unchanged.  A negative number to a fractional power gives the
        real part of the principal value, so pow(-N, 0.5) is 0.
        '''
        if self._pow_is_self(exp):
            return self
        if self.d == 0:
            return self.Zero
        with workprec(self.prec):
            return self.frac(re(power(self.mpf(), exp)))

    def pow_c(self, exp):
        '''Raise to the power exp as a complex number.  Returns the
        approximations of the real and imaginary parts.
        '''
        if self._pow_is_self(exp):
            return self, self.Zero
        if self.d == 0:
            return self.Zero, self.Zero
        with workprec(self.prec):
            z = power(self.mpc(), exp)
            return self.frac(re(z)), self.frac(im(z))

    def square(self):
        return self*self

    def cube(self):
        return self*self*self

    def is_perfect_square(self):
        '''True if abs(self) is the square of a fraction.  The roots of
        the numerator and denominator are found in floating point, so
        the answer can be wrong for integers too big for the precision.
        '''
        with workprec(self.prec):
            root = self.__class__(int(nint(sqrt(abs(self.n)))),
                                  int(nint(sqrt(self.d))))
        return abs(self) == root.square()

    def is_perfect_cube(self):
        'True if self is the cube of a fraction.  See is_perfect_square().'
        with workprec(self.prec):
            root = self.__class__(int(nint(_real_cbrt(self.n))),
                                  int(nint(_real_cbrt(self.d))))
        return self == root.cube()

    def frexp(self):
        '''Split into a normalized fraction y with 0.5 <= abs(y) < 1 and
        an integer power of two e; self is about y*2**e.  For example
        48/7 gives (6/7, 3).  Infinity gives (Infinity, 0).
        '''
        if self.d == 0:
            return self, 0
        with workprec(self.prec):
            y, e = frexp(self.mpf())
            return self.frac(y), e

    def ldexp(self, exp):
        'Approximate self*2**exp, e.g. (2/5).ldexp(3) is 16/5.'
        if not isint(exp):
            raise TypeError("%sExponent must be an integer" % fln())
        if self.d == 0:
            return self
        with workprec(self.prec):
            return self.frac(ldexp(self.mpf(), exp))

    def sqrt(self):
        '''Approximate square root.  The square root of a negative number
        gives its real part, 0.
        '''
        if self.d == 0:
            return self
        with workprec(self.prec):
            return self.frac(re(sqrt(self.mpf())))

    def sqrt_c(self):
        'Approximate complex square root as (real, imaginary).'
        if self.d == 0:
            return self, self.Zero
        with workprec(self.prec):
            z = sqrt(self.mpc())
            return self.frac(re(z)), self.frac(im(z))

    def cbrt(self):
        'Approximate real cube root.'
        if self.d == 0:
            return self
        with workprec(self.prec):
            return self.frac(_real_cbrt(self.mpf()))

    def simplify_root(self, r):
        '''Take the r-th powers out of the numerator and the denominator.
        Returns (factor, remainder) with self equal to
        factor**r * remainder, e.g. for square roots:

            56/45     = 2*2*2*7/(3*3*5)                 -> (2/3, 14/5)
            392/10125 = 2*2*2*7*7/(3*3*3*3*5*5*5)       -> (14/45, 2/5)

        and for cube roots:

            56/135    = 2*2*2*7/(3*3*3*5)               -> (2/3, 7/5)

        If there is nothing to take out, the result is (One, self).
        '''
        num_factor, num_remain = extract_root_factor(self.n, r)
        den_factor, den_remain = extract_root_factor(self.d, r)
        if num_factor > 1 or den_factor > 1:
            return (self.__class__(num_factor, den_factor),
                    self.__class__(num_remain, den_remain))
        return self.One, self

    def simplify_sqrt(self):
        return self.simplify_root(2)

    def simplify_cbrt(self):
        return self.simplify_root(3)

def _constants(cls):
    'Set up the tolerance and the constants of a kind.'
    with workprec(cls.prec):
        cls.error = mpf(10)**cls.error_exp
    cls.Zero = cls(0, 1)
    cls.One = cls(1, 1)
    cls.Infinity = cls(1, 0)
    return cls

_constants(Rational)
_kinds[(Rational.bits, Rational.error_exp, Rational.prec,
        Rational.max_iterations)] = Rational

def mediant(a, b):
    'The fraction made of the sums of the numerators and denominators.'
    return a.__class__(a.n + b.n, a.d + b.d)

def average(*values, kind=None):
    '''The mean of the arguments; Zero if there are none.  kind is the
    Rational kind used when there are no Rational arguments to take it
    from; it defaults to Rational.
    '''
    if kind is None:
        kind = Rational
    if not values:
        return kind.Zero
    total = reduce(operator.add, values)
    if not isinstance(total, Rational):
        total = kind(total)
    return total/len(values)
