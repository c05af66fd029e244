'''
Approximate real numbers by fractions.

Two methods are provided:

    stern_brocot()          Binary search of the Stern-Brocot tree by
                            mediants, started from floor(x) and ceil(x)
                            rather than from 0/1 and 1/0.
    continued_fraction()    Expand x into continued fraction
                            coefficients; evaluate() folds them back
                            into a fraction.

Each function takes the fraction kind (Rational or one of its kinds, see
Rational.kind()) to build its results with; the kind supplies the
tolerance, the floating point precision and the iteration limit.  The
to_*() functions default to Rational.

All the floating point work is done with mpmath at the kind's precision;
the default of 53 bits gives the same answers as IEEE doubles.

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

from mpmath import mpf, floor, ceil, isinf, isnan, workprec
from .integer import check_width, isint
from .debug import fln, trace

CONTINUED_FRACTION_TERMS = 25

class NonConvergence(ArithmeticError): pass

def _real(x):
    'Convert x to an mpf at the current precision; it must be finite.'
    x = mpf(x)
    if isinf(x) or isnan(x):
        raise NonConvergence("%sCan't approximate %s with a fraction" % \
            (fln(), str(x)))
    return x

def _default_kind(kind):
    if kind is None:
        from .rational import Rational
        return Rational
    return kind

def stern_brocot(x, kind, digits=0, max_iterations=0):
    '''Return a fraction of the given kind within the kind's tolerance
    of x.

    low and high start as the integers either side of x and the mediant
    of the two replaces whichever one is on the same side of x as the
    mediant, until the mediant is close enough.  Every mediant lies
    strictly between low and high, so the search narrows every step.

    digits sets the tolerance to 10**(-digits).  If it is 0, then the
    kind's tolerance is used.

    max_iterations limits the number of mediants tried; if it is 0, the
    kind's max_iterations is used.  NonConvergence is raised when the
    limit is reached, or when x is infinite or NaN.
    '''
    if not max_iterations:
        max_iterations = kind.max_iterations
    with workprec(kind.prec):
        x = _real(x)
        if digits:
            error = mpf(10)**(-digits)
        else:
            error = kind.error
        low_n = check_width(int(floor(x)), kind.bits)
        high_n = check_width(int(ceil(x)), kind.bits)
        if low_n == high_n:
            return kind(low_n)
        # low and high are always neighbours in the tree, so their
        # mediants are already in lowest terms.
        low_d = high_d = 1
        for iterations in range(1, max_iterations + 1):
            n, d = low_n + high_n, low_d + high_d
            diff = mpf(n)/mpf(d) - x
            if diff > error:
                high_n, high_d = n, d
            elif diff < -error:
                low_n, low_d = n, d
            else:
                trace("%s -> %d/%d in %d steps" % (str(x), n, d, iterations))
                return kind(n, d)
    msg = "%sNo fraction within %s of %s after %d steps"
    raise NonConvergence(msg % (fln(), str(error), str(x), max_iterations))

def continued_fraction(x, kind, terms=CONTINUED_FRACTION_TERMS):
    '''Return the first terms coefficients of the continued fraction of
    x as a list.  The expansion stops early once the fractional part
    left over is smaller than the kind's tolerance; the unused
    coefficients are 0.  Coefficients are truncated towards zero, so a
    negative x gives negative coefficients.
    '''
    if not isint(terms) or terms < 1:
        raise ValueError("%sNumber of terms must be an integer > 0" % fln())
    cf = [0]*terms
    with workprec(kind.prec):
        remainder = _real(x)
        for i in range(terms):
            whole = int(remainder)
            remainder -= whole
            cf[i] = check_width(whole, kind.bits)
            if abs(remainder) < kind.error:
                break
            remainder = 1/remainder
    trace("%s -> %s" % (str(x), continued_fraction_str(cf)))
    return cf

def _last_term(cf):
    'Index of the last nonzero coefficient, but never less than 0.'
    last = len(cf) - 1
    while last > 0 and cf[last] == 0:
        last -= 1
    return last

def evaluate(cf, kind):
    '''Convert the continued fraction coefficients in cf to a fraction.
    Trailing zero coefficients are padding and are ignored.
    '''
    cf = list(cf)
    if not cf:
        return kind.Zero
    last = _last_term(cf)
    result = kind(cf[last])
    for c in reversed(cf[:last]):
        if result.n == 0:
            result = kind(c)
        else:
            result = result.invert() + c
    return result

def continued_fraction_str(cf):
    '''Return the coefficients separated by commas, e.g. "3,7,16",
    without the zero padding.
    '''
    cf = list(cf)
    if not cf:
        return ""
    return ",".join([str(c) for c in cf[:_last_term(cf) + 1]])

def to_fraction_using_stern_brocot(x, kind=None):
    return stern_brocot(x, _default_kind(kind))

def to_continued_fraction(x, terms=CONTINUED_FRACTION_TERMS, kind=None):
    return continued_fraction(x, _default_kind(kind), terms)

def to_fraction(cf, kind=None):
    return evaluate(cf, _default_kind(kind))

def to_fraction_using_continued_fractions(x, terms=CONTINUED_FRACTION_TERMS,
                                          kind=None):
    kind = _default_kind(kind)
    return evaluate(continued_fraction(x, kind, terms), kind)
