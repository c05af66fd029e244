'''
Integer support for fractions.

The integers inside a fraction have a width, set in bits the same way
the calculator's Zn objects do it:

    bits        Must be >= 0.  If 0, then the integers are regular
                python integers with no limit.  If > 0, then they
                behave like signed two's complement integers with that
                number of bits, except that leaving the range raises
                IntegerOverflow instead of silently wrapping around.

Also here are the exact integer routines the root simplification is
built on:  gcd(), iroot() and extract_root_factor().

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

from mpmath import mpf, floor, root, workprec
from .debug import fln

class IntegerOverflow(OverflowError): pass

def isint(x):
    return isinstance(x, int)

def int_range(bits):
    '''Return the (low, high) limits of a signed integer with the given
    number of bits; low is allowed, high is not.  (None, None) for
    unlimited integers.
    '''
    if not isint(bits) or bits < 0:
        raise ValueError("%sNumber of bits must be an integer >= 0" % fln())
    if bits == 0:
        return None, None
    high = 2**(bits - 1)
    return -high, high

def check_width(n, bits):
    '''Return n if it fits in a signed integer of the given number of
    bits, else raise IntegerOverflow.
    '''
    if bits:
        low, high = int_range(bits)
        if not (low <= n < high):
            msg = "%s%d doesn't fit in a %d bit integer"
            raise IntegerOverflow(msg % (fln(), n, bits))
    return n

def gcd(a, b):
    '''Determine the greatest common divisor of integers a and b.
    Euclid's algorithm from Knuth, vol 2, pg 320.  The result is never
    negative and gcd(a, 0) is abs(a), so gcd(0, 0) is 0.
    '''
    if not isint(a) or not isint(b):
        raise ValueError("%sArguments must be integers" % fln())
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a

def iroot(v, r):
    '''Return the largest integer whose r-th power doesn't exceed v.

    mpmath gives the estimate; it is then corrected with exact integer
    arithmetic, so the result is right for integers of any size.
    '''
    if not isint(v) or not isint(r):
        raise ValueError("%sArguments must be integers" % fln())
    if v < 0:
        raise ValueError("%sCan't take the root of a negative number" % fln())
    if r < 1:
        raise ValueError("%sRoot must be >= 1" % fln())
    if v < 2 or r == 1:
        return v
    with workprec(max(53, v.bit_length()//r + 16)):
        x = int(floor(root(mpf(v), r)))
    while x > 0 and x**r > v:
        x -= 1
    while (x + 1)**r <= v:
        x += 1
    return x

def extract_root_factor(v, r):
    '''Split v into factor**r * remainder, where factor is the largest
    integer whose r-th power divides v.  Returns (factor, remainder).

    The search starts at the integer r-th root of abs(v) and works down,
    so 392 = 2*2*2*7*7 gives (14, 2) for square roots and (2, 49) for
    cube roots.  The sign of v stays with the remainder.  v == 0 gives
    (1, 0).
    '''
    if not isint(v):
        raise ValueError("%sCan't extract a root factor from '%s'" % \
            (fln(), str(v)))
    factor = iroot(abs(v), r)
    while factor > 0:
        power = factor**r
        if v % power == 0:
            return factor, v//power
        factor -= 1
    return 1, v
