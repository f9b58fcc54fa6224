## floating point convenience constructors for v3d
## Copyright (c) 2026 v3d contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


"""lower-case constructors for floating point geometry, the
counterparts of those in ``v3d.rational``.  Equality and zero tests use
the absolute tolerance ``v3d.arith.EPSILON``."""

from functools import partial

from v3d import rational
from v3d.arith import FLOATING

vector = partial(rational.vector, arith=FLOATING)
point = partial(rational.point, arith=FLOATING)
line = partial(rational.line, arith=FLOATING)
ray = partial(rational.ray, arith=FLOATING)
segment = partial(rational.segment, arith=FLOATING)
plane = partial(rational.plane, arith=FLOATING)
triangle = partial(rational.triangle, arith=FLOATING)
rectangle = partial(rational.rectangle, arith=FLOATING)
tetrahedron = partial(rational.tetrahedron, arith=FLOATING)
envelope = partial(rational.envelope, arith=FLOATING)
collinear = partial(rational.collinear, arith=FLOATING)


__all__ = rational.__all__
