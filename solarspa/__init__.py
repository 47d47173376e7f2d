# The MIT License (MIT)
# 
# Copyright (c) 2025 Samuel Bear Powell
# 
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.


"""solarspa: NREL's Solar Position Algorithm (Reda & Andreas, 2003)

Compute the topocentric position of the sun, the incidence angle on a tilted
surface, and the times of sunrise, transit and sunset for dates from -2000 to
6000 with an uncertainty of +/- 0.0003 degrees.

    >>> from solarspa import SpaInput, compute
    >>> r = compute(SpaInput(2003, 10, 17, 12, 30, 30, timezone=-7, delta_t=67,
    ...                      latitude=39.742476, longitude=-105.1786, elevation=1830.14))
"""

VERSION = '1.0.0'
__version__ = VERSION

from ._jit import enable_jit, disable_jit, jit_enabled
from .angles import (limit_degrees, limit_degrees180pm, limit_degrees180, limit_zero2one, limit_minutes,
                     format_hours)
from .topocentric import Refraction
from .validation import ErrorCode, InvalidInputError
from .rts import Polar, Event, NoEvent, RiseTransitSet, rise_transit_set
from .spa import Mode, SpaInput, SpaResult, compute, validate_inputs, find_violations
from .arrays import sunpos, julian_day
