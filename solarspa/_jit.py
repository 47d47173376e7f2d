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

"""Optional Numba acceleration.

Every numeric kernel in solarspa is decorated with `register_jitable`, which
leaves it an ordinary Python function unless it is called from `njit`-compiled
code. Without numba the decorators are no-ops.
"""

import os
import warnings

try:
    #scipy is required for numba's linear algebra routines (np.dot) to work
    import numba, scipy
except ImportError:
    numba = None

def empty_decorator(f = None, *args, **kw):
    if callable(f):
        return f
    return empty_decorator

if numba is not None:
    # register_jitable informs numba that a function may be compiled when
    # called from jit'ed code, but doesn't jit it by default
    register_jitable = numba.extending.register_jitable

    #njit compiles code -- we use this for the top-level array loops
    njit = numba.njit

    _ENABLE_JIT = not numba.config.DISABLE_JIT and not os.environ.get('NUMBA_DISABLE_JIT',False)
else:
    njit = empty_decorator
    register_jitable = empty_decorator
    _ENABLE_JIT = False

def enable_jit(en = True):
    """Turn Numba acceleration of the array functions on or off"""
    global _ENABLE_JIT
    if en and numba is None:
        warnings.warn('JIT unavailable (requires numba and scipy)', RuntimeWarning, stacklevel=2)
    #We set the flag regardless of whether numba is available, just to test that code path!
    _ENABLE_JIT = bool(en)

def disable_jit():
    enable_jit(False)

def jit_enabled():
    return _ENABLE_JIT

def use_jit(jit=None):
    '''resolve a per-call jit override against the module setting'''
    if jit is None:
        return _ENABLE_JIT
    return bool(jit)
