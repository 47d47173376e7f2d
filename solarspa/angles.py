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


"""Canonical angle and day-fraction wrapping used throughout the pipeline"""

from ._jit import register_jitable

@register_jitable
def limit_degrees(degrees):
    """Wrap an angle into [0, 360)"""
    limited = degrees % 360.0
    # a tiny negative input rounds up to exactly 360
    if limited >= 360.0:
        limited = 0.0
    return limited

@register_jitable
def limit_degrees180pm(degrees):
    """Wrap an angle into [-180, 180]"""
    limited = limit_degrees(degrees)
    if limited > 180.0:
        limited -= 360.0
    return limited

@register_jitable
def limit_degrees180(degrees):
    """Wrap an angle into [0, 180)"""
    limited = degrees % 180.0
    if limited >= 180.0:
        limited = 0.0
    return limited

@register_jitable
def limit_zero2one(value):
    """Wrap a day fraction into [0, 1)"""
    limited = value % 1.0
    if limited >= 1.0:
        limited = 0.0
    return limited

@register_jitable
def limit_minutes(minutes):
    """Bring a time difference in minutes into [-20, 20] by adding or removing one day"""
    limited = minutes
    if limited < -20.0:
        limited += 1440.0
    elif limited > 20.0:
        limited -= 1440.0
    return limited

@register_jitable
def dayfrac_to_local_hr(dayfrac, timezone):
    """Convert a UT fraction of the day to a local fractional hour in [0, 24)"""
    return 24.0 * limit_zero2one(dayfrac + timezone/24.0)

def format_hours(hours):
    '''Format a fractional hour as HH:MM:SS, rounded to the nearest second'''
    s = int(round(float(hours)*3600))
    h, s = divmod(s, 3600)
    m, s = divmod(s, 60)
    return f'{h:02}:{m:02}:{s:02}'
