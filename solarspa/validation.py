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


"""Input range checks

The checks run in a fixed order and the first violated field is reported,
exactly as the reference C code does, so a caller passing several bad fields
only ever sees one code.
"""

import enum

class ErrorCode(enum.IntEnum):
    VALID = 0
    YEAR = 1
    MONTH = 2
    DAY = 3
    HOUR = 4
    MINUTE = 5
    SECOND = 6
    DELTA_T = 7
    TIMEZONE = 8
    LONGITUDE = 9
    LATITUDE = 10
    ELEVATION = 11
    PRESSURE = 12
    TEMPERATURE = 13
    SLOPE = 14
    AZM_ROTATION = 15
    ATMOS_REFRACT = 16
    DELTA_UT1 = 17

_FIELDS = {
    ErrorCode.YEAR: ('year', 'must be in [-2000, 6000]'),
    ErrorCode.MONTH: ('month', 'must be in [1, 12]'),
    ErrorCode.DAY: ('day', 'must be in [1, 31]'),
    ErrorCode.HOUR: ('hour', 'must be in [0, 24]'),
    ErrorCode.MINUTE: ('minute', 'must be in [0, 59], and 0 when hour is 24'),
    ErrorCode.SECOND: ('second', 'must be in [0, 60), and 0 when hour is 24'),
    ErrorCode.DELTA_T: ('delta_t', 'must be in [-8000, 8000] seconds'),
    ErrorCode.TIMEZONE: ('timezone', 'must be in [-18, 18] hours'),
    ErrorCode.LONGITUDE: ('longitude', 'must be in [-180, 180] degrees'),
    ErrorCode.LATITUDE: ('latitude', 'must be in [-90, 90] degrees'),
    ErrorCode.ELEVATION: ('elevation', 'must be at least -6500000 meters'),
    ErrorCode.PRESSURE: ('pressure', 'must be in [0, 5000] millibar'),
    ErrorCode.TEMPERATURE: ('temperature', 'must be in (-273, 6000] celcius'),
    ErrorCode.SLOPE: ('slope', 'must be in [-360, 360] degrees'),
    ErrorCode.AZM_ROTATION: ('azm_rotation', 'must be in [-360, 360] degrees'),
    ErrorCode.ATMOS_REFRACT: ('atmos_refract', 'must be in [-5, 5] degrees'),
    ErrorCode.DELTA_UT1: ('delta_ut1', 'must be in (-1, 1) seconds'),
}

class InvalidInputError(ValueError):
    """An input field is outside of its valid range

    Attributes
    ----------
    code : ErrorCode
        the code of the first violated check
    field : str
        name of the offending input field
    """
    def __init__(self, code, value=None):
        self.code = ErrorCode(code)
        self.field, rule = _FIELDS[self.code]
        self.value = value
        msg = f'Invalid {self.field}: {rule}'
        if value is not None:
            msg += f' (got {value!r})'
        super().__init__(msg)

def field_name(code):
    '''name of the input field checked by code'''
    return _FIELDS[ErrorCode(code)][0]

def _checks(year, month, day, hour, minute, second, delta_ut1, delta_t, timezone,
            longitude, latitude, elevation, pressure, temperature,
            slope, azm_rotation, atmos_refract, surface):
    '''yield (code, ok) pairs in gate order; comparisons are written so that NaN fails'''
    yield ErrorCode.YEAR, -2000 <= year <= 6000
    yield ErrorCode.MONTH, 1 <= month <= 12
    yield ErrorCode.DAY, 1 <= day <= 31
    yield ErrorCode.HOUR, 0 <= hour <= 24
    yield ErrorCode.MINUTE, 0 <= minute <= 59
    yield ErrorCode.SECOND, 0 <= second < 60
    yield ErrorCode.PRESSURE, 0 <= pressure <= 5000
    yield ErrorCode.TEMPERATURE, -273 < temperature <= 6000
    yield ErrorCode.DELTA_UT1, -1 < delta_ut1 < 1
    # midnight may be given as 24:00:00 but nothing later
    yield ErrorCode.MINUTE, not (hour == 24 and minute > 0)
    yield ErrorCode.SECOND, not (hour == 24 and second > 0)
    yield ErrorCode.DELTA_T, abs(delta_t) <= 8000
    yield ErrorCode.TIMEZONE, abs(timezone) <= 18
    yield ErrorCode.LONGITUDE, abs(longitude) <= 180
    yield ErrorCode.LATITUDE, abs(latitude) <= 90
    yield ErrorCode.ATMOS_REFRACT, abs(atmos_refract) <= 5
    yield ErrorCode.ELEVATION, elevation >= -6500000
    if surface:
        yield ErrorCode.SLOPE, abs(slope) <= 360
        yield ErrorCode.AZM_ROTATION, abs(azm_rotation) <= 360

def check_fields(year, month, day, hour, minute, second, delta_ut1, delta_t, timezone,
                 longitude, latitude, elevation, pressure, temperature,
                 slope=0.0, azm_rotation=0.0, atmos_refract=0.5667, surface=False):
    """Return the code of the first violated range check, or ErrorCode.VALID

    slope and azm_rotation are only checked when surface is True.
    """
    for code, ok in _checks(year, month, day, hour, minute, second, delta_ut1, delta_t, timezone,
                            longitude, latitude, elevation, pressure, temperature,
                            slope, azm_rotation, atmos_refract, surface):
        if not ok:
            return code
    return ErrorCode.VALID

def _input_fields(inp, surface):
    return (inp.year, inp.month, inp.day, inp.hour, inp.minute, inp.second,
            inp.delta_ut1, inp.delta_t, inp.timezone, inp.longitude, inp.latitude,
            inp.elevation, inp.pressure, inp.temperature,
            inp.slope, inp.azm_rotation, inp.atmos_refract, surface)

def first_violation(inp, surface=False):
    """Validate an input record; returns the first violated ErrorCode or ErrorCode.VALID"""
    return check_fields(*_input_fields(inp, surface))

def all_violations(inp, surface=False):
    """List every violated check of an input record, in gate order

    This goes beyond the reference algorithm, which only ever reports the
    first violation (see first_violation). A field appears at most once.
    """
    codes = []
    for code, ok in _checks(*_input_fields(inp, surface)):
        if not ok and code not in codes:
            codes.append(code)
    return codes
