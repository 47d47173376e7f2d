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


"""Vectorised front end: broadcast arrays of observations through the pipeline

Arguments are broadcast together like numpy ufunc arguments. With JIT enabled,
the loop over observations is compiled with Numba; otherwise np.vectorize is
used. Both paths evaluate the same scalar kernels as compute().
"""

import numpy as np

from ._jit import njit, register_jitable, use_jit
from . import ephemeris
from .ephemeris import geocentric_position, GEOCENTRIC_FIELDS
from .topocentric import Refraction, topocentric_position, TOPOCENTRIC_FIELDS
from .validation import ErrorCode, InvalidInputError, check_fields, field_name

_NU = GEOCENTRIC_FIELDS.index('greenwich_sidereal_t')
_ALPHA = GEOCENTRIC_FIELDS.index('geo_right_asc')
_DELTA = GEOCENTRIC_FIELDS.index('geo_decl')
_R = GEOCENTRIC_FIELDS.index('earth_rad')
_AZ = TOPOCENTRIC_FIELDS.index('topo_azimuth')
_ZEN = TOPOCENTRIC_FIELDS.index('topo_zenith')
_RA = TOPOCENTRIC_FIELDS.index('topo_right_asc')
_DEC = TOPOCENTRIC_FIELDS.index('topo_decl')
_H = TOPOCENTRIC_FIELDS.index('topo_hour')

@register_jitable
def _sunpos(year, month, day, hour, minute, second, timezone, delta_ut1, delta_t,
            latitude, longitude, elevation, temperature, pressure, atmos_refract, refraction):
    """Compute azimuth, zenith, RA, dec, H for one observation, all in degrees"""
    jd = ephemeris.julian_day(year, month, day, hour, minute, second, delta_ut1, timezone)
    geo = geocentric_position(jd, delta_t)
    topo = topocentric_position(geo[_NU], geo[_ALPHA], geo[_DELTA], geo[_R], latitude, longitude, elevation,
                                pressure, temperature, atmos_refract, refraction)
    return topo[_AZ], topo[_ZEN], topo[_RA], topo[_DEC], topo[_H]

_sunpos_vec = np.vectorize(_sunpos, otypes=[float]*5)

@njit
def _sunpos_vec_jit(year, month, day, hour, minute, second, timezone, delta_ut1, delta_t,
                    latitude, longitude, elevation, temperature, pressure, atmos_refract, refraction):
    '''Compute azimuth, zenith, RA, dec, H; vectorized for use with Numba
    Arguments must be flat, contiguous, and of equal length: Numba's broadcast does not match Numpy's with scalar arguments
    '''
    n = year.size
    azimuth, zenith = np.empty(n), np.empty(n)
    RA, dec, H = np.empty(n), np.empty(n), np.empty(n)
    for i in range(n):
        azimuth[i], zenith[i], RA[i], dec[i], H[i] = _sunpos(
            year[i], month[i], day[i], hour[i], minute[i], second[i], timezone[i], delta_ut1[i], delta_t[i],
            latitude[i], longitude[i], elevation[i], temperature[i], pressure[i], atmos_refract[i], refraction[i])
    return azimuth, zenith, RA, dec, H

_julian_day_vec = np.vectorize(ephemeris.julian_day, otypes=[float])

@njit
def _julian_day_vec_jit(year, month, day, hour, minute, second, delta_ut1, timezone):
    n = year.size
    jds = np.empty(n)
    for i in range(n):
        jds[i] = ephemeris.julian_day(year[i], month[i], day[i], hour[i], minute[i], second[i], delta_ut1[i], timezone[i])
    return jds

def _flatten(args):
    '''broadcast args, returning (shape, [flat contiguous float64 arrays])'''
    args = np.broadcast_arrays(*(np.asarray(a, dtype=np.float64) for a in args))
    return args[0].shape, [np.ascontiguousarray(a).ravel() for a in args]

_check_vec = np.vectorize(check_fields, otypes=[int])

def _validate(**fields):
    '''raise InvalidInputError for the first element of the broadcast fields that fails validation'''
    codes = np.atleast_1d(_check_vec(**fields))
    bad = np.flatnonzero(codes != ErrorCode.VALID)
    if bad.size:
        i = bad[0]
        code = ErrorCode(codes.flat[i])
        value = np.broadcast_to(fields[field_name(code)], codes.shape).flat[i]
        raise InvalidInputError(code, value.item())

def sunpos(year, month, day, hour, minute, second, latitude, longitude, elevation,
           timezone=0, delta_ut1=0, delta_t=0, temperature=None, pressure=None, atmos_refract=None,
           refraction=Refraction.PIECEWISE, radians=False, jit=None):
    """Compute the observed and topocentric coordinates of the sun for arrays of observations

    Parameters
    ----------
    year, month, day, hour, minute, second : array_like
        observer local date and time, see SpaInput
    latitude, longitude : array_like of float
        decimal degrees, positive for north of the equator and east of Greenwich
    elevation : array_like of float
        meters
    timezone : array_like of float, optional
        hours, negative west of Greenwich. Default is 0 (UTC)
    delta_ut1 : array_like of float, optional
        seconds, UT1 - UTC
    delta_t : array_like of float, optional
        seconds, default is 0, difference between the earth's rotation time (TT) and universal time (UT)
    temperature : None or array_like of float, optional
        celcius, default is 14.6 (global average in 2013)
    pressure : None or array_like of float, optional
        millibar, default is 1013 (global average)
    atmos_refract : None or array_like of float, optional
        Atmospheric refraction at sunrise and sunset, in degrees. Default is 0.5667
    refraction : Refraction, optional
        refraction model, default Refraction.PIECEWISE
    radians : bool, optional
        return results in radians if True, degrees if False (default)
    jit : bool, optional
        override module jit settings. True to enable Numba acceleration, False to disable.

    Returns
    -------
    azimuth_angle : ndarray, measured eastward from north
    zenith_angle : ndarray, measured down from vertical
    right_ascension : ndarray, topocentric
    declination : ndarray, topocentric
    hour_angle : ndarray, topocentric

    Raises
    ------
    InvalidInputError
        for the first observation (in C order) with a field out of range
    """
    if temperature is None:
        temperature = 14.6
    if pressure is None:
        pressure = 1013
    if atmos_refract is None:
        atmos_refract = 0.5667

    _validate(year=year, month=month, day=day, hour=hour, minute=minute, second=second,
              delta_ut1=delta_ut1, delta_t=delta_t, timezone=timezone, longitude=longitude,
              latitude=latitude, elevation=elevation, pressure=pressure, temperature=temperature,
              atmos_refract=atmos_refract)

    args = (year, month, day, hour, minute, second, timezone, delta_ut1, delta_t,
            latitude, longitude, elevation, temperature, pressure, atmos_refract, int(refraction))
    if use_jit(jit):
        shape, flat = _flatten(args)
        sp = tuple(a.reshape(shape)[()] for a in _sunpos_vec_jit(*flat)) #unwrap np.array() from scalars
    else:
        sp = tuple(a[()] for a in _sunpos_vec(*args))
    if radians:
        sp = tuple(np.deg2rad(a) for a in sp)
    return sp

def julian_day(year, month, day, hour=0, minute=0, second=0, delta_ut1=0, timezone=0, jit=None):
    """Convert local calendar dates and times to Julian days

    Parameters
    ----------
    year, month, day, hour, minute, second : array_like
        local date and time
    delta_ut1 : array_like of float
        seconds, UT1 - UTC
    timezone : array_like of float
        hours, negative west of Greenwich
    jit : bool or None
        override module jit settings, to True/False to enable/disable numba acceleration

    Returns
    -------
    jd : ndarray
        fractional Julian days
    """
    args = (year, month, day, hour, minute, second, delta_ut1, timezone)
    if use_jit(jit):
        shape, flat = _flatten(args)
        jd = _julian_day_vec_jit(*flat).reshape(shape)
    else:
        jd = _julian_day_vec(*args)
    return jd[()] # use [()] to "unwrap" scalar values out of np.array
