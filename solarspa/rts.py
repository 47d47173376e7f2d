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


"""Equation of time, and sunrise, sun transit, and sunset times (Appendix A.2 of Reda & Andreas)

The sun's geocentric right ascension and declination are computed at 0h UT
on the day before, the day of, and the day after the requested date. Transit,
rise and set are first approximated from the middle sample, then corrected
once using a quadratic interpolation of all three. The result is accurate to
about 30 seconds; it is not iterated to convergence.
"""

import enum
import typing

import numpy as np

from ._jit import register_jitable
from .angles import limit_degrees, limit_degrees180, limit_degrees180pm, limit_zero2one, limit_minutes, dayfrac_to_local_hr, format_hours
from .ephemeris import julian_day, geocentric_position, GEOCENTRIC_FIELDS, _horner
from .topocentric import SUN_RADIUS
from . import terms

_NU = GEOCENTRIC_FIELDS.index('greenwich_sidereal_t')
_ALPHA = GEOCENTRIC_FIELDS.index('geo_right_asc')
_DELTA = GEOCENTRIC_FIELDS.index('geo_decl')

class Polar(enum.Enum):
    """Why the sun does not cross the horizon on a given day"""
    DAY = 'polar day' #the sun stays above the horizon
    NIGHT = 'polar night' #the sun stays below the horizon

class Event(typing.NamedTuple):
    """Sunrise, transit, or sunset at a local fractional hour in [0, 24)"""
    hour: float

    @property
    def occurred(self):
        return True

    def __str__(self):
        return format_hours(self.hour)

class NoEvent(typing.NamedTuple):
    """The sun does not cross the horizon on this day"""
    reason: Polar

    @property
    def occurred(self):
        return False

    def __str__(self):
        return self.reason.value

class RiseTransitSet(typing.NamedTuple):
    sunrise: typing.Union[Event, NoEvent]
    transit: typing.Union[Event, NoEvent]
    sunset: typing.Union[Event, NoEvent]
    #: topocentric local hour angles at sunrise and sunset, degrees; None without events
    sunrise_hour_angle: typing.Optional[float] = None
    sunset_hour_angle: typing.Optional[float] = None
    #: altitude of the sun at transit, degrees; None without events
    transit_altitude: typing.Optional[float] = None

@register_jitable
def sun_mean_longitude(jme):
    return limit_degrees(_horner(terms.SUN_MEAN_LONGITUDE, jme))

@register_jitable
def equation_of_time(jme, alpha, delta_psi, epsilon):
    """Difference between apparent and mean solar time, in minutes, within [-20, 20]"""
    M = sun_mean_longitude(jme)
    return limit_minutes(4.0*(M - 0.0057183 - alpha + delta_psi*np.cos(np.deg2rad(epsilon))))

@register_jitable
def hour_angle_argument(latitude, delta, h0_prime):
    """cos(H0) for the hour angle at which the sun's altitude is h0_prime

    Values outside [-1, 1] mean the sun never reaches that altitude:
    below -1 it stays above it all day, above 1 it stays below it.
    """
    phi = np.deg2rad(latitude)
    dr = np.deg2rad(delta)
    return (np.sin(np.deg2rad(h0_prime)) - np.sin(phi)*np.sin(dr))/(np.cos(phi)*np.cos(dr))

@register_jitable
def _interpolate(values, n):
    '''three-point interpolation of (day -1, day 0, day +1) samples at day fraction n'''
    a = values[1] - values[0]
    b = values[2] - values[1]
    # right ascension wraps through 360 once a year
    if abs(a) >= 2.0:
        a = limit_zero2one(a)
    if abs(b) >= 2.0:
        b = limit_zero2one(b)
    return values[1] + n*(a + b + (b - a)*n)/2.0

@register_jitable
def _altitude(latitude, delta_prime, H_prime):
    phi = np.deg2rad(latitude)
    dr = np.deg2rad(delta_prime)
    return np.rad2deg(np.arcsin(np.sin(phi)*np.sin(dr) + np.cos(phi)*np.cos(dr)*np.cos(np.deg2rad(H_prime))))

def _daily_samples(year, month, day, delta_t):
    '''sidereal time at 0h UT, and right ascension & declination at 0h UT on days -1, 0, +1'''
    jd = julian_day(year, month, day, 0, 0, 0.0, 0.0, 0.0)
    nu = geocentric_position(jd, delta_t)[_NU]
    alpha, delta = np.empty(3), np.empty(3)
    for i in range(3):
        geo = geocentric_position(jd + i - 1, 0.0)
        alpha[i], delta[i] = geo[_ALPHA], geo[_DELTA]
    return nu, alpha, delta

def _approximate_times(nu, alpha, delta, latitude, longitude, h0_prime):
    '''transit, rise, and set as UT fractions of the day, from the middle sample only

    Returns the cos(H0) argument and the fractions, which are None when the sun
    does not cross h0_prime that day.
    '''
    m0 = (alpha[1] - longitude - nu)/360.0
    arg = hour_angle_argument(latitude, delta[1], h0_prime)
    if arg < -1.0 or arg > 1.0:
        return arg, None
    H0 = limit_degrees180(np.rad2deg(np.arccos(arg)))
    return arg, (limit_zero2one(m0), limit_zero2one(m0 - H0/360.0), limit_zero2one(m0 + H0/360.0))

def _local_sun(m, nu, alpha, delta, latitude, longitude, delta_t):
    '''local hour angle, altitude, and declination of the sun at UT day fraction m'''
    nu_m = nu + 360.985647*m
    n = m + delta_t/86400.0
    alpha_m = _interpolate(alpha, n)
    delta_m = _interpolate(delta, n)
    H_prime = limit_degrees180pm(nu_m + longitude - alpha_m)
    return H_prime, _altitude(latitude, delta_m, H_prime), delta_m

def _rise_set_correction(m, H_prime, h, delta_prime, latitude, h0_prime):
    '''one Newton step of the day fraction m toward the altitude h0_prime'''
    return m + (h - h0_prime)/(360.0*np.cos(np.deg2rad(delta_prime))*np.cos(np.deg2rad(latitude))*np.sin(np.deg2rad(H_prime)))

def rise_transit_set(year, month, day, timezone, latitude, longitude, delta_t=0.0, atmos_refract=0.5667):
    """Compute the local times of sunrise, sun transit (solar noon), and sunset

    Parameters
    ----------
    year, month, day : int
        local calendar date
    timezone : float
        hours, negative west of Greenwich; the returned times are in this zone
    latitude, longitude : float
        decimal degrees, positive for north of the equator and east of Greenwich
    delta_t : float
        seconds, difference between terrestrial time (TT) and universal time (UT)
    atmos_refract : float
        atmospheric refraction at sunrise and sunset, in degrees

    Returns
    -------
    RiseTransitSet
        events are Event(hour) or, when the sun does not cross the horizon
        that day, NoEvent(Polar.DAY) or NoEvent(Polar.NIGHT) for all three
    """
    h0_prime = -1*(SUN_RADIUS + atmos_refract)
    nu, alpha, delta = _daily_samples(year, month, day, delta_t)

    arg, m = _approximate_times(nu, alpha, delta, latitude, longitude, h0_prime)
    if m is None:
        none = NoEvent(Polar.DAY if arg < -1.0 else Polar.NIGHT)
        return RiseTransitSet(none, none, none)

    # transit, rise, set
    H_prime, h, delta_prime = zip(*[_local_sun(mi, nu, alpha, delta, latitude, longitude, delta_t) for mi in m])

    def corrected(i):
        return Event(float(dayfrac_to_local_hr(
            _rise_set_correction(m[i], H_prime[i], h[i], delta_prime[i], latitude, h0_prime), timezone)))

    transit = Event(float(dayfrac_to_local_hr(m[0] - H_prime[0]/360.0, timezone)))
    return RiseTransitSet(corrected(1), transit, corrected(2),
                          float(H_prime[1]), float(H_prime[2]), float(h[0]))
