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


"""Time scales, Earth heliocentric position, nutation, and the sun's geocentric coordinates

These are steps 3.1 to 3.8 of Reda & Andreas (2004). All angles are in
degrees unless stated otherwise. Every function here is a scalar kernel that
Numba may compile when it is called from jit'ed code.
"""

import numpy as np

from ._jit import register_jitable
from .angles import limit_degrees
from . import terms

## Dates and times
# The calendar date is taken as given: dates before 1582-10-15 are read on the
# Julian calendar, later ones on the Gregorian. The switch is made on the
# computed Julian Day, as in the paper, rather than on the date fields.

@register_jitable
def julian_day(year, month, day, hour, minute, second, dut1, tz):
    """Calculate the Julian Day from a local calendar date and time

    tz is the observer's timezone in hours (negative west of Greenwich) and
    dut1 is UT1-UTC in seconds. delta_t is *not* applied here.
    """
    day_decimal = day + (hour - tz + (minute + (second + dut1)/60.0)/60.0)/24.0
    # From paper: "if M = 1 or 2, then Y = Y - 1 and M = M + 12"
    if month < 3:
        month += 12
        year -= 1
    jd = int(365.25*(year + 4716.0)) + int(30.6001*(month + 1)) + day_decimal - 1524.5
    # b = 0 for the julian calendar and (2 - A + INT(A/4)), A = INT(Y/100) for the gregorian calendar
    if jd > 2299160.0:
        a = int(year/100)
        jd += 2 - a + int(a/4)
    return jd

@register_jitable
def julian_century(jd):
    """Calculate the Julian Century from the Julian Day"""
    return (jd - 2451545.0) / 36525.0

@register_jitable
def julian_ephemeris_day(jd, delta_t):
    """Calculate the Julian Ephemeris Day from the Julian Day and delta-time = (terrestrial time - universal time) in seconds"""
    return jd + delta_t / 86400.0

@register_jitable
def julian_ephemeris_century(jde):
    return (jde - 2451545.0) / 36525.0

@register_jitable
def julian_ephemeris_millennium(jce):
    return jce / 10.0

## Earth heliocentric position

@register_jitable
def _horner(coeffs, x):
    y = 0.0
    for c in coeffs:
        y = y*x + c
    return y

@register_jitable
def _periodic_sum(series, jme):
    """Evaluate a family of periodic series: sum_i (sum_k A cos(B + C jme)) jme**i, scaled by 1e-8

    series is a tuple of (n, 3) arrays, one per power of jme, lowest first
    """
    total = 0.0
    power = 1.0
    for order in series:
        s = 0.0
        for k in range(order.shape[0]):
            s += order[k, 0]*np.cos(order[k, 1] + order[k, 2]*jme)
        total += s*power
        power *= jme
    return total / 1e8

@register_jitable
def heliocentric_longitude(jme):
    """Compute the Earth Heliocentric Longitude (L) in degrees, in [0, 360)"""
    return limit_degrees(np.rad2deg(_periodic_sum(terms.L_TERMS, jme)))

@register_jitable
def heliocentric_latitude(jme):
    """Compute the Earth Heliocentric Latitude (B) in degrees"""
    return np.rad2deg(_periodic_sum(terms.B_TERMS, jme))

@register_jitable
def heliocentric_radius(jme):
    """Compute the Earth radius vector (R) in astronomical units"""
    return _periodic_sum(terms.R_TERMS, jme)

@register_jitable
def heliocentric_position(jme):
    """Returns (L, B, R): longitude and latitude in degrees, radius in AU"""
    return heliocentric_longitude(jme), heliocentric_latitude(jme), heliocentric_radius(jme)

@register_jitable
def geocentric_longitude(L):
    """The sun as seen from the earth is opposite the earth as seen from the sun"""
    theta = L + 180.0
    if theta >= 360.0:
        theta -= 360.0
    return theta

@register_jitable
def geocentric_latitude(B):
    return -B

## Nutation

@register_jitable
def fundamental_arguments(jce):
    """Compute the five lunar/solar arguments of the nutation series, in degrees

    Returns (x0, x1, x2, x3, x4):
     mean elongation of the moon from the sun,
     mean anomaly of the sun (earth),
     mean anomaly of the moon,
     moon's argument of latitude,
     longitude of the ascending node of the moon's mean orbit on the ecliptic
    """
    x0 = _horner(terms.MEAN_ELONGATION_MOON_SUN, jce)
    x1 = _horner(terms.MEAN_ANOMALY_SUN, jce)
    x2 = _horner(terms.MEAN_ANOMALY_MOON, jce)
    x3 = _horner(terms.ARGUMENT_LATITUDE_MOON, jce)
    x4 = _horner(terms.ASCENDING_LONGITUDE_MOON, jce)
    return x0, x1, x2, x3, x4

@register_jitable
def nutation(jce, x0, x1, x2, x3, x4):
    """Compute the nutation in longitude (delta_psi) and obliquity (delta_epsilon), in degrees"""
    x = np.deg2rad(np.array([x0, x1, x2, x3, x4]))
    phase = np.dot(terms.NUTATION_ARGS, x)
    a = terms.NUTATION_COEFFS[:, 0]
    b = terms.NUTATION_COEFFS[:, 1]
    c = terms.NUTATION_COEFFS[:, 2]
    d = terms.NUTATION_COEFFS[:, 3]
    delta_psi = np.sum((a + b*jce)*np.sin(phase)) / 36e6
    delta_epsilon = np.sum((c + d*jce)*np.cos(phase)) / 36e6
    return delta_psi, delta_epsilon

## Geocentric position of the sun

@register_jitable
def ecliptic_mean_obliquity(jme):
    """Mean obliquity of the ecliptic (epsilon0), in arcseconds"""
    return _horner(terms.MEAN_OBLIQUITY, jme/10.0)

@register_jitable
def ecliptic_true_obliquity(delta_epsilon, epsilon0):
    """True obliquity of the ecliptic (epsilon), in degrees"""
    return delta_epsilon + epsilon0/3600.0

@register_jitable
def aberration_correction(R):
    """Calculate the aberration correction (delta_tau, in degrees) given the Earth Heliocentric Radius (in AU)"""
    return -20.4898/(3600.0*R)

@register_jitable
def apparent_sun_longitude(theta, delta_psi, delta_tau):
    return theta + delta_psi + delta_tau

@register_jitable
def greenwich_mean_sidereal_time(jd, jc):
    """Mean sidereal time at Greenwich (nu0), in degrees"""
    return limit_degrees(280.46061837 + 360.98564736629*(jd - 2451545.0) + jc*jc*(0.000387933 - jc/38710000.0))

@register_jitable
def greenwich_sidereal_time(nu0, delta_psi, epsilon):
    """Apparent sidereal time at Greenwich (nu), in degrees"""
    return nu0 + delta_psi*np.cos(np.deg2rad(epsilon))

@register_jitable
def geocentric_right_ascension(llambda, epsilon, beta):
    l = np.deg2rad(llambda)
    e = np.deg2rad(epsilon)
    b = np.deg2rad(beta)
    alpha = np.arctan2(np.sin(l)*np.cos(e) - np.tan(b)*np.sin(e), np.cos(l))
    return limit_degrees(np.rad2deg(alpha))

@register_jitable
def geocentric_declination(beta, epsilon, llambda):
    b = np.deg2rad(beta)
    e = np.deg2rad(epsilon)
    return np.rad2deg(np.arcsin(np.sin(b)*np.cos(e) + np.cos(b)*np.sin(e)*np.sin(np.deg2rad(llambda))))

# names of the values returned by geocentric_position(), in order
GEOCENTRIC_FIELDS = (
    'julian_day', 'julian_century', 'julian_eph_day', 'julian_eph_century', 'julian_eph_millennium',
    'earth_helio_lon', 'earth_helio_lat', 'earth_rad', 'geo_lon', 'geo_lat',
    'mean_elongation', 'mean_anomaly_sun', 'mean_anomaly_moon', 'arg_lat_moon', 'asc_lon_moon',
    'nutation_lon', 'nutation_obliquity', 'ecliptic_mean_obliquity', 'ecliptic_obliquity',
    'aberration_correction', 'sun_lon', 'greenwich_mean_sidereal_t', 'greenwich_sidereal_t',
    'geo_right_asc', 'geo_decl',
)

@register_jitable
def geocentric_position(jd, delta_t):
    """Run the pipeline from the Julian Day to the sun's geocentric right ascension and declination

    Returns a tuple of floats, named by GEOCENTRIC_FIELDS
    """
    jc = julian_century(jd)
    jde = julian_ephemeris_day(jd, delta_t)
    jce = julian_ephemeris_century(jde)
    jme = julian_ephemeris_millennium(jce)

    L, B, R = heliocentric_position(jme)
    theta = geocentric_longitude(L)
    beta = geocentric_latitude(B)

    x0, x1, x2, x3, x4 = fundamental_arguments(jce)
    delta_psi, delta_epsilon = nutation(jce, x0, x1, x2, x3, x4)
    epsilon0 = ecliptic_mean_obliquity(jme)
    epsilon = ecliptic_true_obliquity(delta_epsilon, epsilon0)

    delta_tau = aberration_correction(R)
    llambda = apparent_sun_longitude(theta, delta_psi, delta_tau)
    nu0 = greenwich_mean_sidereal_time(jd, jc)
    nu = greenwich_sidereal_time(nu0, delta_psi, epsilon)

    alpha = geocentric_right_ascension(llambda, epsilon, beta)
    delta = geocentric_declination(beta, epsilon, llambda)

    return (jd, jc, jde, jce, jme, L, B, R, theta, beta,
            x0, x1, x2, x3, x4, delta_psi, delta_epsilon, epsilon0, epsilon,
            delta_tau, llambda, nu0, nu, alpha, delta)
