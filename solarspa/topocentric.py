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


"""Topocentric correction, atmospheric refraction, and the observed angles of the sun

Steps 3.9 to 3.15 of Reda & Andreas (2004), with the oblate-earth parallax
model and a choice of two refraction models.
"""

import enum

import numpy as np

from ._jit import register_jitable
from .angles import limit_degrees

# apparent angular radius of the sun, degrees
SUN_RADIUS = 0.26667

class Refraction(enum.IntEnum):
    """Atmospheric refraction model applied to the topocentric elevation angle"""
    #: piecewise rational fit, applied for -2.5 < e0 < 90 degrees
    PIECEWISE = 0
    #: the formula of the NREL report, applied while the sun's upper limb is above the horizon
    BENNETT = 1

# plain int for comparisons inside jit-compiled code
_BENNETT = int(Refraction.BENNETT)

@register_jitable
def observer_hour_angle(nu, longitude, alpha):
    """Observer local hour angle (H), in [0, 360)"""
    return limit_degrees(nu + longitude - alpha)

@register_jitable
def equatorial_horizontal_parallax(R):
    """Sun equatorial horizontal parallax (xi), in degrees"""
    return 8.794/(3600.0*R)

@register_jitable
def parallax_and_topocentric_declination(latitude, elevation, xi, H, delta):
    """Calculate the parallax in the sun's right ascension (delta_alpha) and the topocentric declination (delta')

    Returns (delta_alpha, delta_prime), in degrees
    """
    phi = np.deg2rad(latitude)
    xi_r = np.deg2rad(xi)
    Hr = np.deg2rad(H)
    dr = np.deg2rad(delta)
    #NB: These equations look like they're based on WGS-84, but are rounded slightly
    # The WGS-84 reference ellipsoid has major axis a = 6378137 m, and flattening factor 1/f = 298.257223563
    # minor axis b = a*(1-f) = 6356752.3142 = 0.996647189335*a
    u = np.arctan(0.99664719*np.tan(phi))
    x = np.cos(u) + elevation*np.cos(phi)/6378140.0 #rho cos(phi-prime)
    y = 0.99664719*np.sin(u) + elevation*np.sin(phi)/6378140.0 #rho sin(phi-prime)

    denom = np.cos(dr) - x*np.sin(xi_r)*np.cos(Hr)
    dar = np.arctan2(-x*np.sin(xi_r)*np.sin(Hr), denom)
    delta_prime = np.arctan2((np.sin(dr) - y*np.sin(xi_r))*np.cos(dar), denom)
    return np.rad2deg(dar), np.rad2deg(delta_prime)

@register_jitable
def topocentric_elevation_angle(latitude, delta_prime, H_prime):
    """Topocentric elevation angle without refraction (e0), in degrees"""
    phi = np.deg2rad(latitude)
    dr = np.deg2rad(delta_prime)
    return np.rad2deg(np.arcsin(np.sin(phi)*np.sin(dr) + np.cos(phi)*np.cos(dr)*np.cos(np.deg2rad(H_prime))))

@register_jitable
def refraction_correction(pressure, temperature, atmos_refract, e0, model=0):
    """Atmospheric refraction correction (delta_e) to add to the elevation angle e0

    pressure in millibar, temperature in celcius, angles in degrees.
    atmos_refract is the refraction at the horizon, used by the BENNETT model
    to decide whether the sun is up at all.
    """
    delta_e = 0.0
    if model == _BENNETT:
        if e0 >= -1*(SUN_RADIUS + atmos_refract):
            tmp = np.deg2rad(e0 + 10.3/(e0 + 5.11))
            delta_e = (pressure/1010.0)*(283.0/(273.0 + temperature))*(1.02/(60.0*np.tan(tmp)))
    else:
        PT = pressure/(temperature + 273.15)
        if -2.5 < e0 < 15.0:
            delta_e = PT*(0.1594 + 0.0196*e0 + 2e-5*e0*e0)/(1.0 + 0.505*e0 + 0.0845*e0*e0)
        elif 15.0 <= e0 < 90.0:
            delta_e = 0.00452*PT/np.tan(np.deg2rad(e0))
    return delta_e

@register_jitable
def topocentric_azimuth_astro(H_prime, latitude, delta_prime):
    """Topocentric azimuth measured westward from south (Gamma), in [0, 360)"""
    Hr = np.deg2rad(H_prime)
    phi = np.deg2rad(latitude)
    gamma = np.arctan2(np.sin(Hr), np.cos(Hr)*np.sin(phi) - np.tan(np.deg2rad(delta_prime))*np.cos(phi))
    return limit_degrees(np.rad2deg(gamma))

@register_jitable
def topocentric_azimuth(azimuth_astro):
    """Topocentric azimuth measured eastward from north (Phi), in [0, 360)"""
    return limit_degrees(azimuth_astro + 180.0)

@register_jitable
def surface_incidence_angle(zenith, azimuth_astro, azm_rotation, slope):
    """Angle between the sun and the normal of a surface

    slope is measured from the horizontal plane, azm_rotation from south to the
    projection of the surface normal on the horizontal plane (negative east).
    """
    z = np.deg2rad(zenith)
    w = np.deg2rad(slope)
    return np.rad2deg(np.arccos(np.cos(z)*np.cos(w) + np.sin(w)*np.sin(z)*np.cos(np.deg2rad(azimuth_astro - azm_rotation))))

# names of the values returned by topocentric_position(), in order
TOPOCENTRIC_FIELDS = (
    'observer_hour', 'sun_horizontal_parallax', 'sun_right_asc_parallax',
    'topo_right_asc', 'topo_decl', 'topo_hour',
    'topo_elevation_uncorrected', 'atmos_refract', 'topo_elevation',
    'topo_zenith', 'topo_azimuth_astro', 'topo_azimuth',
)

@register_jitable
def topocentric_position(nu, alpha, delta, R, latitude, longitude, elevation, pressure, temperature, atmos_refract, model=0):
    """Correct the geocentric position of the sun for the observer's location and the atmosphere

    Returns a tuple of floats, named by TOPOCENTRIC_FIELDS
    """
    H = observer_hour_angle(nu, longitude, alpha)
    xi = equatorial_horizontal_parallax(R)
    delta_alpha, delta_prime = parallax_and_topocentric_declination(latitude, elevation, xi, H, delta)
    alpha_prime = alpha + delta_alpha
    H_prime = H - delta_alpha

    e0 = topocentric_elevation_angle(latitude, delta_prime, H_prime)
    delta_e = refraction_correction(pressure, temperature, atmos_refract, e0, model)
    e = e0 + delta_e
    zenith = 90.0 - e

    azimuth_astro = topocentric_azimuth_astro(H_prime, latitude, delta_prime)
    azimuth = topocentric_azimuth(azimuth_astro)
    return (H, xi, delta_alpha, alpha_prime, delta_prime, H_prime,
            e0, delta_e, e, zenith, azimuth_astro, azimuth)
