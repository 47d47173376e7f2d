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


"""The solar position pipeline: SpaInput -> compute() -> SpaResult"""

import datetime
import enum
import typing

from .ephemeris import julian_day, geocentric_position, GEOCENTRIC_FIELDS
from .topocentric import Refraction, topocentric_position, surface_incidence_angle, TOPOCENTRIC_FIELDS
from .rts import Event, NoEvent, rise_transit_set, equation_of_time
from .validation import ErrorCode, InvalidInputError, first_violation, all_violations, field_name

class Mode(enum.Flag):
    """Which outputs to compute in addition to the zenith and azimuth angles"""
    ZENITH_AZIMUTH = 0
    INCIDENCE = 1
    RISE_TRANSIT_SET = 2
    ALL = INCIDENCE | RISE_TRANSIT_SET

class SpaInput(typing.NamedTuple):
    """Date, time, location, and atmospheric conditions of an observation

    Attributes
    ----------
    year, month, day, hour, minute, second :
        observer local date and time. year is in [-2000, 6000]; hour may be 24
        only for 24:00:00. Dates before 1582-10-15 are on the Julian calendar.
    timezone : float
        hours, negative west of Greenwich
    delta_ut1 : float
        seconds, UT1 - UTC, in (-1, 1)
    delta_t : float
        seconds, difference between terrestrial time (TT) and universal time (UT)
    latitude, longitude : float
        decimal degrees, positive for north of the equator and east of Greenwich
    elevation : float
        meters
    pressure : float
        millibar, default is 1013 (global average)
    temperature : float
        celcius, default is 14.6 (global average in 2013)
    slope : float
        degrees, surface slope measured from the horizontal plane
    azm_rotation : float
        degrees, surface azimuth rotation measured from south to the projection
        of the surface normal on the horizontal plane, negative east
    atmos_refract : float
        atmospheric refraction at sunrise and sunset, degrees. Default is 0.5667
    refraction : Refraction
        refraction model applied to the topocentric elevation angle
        (Refraction.PIECEWISE by default). The example results published in the
        NREL report (zenith 50.11162, incidence 25.18700 for 2003-10-17
        12:30:30 MST at Golden, CO) use Refraction.BENNETT; the default model
        gives a zenith about 7e-4 degrees larger there.
    """
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0
    timezone: float = 0.0
    delta_ut1: float = 0.0
    delta_t: float = 0.0
    latitude: float = 0.0
    longitude: float = 0.0
    elevation: float = 0.0
    pressure: float = 1013.0
    temperature: float = 14.6
    slope: float = 0.0
    azm_rotation: float = 0.0
    atmos_refract: float = 0.5667
    refraction: Refraction = Refraction.PIECEWISE

    @classmethod
    def from_datetime(cls, dt, latitude, longitude, elevation=0.0, **kwargs):
        """Make a SpaInput from a datetime.datetime

        The timezone is taken from dt's UTC offset; naive datetimes are taken as UTC.
        Other fields are passed through kwargs.
        """
        offset = dt.utcoffset()
        if offset is None:
            offset = datetime.timedelta(0)
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second + dt.microsecond/1e6,
                   timezone=offset.total_seconds()/3600.0, latitude=latitude, longitude=longitude,
                   elevation=elevation, **kwargs)

class SpaResult(typing.NamedTuple):
    """Position of the sun as seen by the observer

    All angles are in degrees. Optional outputs are None unless the Mode
    passed to compute() requested them.

    Attributes
    ----------
    zenith : topocentric zenith angle, corrected for refraction
    azimuth : topocentric azimuth angle, eastward from north (navigators, solar radiation)
    azimuth_astro : topocentric azimuth angle, westward from south (astronomers)
    right_ascension, declination, hour_angle : topocentric
    incidence : surface incidence angle (Mode.INCIDENCE)
    eot : equation of time, minutes (Mode.RISE_TRANSIT_SET)
    sunrise, transit, sunset : Event or NoEvent (Mode.RISE_TRANSIT_SET)
    sunrise_hour_angle, sunset_hour_angle, transit_altitude : only when the events occur
    """
    zenith: float
    azimuth: float
    azimuth_astro: float
    right_ascension: float
    declination: float
    hour_angle: float
    incidence: typing.Optional[float] = None
    eot: typing.Optional[float] = None
    sunrise: typing.Union[Event, NoEvent, None] = None
    transit: typing.Union[Event, NoEvent, None] = None
    sunset: typing.Union[Event, NoEvent, None] = None
    sunrise_hour_angle: typing.Optional[float] = None
    sunset_hour_angle: typing.Optional[float] = None
    transit_altitude: typing.Optional[float] = None

def _needs_surface(mode):
    return bool(Mode(mode) & Mode.INCIDENCE)

def validate_inputs(inp, mode=Mode.ALL):
    """Check every field of inp against its valid range

    Only the first violation is reported, in the order of the reference
    algorithm. slope and azm_rotation are only checked when mode includes
    Mode.INCIDENCE.

    Returns
    -------
    ErrorCode
        ErrorCode.VALID (0) if the input may be passed to compute()
    """
    return first_violation(inp, _needs_surface(mode))

def find_violations(inp, mode=Mode.ALL):
    """List every violated ErrorCode of inp, in the order validate_inputs() checks them"""
    return all_violations(inp, _needs_surface(mode))

def _intermediate_values(inp):
    """Run the pipeline up to the observed zenith and azimuth and return every intermediate value

    The dict is created fresh on each call and is keyed by the names in
    ephemeris.GEOCENTRIC_FIELDS and topocentric.TOPOCENTRIC_FIELDS.
    inp is not validated.
    """
    jd = julian_day(inp.year, inp.month, inp.day, inp.hour, inp.minute, inp.second, inp.delta_ut1, inp.timezone)
    geo = geocentric_position(jd, inp.delta_t)
    ivs = dict(zip(GEOCENTRIC_FIELDS, map(float, geo)))
    topo = topocentric_position(ivs['greenwich_sidereal_t'], ivs['geo_right_asc'], ivs['geo_decl'], ivs['earth_rad'],
                                inp.latitude, inp.longitude, inp.elevation, inp.pressure, inp.temperature,
                                inp.atmos_refract, int(inp.refraction))
    ivs.update(zip(TOPOCENTRIC_FIELDS, map(float, topo)))
    return ivs

def compute(inp, mode=Mode.ALL):
    """Compute the position of the sun for one observation

    Parameters
    ----------
    inp : SpaInput
    mode : Mode
        Mode.ZENITH_AZIMUTH, Mode.INCIDENCE, Mode.RISE_TRANSIT_SET, or Mode.ALL (default)

    Returns
    -------
    SpaResult

    Raises
    ------
    InvalidInputError
        if a field of inp is out of range; nothing is computed

    Notes
    -----
    The zenith and incidence angles depend on inp.refraction. To reproduce the
    NREL report's published example values, use
    inp._replace(refraction=Refraction.BENNETT).
    """
    mode = Mode(mode)
    code = validate_inputs(inp, mode)
    if code != ErrorCode.VALID:
        raise InvalidInputError(code, getattr(inp, field_name(code)))

    ivs = _intermediate_values(inp)
    result = SpaResult(zenith=ivs['topo_zenith'], azimuth=ivs['topo_azimuth'], azimuth_astro=ivs['topo_azimuth_astro'],
                       right_ascension=ivs['topo_right_asc'], declination=ivs['topo_decl'], hour_angle=ivs['topo_hour'])

    if Mode.INCIDENCE & mode:
        incidence = surface_incidence_angle(ivs['topo_zenith'], ivs['topo_azimuth_astro'], inp.azm_rotation, inp.slope)
        result = result._replace(incidence=float(incidence))

    if Mode.RISE_TRANSIT_SET & mode:
        eot = equation_of_time(ivs['julian_eph_millennium'], ivs['geo_right_asc'], ivs['nutation_lon'], ivs['ecliptic_obliquity'])
        rts = rise_transit_set(inp.year, inp.month, inp.day, inp.timezone, inp.latitude, inp.longitude,
                               inp.delta_t, inp.atmos_refract)
        result = result._replace(eot=float(eot), **rts._asdict())

    return result
