import math

import pytest

import solarspa
from solarspa import ErrorCode, InvalidInputError, Mode, SpaInput

def _valid(**kw):
    fields = dict(year=2003, month=10, day=17, hour=12, minute=30, second=30, timezone=-7,
                  delta_t=67, latitude=39.742476, longitude=-105.1786, elevation=1830.14,
                  pressure=820, temperature=11, slope=30, azm_rotation=-10)
    fields.update(kw)
    return SpaInput(**fields)

def test_valid():
    assert solarspa.validate_inputs(_valid()) == ErrorCode.VALID
    assert solarspa.validate_inputs(_valid()) == 0
    assert solarspa.find_violations(_valid()) == []

#(field overrides, expected code)
_invalid = [
    (dict(year=-2001), ErrorCode.YEAR),
    (dict(year=6001), ErrorCode.YEAR),
    (dict(month=0), ErrorCode.MONTH),
    (dict(month=13), ErrorCode.MONTH),
    (dict(day=0), ErrorCode.DAY),
    (dict(day=32), ErrorCode.DAY),
    (dict(hour=-1), ErrorCode.HOUR),
    (dict(hour=25), ErrorCode.HOUR),
    (dict(minute=-1), ErrorCode.MINUTE),
    (dict(minute=60), ErrorCode.MINUTE),
    (dict(second=-0.5), ErrorCode.SECOND),
    (dict(second=60), ErrorCode.SECOND),
    (dict(delta_t=8000.5), ErrorCode.DELTA_T),
    (dict(delta_t=-8001), ErrorCode.DELTA_T),
    (dict(timezone=18.5), ErrorCode.TIMEZONE),
    (dict(timezone=-19), ErrorCode.TIMEZONE),
    (dict(longitude=180.1), ErrorCode.LONGITUDE),
    (dict(longitude=-181), ErrorCode.LONGITUDE),
    (dict(latitude=90.1), ErrorCode.LATITUDE),
    (dict(latitude=-91), ErrorCode.LATITUDE),
    (dict(elevation=-6500001), ErrorCode.ELEVATION),
    (dict(pressure=-1), ErrorCode.PRESSURE),
    (dict(pressure=5001), ErrorCode.PRESSURE),
    (dict(temperature=-273), ErrorCode.TEMPERATURE),
    (dict(temperature=6001), ErrorCode.TEMPERATURE),
    (dict(slope=361), ErrorCode.SLOPE),
    (dict(slope=-361), ErrorCode.SLOPE),
    (dict(azm_rotation=361), ErrorCode.AZM_ROTATION),
    (dict(azm_rotation=-400), ErrorCode.AZM_ROTATION),
    (dict(atmos_refract=5.1), ErrorCode.ATMOS_REFRACT),
    (dict(atmos_refract=-6), ErrorCode.ATMOS_REFRACT),
    (dict(delta_ut1=1), ErrorCode.DELTA_UT1),
    (dict(delta_ut1=-1), ErrorCode.DELTA_UT1),
]

@pytest.fixture(params=_invalid)
def invalid(request : pytest.FixtureRequest):
    return request.param

def test_invalid(invalid):
    fields, code = invalid
    inp = _valid(**fields)
    assert solarspa.validate_inputs(inp) == code
    assert solarspa.find_violations(inp) == [code]
    with pytest.raises(InvalidInputError) as excinfo:
        solarspa.compute(inp)
    assert excinfo.value.code == code
    assert excinfo.value.field in fields
    assert isinstance(excinfo.value, ValueError)

def test_boundaries():
    for fields in [dict(year=-2000), dict(year=6000), dict(second=59.999), dict(delta_t=8000),
                   dict(delta_t=-8000), dict(timezone=18), dict(longitude=-180), dict(latitude=90),
                   dict(elevation=-6500000), dict(pressure=0), dict(pressure=5000),
                   dict(temperature=-272.9), dict(slope=360), dict(azm_rotation=-360),
                   dict(atmos_refract=5), dict(delta_ut1=0.999)]:
        assert solarspa.validate_inputs(_valid(**fields)) == ErrorCode.VALID, fields

def test_first_violation_wins():
    inp = _valid(month=13, hour=30)
    assert solarspa.validate_inputs(inp) == ErrorCode.MONTH
    assert solarspa.find_violations(inp) == [ErrorCode.MONTH, ErrorCode.HOUR]

    inp = _valid(latitude=100, year=7000, slope=1000)
    assert solarspa.validate_inputs(inp) == ErrorCode.YEAR
    assert solarspa.find_violations(inp) == [ErrorCode.YEAR, ErrorCode.LATITUDE, ErrorCode.SLOPE]

def test_atmosphere_checked_before_midnight():
    # pressure, temperature and delta_ut1 come before the 24:00:00 checks
    inp = _valid(hour=24, minute=1, pressure=-5)
    assert solarspa.validate_inputs(inp) == ErrorCode.PRESSURE
    inp = _valid(hour=24, second=1, delta_ut1=2)
    assert solarspa.validate_inputs(inp) == ErrorCode.DELTA_UT1

def test_hour_24():
    assert solarspa.validate_inputs(_valid(hour=24, minute=0, second=0)) == ErrorCode.VALID
    assert solarspa.validate_inputs(_valid(hour=24, minute=1, second=0)) == ErrorCode.MINUTE
    assert solarspa.validate_inputs(_valid(hour=24, minute=0, second=0.001)) == ErrorCode.SECOND
    # 24:00:00 is midnight at the end of the day
    r24 = solarspa.compute(_valid(hour=24, minute=0, second=0), Mode.ZENITH_AZIMUTH)
    r0 = solarspa.compute(_valid(day=18, hour=0, minute=0, second=0), Mode.ZENITH_AZIMUTH)
    assert r24.zenith == pytest.approx(r0.zenith, abs=1e-9)
    assert r24.azimuth == pytest.approx(r0.azimuth, abs=1e-9)

def test_surface_only_checked_for_incidence():
    inp = _valid(slope=400, azm_rotation=500)
    assert solarspa.validate_inputs(inp, Mode.ZENITH_AZIMUTH) == ErrorCode.VALID
    assert solarspa.validate_inputs(inp, Mode.RISE_TRANSIT_SET) == ErrorCode.VALID
    assert solarspa.validate_inputs(inp, Mode.INCIDENCE) == ErrorCode.SLOPE
    assert solarspa.validate_inputs(inp, Mode.ALL) == ErrorCode.SLOPE
    assert solarspa.compute(inp, Mode.ZENITH_AZIMUTH).incidence is None
    with pytest.raises(InvalidInputError):
        solarspa.compute(inp, Mode.INCIDENCE)

@pytest.mark.parametrize('field,code', [
    ('latitude', ErrorCode.LATITUDE),
    ('longitude', ErrorCode.LONGITUDE),
    ('elevation', ErrorCode.ELEVATION),
    ('pressure', ErrorCode.PRESSURE),
    ('delta_t', ErrorCode.DELTA_T),
    ('second', ErrorCode.SECOND),
])
def test_nan(field, code):
    inp = _valid(**{field: math.nan})
    assert solarspa.validate_inputs(inp) == code

def test_error_message():
    with pytest.raises(InvalidInputError, match='latitude') as excinfo:
        solarspa.compute(_valid(latitude=123.0))
    assert excinfo.value.code == ErrorCode.LATITUDE
    assert excinfo.value.field == 'latitude'
    assert excinfo.value.value == 123.0
    assert '123.0' in str(excinfo.value)
