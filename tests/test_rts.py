import pytest

import solarspa
from solarspa import Mode, Polar, Event, NoEvent, RiseTransitSet, SpaInput
from solarspa import rts, angles

_sites = [
    #year, month, day, timezone, latitude, longitude
    (2020, 3, 20, -7.0, 40.0, -105.0),
    (2021, 7, 4, 10.0, -33.87, 151.21),
    (2022, 12, 1, 0.0, 51.48, 0.0),
    (1999, 8, 11, 2.0, 48.0, 10.0),
    (2030, 1, 15, 5.5, 28.6, 77.2),
    (2003, 10, 17, -7.0, 39.742476, -105.1786),
]

@pytest.fixture(params=_sites)
def site(request : pytest.FixtureRequest):
    return request.param

def test_ordinary_day(site):
    year, month, day, tz, lat, lon = site
    result = solarspa.rise_transit_set(year, month, day, tz, lat, lon, delta_t=69)
    assert isinstance(result, RiseTransitSet)
    assert all(e.occurred for e in result[:3])
    assert 0 <= result.sunrise.hour < result.transit.hour < result.sunset.hour < 24
    # solar noon is within a couple of hours of the zone's clock noon
    assert abs(result.transit.hour - 12) < 2
    assert -180 <= result.sunrise_hour_angle < 0 < result.sunset_hour_angle <= 180
    assert -90 < result.transit_altitude <= 90

def test_rise_set_correction(site):
    year, month, day, tz, lat, lon = site
    h0_prime = -(0.26667 + 0.5667)
    nu, alpha, delta = rts._daily_samples(year, month, day, 69)
    _, m = rts._approximate_times(nu, alpha, delta, lat, lon, h0_prime)
    result = solarspa.rise_transit_set(year, month, day, tz, lat, lon, delta_t=69)
    for mi, event in zip(m[1:], (result.sunrise, result.sunset)):
        H_prime, h, delta_prime = rts._local_sun(mi, nu, alpha, delta, lat, lon, 69)
        m_corrected = rts._rise_set_correction(mi, H_prime, h, delta_prime, lat, h0_prime)
        h_corrected = rts._local_sun(m_corrected, nu, alpha, delta, lat, lon, 69)[1]
        # the correction step brings the sun's altitude closer to h0_prime
        assert abs(h_corrected - h0_prime) < abs(h - h0_prime)
        assert abs(h_corrected - h0_prime) < 0.1
        assert event.hour == pytest.approx(angles.dayfrac_to_local_hr(m_corrected, tz))

def test_day_length():
    # equinox: about 12 hours plus a few minutes of refraction and the sun's radius
    r = solarspa.rise_transit_set(2020, 3, 20, 0, 0.0, 0.0)
    assert 12.0 < r.sunset.hour - r.sunrise.hour < 12.25
    # midsummer is longer at higher latitude
    r40 = solarspa.rise_transit_set(2020, 6, 21, 0, 40.0, 0.0)
    r60 = solarspa.rise_transit_set(2020, 6, 21, 0, 60.0, 0.0)
    assert (r60.sunset.hour - r60.sunrise.hour) > (r40.sunset.hour - r40.sunrise.hour) > 14

@pytest.mark.parametrize('month,day,latitude,reason', [
    (6, 21, 80.0, Polar.DAY),
    (12, 21, 80.0, Polar.NIGHT),
    (6, 21, -80.0, Polar.NIGHT),
    (12, 21, -80.0, Polar.DAY),
    (6, 21, 89.9, Polar.DAY),
])
def test_polar(month, day, latitude, reason):
    result = solarspa.rise_transit_set(2020, month, day, 0, latitude, 15.0)
    assert result.sunrise == result.transit == result.sunset == NoEvent(reason)
    assert not result.sunrise.occurred
    assert result.sunrise_hour_angle is None
    assert result.sunset_hour_angle is None
    assert result.transit_altitude is None

    r = solarspa.compute(SpaInput(2020, month, day, 12, latitude=latitude, longitude=15.0), Mode.ALL)
    assert r.sunrise == NoEvent(reason)
    assert r.transit_altitude is None
    # the position is still computed
    if reason is Polar.DAY:
        assert r.zenith < 90
    else:
        assert r.zenith > 90

def test_hour_angle_argument():
    # equator at the equinox: the sun sets
    assert -1 <= rts.hour_angle_argument(0.0, 0.0, -0.8334) <= 1
    assert rts.hour_angle_argument(80.0, 23.4, -0.8334) < -1
    assert rts.hour_angle_argument(80.0, -23.4, -0.8334) > 1

def test_interpolate():
    assert rts._interpolate((1.0, 2.0, 3.0), 0.5) == pytest.approx(2.5)
    assert rts._interpolate((1.0, 2.0, 3.0), 0.0) == pytest.approx(2.0)
    # right ascension through 360: large differences are wrapped
    assert rts._interpolate((358.0, 359.0, 0.0), 0.0) == pytest.approx(359.0)

def test_events():
    e = Event(6.211944)
    assert e.occurred
    assert str(e) == '06:12:43'
    n = NoEvent(Polar.NIGHT)
    assert not n.occurred
    assert str(n) == 'polar night'
    assert n != NoEvent(Polar.DAY)
