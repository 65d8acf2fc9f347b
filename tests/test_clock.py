from datetime import time

import pytest

from day_planner.clock import MalformedTimeError, minutes_to_time, normalize_time, time_to_minutes


def test_minutes_to_time_pads_and_wraps():
    assert minutes_to_time(0) == "00:00"
    assert minutes_to_time(425) == "07:05"
    assert minutes_to_time(1439) == "23:59"
    assert minutes_to_time(1440) == "00:00"
    assert minutes_to_time(1500) == "01:00"


def test_minutes_to_time_negative_wraps_backwards():
    assert minutes_to_time(-30) == "23:30"
    assert minutes_to_time(-1440) == "00:00"


def test_time_to_minutes():
    assert time_to_minutes("00:00") == 0
    assert time_to_minutes("07:00") == 420
    assert time_to_minutes("23:59") == 1439


@pytest.mark.parametrize("value", ["", "7", "0700", "7:00", "07:0", "24:00", "12:60", "ab:cd", "07:00:00", None])
def test_time_to_minutes_rejects_malformed(value):
    with pytest.raises(MalformedTimeError):
        time_to_minutes(value)


def test_malformed_time_is_value_error():
    with pytest.raises(ValueError):
        time_to_minutes("noon")


def test_clock_round_trips():
    for minutes in (0, 59, 60, 719, 1439):
        assert time_to_minutes(minutes_to_time(minutes)) == minutes
    for minutes in (1440, 2000, 10_000):
        assert time_to_minutes(minutes_to_time(minutes)) == minutes % 1440
    assert minutes_to_time(time_to_minutes("18:45")) == "18:45"


def test_normalize_time():
    assert normalize_time(time(6, 5)) == "06:05"
    assert normalize_time("21:30") == "21:30"
    with pytest.raises(MalformedTimeError):
        normalize_time("9pm")


@pytest.mark.parametrize("value", ["0٧:30", "07:3٠", "０７:00"])
def test_time_to_minutes_rejects_non_ascii_digits(value):
    with pytest.raises(MalformedTimeError):
        time_to_minutes(value)
