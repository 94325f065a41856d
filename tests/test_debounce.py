import pytest
from hypothesis import given
from hypothesis import strategies as st

from pinballkit.debounce import DEFAULT_DELAY, Debounce


def test_fresh_switch_is_off():
    switch = Debounce()
    assert switch.state() == 0
    assert switch.activation_time() == 0
    assert switch.serviced is False
    assert switch.debounce_delay == DEFAULT_DELAY
    assert switch.ignore_window == 0


def test_press_accepted_only_after_default_delay():
    switch = Debounce()
    assert switch.update(1, 100) == 0
    assert switch.update(1, 100 + DEFAULT_DELAY - 1) == 0
    assert switch.update(1, 100 + DEFAULT_DELAY) == 1
    assert switch.state() == 1
    assert switch.activation_time() == 100


def test_zero_delay_follows_input_immediately():
    switch = Debounce(0, 0)
    assert switch.update(1, 10) == 1
    assert switch.activation_time() == 10
    assert switch.update(0, 11) == 0
    assert switch.activation_time() == 11


def test_flicker_restarts_the_debounce_timer():
    switch = Debounce(10, 0)
    switch.update(1, 0)
    switch.update(0, 5)
    switch.update(1, 8)
    assert switch.update(1, 17) == 0
    assert switch.update(1, 18) == 1
    assert switch.activation_time() == 8


def test_press_within_ignore_window_is_ignored():
    switch = Debounce(0, 50)
    assert switch.update(1, 10) == 1
    assert switch.update(0, 20) == 0
    assert switch.update(1, 30) == 0
    assert switch.update(1, 69) == 0
    assert switch.update(1, 70) == 1
    assert switch.activation_time() == 30


def test_release_has_no_ignore_window():
    switch = Debounce(0, 1000)
    switch.update(1, 0)
    assert switch.update(0, 1) == 0
    # A second release-reading does not change anything.
    assert switch.update(0, 2) == 0
    assert switch.activation_time() == 1


def test_is_ignoring_only_while_on_and_before_timeout():
    switch = Debounce(0, 50)
    switch.update(1, 10)
    switch.update(0, 20)
    assert switch.is_ignoring(30) is False  # switch is off
    switch.update(1, 70)
    assert switch.is_ignoring(69) is True
    assert switch.is_ignoring(70) is False


def test_serviced_flag_cleared_on_state_change():
    switch = Debounce(0, 0)
    switch.update(1, 5)
    switch.serviced = True
    assert switch.update(1, 6) == 1
    assert switch.serviced is True
    switch.update(0, 7)
    assert switch.serviced is False


def test_values_other_than_zero_and_one_never_change_state():
    switch = Debounce(0, 0)
    assert switch.update(2, 100) == 0
    assert switch.update(2, 200) == 0
    switch.update(1, 300)
    assert switch.update(2, 400) == 1


def test_clock_wraparound_is_handled():
    switch = Debounce(4, 0)
    assert switch.update(1, 0xFFFFFFFE) == 0
    assert switch.update(1, 2) == 1
    assert switch.activation_time() == 0xFFFFFFFE


@pytest.mark.parametrize("delay, window", [(-1, 0), (0, -1)])
def test_negative_settings_rejected(delay, window):
    with pytest.raises(ValueError):
        Debounce(delay, window)


@given(st.lists(st.sampled_from([0, 1]), max_size=50))
def test_zero_delay_and_window_tracks_last_value(values):
    switch = Debounce(0, 0)
    for moment, value in enumerate(values, start=1):
        assert switch.update(value, moment) == value
    assert switch.state() == (values[-1] if values else 0)


@given(
    st.integers(min_value=0, max_value=20),
    st.integers(min_value=0, max_value=20),
    st.lists(st.tuples(st.sampled_from([0, 1]), st.integers(0, 5)), max_size=60),
)
def test_state_is_always_binary_and_activation_not_in_future(delay, window, steps):
    switch = Debounce(delay, window)
    now = 0
    for value, step in steps:
        now += step
        result = switch.update(value, now)
        assert result in (0, 1)
        assert result == switch.state()
        assert switch.activation_time() <= now