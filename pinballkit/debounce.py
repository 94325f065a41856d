"""Software debouncing for a mechanical switch sampled at known times."""

from __future__ import annotations

DEFAULT_DELAY = 4
"""Default debounce delay, in milliseconds."""

_CLOCK_MASK = 0xFFFFFFFF  # millisecond clock is a 32-bit counter that wraps


class Debounce:
    """A switch whose reported state changes only after the input has settled.

    The raw switch value must hold for ``debounce_delay`` milliseconds before
    the steady state follows it. After the switch is released, a new press
    is not accepted until ``ignore_window`` milliseconds have passed since
    the release began.

    ``serviced`` is a flag for the caller. It is cleared whenever the steady
    state changes. Set it once the change has been handled.
    """

    def __init__(self, debounce_delay: int = DEFAULT_DELAY, ignore_window: int = 0) -> None:
        if debounce_delay < 0:
            raise ValueError(f"debounce delay must not be negative: {debounce_delay}")
        if ignore_window < 0:
            raise ValueError(f"ignore window must not be negative: {ignore_window}")
        self._debounce_delay = debounce_delay
        self._ignore_window = ignore_window
        self._ignore_timeout = 0
        self._last_activation_time = 0
        self._last_debounce_time = 0
        self._last_flickerable_state = 0
        self._steady_state = 0
        self.serviced = False

    @property
    def debounce_delay(self) -> int:
        """Milliseconds the input must be steady before the state follows it."""
        return self._debounce_delay

    @property
    def ignore_window(self) -> int:
        """Milliseconds after a release during which presses are ignored."""
        return self._ignore_window

    def activation_time(self) -> int:
        """Return the time, in milliseconds, at which the current steady state began."""
        return self._last_activation_time

    def is_ignoring(self, current_millis: int) -> bool:
        """Return True if the switch is on and the ignore window has not expired."""
        return self._steady_state == 1 and current_millis < self._ignore_timeout

    def state(self) -> int:
        """Return the current steady state of the switch."""
        return self._steady_state

    def update(self, current_value: int, current_millis: int) -> int:
        """Feed a raw switch reading taken at ``current_millis``; return the steady state."""
        if current_value != self._last_flickerable_state:
            self._last_debounce_time = current_millis
            self._last_flickerable_state = current_value

        elapsed = (current_millis - self._last_debounce_time) & _CLOCK_MASK
        if elapsed >= self._debounce_delay and self._steady_state != current_value:
            if current_value == 1 and current_millis >= self._ignore_timeout:
                self._steady_state = 1
                self._last_activation_time = self._last_debounce_time
                self.serviced = False
            elif current_value == 0:
                # Releasing the switch is never subject to the ignore window.
                self._steady_state = 0
                self._last_activation_time = self._last_debounce_time
                self._ignore_timeout = (
                    self._last_activation_time + self._ignore_window
                ) & _CLOCK_MASK
                self.serviced = False

        return self._steady_state