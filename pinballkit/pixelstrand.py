"""A strand of addressable RGB pixels with a few animation effects."""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Protocol

Color = tuple[int, int, int]

_BLACK: Color = (0, 0, 0)
_WHITE: Color = (255, 255, 255)
_HUE_RANGE = 65536
_GAMMA = 2.6
_GAMMA_TABLE = tuple(int((i / 255) ** _GAMMA * 255 + 0.5) for i in range(256))

WHITE_BRIGHTNESS = 225
"""Brightness a strand is given when it starts out white."""


class StrandOutput(Protocol):
    """Where a strand sends its brightness and its frames of colors."""

    def set_brightness(self, value: int) -> None:
        """Set the overall brightness of the strand, 0 to 255."""

    def write(self, colors: Sequence[Color]) -> None:
        """Send one frame of (red, green, blue) colors, one per pixel."""


class RecordingOutput:
    """An output that keeps every frame and the last brightness it was given."""

    def __init__(self) -> None:
        self.brightness: int | None = None
        self.frames: list[tuple[Color, ...]] = []

    def set_brightness(self, value: int) -> None:
        """Remember the brightness."""
        self.brightness = value

    def write(self, colors: Sequence[Color]) -> None:
        """Append a copy of the frame."""
        self.frames.append(tuple(colors))


def _check_range(name: str, value: int, low: int, high: int) -> int:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}: {value}")
    return value


def _check_byte(name: str, value: int) -> int:
    return _check_range(name, value, 0, 255)


def color_hsv(hue: int, saturation: int, value: int) -> int:
    """Return the packed 0xRRGGBB color for a 16-bit hue and 8-bit saturation and value."""
    _check_range("hue", hue, 0, _HUE_RANGE - 1)
    _check_byte("saturation", saturation)
    _check_byte("value", value)

    sector = (hue * 1530 + 32768) // _HUE_RANGE
    if sector < 510:
        blue = 0
        red, green = (255, sector) if sector < 255 else (510 - sector, 255)
    elif sector < 1020:
        red = 0
        green, blue = (255, sector - 510) if sector < 765 else (1020 - sector, 255)
    elif sector < 1530:
        green = 0
        red, blue = (sector - 1020, 255) if sector < 1275 else (255, 1530 - sector)
    else:
        red, green, blue = 255, 0, 0

    v1 = 1 + value
    s1 = 1 + saturation
    s2 = 255 - saturation

    def scale(channel: int) -> int:
        return (((channel * s1) >> 8) + s2) * v1

    return (
        ((scale(red) & 0xFF00) << 8)
        | (scale(green) & 0xFF00)
        | (scale(blue) >> 8)
    )


def unpack_color(color: int) -> Color:
    """Split a packed 0xRRGGBB color into its (red, green, blue) channels."""
    _check_range("color", color, 0, 0xFFFFFFFF)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _gamma32(color: int) -> int:
    """Apply gamma correction to every byte of a packed color."""
    return int.from_bytes(
        bytes(_GAMMA_TABLE[b] for b in color.to_bytes(4, "big")), "big"
    )


class PixelStrand:
    """The colors of a strand of pixels, sent to an output when shown."""

    def __init__(self, pixel_count: int, output: StrandOutput) -> None:
        if pixel_count < 1:
            raise ValueError(f"a strand needs at least one pixel: {pixel_count}")
        self._output = output
        self._colors: list[Color] = [_BLACK] * pixel_count

    def __len__(self) -> int:
        return len(self._colors)

    @property
    def colors(self) -> tuple[Color, ...]:
        """The current color of every pixel, first pixel first."""
        return tuple(self._colors)

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._colors):
            raise IndexError(f"pixel index out of range: {index}")
        return index

    def alternate(
        self,
        red_a: int,
        green_a: int,
        blue_a: int,
        red_b: int,
        green_b: int,
        blue_b: int,
    ) -> None:
        """Color even pixels with the first color and odd pixels with the second, then show."""
        even = (_check_byte("red", red_a), _check_byte("green", green_a), _check_byte("blue", blue_a))
        odd = (_check_byte("red", red_b), _check_byte("green", green_b), _check_byte("blue", blue_b))
        self._colors = [odd if p % 2 else even for p in range(len(self._colors))]
        self.show()

    def color_wipe(self, red: int, green: int, blue: int, wait: int) -> None:
        """Fill the pixels one after another, showing each and pausing ``wait`` milliseconds."""
        color = (_check_byte("red", red), _check_byte("green", green), _check_byte("blue", blue))
        if wait < 0:
            raise ValueError(f"wait must not be negative: {wait}")
        for index in range(len(self._colors)):
            self._colors[index] = color
            self.show()
            time.sleep(wait / 1000)

    def get_color(self, pixel: int, channel: int) -> int:
        """Return one channel (0 red, 1 green, 2 blue) of a pixel's color."""
        if not 0 <= channel < 3:
            raise IndexError(f"color channel out of range: {channel}")
        return self._colors[self._check_index(pixel)][channel]

    def rainbow(self, first_hue: int = 0, reps: int = 1) -> None:
        """Spread ``reps`` cycles of hue over the strand, starting at ``first_hue``, then show.

        A negative ``reps`` runs the hues in reverse order.
        """
        _check_range("first hue", first_hue, 0, _HUE_RANGE - 1)
        _check_range("reps", reps, -128, 127)
        count = len(self._colors)
        for index in range(count):
            offset = index * reps * _HUE_RANGE
            step = abs(offset) // count
            hue = (first_hue + (-step if offset < 0 else step)) % _HUE_RANGE
            self._colors[index] = unpack_color(_gamma32(color_hsv(hue, 255, 255)))
        self.show()

    def rotate(self, positions: int) -> None:
        """Move every color ``positions`` pixels along the strand, wrapping round, then show."""
        shift = positions % len(self._colors) if positions > 0 else 0
        if shift:
            self._colors = self._colors[-shift:] + self._colors[:-shift]
        self.show()

    def set_brightness(self, value: int) -> None:
        """Set the brightness of the strand, 0 to 255."""
        self._output.set_brightness(_check_byte("brightness", value))

    def set_color(self, index: int, red: int, green: int, blue: int) -> None:
        """Set the color of one pixel; it appears at the next show."""
        self._colors[self._check_index(index)] = (
            _check_byte("red", red),
            _check_byte("green", green),
            _check_byte("blue", blue),
        )

    def set_packed_color(self, index: int, color: int) -> None:
        """Set the color of one pixel from a packed 0xRRGGBB value."""
        self.set_color(index, *unpack_color(color))

    def show(self) -> None:
        """Send the current colors to the output."""
        self._output.write(tuple(self._colors))


def white_strand(pixel_count: int, output: StrandOutput) -> PixelStrand:
    """Return a strand set to the start-up brightness and filled with white."""
    strand = PixelStrand(pixel_count, output)
    strand.set_brightness(WHITE_BRIGHTNESS)
    strand.color_wipe(*_WHITE, 0)
    return strand