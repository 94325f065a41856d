"""Names and scores of the switches and solenoids on a pinball machine."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

SWITCH_COUNT = 12
"""Number of switch inputs on the scoring board."""

SOLENOID_COUNT = 8
"""Number of solenoid drivers."""

DEFAULT_POINTS = 5
"""Points awarded by a switch or solenoid that has no score of its own."""


def _check_numbers(kind: str, mapping: Mapping[int, object], count: int) -> None:
    for number in mapping:
        if not 1 <= number <= count:
            raise ValueError(f"{kind} number must be between 1 and {count}: {number}")


@dataclass(frozen=True)
class MachineLayout:
    """Which switches and solenoids a machine uses, what they are called and what they score.

    ``switches`` and ``solenoids`` are the names known to the scoring board;
    ``driver_solenoids`` are the names known to the solenoid board. A number
    missing from a mapping is not used on the machine.
    """

    switches: Mapping[int, str]
    solenoids: Mapping[int, str]
    driver_solenoids: Mapping[int, str] = field(default_factory=dict)
    switch_scores: Mapping[int, int] = field(default_factory=dict)
    solenoid_scores: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_numbers("switch", self.switches, SWITCH_COUNT)
        _check_numbers("switch", self.switch_scores, SWITCH_COUNT)
        _check_numbers("solenoid", self.solenoids, SOLENOID_COUNT)
        _check_numbers("solenoid", self.driver_solenoids, SOLENOID_COUNT)
        _check_numbers("solenoid", self.solenoid_scores, SOLENOID_COUNT)
        for points in (*self.switch_scores.values(), *self.solenoid_scores.values()):
            if points < 0:
                raise ValueError(f"points must not be negative: {points}")

    @staticmethod
    def _lookup(kind: str, mapping: Mapping[int, str], number: int, count: int) -> str:
        if not 1 <= number <= count:
            raise ValueError(f"{kind} number must be between 1 and {count}: {number}")
        try:
            return mapping[number]
        except KeyError:
            raise KeyError(f"{kind} {number} is not used on this machine") from None

    def switch_name(self, number: int) -> str:
        """Return the name of a switch; KeyError if the machine does not use it."""
        return self._lookup("switch", self.switches, number, SWITCH_COUNT)

    def solenoid_name(self, number: int) -> str:
        """Return the name of a solenoid; KeyError if the machine does not use it."""
        return self._lookup("solenoid", self.solenoids, number, SOLENOID_COUNT)

    def switch_score(self, number: int) -> int:
        """Return the points a switch awards when it closes."""
        self.switch_name(number)
        return self.switch_scores.get(number, DEFAULT_POINTS)

    def solenoid_score(self, number: int) -> int:
        """Return the points a solenoid awards when it fires."""
        self.solenoid_name(number)
        return self.solenoid_scores.get(number, DEFAULT_POINTS)


def vanilla_layout() -> MachineLayout:
    """Return the generic layout with every switch and solenoid in use."""
    return MachineLayout(
        switches={n: f"S{n}" for n in range(1, SWITCH_COUNT + 1)},
        solenoids={n: f"X{n}" for n in range(1, SOLENOID_COUNT + 1)},
        driver_solenoids={n: f"S{n}" for n in range(1, SOLENOID_COUNT + 1)},
    )


def eckerd_layout() -> MachineLayout:
    """Return the layout of the themed machine."""
    return MachineLayout(
        switches={
            1: "R_1",
            2: "R_2",
            3: "R_3",
            4: "R_4",
            5: "R_8",
            6: "R_7",
            7: "R_6",
            8: "R_5",
            9: "T_2",
            10: "T_1",
            11: "Spinner",
        },
        solenoids={
            1: "RT_S",
            2: "PB_3",
            3: "LF_S",
            4: "PB_1",
            5: "PB_2",
            6: "PB_6",
            7: "PB_7",
        },
        driver_solenoids={
            1: "RT_S",
            2: "PB_3",
            3: "LF_S",
            4: "PB_2",
            5: "P_2",
            6: "P_6",
            7: "P_7",
        },
    )