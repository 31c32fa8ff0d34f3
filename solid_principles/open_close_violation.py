"""A missile whose firing logic switches on a fixed set of types."""

from __future__ import annotations

from enum import Enum


class FiringType(Enum):
    INFRARED = "Infrared"
    LASER = "Laser"
    GPS = "GPS"


_MESSAGES = {
    FiringType.INFRARED: "Fired using Infrared guidance",
    FiringType.LASER: "Fired using Laser guidance",
    FiringType.GPS: "Fired using GPS guidance",
}


class Missile:
    def __init__(self, firing_type: FiringType) -> None:
        self.firing_type = firing_type

    def execute(self) -> str:
        """Fire according to the firing type, print and return the result."""
        result = _MESSAGES.get(self.firing_type, "Unknown firing type")
        print(result)
        return result


def main(argv: list[str] | None = None) -> int:
    """Fire one missile of each known type."""
    for firing_type in (FiringType.INFRARED, FiringType.LASER, FiringType.GPS):
        Missile(firing_type).execute()
    return 0