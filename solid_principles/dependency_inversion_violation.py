"""An aircraft hard-wired to one concrete missile type."""

from __future__ import annotations


class AgniMissile:
    def turn(self, signal: int) -> None:
        if signal == 1:
            direction = "left."
        elif signal == 0:
            direction = "right."
        else:
            direction = "continuing straight."
        print(f"AgniMissile: Turning {direction}")

    def accelerate(self, signal: int) -> None:
        if signal > 0:
            action = "Increasing speed."
        elif signal < 0:
            action = "Decreasing speed."
        else:
            action = "Maintaining current speed."
        print(f"AgniMissile: {action}")


class AircraftModel:
    """Controller tightly coupled to AgniMissile."""

    def __init__(self, missile: AgniMissile) -> None:
        self.missile = missile

    def turn_missile(self, direction_signal: int) -> None:
        self.missile.turn(direction_signal)

    def control_missile_speed(self, speed_signal: int) -> None:
        self.missile.accelerate(speed_signal)


def main(argv: list[str] | None = None) -> int:
    """Fly the Agni missile from the aircraft model."""
    model = AircraftModel(AgniMissile())
    model.turn_missile(1)
    model.control_missile_speed(-1)
    return 0