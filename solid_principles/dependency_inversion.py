"""An aircraft that steers any missile through an abstract missile interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _turn_direction(signal: int) -> str:
    if signal == 1:
        return "left."
    if signal == 0:
        return "right."
    return "continuing straight."


def _by_sign(signal: int, faster: str, slower: str, steady: str) -> str:
    if signal > 0:
        return faster
    if signal < 0:
        return slower
    return steady


class Missile(ABC):
    """Interface every missile the aircraft can control must provide."""

    @abstractmethod
    def turn(self, signal: int) -> None:
        """Turn: 1 means left, 0 means right, anything else straight on."""

    @abstractmethod
    def accelerate(self, signal: int) -> None:
        """Change speed according to the sign of the signal."""


class AgniMissile(Missile):
    def turn(self, signal: int) -> None:
        print(f"AgniMissile: Turning {_turn_direction(signal)}")

    def accelerate(self, signal: int) -> None:
        action = _by_sign(
            signal,
            "Increasing speed.",
            "Decreasing speed.",
            "Maintaining current speed.",
        )
        print(f"AgniMissile: {action}")


class TejasMissile(Missile):
    def turn(self, signal: int) -> None:
        print(f"TejasMissile: Turning {_turn_direction(signal)}")

    def accelerate(self, signal: int) -> None:
        action = _by_sign(
            signal,
            "Boosting.",
            "Slowing down.",
            "Holding current velocity.",
        )
        print(f"TejasMissile: {action}")


class AircraftModel:
    """High-level controller that depends only on the Missile interface."""

    def __init__(self, missile: Missile) -> None:
        self.missile = missile

    def turn_missile(self, direction_signal: int) -> None:
        self.missile.turn(direction_signal)

    def control_missile_speed(self, speed_signal: int) -> None:
        self.missile.accelerate(speed_signal)


def main(argv: list[str] | None = None) -> int:
    """Fly a Tejas missile from the aircraft model."""
    model = AircraftModel(TejasMissile())
    model.turn_missile(1)
    model.control_missile_speed(-1)
    return 0