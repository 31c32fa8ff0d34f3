"""Missile firing extended through interchangeable strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class FiringStrategy(ABC):
    @abstractmethod
    def fire(self) -> str:
        """Return a description of how the missile was fired."""


class InfraredFiring(FiringStrategy):
    def fire(self) -> str:
        return "Fired using Infrared guidance"


class LaserFiring(FiringStrategy):
    def fire(self) -> str:
        return "Fired using Laser guidance"


class GPSFiring(FiringStrategy):
    def fire(self) -> str:
        return "Fired using GPS guidance"


class Missile:
    def __init__(self, strategy: FiringStrategy) -> None:
        self.strategy = strategy

    def execute(self) -> str:
        """Fire with the configured strategy, print and return the result."""
        result = self.strategy.fire()
        print(result)
        return result


def main(argv: list[str] | None = None) -> int:
    """Fire one missile with each strategy."""
    for strategy in (InfraredFiring(), LaserFiring(), GPSFiring()):
        Missile(strategy).execute()
    return 0