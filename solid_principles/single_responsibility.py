"""A missile assembled from parts that each do one job."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


class TargetLocator:
    def search_target(self, start: Location | None, end: Location | None) -> Location:
        """Locate the target between two points."""
        print("Target located using radar.")
        return Location(10.12, 13.13)


class TargetLocker:
    """Holds the target most recently locked onto."""

    def __init__(self) -> None:
        self.locked: Location | None = None

    def lock_target(self, target: Location | None) -> str:
        """Lock onto a target and return the lock report."""
        self.locked = target
        message = "Target locked using infrared heat waves."
        print(message)
        return message


class FiringSystem:
    def fire(self, point: Location | None) -> str:
        """Fire at a point, or report that no valid point was given."""
        if point is None:
            return "Enter a valid location"
        return "Fired"


class Missile:
    def __init__(
        self,
        locator: TargetLocator,
        locker: TargetLocker,
        firing_system: FiringSystem,
    ) -> None:
        self.locator = locator
        self.locker = locker
        self.firing_system = firing_system

    def execute(self, start: Location | None, end: Location | None) -> None:
        target = self.locator.search_target(start, end)
        self.locker.lock_target(target)
        print(self.firing_system.fire(target))


def main(argv: list[str] | None = None) -> int:
    """Locate, lock and fire at a target."""
    start = Location(14.13, 15.0)
    end = Location(10.0, 15.0)
    missile = Missile(TargetLocator(), TargetLocker(), FiringSystem())
    missile.execute(start, end)
    return 0