"""Missiles that can all be substituted for the base missile."""

from __future__ import annotations


def _report(message: str) -> str:
    """Print a status message and hand it back to the caller."""
    print(message)
    return message


class Missile:
    def fire(self) -> str:
        return _report("Firing generic missile...")


class ICBMMissile(Missile):
    def fire(self) -> str:
        return _report("ICBM missile launched with long-range payload.")


class ShortRangeMissile(Missile):
    def fire(self) -> str:
        return _report("Short-range tactical missile launched!")


class DummyMissile:
    """Simulation-only missile; deliberately not a Missile."""

    def simulate(self) -> str:
        return _report("Simulating dummy missile (no real fire).")


def launch(missile: Missile) -> str:
    """Fire any real missile and return its launch message."""
    if not isinstance(missile, Missile):
        raise TypeError(f"{type(missile).__name__} is not a Missile")
    return missile.fire()


def main(argv: list[str] | None = None) -> int:
    """Launch the real missiles and simulate the dummy."""
    launch(ICBMMissile())
    launch(ShortRangeMissile())
    DummyMissile().simulate()
    return 0