"""A dummy missile subclass that breaks substitution by refusing to fire."""

from __future__ import annotations


class Missile:
    def fire(self) -> None:
        print("Missile launched!")


class DummyMissile(Missile):
    def fire(self) -> None:
        raise RuntimeError("This missile is for testing. Cannot fire.")


def launch_missile(missile: Missile) -> None:
    """Fire a missile, expecting every Missile to fire."""
    missile.fire()


def main(argv: list[str] | None = None) -> int:
    """Launch a dummy missile; this fails at run time."""
    launch_missile(DummyMissile())
    return 0