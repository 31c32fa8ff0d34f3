"""A single fat aircraft interface that forces gliders to fake engines."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _report(message: str) -> str:
    """Print a status message and hand it back to the caller."""
    print(message)
    return message


class Aircraft(ABC):
    @abstractmethod
    def fly(self) -> str:
        """Fly the aircraft."""

    @abstractmethod
    def start_engine(self) -> str:
        """Start the engine."""

    @abstractmethod
    def stop_engine(self) -> str:
        """Stop the engine."""

    @abstractmethod
    def enable_autopilot(self) -> str:
        """Switch the autopilot on."""

    @abstractmethod
    def disable_autopilot(self) -> str:
        """Switch the autopilot off."""


class Boeing(Aircraft):
    def fly(self) -> str:
        return _report("Boeing is flying with engine thrust.")

    def start_engine(self) -> str:
        return _report("Boeing: Engine started.")

    def stop_engine(self) -> str:
        return _report("Boeing: Engine stopped.")

    def enable_autopilot(self) -> str:
        return _report("Boeing: Autopilot enabled.")

    def disable_autopilot(self) -> str:
        return _report("Boeing: Autopilot disabled.")


class Glider(Aircraft):
    def fly(self) -> str:
        return _report("Glider is flying using air currents.")

    def start_engine(self) -> str:
        return _report("Glider: No engine to start!")

    def stop_engine(self) -> str:
        return _report("Glider: No engine to stop!")

    def enable_autopilot(self) -> str:
        return _report("Glider: No autopilot available!")

    def disable_autopilot(self) -> str:
        return _report("Glider: No autopilot to disable!")


def main(argv: list[str] | None = None) -> int:
    """Run both aircraft through the fat interface."""
    boeing = Boeing()
    glider = Glider()

    print("--- Boeing ---")
    boeing.fly()
    boeing.start_engine()
    boeing.enable_autopilot()

    print("\n--- Glider ---")
    glider.fly()
    glider.start_engine()
    glider.enable_autopilot()
    return 0