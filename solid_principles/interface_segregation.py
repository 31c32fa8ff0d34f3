"""Aircraft capabilities split into small, separate interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BasicAircraft(ABC):
    @abstractmethod
    def fly(self) -> None:
        """Fly the aircraft."""


class EnginePowered(ABC):
    @abstractmethod
    def start_engine(self) -> None:
        """Start the engine."""

    @abstractmethod
    def stop_engine(self) -> None:
        """Stop the engine."""


class AutopilotEnabled(ABC):
    @abstractmethod
    def enable_autopilot(self) -> None:
        """Switch the autopilot on."""

    @abstractmethod
    def disable_autopilot(self) -> None:
        """Switch the autopilot off."""


class Boeing(BasicAircraft, EnginePowered, AutopilotEnabled):
    """A powered airliner with engines and an autopilot."""

    def __init__(self) -> None:
        self.airborne = False
        self.engine_running = False
        self.autopilot_engaged = False

    def fly(self) -> None:
        self.airborne = True
        print("Boeing is flying with engine thrust.")

    def start_engine(self) -> None:
        self.engine_running = True
        print("Boeing: Engine started.")

    def stop_engine(self) -> None:
        self.engine_running = False
        print("Boeing: Engine stopped.")

    def enable_autopilot(self) -> None:
        self.autopilot_engaged = True
        print("Boeing: Autopilot enabled.")

    def disable_autopilot(self) -> None:
        self.autopilot_engaged = False
        print("Boeing: Autopilot disabled.")


class Glider(BasicAircraft):
    """An unpowered aircraft that can only fly."""

    def __init__(self) -> None:
        self.airborne = False

    def fly(self) -> None:
        self.airborne = True
        print("Glider is flying using air currents and no engine.")


def _require(obj: object, interface: type) -> None:
    if not isinstance(obj, interface):
        raise TypeError(f"{type(obj).__name__} is not {interface.__name__}")


def check_flight(aircraft: BasicAircraft) -> None:
    """Make the aircraft fly."""
    _require(aircraft, BasicAircraft)
    aircraft.fly()


def check_engine(engine_aircraft: EnginePowered) -> None:
    """Start and stop the aircraft's engine."""
    _require(engine_aircraft, EnginePowered)
    engine_aircraft.start_engine()
    engine_aircraft.stop_engine()


def check_autopilot(autopilot_aircraft: AutopilotEnabled) -> None:
    """Switch the aircraft's autopilot on and off."""
    _require(autopilot_aircraft, AutopilotEnabled)
    autopilot_aircraft.enable_autopilot()
    autopilot_aircraft.disable_autopilot()


def main(argv: list[str] | None = None) -> int:
    """Exercise a Boeing on every interface and a glider on flight only."""
    boeing = Boeing()
    glider = Glider()

    print("--- Testing Boeing ---")
    check_flight(boeing)
    check_engine(boeing)
    check_autopilot(boeing)

    print("\n--- Testing Glider ---")
    check_flight(glider)
    return 0