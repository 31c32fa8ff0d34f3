import pytest

from solid_principles.interface_segregation import (
    AutopilotEnabled,
    BasicAircraft,
    Boeing,
    EnginePowered,
    Glider,
    check_autopilot,
    check_engine,
    check_flight,
    main,
)


def test_check_flight_glider(capsys):
    check_flight(Glider())
    assert capsys.readouterr().out == "Glider is flying using air currents and no engine.\n"


def test_check_engine_boeing(capsys):
    check_engine(Boeing())
    assert capsys.readouterr().out.splitlines() == [
        "Boeing: Engine started.",
        "Boeing: Engine stopped.",
    ]


def test_check_autopilot_boeing(capsys):
    check_autopilot(Boeing())
    assert capsys.readouterr().out.splitlines() == [
        "Boeing: Autopilot enabled.",
        "Boeing: Autopilot disabled.",
    ]


@pytest.mark.parametrize("check", [check_engine, check_autopilot])
def test_glider_rejected_by_engine_and_autopilot(check):
    with pytest.raises(TypeError):
        check(Glider())


def test_glider_only_basic():
    glider = Glider()
    interfaces = [BasicAircraft, EnginePowered, AutopilotEnabled]
    assert [cls for cls in interfaces if isinstance(glider, cls)] == [BasicAircraft]


def test_boeing_implements_all_interfaces():
    boeing = Boeing()
    interfaces = [BasicAircraft, EnginePowered, AutopilotEnabled]
    assert [cls for cls in interfaces if isinstance(boeing, cls)] == interfaces


@pytest.mark.parametrize("interface", [BasicAircraft, EnginePowered, AutopilotEnabled])
def test_interfaces_abstract(interface):
    with pytest.raises(TypeError):
        interface()


def test_main(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "--- Testing Boeing ---",
        "Boeing is flying with engine thrust.",
        "Boeing: Engine started.",
        "Boeing: Engine stopped.",
        "Boeing: Autopilot enabled.",
        "Boeing: Autopilot disabled.",
        "",
        "--- Testing Glider ---",
        "Glider is flying using air currents and no engine.",
    ]