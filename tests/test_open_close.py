import pytest

from solid_principles.open_close import (
    FiringStrategy,
    GPSFiring,
    InfraredFiring,
    LaserFiring,
    Missile,
    main,
)


@pytest.mark.parametrize(
    "cls, expected",
    [
        (InfraredFiring, "Fired using Infrared guidance"),
        (LaserFiring, "Fired using Laser guidance"),
        (GPSFiring, "Fired using GPS guidance"),
    ],
)
def test_strategy_fire(cls, expected):
    assert cls().fire() == expected


def test_missile_prints_strategy_result(capsys):
    Missile(LaserFiring()).execute()
    assert capsys.readouterr().out == "Fired using Laser guidance\n"


class _SonarFiring(FiringStrategy):
    def fire(self):
        return "sonar"


def test_new_strategy_needs_no_missile_change(capsys):
    Missile(_SonarFiring()).execute()
    assert capsys.readouterr().out == "sonar\n"


def test_strategy_abstract():
    with pytest.raises(TypeError):
        FiringStrategy()


def test_main(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Fired using Infrared guidance",
        "Fired using Laser guidance",
        "Fired using GPS guidance",
    ]