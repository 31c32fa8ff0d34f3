from solid_principles.single_responsibility import (
    FiringSystem,
    Location,
    Missile,
    TargetLocator,
    TargetLocker,
    main,
)


def test_search_target(capsys):
    found = TargetLocator().search_target(Location(14.13, 15.0), Location(10.0, 15.0))
    assert found == Location(10.12, 13.13)
    assert capsys.readouterr().out == "Target located using radar.\n"


def test_lock_target(capsys):
    TargetLocker().lock_target(Location(1.0, 2.0))
    assert capsys.readouterr().out == "Target locked using infrared heat waves.\n"


def test_fire_with_location():
    assert FiringSystem().fire(Location(0.0, 0.0)) == "Fired"


def test_fire_without_location():
    assert FiringSystem().fire(None) == "Enter a valid location"


class _NoTargetLocator(TargetLocator):
    def search_target(self, start, end):
        return None


def test_missile_without_target(capsys):
    Missile(_NoTargetLocator(), TargetLocker(), FiringSystem()).execute(None, None)
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Enter a valid location"


def test_main(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Target located using radar.",
        "Target locked using infrared heat waves.",
        "Fired",
    ]