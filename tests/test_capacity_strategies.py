import pytest

from raidcalc.capacity.errors import InvalidDriveSizeError
from raidcalc.capacity.strategies import generate_strategies
from raidcalc.capacity.units import to_binary_units


def _ids(strategies):
    return [s.scheme_id for s in strategies]


def test_strategies_no_drives():
    assert generate_strategies([]) == []


def test_strategies_one_drive():
    strategies = generate_strategies([4])

    # Only a single drive stripe is possible
    assert _ids(strategies) == ["zfs-stripe"]
    assert strategies[0].redundancy == "No redundancy - any drive failure results in data loss"


def test_strategies_two_drives():
    ids = _ids(generate_strategies([4, 4]))

    assert "raid0" in ids
    assert "raid1" in ids
    assert "shr" in ids
    assert "unraid-1" in ids
    assert "raid5" not in ids


def test_strategies_three_drives():
    ids = _ids(generate_strategies([4, 4, 4]))

    assert "raid5" in ids
    assert "raidz1" in ids
    assert "unraid-2" in ids
    assert "raid6" not in ids
    assert "raid10" not in ids


def test_strategies_four_drives():
    ids = _ids(generate_strategies([4, 4, 4, 4]))

    for scheme_id in ["raid0", "raid1", "raid5", "raid6", "raid10", "shr2", "raidz2"]:
        assert scheme_id in ids
    assert "raidz3" not in ids


def test_strategy_figures():
    strategies = {s.scheme_id: s for s in generate_strategies([2, 4, 6])}

    unraid = strategies["unraid-1"]
    assert unraid.usable_capacity == pytest.approx(to_binary_units(6))
    assert unraid.raw_capacity == pytest.approx(to_binary_units(12))
    assert unraid.efficiency == pytest.approx(0.5)
    assert unraid.drives == [2.0, 4.0, 6.0]


def test_strategies_reject_bad_sizes():
    with pytest.raises(InvalidDriveSizeError):
        generate_strategies([4, -1])
