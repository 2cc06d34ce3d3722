import json

import pytest
from click.testing import CliRunner

from raidcalc.cli import main
from raidcalc.cli import utils
from raidcalc.capacity.units import to_binary_units


def test_main_help():
    runner = CliRunner()
    result = runner.invoke(main, ['--help'])
    assert result.exit_code == 0
    assert "RAID capacity calculator CLI" in result.output


def test_calculate_identical_drives():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raid5', '--count', '5', '--size', '4'])
    assert result.exit_code == 0
    assert "Usable Capacity:    14.55 TiB (16.00 TB)" in result.output
    assert "Storage Efficiency: 80.0%" in result.output


def test_calculate_uses_default_drive_size(monkeypatch):
    monkeypatch.setattr(utils.config, "default_drive_size", 12.0)
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raid0', '--count', '4'])
    assert result.exit_code == 0
    assert "43.66 TiB (48.00 TB)" in result.output


def test_calculate_mixed_drives_json():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'unraid-1', '--drives', '2,4,6', '--json'])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["scheme"]["scheme_id"] == "unraid-1"
    assert data["drives"] == [2.0, 4.0, 6.0]
    assert data["result"]["usable_capacity"] == pytest.approx(to_binary_units(6))


def test_calculate_vdevs():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raidz1', '--vdevs', '2', '--drives-per-vdev', '3', '--size', '4'])
    assert result.exit_code == 0
    assert "14.55 TiB (16.00 TB)" in result.output
    assert "2 vdevs × 3 drives each" in result.output


def test_calculate_vdevs_need_both_options():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raidz1', '--vdevs', '2', '--count', '6'])
    assert result.exit_code == 2
    assert "must be used together" in result.output


def test_calculate_topology_mismatch():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raidz1', '--vdevs', '2', '--drives-per-vdev', '3', '--count', '7'])
    assert result.exit_code == 1
    assert "Total drives (7) must equal vdevs (2)" in result.output


def test_calculate_insufficient_drives():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raid5', '--drives', '4,4'])
    assert result.exit_code == 1
    assert "RAID 5 requires at least 3 drives" in result.output


def test_calculate_unknown_scheme():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raid7', '--count', '3'])
    assert result.exit_code == 1
    assert "Unknown storage scheme: raid7" in result.output


def test_calculate_drives_and_count_are_exclusive():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raid0', '--drives', '4,4', '--count', '2'])
    assert result.exit_code == 2
    assert "mutually exclusive" in result.output


def test_exclusive_option_names_both_flags():
    runner = CliRunner()
    result = runner.invoke(main, ['compare', '--drives', '4,4', '--size', '4'])
    assert result.exit_code == 2
    assert "--drives is mutually exclusive with --size." in result.output


def test_exclusive_option_help():
    from raidcalc.cli.capacity import calculate

    options = {p.name: p for p in calculate.params}
    assert options["drives"].help.endswith("Cannot be used with --count/--size.")
    assert options["count"].help == "Number of identical drives. Cannot be used with --drives."


def test_calculate_bad_drive_list():
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raid0', '--drives', '4,big'])
    assert result.exit_code == 2


def test_calculate_drive_limit(monkeypatch):
    monkeypatch.setattr(utils.config, "max_drives", 3)
    runner = CliRunner()
    result = runner.invoke(main, ['calculate', 'raid0', '--count', '4'])
    assert result.exit_code == 2
    assert "At most 3 drives" in result.output


def test_calculate_from_layout_file(tmp_path):
    layout = tmp_path / "layout.yaml"
    layout.write_text("scheme: unraid-1\ndrives: [2, 4, 6]\n")

    runner = CliRunner()
    result = runner.invoke(main, ['calculate', '--config', str(layout)])
    assert result.exit_code == 0
    assert "5.46 TiB (6.00 TB)" in result.output
    assert "3 drives: 1x 2TB, 1x 4TB, 1x 6TB" in result.output


def test_calculate_finds_default_layout(tmp_path, monkeypatch):
    layout = tmp_path / "raidcalc.yaml"
    layout.write_text("scheme: zfs-mirror\ndrives: [8, 4, 8, 6]\nvdevs: 2\ndrives_per_vdev: 2\n")
    monkeypatch.setattr(utils, "LAYOUT_SEARCH_PATHS", [str(layout)])

    runner = CliRunner()
    result = runner.invoke(main, ['calculate'])
    assert result.exit_code == 0
    assert "9.09 TiB (10.00 TB)" in result.output


def test_calculate_without_scheme_or_layout(tmp_path, monkeypatch):
    monkeypatch.setattr(utils, "LAYOUT_SEARCH_PATHS", [str(tmp_path / "missing.yaml")])

    runner = CliRunner()
    result = runner.invoke(main, ['calculate', '--count', '3'])
    assert result.exit_code == 2
    assert "no layout file found" in result.output


def test_schemes_list():
    runner = CliRunner()
    result = runner.invoke(main, ['schemes'])
    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 14
    assert "Synology Hybrid RAID 2" in result.output


def test_schemes_availability():
    runner = CliRunner()
    result = runner.invoke(main, ['schemes', '--count', '3'])
    assert result.exit_code == 0
    lines = {line.split()[0]: line for line in result.output.strip().splitlines()}
    assert lines["raid5"].endswith("[ok]")
    assert lines["raid6"].endswith("[Requires 4+ drives]")
    assert lines["raid10"].endswith("[RAID 10 requires even number of drives]")


def test_schemes_json():
    runner = CliRunner()
    result = runner.invoke(main, ['schemes', '--json'])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [d["scheme_id"] for d in data][-1] == "unraid-2"


def test_compare():
    runner = CliRunner()
    result = runner.invoke(main, ['compare', '--drives', '4,4'])
    assert result.exit_code == 0
    assert "RAID 1" in result.output
    assert "RAID 5" not in result.output


def test_compare_single_drive():
    runner = CliRunner()
    result = runner.invoke(main, ['compare', '--count', '1', '--size', '4'])
    assert result.exit_code == 0
    assert result.output.strip().startswith("ZFS Stripe")
    assert len(result.output.strip().splitlines()) == 1


def test_compare_rejects_bad_size():
    runner = CliRunner()
    result = runner.invoke(main, ['compare', '--drives', '4,-1'])
    assert result.exit_code == 1
    assert "positive" in result.output
