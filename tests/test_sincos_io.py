import math

import pytest

from numlab.sincos_io import main, tabulate


def test_tabulate_zero():
    assert list(tabulate([0.0])) == ["0 0 1"]


def test_tabulate_satisfies_identity():
    for line in tabulate([0.5, 1.0, -2.0]):
        _, s, c = (float(v) for v in line.split())
        assert s * s + c * c == pytest.approx(1.0, abs=1e-5)


def test_main_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("0 1.5\n2\n")
    assert main(["--input", str(source), "--output", str(target)]) == 0
    rows = [line.split() for line in target.read_text().splitlines()]
    assert [float(r[0]) for r in rows] == [0.0, 1.5, 2.0]
    assert float(rows[1][1]) == pytest.approx(math.sin(1.5), abs=1e-5)


def test_main_stops_at_first_non_number(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("1 2 stop 3\n")
    assert main(["--input", str(source), "--output", str(target)]) == 0
    assert len(target.read_text().splitlines()) == 2


def test_main_reports_missing_input(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main(["--input", str(missing), "--output", str(tmp_path / "o.txt")]) == 1
    assert "Error opening files" in capsys.readouterr().err


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Error opening files" in capsys.readouterr().err