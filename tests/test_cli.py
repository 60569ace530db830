"""End-to-end runs of the command line entry point."""

from __future__ import annotations

import pytest
from loguru import logger

from advent_of_code.cli import main


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield
    logger.remove()


def test_part_one(sample_input, capsys) -> None:
    main([str(sample_input), "--day", "1"])
    out = capsys.readouterr().out
    assert f"The answer to day 1, input {sample_input}, is:" in out
    assert out.rstrip().endswith("3")


def test_part_two(sample_input, capsys) -> None:
    main([str(sample_input), "-d", "1", "-p", "two"])
    assert capsys.readouterr().out.rstrip().endswith("6")


def test_numeric_part(sample_input, capsys) -> None:
    main([str(sample_input), "-d", "1", "-p", "2"])
    assert capsys.readouterr().out.rstrip().endswith("6")


def test_verbose_traces_rotations(sample_input, capsys) -> None:
    main([str(sample_input), "-d", "1", "--verbose"])
    err = capsys.readouterr().err
    assert "The dial is rotated L68 to point at 82." in err


def test_log_file_from_config(sample_input, tmp_path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text('[output]\nlog_level = "WARNING"\nlog_file = "logs/run.log"\n')
    main([str(sample_input), "-d", "1", "--config", str(config)])
    logger.remove()  # flush and close the file sink
    assert "point at 32." in (tmp_path / "logs" / "run.log").read_text()


def test_invalid_day(sample_input, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_input), "--day", "2"])
    assert excinfo.value.code == 2
    assert "Please use a valid day" in capsys.readouterr().err


def test_invalid_part(sample_input) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_input), "--day", "1", "--part", "three"])
    assert excinfo.value.code == 2


def test_bad_instruction_exits_nonzero(tmp_path, capsys) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("L68\nX5\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path), "--day", "1"])
    assert excinfo.value.code == 1
    assert "line 2" in capsys.readouterr().err


def test_missing_input_exits_nonzero(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.txt"), "--day", "1"])
    assert excinfo.value.code == 1


def test_bad_config_exits_nonzero(sample_input, tmp_path) -> None:
    config = tmp_path / "bad.toml"
    config.write_text("[run]\ndebug = 1\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_input), "-d", "1", "-c", str(config)])
    assert excinfo.value.code == 1


def test_non_utf8_input_exits_nonzero(tmp_path, capsys) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"L68\n\xff\xfe5\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path), "--day", "1"])
    assert excinfo.value.code == 1
    assert "not valid UTF-8" in capsys.readouterr().err


def test_unusable_log_file_exits_nonzero(sample_input, tmp_path, capsys) -> None:
    (tmp_path / "blocker").write_text("")
    config = tmp_path / "custom.toml"
    config.write_text('[output]\nlog_file = "blocker/run.log"\n')
    with pytest.raises(SystemExit) as excinfo:
        main([str(sample_input), "-d", "1", "--config", str(config)])
    assert excinfo.value.code == 1
    assert "Could not open log file" in capsys.readouterr().err
