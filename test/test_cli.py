# test/test_cli.py
import logging

import pytest

from epgseg.cli import build_parser, main

from conftest import HEADER


def test_parser_defaults():
    args = build_parser().parse_args(["rec.D01"])
    assert args.seed == "rec.D01"
    assert args.rate == 100.0
    assert args.mode == "line"
    assert args.start == 0.0
    assert args.duration == 10.0
    assert not args.full
    assert args.output is None


def test_main_writes_window_figure(recording, tmp_path, caplog):
    out = tmp_path / "chunk.png"

    with caplog.at_level(logging.INFO):
        rc = main([str(recording), "--rate", "2", "--start", "1", "--duration", "1", "--output", str(out)])

    assert rc == 0
    assert out.exists()
    assert "2 segment(s), 6 samples" in caplog.text


def test_main_full_scatter(recording, tmp_path):
    out = tmp_path / "full.png"
    rc = main([str(recording), "--full", "--mode", "scatter", "--output", str(out)])
    assert rc == 0
    assert out.exists()


def test_main_reports_core_errors(tmp_path, caplog):
    rc = main([str(tmp_path / "missing.D01")])
    assert rc == 1
    assert "File not found" in caplog.text


def test_main_bad_mode_and_rate(recording):
    assert main([str(recording), "--mode", "bar"]) == 1
    assert main([str(recording), "--rate", "0"]) == 1


def test_main_lenient_flag(tmp_path):
    (tmp_path / "rec.D01").write_bytes(HEADER + b"\x00\x00\x80\x3f\x00")

    assert main([str(tmp_path / "rec.D01")]) == 1
    assert main([str(tmp_path / "rec.D01"), "--lenient"]) == 0


def test_main_usage_error_exits_2():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_main_title_requires_full(recording):
    with pytest.raises(SystemExit) as exc:
        main([str(recording), "--title", "Night run"])
    assert exc.value.code == 2

    assert main([str(recording), "--full", "--title", "Night run"]) == 0
