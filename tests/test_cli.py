"""Tests for the hexdump2 command line interface."""

import pytest

from hexdump2.__main__ import main, parse_args


def test_parse_export_defaults():
    args = parse_args(["export", "data.bin"])
    assert args.command == "export"
    assert args.per_line == 16
    assert not args.offsets
    assert not args.ascii
    assert not args.color


def test_export_to_stdout(tmp_path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(b"abcde\x00")

    main(["export", str(source), "-n", "4", "--offsets", "--ascii"])

    out = capsys.readouterr().out
    assert out == "0000 61 62 63 64 abcd\n0004 65 00       e.\n"


def test_export_to_file(tmp_path):
    source = tmp_path / "data.bin"
    target = tmp_path / "data.hex"
    source.write_bytes(bytes(range(4)))

    main(["export", str(source), "-o", str(target), "--per-line", "2"])

    assert target.read_text(encoding="utf-8") == "00 01\n02 03\n"


def test_import_to_file(tmp_path):
    source = tmp_path / "data.hex"
    target = tmp_path / "data.bin"
    source.write_text("0000 61 62 63 abc\n0003 64 65    de\n", encoding="utf-8")

    main(["import", str(source), "-o", str(target)])

    assert target.read_bytes() == b"abcde"


def test_round_trip_through_files(tmp_path):
    data = bytes(range(256)) * 3
    binary = tmp_path / "in.bin"
    text = tmp_path / "dump.hex"
    restored = tmp_path / "out.bin"
    binary.write_bytes(data)

    main(["export", str(binary), "-o", str(text), "--offsets", "--ascii"])
    main(["import", str(text), "-o", str(restored)])

    assert restored.read_bytes() == data


def test_import_malformed_exits_with_error(tmp_path, capsys):
    source = tmp_path / "bad.hex"
    source.write_text("xx aa bb", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["import", str(source), "-o", str(tmp_path / "out.bin")])

    assert excinfo.value.code == 1
    assert "not a valid hexdump" in capsys.readouterr().err
    assert not (tmp_path / "out.bin").exists()


def test_export_rejects_zero_per_line(tmp_path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(b"\x00")

    with pytest.raises(SystemExit) as excinfo:
        main(["export", str(source), "-n", "0"])

    assert excinfo.value.code == 1
    assert "per_line must be positive" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["export", str(tmp_path / "missing.bin")])

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_color_is_not_written_to_files(tmp_path):
    source = tmp_path / "data.bin"
    target = tmp_path / "data.hex"
    source.write_bytes(b"\x00\x01")

    main(["export", str(source), "-o", str(target), "--color"])

    assert target.read_text(encoding="utf-8") == "00 01\n"


def test_color_on_stdout(tmp_path, capsys):
    source = tmp_path / "data.bin"
    source.write_bytes(b"\x00\x01")

    main(["export", str(source), "--color"])

    assert "\x1b[" in capsys.readouterr().out


def test_color_with_empty_input_prints_nothing(tmp_path, capsys):
    source = tmp_path / "empty.bin"
    source.write_bytes(b"")

    main(["export", str(source), "--color"])

    assert capsys.readouterr().out == ""
