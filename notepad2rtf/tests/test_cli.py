import json
import logging
import shutil
from pathlib import Path

import pytest

import notepad2rtf
from notepad2rtf.cli import main

LETTER = Path(__file__).resolve().parent / "resources" / "letter.np"


@pytest.fixture
def letter(tmp_path: Path) -> Path:
    path = tmp_path / "letter.np"
    shutil.copyfile(LETTER, path)
    return path


def test_cli_without_arguments_prints_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: notepad2rtf" in captured.out
    assert notepad2rtf.__version__ in captured.out


def test_cli_converts_to_rtf_by_default(capsys, letter: Path) -> None:
    exit_code = main([str(letter)])
    captured = capsys.readouterr()

    target = letter.with_suffix(".rtf")
    assert exit_code == 0
    assert captured.out == f"conversion successful: {target.resolve()}\n"
    assert target.read_bytes() == notepad2rtf.convert_bytes(LETTER.read_bytes())


def test_cli_text_mode_with_output(capsys, letter: Path, tmp_path: Path) -> None:
    output = tmp_path / "plain.out"

    exit_code = main(["--text", "-o", str(output), str(letter)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert str(output.resolve()) in captured.out
    assert output.read_bytes().startswith(b"Dear Sam,\n")
    assert not letter.with_suffix(".txt").exists()


def test_cli_outputs_json_report(capsys, letter: Path) -> None:
    exit_code = main(["--json", str(letter)])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out.strip())
    assert payload["_type"] == "ConversionReport"
    assert payload["mode"] == "rtf"
    assert payload["bytes_read"] == LETTER.stat().st_size
    assert payload["unrecognized_codes"][0]["code"] == 0x41
    assert payload["metadata"]["target"]["filename"] == "letter.rtf"


def test_cli_stale_fragment_flag(capsys, letter: Path) -> None:
    exit_code = main(["--stale-fragment", str(letter)])
    capsys.readouterr()

    assert exit_code == 0
    # the fragment before the unknown code was the one ending the enlarged text
    assert b" soon\\plain\\fs24 ." in letter.with_suffix(".rtf").read_bytes()


def test_cli_reports_missing_input(capsys, tmp_path: Path) -> None:
    exit_code = main([str(tmp_path / "missing.np")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to open input file" in captured.err


def test_cli_warns_on_unsupported_argument(capsys, letter: Path) -> None:
    exit_code = main(["--not-a-real-flag", str(letter)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "warning: unsupported arguments" in captured.err


def test_cli_rejects_surplus_paths(capsys, letter: Path) -> None:
    exit_code = main([str(letter), str(letter)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "warning: unsupported arguments" in captured.err
    assert not letter.with_suffix(".rtf").exists()


def test_cli_version(capsys) -> None:
    exit_code = main(["--version"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.strip() == f"notepad2rtf {notepad2rtf.__version__}"


def test_cli_refuses_to_overwrite_input(capsys, letter: Path) -> None:
    original = letter.read_bytes()

    exit_code = main(["-o", str(letter), str(letter)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Output file is the input file" in captured.err
    assert "conversion successful" not in captured.out
    assert letter.read_bytes() == original


@pytest.fixture
def package_log_level():
    package_logger = logging.getLogger("notepad2rtf")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


def test_cli_verbose_enables_debug_records(
    capsys, caplog, letter: Path, package_log_level
) -> None:
    assert main(["-v", str(letter)]) == 0
    verbose_text = caplog.text
    caplog.clear()

    assert main([str(letter)]) == 0
    quiet_text = caplog.text
    capsys.readouterr()

    assert "Format code 0xE2: bold on" in verbose_text
    assert "Format code 0xE2: bold on" not in quiet_text
    # warnings are shown either way
    assert "Unknown format code 0x41" in quiet_text
