"""Unit tests for arg_parser.py."""

import pytest

from numproc.arg_parser import parse_args_for_logger_demo, parse_args_for_processing


def test_processing_args():
    args = parse_args_for_processing(["GT10", "numbers.txt"])
    assert args.filter == "GT10"
    assert args.file == "numbers.txt"
    assert args.log_level == "INFO"
    assert args.output is None


def test_processing_options():
    args = parse_args_for_processing(
        ["-l", "DEBUG", "-o", "kept.jsonl", "EVEN", "numbers.txt"]
    )
    assert args.log_level == "DEBUG"
    assert args.output == "kept.jsonl"


@pytest.mark.parametrize("argv", [[], ["EVEN"]])
def test_processing_missing_args_exit_1(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args_for_processing(argv)

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "usage:" in err
    assert "Available filters: EVEN, ODD, GT<n>" in err


def test_processing_bad_log_level_exit_1():
    with pytest.raises(SystemExit) as excinfo:
        parse_args_for_processing(["-l", "LOUD", "EVEN", "numbers.txt"])
    assert excinfo.value.code == 1


def test_logger_demo_args():
    assert parse_args_for_logger_demo([]).sink is None
    assert parse_args_for_logger_demo(["FILE"]).sink == "FILE"


def test_processing_ignores_extra_arguments():
    args = parse_args_for_processing(["EVEN", "numbers.txt", "extra", "--unknown"])
    assert args.filter == "EVEN"
    assert args.file == "numbers.txt"


def test_logger_demo_ignores_unknown_option():
    assert parse_args_for_logger_demo(["--foo"]).sink is None
    assert parse_args_for_logger_demo(["file", "extra"]).sink == "file"
