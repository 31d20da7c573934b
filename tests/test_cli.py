import pytest

from roundnetpairing.testing.__main__ import (
    COMMANDS,
    create_completer,
    create_main_parser,
    run_debug_command,
    run_groups_command,
)


def test_completer_accepts_both_command_forms():
    options = create_completer().options

    for command in COMMANDS:
        assert command in options
        assert f"/{command}" in options
    assert "/list" in options


def test_main_parser_dispatches_subcommands():
    args = create_main_parser().parse_args(["groups", "--mode", "mixed", "--max", "12"])

    assert args.func is run_groups_command
    assert args.mode == "mixed"
    assert args.max == 12


def test_main_parser_rejects_unknown_mode():
    with pytest.raises(SystemExit):
        create_main_parser().parse_args(["benchmark", "--mode", "pods"])


def test_groups_command_prints_layouts(capsys):
    args = create_main_parser().parse_args(
        ["groups", "--mode", "mixed", "--min", "6", "--max", "10"]
    )

    assert run_groups_command(args) == 0
    out = capsys.readouterr().out
    assert "Need at least 8 players" in out
    assert "10" in out


def test_debug_command_prints_report(capsys):
    args = create_main_parser().parse_args(
        ["debug", "--players", "10", "--played", "1", "--seed", "3"]
    )

    assert run_debug_command(args) == 0
    assert "ROUND 2 DIAGNOSTICS" in capsys.readouterr().out
