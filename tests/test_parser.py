import pytest

from newshell.parser import MAX_ARGS, ParseError, ParsedCommand, parse_command, split_commands


def test_simple_command():
    parsed = parse_command("ls -l")
    assert parsed == ParsedCommand(args=["ls", "-l"], outfile=None)


def test_redirection():
    parsed = parse_command("ls -l > out.txt")
    assert parsed.args == ["ls", "-l"]
    assert parsed.outfile == "out.txt"


def test_redirection_in_middle():
    parsed = parse_command("echo > f.txt hello")
    assert parsed.args == ["echo", "hello"]
    assert parsed.outfile == "f.txt"


def test_last_redirection_wins():
    parsed = parse_command("echo > a > b")
    assert parsed.outfile == "b"
    assert parsed.args == ["echo"]


def test_missing_redirection_target():
    with pytest.raises(ParseError):
        parse_command("ls >")


def test_repeated_spaces_collapse():
    assert parse_command("  ls    -a  ").args == ["ls", "-a"]


def test_tabs_are_not_separators():
    assert parse_command("ls\t-l").args == ["ls\t-l"]


def test_empty_line():
    parsed = parse_command("")
    assert parsed.args == []
    assert parsed.outfile is None


def test_argument_limit():
    tokens = [f"a{i}" for i in range(150)]
    parsed = parse_command(" ".join(tokens))
    assert parsed.args == tokens[: MAX_ARGS - 1]


def test_split_commands_drops_empty():
    assert split_commands("ls; pwd;;") == ["ls", " pwd"]


def test_split_commands_single():
    assert split_commands("echo hi") == ["echo hi"]


def test_split_commands_only_separators():
    assert split_commands(";;;") == []