import io
from datetime import datetime, timedelta, timezone

import pytest

from histkit.history import (
    FormatError,
    History,
    ListMode,
    format_field,
    format_history,
    parse_format,
    print_list,
)


def _entry(**kwargs):
    defaults = dict(
        command="  ls -la  ",
        timestamp=datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        duration=0,
        exit=0,
        cwd=" /home/alice ",
        session="sess",
        hostname="box:alice",
    )
    defaults.update(kwargs)
    return History(**defaults)


class _BrokenPipe(io.StringIO):
    def write(self, s):
        raise BrokenPipeError


@pytest.mark.parametrize(
    "human, cmd_only, expected",
    [
        (True, False, ListMode.HUMAN),
        (True, True, ListMode.HUMAN),
        (False, True, ListMode.CMD_ONLY),
        (False, False, ListMode.REGULAR),
    ],
)
def test_list_mode_from_flags(human, cmd_only, expected):
    assert ListMode.from_flags(human, cmd_only) is expected


def test_command_and_directory_are_trimmed():
    h = _entry()
    assert format_field(h, "command") == "ls -la"
    assert format_field(h, "directory") == "/home/alice"


def test_host_and_user_split_on_colon():
    h = _entry()
    assert format_field(h, "host") == "box"
    assert format_field(h, "user") == "alice"


def test_hostname_without_user():
    h = _entry(hostname="box")
    assert format_field(h, "host") == "box"
    assert format_field(h, "user") == ""


def test_time_field():
    assert format_field(_entry(), "time") == "2023-01-02 03:04:05"


def test_exit_field():
    assert format_field(_entry(exit=127), "exit") == str(127)


def test_negative_duration_is_zero():
    assert format_field(_entry(duration=-1), "duration") == "0s"


def test_relative_time_in_future_is_zero():
    future = datetime.now(timezone.utc) + timedelta(days=1)
    assert format_field(_entry(timestamp=future), "relativetime") == "0s"


def test_unknown_key_raises():
    with pytest.raises(FormatError):
        format_field(_entry(), "nope")


def test_escaped_braces_are_literal():
    assert format_history(_entry(), "{{command}}") == "{command}"


def test_format_history_mixes_literals_and_keys():
    h = _entry()
    assert format_history(h, "[{host}] {command}") == "[box] ls -la"


def test_parse_format_segments():
    assert parse_format("a{command}b") == [("a", False), ("command", True), ("b", False)]


@pytest.mark.parametrize("bad", ["{command", "oops}", "{a{b}"])
def test_parse_format_rejects_bad_braces(bad):
    with pytest.raises(FormatError):
        parse_format(bad)


def test_print_list_reverses_and_cmd_only():
    entries = [_entry(command="first"), _entry(command="second")]
    out = io.StringIO()
    print_list(entries, ListMode.CMD_ONLY, out=out)
    assert out.getvalue().splitlines() == ["second", "first"]


def test_print_list_custom_format_with_escaped_tab():
    out = io.StringIO()
    print_list([_entry()], ListMode.REGULAR, "{host}\\t{command}", out=out)
    assert out.getvalue() == "box\tls -la\n"


def test_print_list_regular_default_has_three_columns():
    out = io.StringIO()
    print_list([_entry()], ListMode.REGULAR, out=out)
    assert out.getvalue().rstrip("\n").split("\t") == [
        "2023-01-02 03:04:05",
        "ls -la",
        "0s",
    ]


def test_print_list_bad_format_raises():
    with pytest.raises(FormatError):
        print_list([_entry()], ListMode.HUMAN, "{command", out=io.StringIO())


def test_print_list_unknown_key_raises():
    with pytest.raises(FormatError):
        print_list([_entry()], ListMode.HUMAN, "{bogus}", out=io.StringIO())


def test_print_list_ignores_broken_pipe():
    out = _BrokenPipe()
    assert print_list([_entry()], ListMode.CMD_ONLY, out=out) is None
    assert out.getvalue() == ""