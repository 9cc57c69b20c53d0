from __future__ import annotations

from typing import List, Optional

import pytest

from ed_engine import Ed, SessionConfig
from ed_engine.actions.session import HELP_TEXT, QUIT_HINT
from ed_engine.buffer import BufferMirror
from ed_engine.modes import PendingOp, TextInputState


def make_ed(
    lines: Optional[List[str]] = None,
    *,
    cursor: Optional[int] = None,
    verbose: bool = False,
) -> Ed:
    ed = Ed(lines, config=SessionConfig(verbose_errors=verbose))
    if cursor is not None:
        ed.current_line = cursor
    return ed


FIND_LINES = ["line 1", "line 2", "find me", "line 4", "find me too"]
WORLD_LINES = ["hello world", "another world", "world world"]


def test_initializes_with_empty_buffer() -> None:
    ed = Ed()

    assert ed.buffer == []
    assert ed.current_line == 0
    assert ed.input_mode is False


def test_initializes_cursor_on_last_line() -> None:
    ed = Ed(["line 1", "line 2"])

    assert ed.buffer == ["line 1", "line 2"]
    assert ed.current_line == 1


def test_config_controls_prompt_and_errors() -> None:
    ed = Ed([], config=SessionConfig(verbose_errors=True, show_prompt=False))

    assert ed.verbose_errors is True
    assert ed.show_prompt is False
    assert ed.get_prompt() == ""
    assert Ed().get_prompt() == "*"


def test_constructor_copies_initial_lines() -> None:
    initial = ["one", "two"]
    ed = Ed(initial)
    ed.process("1d")

    assert initial == ["one", "two"]
    assert ed.buffer == ["two"]


def test_append_enters_input_mode_and_commits_after_current_line() -> None:
    ed = make_ed(["one", "two", "three"], cursor=1)

    result = ed.process("a")
    assert result.as_dict() == {"status": "input"}
    assert ed.input_mode is True
    assert ed.get_prompt() == ""

    assert ed.process("new line 1").as_dict() == {"output": "", "status": "input"}
    ed.process("new line 2")
    result = ed.process(".")

    assert result.as_dict() == {"output": ""}
    assert ed.input_mode is False
    assert ed.buffer == ["one", "two", "new line 1", "new line 2", "three"]
    assert ed.current_line == 3


def test_insert_adds_lines_before_address() -> None:
    ed = make_ed(["one", "two", "three"], cursor=1)

    ed.process("2i")
    ed.process("inserted line")
    ed.process(".")

    assert ed.buffer == ["one", "inserted line", "two", "three"]
    assert ed.current_line == 1


def test_change_replaces_range() -> None:
    ed = make_ed(["one", "two", "three"], cursor=1)

    assert ed.process("1,2c").status == "input"
    ed.process("replacement")
    ed.process(".")

    assert ed.buffer == ["replacement", "three"]
    assert ed.current_line == 0


def test_change_with_bad_range_fails_on_commit_and_leaves_input_mode() -> None:
    ed = make_ed(["one"], verbose=True)

    assert ed.process("5c").status == "input"
    ed.process("ignored")
    result = ed.process(".")

    assert result.error == "? invalid address"
    assert ed.input_mode is False
    assert ed.buffer == ["one"]


def test_delete_range_moves_cursor_into_bounds() -> None:
    ed = make_ed(["one", "two", "three"], cursor=1)

    result = ed.process("2,3d")

    assert result.as_dict() == {"output": ""}
    assert ed.buffer == ["one"]
    assert ed.current_line == 0


def test_delete_everything_resets_cursor() -> None:
    ed = make_ed(["one", "two", "three"])

    ed.process(",d")

    assert ed.buffer == []
    assert ed.current_line == 0


def test_delete_on_empty_buffer_fails() -> None:
    ed = make_ed([], verbose=True)

    assert ed.process("d").error == "? empty buffer"


def test_number_goes_to_line_and_prints_it() -> None:
    ed = make_ed(FIND_LINES)

    result = ed.process("3")

    assert result.output == "find me"
    assert ed.current_line == 2


def test_print_defaults_to_current_line() -> None:
    ed = make_ed(FIND_LINES, cursor=3)

    assert ed.process("p").output == "line 4"


def test_range_print_leaves_cursor_on_last_line() -> None:
    ed = make_ed(FIND_LINES)

    result = ed.process("2,4p")

    assert result.output == "line 2\nfind me\nline 4"
    assert ed.current_line == 3


def test_dollar_addresses_last_line() -> None:
    ed = make_ed(FIND_LINES, cursor=0)

    assert ed.process("$p").output == "find me too"
    assert ed.current_line == 4


@pytest.mark.parametrize("command", [",p", "%p"])
def test_whole_buffer_print(command: str) -> None:
    ed = make_ed(FIND_LINES, cursor=1)

    result = ed.process(command)

    assert result.output == "\n".join(FIND_LINES)
    assert ed.current_line == len(FIND_LINES) - 1


def test_number_print_prefixes_line_numbers() -> None:
    ed = make_ed(["alpha", "beta", "gamma"])

    assert ed.process("2,3n").output == "2\tbeta\n3\tgamma"
    assert ed.current_line == 2


def test_regex_address_finds_next_match() -> None:
    ed = make_ed(FIND_LINES, cursor=0)

    result = ed.process("/find/")

    assert result.output == "find me"
    assert ed.current_line == 2


def test_regex_range_prints_between_matches() -> None:
    ed = make_ed(FIND_LINES, cursor=0)

    result = ed.process("/find/,/too/p")

    assert result.output == "find me\nline 4\nfind me too"
    assert ed.current_line == 4


def test_regex_address_wraps_around_once() -> None:
    ed = make_ed(["alpha", "beta", "alpha two"])

    assert ed.process("/alpha/").output == "alpha"
    assert ed.current_line == 0
    assert ed.process("/alpha/").output == "alpha two"


def test_regex_right_side_of_range_does_not_wrap() -> None:
    ed = make_ed(["match", "x", "y"], cursor=0, verbose=True)

    assert ed.process("2,/match/p").error == "? no match"


def test_invalid_regex_in_address() -> None:
    ed = make_ed(["one"], verbose=True)

    assert ed.process("/[/").error == "? invalid regex in address"


def test_inverted_composite_range() -> None:
    ed = make_ed(["one", "two", "three"], verbose=True)

    assert ed.process("3,1p").error == "? invalid address range"


def test_unparsable_address() -> None:
    ed = make_ed(["one"], verbose=True)

    assert ed.process("'p").error == "? invalid address"


def test_empty_input_steps_through_buffer_circularly() -> None:
    ed = make_ed(["a", "b", "c"])

    assert ed.process("").output == "a"
    assert ed.process("   ").output == "b"
    assert ed.current_line == 1


def test_empty_input_on_empty_buffer_fails() -> None:
    assert make_ed([], verbose=True).process("").error == "? empty buffer"


@pytest.mark.parametrize("verbose, expected", [(True, "? empty buffer"), (False, "?")])
def test_print_on_empty_buffer(verbose: bool, expected: str) -> None:
    ed = make_ed([], verbose=verbose)

    result = ed.process("p")

    assert result.as_dict() == {"error": expected}
    assert ed.last_error == "empty buffer"


def test_substitute_first_occurrence_on_current_line() -> None:
    ed = make_ed(WORLD_LINES, cursor=0)

    result = ed.process("s/world/galaxy/")

    assert result.output == "hello galaxy"
    assert ed.buffer[0] == "hello galaxy"


def test_substitute_global_on_current_line() -> None:
    ed = make_ed(WORLD_LINES, cursor=2)

    result = ed.process("s/world/galaxy/g")

    assert result.output == "galaxy galaxy"
    assert ed.buffer[2] == "galaxy galaxy"


def test_substitute_over_range_reports_last_changed_line() -> None:
    ed = make_ed(WORLD_LINES)

    result = ed.process("1,2s/world/galaxy/")

    assert result.output == "another galaxy"
    assert ed.buffer == ["hello galaxy", "another galaxy", "world world"]
    assert ed.current_line == 1


def test_substitute_without_global_changes_only_first_match() -> None:
    ed = make_ed(["aaa"])

    assert ed.process("s/a/b/").output == "baa"
    assert ed.process("s/a/b/g").output == "bbb"


def test_substitute_with_group_references() -> None:
    ed = make_ed(["John Smith"])

    assert ed.process(r"s/(\w+) (\w+)/$2 $1/").output == "Smith John"


def test_substitute_no_match_is_an_error() -> None:
    ed = make_ed(WORLD_LINES)

    result = ed.process("s/notfound/galaxy/")

    assert result.error == "?"
    assert ed.last_error == "no match"
    assert ed.buffer == WORLD_LINES


@pytest.mark.parametrize(
    "lines, command, message",
    [
        (["one"], "s/a/b", "invalid substitute command"),
        (["one"], "s/(/x/", "invalid regex"),
        ([], "s/a/b/", "empty buffer"),
        (["one"], "3s/o/0/", "invalid address"),
    ],
)
def test_substitute_failures(lines: List[str], command: str, message: str) -> None:
    ed = make_ed(lines, verbose=True)

    assert ed.process(command).error == f"? {message}"


def test_unknown_command() -> None:
    ed = make_ed(["one", "two"], verbose=True)

    assert ed.process("x").error == "? unknown command"


def test_out_of_bounds_print() -> None:
    ed = make_ed(["one", "two"], verbose=True)

    assert ed.process("5p").error == "? invalid address"


def test_verbose_toggle_switches_to_terse_errors() -> None:
    ed = make_ed(["one", "two"], verbose=True)

    assert ed.process("H").output == "Verbose errors disabled."
    assert ed.process("x").error == "?"
    assert ed.process("H").output == "Verbose errors enabled."
    assert ed.verbose_errors is True


def test_prompt_toggle_is_an_involution() -> None:
    ed = make_ed(["one"])

    assert ed.process("P").as_dict() == {"output": ""}
    assert ed.get_prompt() == ""
    ed.process("P")
    assert ed.show_prompt is True
    assert ed.get_prompt() == "*"


def test_quit_only_prints_guidance() -> None:
    ed = make_ed(["one"])

    assert ed.process("q").output == QUIT_HINT
    assert ed.process("q").output == QUIT_HINT
    assert ed.buffer == ["one"]


def test_hard_quit_resets_buffer() -> None:
    ed = make_ed(["one", "two"])

    result = ed.process("Q")

    assert result.output == "Simulator reset."
    assert ed.buffer == []
    assert ed.current_line == 0


def test_write_returns_buffer_copy() -> None:
    ed = make_ed(["one", "two"])

    result = ed.process("w")

    assert result.as_dict() == {
        "output": "File saved (simulated).",
        "buffer": ["one", "two"],
    }
    assert result.buffer is not None
    result.buffer.append("three")
    assert ed.buffer == ["one", "two"]


def test_help_lists_commands() -> None:
    result = make_ed().process("h")

    assert result.output == HELP_TEXT
    assert "s/old/new/g" in HELP_TEXT


def test_errors_do_not_end_the_session() -> None:
    ed = make_ed(["one"], verbose=True)

    ed.process("x")
    ed.process("9p")

    assert ed.process("1p").output == "one"


def test_text_input_keeps_lines_verbatim() -> None:
    ed = make_ed(["one"])

    ed.process("a")
    ed.process("  indented  ")
    ed.process(" .")
    ed.process(".")

    assert ed.buffer == ["one", "  indented  ", " ."]


def test_text_input_state_records_pending_edit() -> None:
    ed = make_ed(["one", "two"], cursor=0)

    ed.process("2a")
    ed.process("x")

    state = ed.state
    assert isinstance(state, TextInputState)
    assert state.op is PendingOp.APPEND
    assert (state.range.start, state.range.end) == (2, 2)
    assert state.pending == ["x"]


def test_append_at_line_zero_and_end() -> None:
    ed = make_ed(["b"])

    ed.process("0a")
    ed.process("a")
    ed.process(".")
    ed.process("$a")
    ed.process("c")
    ed.process(".")

    assert ed.buffer == ["a", "b", "c"]
    assert ed.current_line == 2


def test_append_into_empty_buffer() -> None:
    ed = make_ed([])

    ed.process("a")
    ed.process("first")
    ed.process("second")
    ed.process(".")

    assert ed.buffer == ["first", "second"]
    assert ed.current_line == 1


def test_mode_switches_are_published_on_the_bus() -> None:
    ed = make_ed(["one"])
    modes: List[object] = []
    ed.bus.subscribe("mode.switch", lambda payload: modes.append(payload))

    ed.process("a")
    ed.process(".")

    assert modes == ["input", "command"]


def test_write_and_reset_publish_session_events() -> None:
    ed = make_ed(["one", "two"])
    events: List[object] = []
    ed.bus.subscribe("session.write", events.append)
    ed.bus.subscribe("session.reset", lambda payload: events.append("reset"))

    ed.process("w")
    ed.process("Q")

    mirror = events[0]
    assert isinstance(mirror, BufferMirror)
    assert mirror.text == "one\ntwo"
    assert events[1] == "reset"
    assert ed.mirror().lines == []


@pytest.mark.parametrize(
    "command, message",
    [
        ("s/o{99999999999}/x/", "invalid regex"),
        ("/o{99999999999}/p", "invalid regex in address"),
        ("s/" + "(" * 2000 + "o" + ")" * 2000 + "/x/", "invalid regex"),
    ],
)
def test_uncompilable_patterns_are_reported(command: str, message: str) -> None:
    ed = make_ed(["one"], verbose=True)

    assert ed.process(command).as_dict() == {"error": f"? {message}"}
    assert ed.buffer == ["one"]


def test_oversized_line_number_is_an_invalid_address() -> None:
    ed = make_ed(["one"], verbose=True)

    assert ed.process("9" * 5000 + "p").error == "? invalid address"
    assert ed.process("1p").output == "one"


def test_line_numbers_use_ascii_digits_only() -> None:
    ed = make_ed(["one", "two"], verbose=True)

    assert ed.process("٢p").error == "? invalid address"
