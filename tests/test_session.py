from __future__ import annotations

import pytest

from tinyvi.buffer import BufferValidationError
from tinyvi.config import EditorMode
from tinyvi.keymaps import BACKSPACE, DOWN, ENTER, ESCAPE, LEFT, RIGHT, UP
from tinyvi.modes import KeyInput
from tinyvi.session import EditorSession, KeyOutcome


def char(c: str) -> KeyInput:
    return KeyInput(key=c, text=c)


def key(name: str, *modifiers: str) -> KeyInput:
    return KeyInput(key=name, modifiers=modifiers)


def session_at(text: str, cursor: tuple[int, int], *, insert: bool = False) -> EditorSession:
    session = EditorSession.from_text(text)
    session.buffer.state.set_cursor(*cursor)
    if insert:
        session.manager.switch_mode(EditorMode.INSERT)
    return session


def type_text(session: EditorSession, text: str) -> None:
    for c in text:
        assert session.handle_key(char(c)) is KeyOutcome.CONTINUE


def assert_invariants(session: EditorSession) -> None:
    view = session.view()
    row, col = view.cursor
    assert view.line_count >= 1
    assert 0 <= row < view.line_count
    assert 0 <= col <= len(view.lines[row])


def test_new_session_starts_empty_in_normal_mode() -> None:
    view = EditorSession().view()

    assert view.lines == ("",)
    assert view.cursor == (0, 0)
    assert view.mode is EditorMode.NORMAL
    assert view.line_count == 1


def test_enter_insert_and_type() -> None:
    session = EditorSession()

    session.handle_key(char("i"))
    type_text(session, "hi")

    view = session.view()
    assert view.lines == ("hi",)
    assert view.cursor == (0, 2)
    assert view.mode is EditorMode.INSERT


def test_enter_splits_line_at_end() -> None:
    session = session_at("hi", (0, 2), insert=True)

    session.handle_key(key(ENTER))

    view = session.view()
    assert view.lines == ("hi", "")
    assert view.cursor == (1, 0)


def test_backspace_at_line_start_joins_with_previous() -> None:
    session = session_at("ab\ncd", (1, 0), insert=True)

    session.handle_key(key(BACKSPACE))

    view = session.view()
    assert view.lines == ("abcd",)
    assert view.cursor == (0, 2)


def test_escape_then_h_moves_left_in_normal_mode() -> None:
    session = session_at("abc", (0, 1), insert=True)

    session.handle_key(key(ESCAPE))
    session.handle_key(char("h"))

    view = session.view()
    assert view.cursor == (0, 0)
    assert view.mode is EditorMode.NORMAL


def test_j_moves_down_keeping_column_when_it_fits() -> None:
    session = session_at("ab\nc", (0, 1))

    session.handle_key(char("j"))

    assert session.view().cursor == (1, 1)


def test_j_clamps_column_on_shorter_line() -> None:
    session = session_at("abc\nc", (0, 3))

    session.handle_key(char("j"))

    assert session.view().cursor == (1, 1)


def test_ctrl_q_in_normal_mode_requests_quit_without_edits() -> None:
    session = session_at("abc", (0, 1))
    before = session.view()

    outcome = session.handle_key(key("q", "ctrl"))

    assert outcome is KeyOutcome.QUIT
    assert session.view() == before


def test_ctrl_q_in_insert_mode_is_ignored() -> None:
    session = session_at("abc", (0, 1), insert=True)

    outcome = session.handle_key(key("q", "ctrl"))

    assert outcome is KeyOutcome.CONTINUE
    assert session.view().lines == ("abc",)
    assert session.mode is EditorMode.INSERT


def test_backspace_at_document_start_is_noop() -> None:
    session = session_at("abc", (0, 0), insert=True)

    session.handle_key(key(BACKSPACE))

    view = session.view()
    assert view.lines == ("abc",)
    assert view.cursor == (0, 0)


def test_insert_then_backspace_round_trip() -> None:
    session = session_at("hello", (0, 2), insert=True)

    session.handle_key(char("x"))
    session.handle_key(key(BACKSPACE))

    view = session.view()
    assert view.lines == ("hello",)
    assert view.cursor == (0, 2)


def test_split_then_backspace_round_trip() -> None:
    session = session_at("one\ntwo words\nthree", (1, 3), insert=True)

    session.handle_key(key(ENTER))
    assert session.view().lines == ("one", "two", " words", "three")
    session.handle_key(key(BACKSPACE))

    view = session.view()
    assert view.lines == ("one", "two words", "three")
    assert view.cursor == (1, 3)


def test_motions_at_edges_leave_state_unchanged() -> None:
    session = session_at("ab\ncd", (0, 0))

    for name in ("h", "k"):
        session.handle_key(char(name))
        assert session.view().cursor == (0, 0)

    session.buffer.state.set_cursor(1, 2)
    for name in ("l", "j"):
        session.handle_key(char(name))
        assert session.view().cursor == (1, 2)


def test_arrow_keys_navigate_in_both_modes() -> None:
    session = session_at("abc\nde", (0, 0))

    session.handle_key(key(RIGHT))
    session.handle_key(key(DOWN))
    assert session.view().cursor == (1, 1)

    session.handle_key(char("i"))
    session.handle_key(key(UP))
    session.handle_key(key(RIGHT))
    session.handle_key(key(LEFT))
    assert session.view().cursor == (0, 1)
    assert session.mode is EditorMode.INSERT


def test_normal_mode_keys_never_edit_text() -> None:
    session = session_at("abc", (0, 1))

    for name in "xdaq0$":
        session.handle_key(char(name))
    session.handle_key(key(ENTER))
    session.handle_key(key(BACKSPACE))

    assert session.view().lines == ("abc",)
    assert session.mode is EditorMode.NORMAL


def test_invariants_hold_over_a_mixed_key_stream() -> None:
    session = EditorSession()
    stream = [
        char("i"), char("a"), char("b"), key(ENTER), char("c"), key(UP),
        key(RIGHT), key(RIGHT), key(RIGHT), key(ENTER), key(ENTER),
        key(BACKSPACE), key(BACKSPACE), key(BACKSPACE), key(BACKSPACE),
        key(BACKSPACE), key(BACKSPACE), key(BACKSPACE), key(ESCAPE),
        char("j"), char("l"), char("l"), char("k"), char("h"), char("i"),
        char("z"), key(DOWN), key(DOWN), key(BACKSPACE),
    ]

    for event in stream:
        session.handle_key(event)
        assert_invariants(session)


def test_view_is_a_snapshot() -> None:
    session = EditorSession()
    session.handle_key(char("i"))
    before = session.view()

    type_text(session, "abc")

    assert before.lines == ("",)
    assert before.cursor == (0, 0)
    assert session.view().version > before.version


def test_invariant_violation_is_fatal() -> None:
    session = session_at("ab", (0, 0))
    session.buffer.state.set_cursor(0, 5)

    with pytest.raises(BufferValidationError):
        session.handle_key(char("x"))
