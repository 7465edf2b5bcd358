from tinyvi.buffer import Buffer, BufferDocument, CursorModel


def make(text: str, cursor: tuple[int, int]) -> tuple[BufferDocument, CursorModel]:
    document = BufferDocument.from_text(text)
    state = CursorModel()
    state.set_cursor(*cursor)
    return document, state


def test_move_left_stops_at_column_zero() -> None:
    document, state = make("ab\ncd", (1, 1))

    assert state.move_left(document) is True
    assert state.cursor == (1, 0)
    assert state.move_left(document) is False
    assert state.cursor == (1, 0)


def test_move_right_stops_past_last_character() -> None:
    document, state = make("ab\ncd", (0, 1))

    assert state.move_right(document) is True
    assert state.cursor == (0, 2)
    assert state.move_right(document) is False
    assert state.cursor == (0, 2)


def test_move_up_and_down_stop_at_document_edges() -> None:
    document, state = make("ab\ncd", (0, 1))

    assert state.move_up(document) is False
    assert state.cursor == (0, 1)
    assert state.move_down(document) is True
    assert state.move_down(document) is False
    assert state.cursor == (1, 1)


def test_vertical_moves_clamp_column_to_line_length() -> None:
    document, state = make("long line\nab\nanother", (0, 8))

    state.move_down(document)
    assert state.cursor == (1, 2)

    state.move_down(document)
    assert state.cursor == (2, 2)

    state.move_up(document)
    state.move_up(document)
    assert state.cursor == (0, 2)


def test_vertical_move_onto_empty_line_lands_on_column_zero() -> None:
    document, state = make("abc\n\nxyz", (0, 3))

    state.move_down(document)

    assert state.cursor == (1, 0)


def test_edit_follow_ups() -> None:
    state = CursorModel()
    state.set_cursor(2, 4)

    state.advance_after_insert()
    assert state.cursor == (2, 5)

    state.advance_after_split()
    assert state.cursor == (3, 0)

    state.retreat_after_join(7)
    assert state.cursor == (2, 7)
    assert (state.row, state.col) == (2, 7)


def test_buffer_insert_then_backspace_round_trips() -> None:
    buffer = Buffer.from_text("abc")
    buffer.state.set_cursor(0, 1)

    buffer.insert_char("x")
    assert buffer.snapshot().lines == ("axbc",)
    assert buffer.cursor == (0, 2)

    result = buffer.backspace()

    assert result.status == "char"
    assert buffer.snapshot().lines == ("abc",)
    assert buffer.cursor == (0, 1)


def test_buffer_split_then_backspace_restores_line_and_cursor() -> None:
    buffer = Buffer.from_text("hello\nworld")
    buffer.state.set_cursor(1, 3)

    buffer.split_line()
    assert buffer.snapshot().lines == ("hello", "wor", "ld")
    assert buffer.cursor == (2, 0)

    result = buffer.backspace()

    assert result.joined
    assert buffer.snapshot().lines == ("hello", "world")
    assert buffer.cursor == (1, 3)


def test_buffer_backspace_at_document_start_changes_nothing() -> None:
    buffer = Buffer.from_text("abc")
    version = buffer.snapshot().version

    result = buffer.backspace()

    assert result.status == "noop"
    assert buffer.cursor == (0, 0)
    assert buffer.snapshot().version == version


def test_buffer_move_dispatches_by_direction() -> None:
    buffer = Buffer.from_text("ab\nc")
    buffer.state.set_cursor(0, 2)

    assert buffer.move("down") is True
    assert buffer.cursor == (1, 1)
    assert buffer.move("right") is False
    assert buffer.move("left") is True
    assert buffer.move("up") is True
    assert buffer.cursor == (0, 0)


def test_buffer_view_text_joins_lines() -> None:
    buffer = Buffer.from_text("ab\ncd")

    view = buffer.snapshot()

    assert view.text == "ab\ncd"
    assert view.cursor == (0, 0)
