from fp_todo.todo_manager import Note, TodoList, parse_index, parse_indices


def make_list(*items):
    todo_list = TodoList()
    for text, checked in items:
        note = todo_list.add_note(text)
        note.checked = checked
    return todo_list


def test_note_text_is_trimmed_and_unchecked():
    note = Note("  Buy milk \n")
    assert note.text == "Buy milk"
    assert note.checked is False


def test_note_keeps_inner_line_breaks():
    assert Note("\n first\nsecond \n").text == "first\nsecond"


def test_check_and_uncheck_note():
    todo_list = make_list(("a", False), ("b", False))
    todo_list.check_note(1)
    assert [n.checked for n in todo_list.notes] == [False, True]
    todo_list.uncheck_note(1)
    assert [n.checked for n in todo_list.notes] == [False, False]


def test_out_of_bounds_operations_leave_list_unchanged():
    todo_list = make_list(("a", False), ("b", True))
    before = TodoList([Note(n.text, n.checked) for n in todo_list.notes])
    for index in (2, 10, -1):
        todo_list.check_note(index)
        todo_list.uncheck_note(index)
        todo_list.remove_note(index)
    assert todo_list == before


def test_check_all_then_uncheck_all():
    todo_list = make_list(("a", True), ("b", False), ("c", True))
    todo_list.check_all()
    assert all(n.checked for n in todo_list.notes)
    todo_list.uncheck_all()
    assert todo_list == make_list(("a", False), ("b", False), ("c", False))


def test_remove_checked_and_unchecked_are_complementary():
    items = [("d", True), ("b", False), ("c", False), ("a", True)]
    without_checked = make_list(*items)
    without_checked.remove_checked()
    without_unchecked = make_list(*items)
    without_unchecked.remove_unchecked()

    assert [n.text for n in without_checked.notes] == ["b", "c"]
    assert [n.text for n in without_unchecked.notes] == ["d", "a"]
    original = make_list(*items)
    kept = iter(without_checked.notes)
    dropped = iter(without_unchecked.notes)
    merged = [next(dropped) if note.checked else next(kept) for note in original.notes]
    assert TodoList(merged) == original


def test_remove_all():
    todo_list = make_list(("a", False), ("b", True))
    todo_list.remove_all()
    assert len(todo_list) == 0


def test_remove_notes_uses_original_positions():
    todo_list = make_list(("one", False), ("two", False), ("three", False), ("four", False))
    todo_list.remove_notes([0, 2])
    assert [n.text for n in todo_list.notes] == ["two", "four"]


def test_remove_notes_order_and_duplicates_do_not_matter():
    first = make_list(("one", False), ("two", False), ("three", False))
    second = make_list(("one", False), ("two", False), ("three", False))
    first.remove_notes([0, 2])
    second.remove_notes([2, 0, 2])
    assert first == second
    assert [n.text for n in first.notes] == ["two"]


def test_dict_round_trip():
    todo_list = make_list(("a\nb", True), ("c", False))
    assert TodoList.from_dict(todo_list.to_dict()) == todo_list


def test_parse_index():
    assert parse_index("1") == 0
    assert parse_index("12") == 11
    assert parse_index("+2") == 1
    assert parse_index("+") is None
    assert parse_index("+0") is None
    assert parse_index("0") is None
    assert parse_index("-1") is None
    assert parse_index("x") is None
    assert parse_index("") is None


def test_parse_indices_sorts_and_reports_invalid():
    indices, invalid = parse_indices(["3", "abc", "1", "0"])
    assert indices == [0, 2]
    assert invalid == ["abc", "0"]
