import pytest

from olympiad.puzzles import (
    CursorEditor,
    Genealogy,
    apply_tree_moves,
    flip_prefixes,
    spiral_number,
    total_height_cost,
    window_maxima,
    window_minima,
)

SAMPLES = [
    ([1, 3, -1, -3, 5, 3, 6, 7], 3),
    ([4, 4, 2, 9, 1, 1, 8], 2),
    ([5, 1, 5, 1, 5], 4),
]


@pytest.mark.parametrize("values,k", SAMPLES)
def test_window_minima_invariant(values, k):
    result = window_minima(values, k)
    assert len(result) == len(values) - k + 1
    for start, low in enumerate(result):
        window = values[start:start + k]
        assert low in window
        assert all(low <= v for v in window)


@pytest.mark.parametrize("values,k", SAMPLES)
def test_window_maxima_invariant(values, k):
    result = window_maxima(values, k)
    assert len(result) == len(values) - k + 1
    for start, high in enumerate(result):
        window = values[start:start + k]
        assert high in window
        assert all(high >= v for v in window)


def test_window_of_one_is_identity():
    values = [3, 1, 2]
    assert window_minima(values, 1) == values
    assert window_maxima(values, 1) == values


def test_window_larger_than_input_is_empty():
    assert window_minima([1, 2], 3) == []


def test_window_size_must_be_positive():
    with pytest.raises(ValueError):
        window_maxima([1, 2], 0)


def test_flip_single_bit():
    assert flip_prefixes([0]) == [1]


def test_flip_preserves_length_and_bits():
    result = flip_prefixes([1, 0, 1, 1, 0])
    assert len(result) == 5
    assert set(result) <= {0, 1}


def test_tree_move_down_appends_zero():
    assert apply_tree_moves("101", "*") == "1010"


def test_tree_moves_round_trip():
    assert apply_tree_moves("101", "*/") == "101"
    assert apply_tree_moves("101", "+-") == "101"
    assert apply_tree_moves("110", "-+") == "110"


def test_tree_increment_keeps_length():
    result = apply_tree_moves("1011", "+")
    assert len(result) == 4
    assert result != "1011"


def test_tree_move_above_root_fails():
    with pytest.raises(ValueError):
        apply_tree_moves("", "/")


def test_tree_unknown_move_fails():
    with pytest.raises(ValueError):
        apply_tree_moves("1", "?")


def test_editor_first_prefix_is_first_value():
    editor = CursorEditor()
    editor.insert(5)
    editor.insert(-7)
    assert editor.query(1) == 5


def test_editor_cursor_round_trip():
    editor = CursorEditor()
    for x in (2, -3, 4, 1):
        editor.insert(x)
    before = [editor.query(k) for k in range(1, 5)]
    for _ in range(3):
        editor.left()
    for _ in range(3):
        editor.right()
    assert [editor.query(k) for k in range(1, 5)] == before


def test_editor_prefix_max_is_monotone():
    editor = CursorEditor()
    for x in (3, -5, 2, 8, -1):
        editor.insert(x)
    answers = [editor.query(k) for k in range(1, 6)]
    assert answers == sorted(answers)


def test_editor_delete_shrinks():
    editor = CursorEditor()
    editor.insert(1)
    editor.insert(2)
    editor.delete()
    with pytest.raises(IndexError):
        editor.query(2)


def test_editor_left_hides_values():
    editor = CursorEditor()
    editor.insert(1)
    editor.left()
    with pytest.raises(IndexError):
        editor.query(1)


def test_spiral_outside_fails():
    with pytest.raises(ValueError):
        spiral_number(3, 4, 1)


def test_genealogy_chain():
    family = Genealogy()
    family.father("Ann")
    family.son("Bob")
    family.son("Cid")
    family.father("Bob")
    family.son("Dee")
    assert family.ancestor("Dee") == "Ann"
    assert family.ancestor("Ann") == "Ann"
    assert family.ancestor("Cid") == "Ann"


def test_genealogy_unknown_name():
    family = Genealogy()
    family.father("Ann")
    with pytest.raises(KeyError):
        family.ancestor("Zed")


def test_genealogy_son_without_father():
    with pytest.raises(ValueError):
        Genealogy().son("Bob")


def test_height_cost_small():
    assert total_height_cost([]) == 0
    assert total_height_cost([7]) == 0


def test_height_cost_increasing():
    values = [1, 4, 6, 9]
    assert total_height_cost(values) == sum(values[1:])


def test_height_cost_symmetric():
    values = [3, 8, 2, 5, 5, 1]
    assert total_height_cost(values) == total_height_cost(values[::-1])