import pytest

from paxtables.resize_reorder import remove_column, resize_reorder_2d


def grid(rows, cols):
    return list(range(1, rows * cols + 1))


def test_grow_columns_pads_rows():
    original = grid(3, 2)
    data = original + [0] * 3
    resize_reorder_2d(data, 3, 2, 3, 3)
    assert len(data) == 9
    for r in range(3):
        assert data[r * 3 : r * 3 + 2] == original[r * 2 : r * 2 + 2]
        assert data[r * 3 + 2] == 0


def test_grow_then_shrink_round_trip():
    original = grid(4, 3)
    data = original + [0] * (4 * 5 - len(original))
    resize_reorder_2d(data, 4, 3, 4, 5)
    resize_reorder_2d(data, 4, 5, 4, 3)
    assert data[:12] == original
    assert all(cell == 0 for cell in data[12:])


def test_shrink_columns_truncates_rows():
    original = grid(2, 4)
    data = list(original)
    resize_reorder_2d(data, 2, 4, 2, 3)
    assert data[:3] == original[:3]
    assert data[3:6] == original[4:7]
    assert data[6:] == [0, 0]


def test_fewer_rows_blanks_the_rest():
    original = grid(3, 2)
    data = original + [0] * 3
    resize_reorder_2d(data, 3, 2, 2, 3)
    assert data[0:2] == original[0:2]
    assert data[3:5] == original[2:4]
    assert all(cell == 0 for cell in data[6:])


def test_same_columns_is_untouched():
    data = grid(3, 3)
    resize_reorder_2d(data, 3, 3, 2, 3)
    assert data == grid(3, 3)


def test_float_blank():
    data = [1.5, 2.5, 0.0, 0.0]
    resize_reorder_2d(data, 2, 1, 2, 2)
    assert data == [1.5, 0.0, 2.5, 0.0]


def test_too_small_data_raises():
    with pytest.raises(ValueError):
        resize_reorder_2d(grid(2, 2), 2, 2, 2, 3)


def test_remove_middle_column():
    original = grid(3, 3)
    data = list(original)
    assert remove_column(data, 3, 3, 1) == 6
    for r in range(3):
        assert data[r * 2 : r * 2 + 2] == [original[r * 3], original[r * 3 + 2]]
    assert data[6:] == original[6:]


def test_remove_last_column():
    original = grid(2, 3)
    data = list(original)
    assert remove_column(data, 2, 3, 2) == 4
    assert data[:4] == original[0:2] + original[3:5]


def test_remove_column_out_of_range_leaves_data():
    data = grid(2, 3)
    assert remove_column(data, 2, 3, 3) == len(data)
    assert data == grid(2, 3)


def test_remove_column_wrong_size_raises():
    with pytest.raises(ValueError):
        remove_column(grid(2, 3), 3, 3, 0)