import random

import pytest

from tiles1024.board import Board, BoardFullError, Direction

EMPTY_ROW = [0, 0, 0, 0]

SAMPLES = [
    [[2, 2, 0, 4], [0, 1, 1, 1], [4, 4, 4, 4], [0, 0, 0, 2]],
    [[1, 0, 1, 0], [2, 2, 0, 0], [0, 0, 0, 0], [8, 8, 16, 16]],
    [[1, 2, 4, 8], [1, 2, 4, 8], [2, 2, 4, 4], [0, 1, 0, 1]],
]


def mirror(rows):
    return [list(reversed(row)) for row in rows]


def transpose(rows):
    return [list(column) for column in zip(*rows)]


def slid(rows, direction):
    board = Board(rows)
    board.slide(direction)
    return [list(row) for row in board.rows]


def test_new_board_is_empty():
    board = Board()
    assert all(value == 0 for row in board.rows for value in row)
    assert not board.is_full()


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board([[0, 0, 0], [0, 0, 0], [0, 0, 0]])


def test_indexing_by_row_and_column():
    board = Board([[0, 0, 0, 0], [0, 0, 7, 0], EMPTY_ROW, EMPTY_ROW])
    assert board[1, 2] == 7
    assert board[2, 1] == 0


def test_slide_left_compacts_row():
    board = Board([[0, 0, 2, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
    assert board.slide(Direction.LEFT) is True
    assert board.rows[0] == (2, 0, 0, 0)


def test_slide_left_merges_pairs():
    board = Board([[2, 2, 2, 2], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
    board.slide(Direction.LEFT)
    assert board.rows[0] == (4, 4, 0, 0)


def test_merged_tile_does_not_merge_again():
    board = Board([[2, 2, 4, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
    board.slide(Direction.LEFT)
    assert board.rows[0] == (4, 4, 0, 0)


def test_slide_right_merges_from_right_edge():
    board = Board([[2, 2, 2, 0], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW])
    board.slide(Direction.RIGHT)
    assert board.rows[0] == (0, 0, 2, 4)


def test_slide_up_moves_tiles_to_top_row():
    board = Board([EMPTY_ROW, EMPTY_ROW, EMPTY_ROW, [1, 0, 2, 0]])
    board.slide(Direction.UP)
    assert board.rows[0] == (1, 0, 2, 0)
    assert board.rows[3] == (0, 0, 0, 0)


def test_slide_without_change_reports_false():
    cells = [[1, 2, 1, 2], [2, 1, 2, 1], [1, 2, 1, 2], [2, 1, 2, 1]]
    board = Board(cells)
    for direction in Direction:
        assert board.slide(direction) is False
    assert [list(row) for row in board.rows] == cells


@pytest.mark.parametrize("cells", SAMPLES)
def test_right_mirrors_left(cells):
    assert slid(cells, Direction.RIGHT) == mirror(slid(mirror(cells), Direction.LEFT))


@pytest.mark.parametrize("cells", SAMPLES)
def test_up_is_transposed_left(cells):
    assert slid(cells, Direction.UP) == transpose(slid(transpose(cells), Direction.LEFT))


@pytest.mark.parametrize("cells", SAMPLES)
def test_down_is_transposed_right(cells):
    assert slid(cells, Direction.DOWN) == transpose(
        slid(transpose(cells), Direction.RIGHT)
    )


@pytest.mark.parametrize("cells", SAMPLES)
@pytest.mark.parametrize("direction", list(Direction))
def test_slide_preserves_sum_and_never_adds_tiles(cells, direction):
    after = slid(cells, direction)
    assert sum(map(sum, after)) == sum(map(sum, cells))
    count = lambda rows: sum(1 for row in rows for value in row if value)
    assert count(after) <= count(cells)


def test_place_random_fills_the_only_empty_cell():
    cells = [[1] * 4, [1] * 4, [1] * 4, [1, 1, 1, 0]]
    board = Board(cells, random.Random(3))
    assert board.place_random() == (3, 3)
    assert board[3, 3] in (1, 2)
    assert board.is_full()


def test_place_random_on_full_board_raises():
    board = Board([[1] * 4 for _ in range(4)])
    with pytest.raises(BoardFullError):
        board.place_random()


def test_start_is_reproducible_with_seed():
    first = Board.start(random.Random(11))
    second = Board.start(random.Random(11))
    first_rows = [list(row) for row in first.rows]
    second_rows = [list(row) for row in second.rows]
    assert first_rows == second_rows
    assert sum(1 for row in first_rows for value in row if value) >= 1


@pytest.mark.parametrize("seed", range(20))
def test_start_places_one_or_two_small_tiles(seed):
    board = Board.start(random.Random(seed))
    tiles = [value for row in board.rows for value in row if value]
    assert 1 <= len(tiles) <= 2
    assert set(tiles) <= {1, 2}


def test_move_adds_a_tile_after_sliding():
    board = Board([[0, 0, 0, 2], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW], random.Random(1))
    row, col = board.move(Direction.LEFT)
    assert board[0, 0] == 2
    assert board[row, col] in (1, 2)
    assert sum(1 for r in board.rows for value in r if value) == 2


def test_move_on_blocked_full_board_raises():
    cells = [[1, 2, 1, 2], [2, 1, 2, 1], [1, 2, 1, 2], [2, 1, 2, 1]]
    board = Board(cells)
    with pytest.raises(BoardFullError):
        board.move(Direction.UP)