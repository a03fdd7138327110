import pytest

from circlecurves.model.board import PairingBoard, TileState


@pytest.fixture
def board() -> PairingBoard:
    return PairingBoard(total_numbers=6, group_count=3)


def test_new_board_is_all_available(board):
    assert [c.state for c in board.tiles] == [TileState.AVAILABLE] * 6
    assert all(slot.is_empty for slot in board.slots)
    assert board.current_group == 0


def test_place_fills_first_then_second_position(board):
    slot = board.place(4)
    assert slot is board.slots[0]
    assert slot.numbers == [4, None]
    assert board.tile(4).state is TileState.PLACED

    board.place(2)
    assert slot.numbers == [4, 2]
    assert slot.is_full


def test_place_ignores_unavailable_and_unknown_tiles(board):
    board.place(1)
    assert board.place(1) is None
    assert board.place(0) is None
    assert board.place(7) is None
    assert board.slots[0].numbers == [1, None]


def test_return_current_restores_tiles_without_advancing(board):
    board.place(1)
    board.place(5)

    returned = board.return_current()

    assert returned == [1, 5]
    assert board.tile(1).state is TileState.AVAILABLE
    assert board.tile(5).state is TileState.AVAILABLE
    assert board.slots[0].is_empty
    assert board.current_group == 0


def test_resolve_current_locks_slot_and_advances(board):
    board.place(1)
    board.place(2)
    board.delete_tiles([1, 2])
    board.resolve_current()

    assert board.slots[0].resolved
    assert board.slots[0].numbers == [1, 2]
    assert board.current_group == 1


def test_deleted_tiles_never_come_back(board):
    board.place(3)
    board.delete_tiles([3])
    board.return_current()

    cell = board.tile(3)
    assert cell.state is TileState.DELETED
    assert not cell.visible
    assert board.place(3) is None
    assert not board.is_available(3)


def test_auto_fill_tags_cells_and_advances(board):
    assert board.auto_fill([2, 6])

    slot = board.slots[0]
    assert slot.numbers == [2, 6]
    assert slot.auto_filled == [True, True]
    assert slot.resolved
    assert board.current_group == 1
    assert not board.tile(2).visible


def test_auto_fill_returns_half_placed_number_first(board):
    board.place(1)

    board.auto_fill([3, 4])

    assert board.tile(1).state is TileState.AVAILABLE
    assert board.slots[0].numbers == [3, 4]


def test_capacity_boundary_is_a_silent_no_op():
    board = PairingBoard(total_numbers=4, group_count=1)
    board.place(1)
    board.place(2)
    board.resolve_current()

    assert board.current_slot is None
    assert not board.has_capacity
    assert board.place(3) is None
    assert board.tile(3).state is TileState.AVAILABLE
    assert board.auto_fill([3, 4]) is False
    assert board.return_current() == []


def test_progress_tracks_placed_numbers(board):
    assert not board.has_progress

    board.place(1)
    assert board.has_progress

    board.return_current()
    assert not board.has_progress
