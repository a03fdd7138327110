import pytest

from circlecurves.model.board import PairOutcome, TileState
from circlecurves.model.texts import Language
from circlecurves.model.state import PuzzleSession


def _click_point(session, curve_index):
    start = session.curves[curve_index].start
    return start.x, start.y


def test_matching_pair_removes_curve_and_advances(chord_session):
    s = chord_session

    assert s.select_number(4) is PairOutcome.PENDING
    assert s.select_number(24) is PairOutcome.MATCHED

    assert len(s.curves) == 19
    assert s.intersection_for(4) is None
    assert s.intersection_for(24) is None
    assert s.board.tile(4).state is TileState.DELETED
    assert s.board.tile(24).state is TileState.DELETED
    assert s.board.slots[0].resolved
    assert s.board.current_group == 1


def test_mismatched_pair_returns_numbers_without_advancing(chord_session):
    s = chord_session

    s.select_number(1)
    assert s.select_number(2) is PairOutcome.MISMATCHED

    assert len(s.curves) == 20
    assert s.board.tile(1).state is TileState.AVAILABLE
    assert s.board.tile(2).state is TileState.AVAILABLE
    assert s.board.slots[0].is_empty
    assert s.board.current_group == 0


def test_match_keeps_curve_indices_consistent(chord_session):
    s = chord_session
    before = {i.number: i.curve_index for i in s.intersections}

    s.select_number(6)
    s.select_number(26)  # curve 5

    for intersection in s.intersections:
        old = before[intersection.number]
        assert intersection.curve_index == (old - 1 if old > 5 else old)
    # the survivors still pair up by curve
    assert s.intersection_for(7).curve_index == s.intersection_for(27).curve_index == 5


def test_numbers_are_not_renumbered_after_removal(chord_session):
    s = chord_session
    s.select_number(1)
    s.select_number(21)

    assert sorted(i.number for i in s.intersections) == [n for n in range(1, 41) if n not in (1, 21)]


def test_scenario_selected_curve_then_tiles(chord_session):
    s = chord_session
    assert s.select_curve_at(*_click_point(s, 3)) == 3
    assert sorted(s.numbers_for_curve(3)) == [4, 24]

    s.select_number(4)
    assert s.select_number(24) is PairOutcome.MATCHED

    assert len(s.curves) == 19
    assert s.selected_curve is None
    assert s.select_number(4) is PairOutcome.IGNORED
    assert s.select_number(24) is PairOutcome.IGNORED
    assert s.board.tile(4).state is TileState.DELETED
    # the orphaned animation frame is a no-op
    assert s.tick_animation() is False


def test_unbacked_tile_is_a_no_op(chord_session):
    s = chord_session
    # curve 0 is gone, but pretend its tile was never retired
    s.curves.pop(0)
    s.intersections = [i for i in s.intersections if i.curve_index != 0]

    assert s.select_number(1) is PairOutcome.IGNORED
    assert s.board.tile(1).state is TileState.AVAILABLE
    assert s.board.slots[0].is_empty


def test_pointer_move_after_selection_auto_matches(chord_session):
    s = chord_session
    s.select_curve_at(*_click_point(s, 3))

    assert s.pointer_moved() is True

    assert len(s.curves) == 19
    slot = s.board.slots[0]
    assert sorted(slot.numbers) == [4, 24]
    assert slot.auto_filled == [True, True]
    assert s.board.current_group == 1
    assert s.board.tile(4).state is TileState.DELETED
    assert s.selected_curve is None
    assert s.pointer_moved() is False


def test_auto_match_returns_a_half_placed_number(chord_session):
    s = chord_session
    s.select_number(1)
    s.select_curve_at(*_click_point(s, 3))
    s.pointer_moved()

    assert s.board.tile(1).state is TileState.AVAILABLE
    assert sorted(s.board.slots[0].numbers) == [4, 24]


def test_click_away_from_curves_selects_nothing(chord_session):
    assert chord_session.select_curve_at(-1000, -1000) is None
    assert chord_session.selected_curve is None
    assert chord_session.pointer_moved() is False


def test_grow_animation_runs_twenty_frames(chord_session):
    s = chord_session
    s.select_curve_at(*_click_point(s, 3))

    results = [s.tick_animation() for _ in range(20)]

    assert results == [True] * 19 + [False]
    curve = s.curves[3]
    assert curve.scale == pytest.approx(1.5)
    assert curve.line_width == pytest.approx(5.0)
    assert curve.stroke_width == pytest.approx(7.5)
    for intersection in s.intersections:
        expected = 1.8 if intersection.curve_index == 3 else 1.0
        assert intersection.scale == pytest.approx(expected)
    assert s.tick_animation() is False


def test_first_frame_is_one_step(chord_session):
    s = chord_session
    s.select_curve_at(*_click_point(s, 2))
    s.tick_animation()
    assert s.curves[2].scale == pytest.approx(1.025)


def test_selection_follows_removal_of_a_lower_curve(chord_session):
    s = chord_session
    s.select_curve_at(*_click_point(s, 5))

    s.select_number(1)
    s.select_number(21)  # removes curve 0

    assert s.selected_curve == 4
    assert s.tick_animation() is True


def test_remove_curve_rejects_bad_index(chord_session):
    with pytest.raises(IndexError):
        chord_session.remove_curve(20)


def test_every_curve_can_be_matched(chord_session):
    s = chord_session
    for i in range(20):
        s.select_number(i + 1)
        assert s.select_number(i + 21) is PairOutcome.MATCHED

    assert s.is_solved
    assert s.board.current_group == 20
    assert s.intersections == []
    assert all(c.state is TileState.DELETED for c in s.board.tiles)


def test_auto_match_past_the_last_slot_still_removes_the_curve(chord_session):
    s = chord_session
    # use up every slot while curves remain
    for _ in range(len(s.board.slots)):
        s.board.resolve_current()
    assert not s.board.has_capacity

    s.select_curve_at(*_click_point(s, 3))
    assert s.pointer_moved() is True

    assert len(s.curves) == 19
    assert s.intersection_for(4) is None
    assert s.board.tile(4).state is TileState.DELETED
    assert s.board.tile(24).state is TileState.DELETED
    assert s.board.current_group == 20
    assert all(slot.placed_numbers() == [] for slot in s.board.slots)
    assert s.selected_curve is None


def test_same_seed_same_puzzle():
    a = PuzzleSession(800, 600, seed=42)
    b = PuzzleSession(800, 600, seed=42)

    assert a.curves == b.curves
    assert [(i.number, i.curve_index, i.position) for i in a.intersections] == \
        [(i.number, i.curve_index, i.position) for i in b.intersections]


def test_resize_regenerates_and_resets(session):
    session.select_number(1)

    assert session.resize(1000, 800) is True

    assert session.circle.radius == 200
    assert session.circle.center.x == 500
    assert [i.number for i in session.intersections] == list(range(1, 41))
    assert session.board.slots[0].is_empty
    assert session.board.tile(1).state is TileState.AVAILABLE


def test_resize_ignores_degenerate_or_unchanged_sizes(session):
    curves = list(session.curves)
    assert session.resize(0, 600) is False
    assert session.resize(800, 600) is False
    assert session.curves == curves


def test_language_toggles_between_two_locales(session):
    assert session.language is Language.ENGLISH
    assert session.texts.title == "Fill Numbers, Curves Disappear"

    assert session.toggle_language() is Language.CHINESE
    assert session.texts.title == "填数字，曲线消失"

    assert session.toggle_language() is Language.ENGLISH
