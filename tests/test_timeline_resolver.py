from datetime import datetime, timedelta
from types import SimpleNamespace

from timelog.core.timeline import compute_end_times, ends_operation, resolve_end_times

T0 = datetime(2025, 3, 1, 8, 0)


def op(minutes, sector, end=None):
    return SimpleNamespace(start_time=T0 + timedelta(minutes=minutes), sector=sector, end_time=end)


def at(minutes):
    return T0 + timedelta(minutes=minutes)


def test_pad_ends_on_any_later_operation():
    ops = [op(0, "PAD"), op(10, "A"), op(20, "B")]
    resolve_end_times(ops)
    assert ops[0].end_time == at(10)
    assert ops[1].end_time is None
    assert ops[2].end_time is None


def test_same_sector_chain_then_pad():
    ops = [op(0, "A"), op(5, "A"), op(10, "PAD")]
    resolve_end_times(ops)
    assert [o.end_time for o in ops] == [at(5), at(10), None]


def test_removing_middle_operation_reconnects_to_pad():
    ops = [op(0, "A"), op(5, "A"), op(10, "PAD")]
    resolve_end_times(ops)
    remaining = [ops[0], ops[2]]
    resolve_end_times(remaining)
    assert remaining[0].end_time == at(10)
    assert remaining[1].end_time is None


def test_changing_pad_to_other_sector():
    ops = [op(0, "A"), op(5, "A"), op(10, "PAD")]
    resolve_end_times(ops)
    ops[2].sector = "B"
    resolve_end_times(ops)
    assert ops[0].end_time == at(5)
    assert ops[1].end_time is None
    assert ops[2].end_time is None


def test_sectors_are_isolated():
    ops = [op(0, "A"), op(5, "B"), op(7, "C"), op(9, "A")]
    resolve_end_times(ops)
    assert ops[0].end_time == at(9)
    assert ops[1].end_time is None
    assert ops[2].end_time is None


def test_later_pad_ends_every_open_sector():
    ops = [op(0, "A"), op(1, "B"), op(2, "HP"), op(30, "PAD")]
    resolve_end_times(ops)
    assert [o.end_time for o in ops[:3]] == [at(30)] * 3
    assert ops[3].end_time is None


def test_input_order_does_not_matter():
    ops = [op(10, "PAD"), op(0, "A"), op(5, "A")]
    assert compute_end_times(ops) == [None, at(5), at(10)]


def test_stale_end_times_are_overwritten_and_idempotent():
    ops = [op(0, "A", end=at(99)), op(5, "A", end=at(1))]
    resolve_end_times(ops)
    first = [o.end_time for o in ops]
    resolve_end_times(ops)
    assert [o.end_time for o in ops] == first == [at(5), None]


def test_equal_start_times_never_end_each_other():
    a = op(0, "PAD")
    b = op(0, "A")
    assert not ends_operation(a, b)
    assert not ends_operation(b, a)
    assert compute_end_times([a, b]) == [None, None]


def test_tied_candidates_give_the_same_end():
    ops = [op(0, "A"), op(5, "A"), op(5, "PAD")]
    assert compute_end_times(ops)[0] == at(5)
    assert compute_end_times(list(reversed(ops)))[2] == at(5)


def test_only_end_time_is_changed():
    o = op(0, "A")
    o.well_id = "well-1"
    resolve_end_times([o, op(5, "A")])
    assert o.well_id == "well-1"
    assert o.start_time == T0
    assert o.sector == "A"


def test_empty_input():
    assert compute_end_times([]) == []
