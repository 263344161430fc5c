"""Timeline presenters

Read-only views over a project's operations. They only sort, group and
filter; end times always come from the stored operations.
"""

from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from ..schemas import (
    PAD_SECTOR,
    FeedView,
    SectorView,
    TableView,
    TimeGap,
    TimeGroup,
    TimelineEntry,
    WellView,
)
from ..utils.helpers import duration_minutes, format_duration


def _unique(operations: Iterable) -> List:
    seen = set()
    result = []
    for op in operations:
        if op.id in seen:
            continue
        seen.add(op.id)
        result.append(op)
    return result


def newest_first(operations: Iterable) -> List:
    # id as secondary key keeps equal start times in insertion order reversed
    return sorted(_unique(operations), key=lambda op: (op.start_time, op.id), reverse=True)


def to_entry(op, well_names: Dict[str, str]) -> TimelineEntry:
    return TimelineEntry.model_validate(
        {
            **{field: getattr(op, field) for field in TimelineEntry.model_fields
               if field not in ("well_name", "duration", "minutes")},
            "well_name": well_names.get(op.well_id, op.well_id),
            "duration": format_duration(op.start_time, op.end_time),
            "minutes": duration_minutes(op.start_time, op.end_time),
        }
    )


def feed(operations: Iterable, well_names: Dict[str, str]) -> FeedView:
    """Operations grouped by identical start time, newest group first"""
    groups = OrderedDict()
    for op in newest_first(operations):
        groups.setdefault(op.start_time, []).append(to_entry(op, well_names))
    return FeedView(groups=[TimeGroup(start_time=start, operations=ops) for start, ops in groups.items()])


def active_sectors(operations: Iterable, used: Optional[set] = None) -> List[str]:
    """Sectors used by operations, PAD excluded, limited to sectors marked in use"""
    sectors = {op.sector for op in operations if op.sector != PAD_SECTOR}
    if used is not None:
        sectors &= used
    return sorted(sectors)


def sector_view(operations: Iterable, well_names: Dict[str, str],
                sector: Optional[str] = None, used: Optional[set] = None) -> SectorView:
    """One sector tab: that sector's operations plus every PAD operation, newest first

    Without an explicit (active) sector the first active sector is shown.
    """
    operations = _unique(operations)
    sectors = active_sectors(operations, used)
    if sector not in sectors:
        sector = sectors[0] if sectors else None
    if sector is None:
        return SectorView(active_sectors=sectors, sector=None, operations=[])
    shown = [op for op in operations if op.sector in (sector, PAD_SECTOR)]
    return SectorView(
        active_sectors=sectors,
        sector=sector,
        operations=[to_entry(op, well_names) for op in newest_first(shown)],
    )


def well_gaps(operations: Iterable) -> List[TimeGap]:
    """Idle time between one operation's end and the next operation's start"""
    ordered = sorted(operations, key=lambda op: (op.start_time, op.id))
    gaps = []
    for previous, following in zip(ordered, ordered[1:]):
        if previous.end_time is not None and following.start_time > previous.end_time:
            gaps.append(TimeGap(start=previous.end_time, end=following.start_time))
    return gaps


def well_view(operations: Iterable, well_names: Dict[str, str], well_id: Optional[str] = None) -> WellView:
    """One well tab: that well's operations newest first, plus its idle gaps

    Tabs follow the order of ``well_names`` (the project's well order).
    """
    operations = _unique(operations)
    with_operations = {op.well_id for op in operations}
    # project well order, then any well no longer part of the project
    wells = [w for w in well_names if w in with_operations]
    wells += sorted(with_operations.difference(wells))
    if well_id not in wells:
        well_id = wells[0] if wells else None
    if well_id is None:
        return WellView(wells=wells, well_id=None, operations=[], gaps=[])
    shown = [op for op in operations if op.well_id == well_id]
    return WellView(
        wells=wells,
        well_id=well_id,
        operations=[to_entry(op, well_names) for op in newest_first(shown)],
        gaps=well_gaps(shown),
    )


def table(operations: Iterable, well_names: Dict[str, str]) -> TableView:
    """Legacy table: newest first with whole-minute durations"""
    return TableView(rows=[to_entry(op, well_names) for op in newest_first(operations)])
