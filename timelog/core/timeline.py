"""End-time resolver

An operation ends when the next qualifying operation of the project starts:
- a PAD operation is ended by any later operation;
- any other operation is ended by a later operation in the same sector, or by
  a later PAD operation.
Operations with no qualifying successor are ongoing (end_time is None).

The rule works on any objects exposing ``start_time``, ``sector`` and
``end_time`` attributes (ORM rows, schema objects, test doubles). It is the
only place the sector predicate is implemented; every mutation path of the
operation store calls resolve_end_times over the whole project.
"""

from datetime import datetime
from typing import List, Optional, Sequence, TypeVar

from ..schemas.enums import PAD_SECTOR

T = TypeVar("T")


def _sector_value(sector) -> Optional[str]:
    return sector.value if hasattr(sector, "value") else sector


def ends_operation(current, candidate) -> bool:
    """Return True when ``candidate`` qualifies as the operation ending ``current``

    Start times must be strictly later; equal start times never end each other.
    """
    if candidate.start_time <= current.start_time:
        return False
    current_sector = _sector_value(current.sector)
    if current_sector == PAD_SECTOR:
        return True
    candidate_sector = _sector_value(candidate.sector)
    return candidate_sector == current_sector or candidate_sector == PAD_SECTOR


def compute_end_times(operations: Sequence) -> List[Optional[datetime]]:
    """Compute end times for ``operations`` without modifying them

    Returns a list aligned with the input order. Candidates are scanned in
    ascending start order, so the first match is the earliest later operation.
    Every candidate sharing that minimum start time yields the same end time,
    which makes the result independent of how ties are ordered.
    """
    ordered = sorted(range(len(operations)), key=lambda i: operations[i].start_time)
    end_times: List[Optional[datetime]] = [None] * len(operations)
    for position, index in enumerate(ordered):
        current = operations[index]
        for candidate_index in ordered[position + 1:]:
            candidate = operations[candidate_index]
            if ends_operation(current, candidate):
                end_times[index] = candidate.start_time
                break
    return end_times


def resolve_end_times(operations: Sequence[T]) -> Sequence[T]:
    """Assign the computed end time to every operation and return the operations

    Only ``end_time`` is written; running it twice gives the same result.
    """
    for operation, end_time in zip(operations, compute_end_times(operations)):
        if operation.end_time != end_time:
            operation.end_time = end_time
    return operations
