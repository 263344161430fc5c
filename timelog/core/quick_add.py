"""Quick-add presets

Shortcuts that pre-fill the add form with the most common entries.
"""

from typing import Iterable, Optional

from ..schemas import OperationPreset, OperationType

PRESETS = {
    "pump": {"type": OperationType.PUMP, "party": "LOS", "main_event": "Frac"},
    "downtime": {"type": OperationType.NPT_DT, "party": "LOS"},
    "nonpumping": {"type": OperationType.NP, "party": "LOS", "main_event": "Well Swap (Zippering)"},
    "zipper": {"type": OperationType.NP, "party": "LOS", "main_event": "Well Swap (Zippering)"},
    "wellcheck": {"type": OperationType.NP, "party": "LOS", "main_event": "Well Open/Close"},
}


def preset_well(operations: Iterable, wells: Iterable, selected_well_id: Optional[str] = None) -> Optional[str]:
    """Well a preset applies to

    The explicitly selected well, else the well of the most recently started
    operation, else the first well marked in use.
    """
    if selected_well_id:
        return selected_well_id
    latest = max(operations, key=lambda op: (op.start_time, op.id), default=None)
    if latest is not None:
        return latest.well_id
    for well in wells:
        if well.is_used:
            return well.well_id
    return None


def build_preset(key: str, operations: Iterable, wells: Iterable,
                 selected_well_id: Optional[str] = None, completion_type=None) -> OperationPreset:
    """Raises KeyError for an unknown preset"""
    values = PRESETS[key]
    return OperationPreset(
        key=key,
        well_id=preset_well(operations, wells, selected_well_id),
        completion_type=completion_type,
        **values,
    )


def list_presets(operations, wells, selected_well_id=None, completion_type=None):
    operations = list(operations)
    wells = list(wells)
    return [build_preset(key, operations, wells, selected_well_id, completion_type) for key in PRESETS]
