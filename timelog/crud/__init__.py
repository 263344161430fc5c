from .operation import (
    add_operations,
    get_operation,
    list_operations,
    update_operation,
    set_completed,
    delete_operation,
    list_stages,
)

from .project import (
    get_project_by_number,
    list_projects,
    get_well,
    delete_project,
    import_project,
    get_configuration,
    update_configuration,
    update_personnel,
    used_wells,
    used_sectors,
)

__all__ = [
    # Operation functions
    "add_operations",
    "get_operation",
    "list_operations",
    "update_operation",
    "set_completed",
    "delete_operation",
    "list_stages",

    # Project functions
    "get_project_by_number",
    "list_projects",
    "get_well",
    "delete_project",
    "import_project",
    "get_configuration",
    "update_configuration",
    "update_personnel",
    "used_wells",
    "used_sectors",
]
