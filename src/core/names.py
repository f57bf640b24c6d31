"""
Display name selection.
"""

from models.leave import Employee


def resolve_display_name(employee: Employee) -> str:
    """Preferred name if the provider has a non-blank one, else the legal name."""
    if employee.preferred_name and employee.preferred_name.strip():
        return employee.preferred_name.strip()
    return employee.name
