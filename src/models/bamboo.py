"""Pydantic models for BambooHR API responses."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class TimeOffType(BaseModel):
    """Leave type attached to a time off request."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str | None = None
    name: str


class TimeOffRequest(BaseModel):
    """Approved time off request from /time_off/requests/."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    employee_id: str = Field(alias="employeeId")
    name: str  # Employee's full name
    start: date
    end: date
    type: TimeOffType


class WhosOutEntry(BaseModel):
    """Entry from /time_off/whos_out/. Observed types: "timeOff" and "holiday"."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    id: str | None = None
    type: str
    employee_id: str | None = Field(default=None, alias="employeeId")
    name: str
    start: date
    end: date


class DirectoryEmployee(BaseModel):
    """Employee from /employees/directory."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    id: str
    display_name: str | None = Field(default=None, alias="displayName")
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    preferred_name: str | None = Field(default=None, alias="preferredName")


class Directory(BaseModel):
    """Response body of /employees/directory."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    employees: list[DirectoryEmployee] = []
