"""Employee models for the API surface and the listing pipeline."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


def calculate_years_of_service(hire_date: date, today: date | None = None) -> int:
    """Whole calendar years between the hire year and the current year.

    Month and day are ignored, so someone hired in December shows one year of
    service the following January.
    """
    today = today or date.today()
    return today.year - hire_date.year


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeInput(CamelModel):
    """Raw employee fields as submitted; checked by ``validate_employee``."""

    full_name: str | None = None
    email: str | None = None
    position: str | None = None
    department: str | None = None
    phone: str | None = None
    hire_date: str | None = None
    version: int | None = None


class Employee(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str
    position: str
    department: str
    phone: str
    hire_date: date
    version: int

    @computed_field(alias="yearsOfService")  # type: ignore[prop-decorator]
    @property
    def years_of_service(self) -> int:
        return calculate_years_of_service(self.hire_date)


class EmployeeListQuery(CamelModel):
    search_term: str | None = None
    page: int = 1
    page_size: int = Field(default=10, ge=1)


class EmployeeListResult(CamelModel):
    """One page of employees plus the numbers needed to render pagination."""

    employees: list[Employee] = []
    search_term: str | None = None
    current_page: int = 1
    page_size: int = 10
    total_pages: int = 0
    total_count: int = 0

    @computed_field(alias="hasPreviousPage")  # type: ignore[prop-decorator]
    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @computed_field(alias="hasNextPage")  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @computed_field(alias="startIndex")  # type: ignore[prop-decorator]
    @property
    def start_index(self) -> int:
        return (self.current_page - 1) * self.page_size + 1

    @computed_field(alias="endIndex")  # type: ignore[prop-decorator]
    @property
    def end_index(self) -> int:
        return min(self.current_page * self.page_size, self.total_count)


class DepartmentCount(CamelModel):
    department: str
    count: int


class DashboardStats(CamelModel):
    total_employees: int = 0
    total_departments: int = 0
    recent_employees: list[Employee] = []
    department_counts: list[DepartmentCount] = []
