from __future__ import annotations

from datetime import date

import pytest

from app.models.employee import EmployeeListResult, calculate_years_of_service
from app.services.employee_service import build_search_predicate, paginate


@pytest.mark.parametrize(
    ("total", "page", "size", "expected"),
    [
        (0, 1, 10, (1, 0)),
        (0, 50, 10, (1, 0)),
        (3, 1, 2, (1, 2)),
        (3, 2, 2, (2, 2)),
        (3, 0, 1, (1, 3)),
        (3, 9999, 1, (3, 3)),
        (10, 1, 10, (1, 1)),
        (11, 2, 10, (2, 2)),
    ],
)
def test_paginate(total, page, size, expected):
    assert paginate(total, page, size) == expected


def test_paginate_rejects_zero_page_size():
    with pytest.raises(ValueError):
        paginate(5, 1, 0)


def test_empty_search_term_has_no_predicate():
    assert build_search_predicate(None) is None
    assert build_search_predicate("") is None
    assert build_search_predicate(" ") is not None


def test_result_helpers_middle_page():
    result = EmployeeListResult(current_page=2, page_size=10, total_pages=3, total_count=25)

    assert result.has_previous_page is True
    assert result.has_next_page is True
    assert result.start_index == 11
    assert result.end_index == 20


def test_result_helpers_last_partial_page():
    result = EmployeeListResult(current_page=3, page_size=10, total_pages=3, total_count=25)

    assert result.has_next_page is False
    assert result.start_index == 21
    assert result.end_index == 25


def test_result_serializes_camel_case():
    data = EmployeeListResult(current_page=1, page_size=10, total_pages=0, total_count=0).model_dump(by_alias=True)

    assert data["currentPage"] == 1
    assert data["totalPages"] == 0
    assert data["hasNextPage"] is False
    assert data["startIndex"] == 1
    assert data["endIndex"] == 0


def test_years_of_service_ignores_month_and_day():
    assert calculate_years_of_service(date(2023, 12, 31), today=date(2024, 1, 1)) == 1
    assert calculate_years_of_service(date(2020, 3, 5), today=date(2024, 3, 4)) == 4
    assert calculate_years_of_service(date(2024, 6, 1), today=date(2024, 1, 1)) == 0
