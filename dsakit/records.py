"""Employee records and the search for the best paid one."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Employee", "highest_paid"]


@dataclass(frozen=True)
class Employee:
    """An employee's name, account number and salary."""

    name: str
    account_number: str
    salary: int


def highest_paid(employees: Iterable[Employee]) -> Employee:
    """Employee with the highest salary; the earliest wins a tie."""
    staff = list(employees)
    if not staff:
        raise ValueError("no employees given")
    return max(staff, key=lambda employee: employee.salary)