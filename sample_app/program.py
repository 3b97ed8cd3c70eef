#!/usr/bin/env python3
"""
Sample console program driving the data access layer.

Usage:
    python -m sample_app
    python -m sample_app --database-url sqlite:///sample.db --log-level DEBUG

Steps:
    1. Seed departments and employees (unless --no-seed)
    2. Query departments with their employees and a few counts
    3. Add employees, change one of them, commit through the unit of work
    4. List all employees ordered by name
"""

import argparse
import sys
from typing import List, Optional, TextIO

from dataaccess.config import settings
from dataaccess.exceptions import DataAccessException
from dataaccess.logging import LogConfig, get_logger
from dataaccess.repository import IRepository, IUnitOfWork, QuerySpec
from .models import Department, Employee
from .repository import IEmployeeRepository
from .seed import seed_sample_data
from .service import SampleDataAccessService

logger = get_logger("sample_program")


def execute_client_actions(
    unit_of_work: IUnitOfWork,
    department_repository: IRepository[Department],
    employee_repository: IEmployeeRepository,
    out: Optional[TextIO] = None,
) -> None:
    """Client side actions, written against the repository and unit of work interfaces only."""

    def write(line: str = "") -> None:
        print(line, file=out or sys.stdout)

    departments = department_repository.get(QuerySpec(order_by="name", include=("employees",)))
    write(f"Initially there are {len(departments)} departments:")
    for department in departments:
        write(f" - {department.name} with {len(department.employees)} employees:")
        for employee in department.employees:
            write(f"   - {employee.first_name} {employee.last_name}")

    development = department_repository.get_single({"name": "Development"})
    john = {"first_name": "John"}
    write(f"Initially there are {employee_repository.count_by_department(development)} developers.")
    write(f"There are {employee_repository.count(john)} employees named John.")
    write(f"{employee_repository.count_unassigned()} employees are not yet assigned to a department.")

    new_developer = Employee(first_name="John", last_name="Daniels", department=development)
    employee_repository.add(new_developer)
    # Register calls are kept even though the SQLModel unit of work tracks changes by itself
    unit_of_work.register_new(new_developer)
    new_unassigned = Employee(first_name="John", last_name="Spencer")
    employee_repository.add(new_unassigned)
    unit_of_work.register_new(new_unassigned)
    unit_of_work.commit()
    write("John Daniels (developer) and John Spencer (not yet assigned) have been added.")

    write(f"Now there are {employee_repository.count_by_department(development)} developers.")
    write(f"There are {employee_repository.count(john)} employees named John.")
    write(f"{employee_repository.count_unassigned()} employees are not yet assigned to a department.")

    new_unassigned.first_name = "Johnny"
    new_unassigned.department = development
    unit_of_work.register_dirty(new_unassigned)
    unit_of_work.commit()
    write("Employee John Spencer changed his first name to Johnny and became developer.")

    write(f"Now there are {employee_repository.count(john)} employees named John.")
    write(f"{employee_repository.count_unassigned()} employees are still not yet assigned to a department.")

    write("All employees ordered by name are:")
    for employee in employee_repository.get_all_ordered_by_name():
        write(f" - {employee.last_name}, {employee.first_name}")


def run(database_url: str, seed: bool = True, out: Optional[TextIO] = None) -> None:
    """Open a sample data access service on database_url and run the client actions."""
    with SampleDataAccessService(database_url) as service:
        service.create_schema()
        if seed:
            seed_sample_data(service)
        execute_client_actions(
            service.get_unit_of_work(),
            service.get_repository(Department),
            service.get_employee_repository(),
            out=out,
        )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the Employee/Department sample against the data access layer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help=f"SQLAlchemy database URL (default: {settings.DATABASE_URL})",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        default=not settings.SEED_SAMPLE_DATA,
        help="Do not insert sample data into an empty database",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level (default: %(default)s)")
    args = parser.parse_args(argv)

    LogConfig.setup_logging(level=args.log_level.upper())

    try:
        run(args.database_url, seed=not args.no_seed)
    except DataAccessException as e:
        logger.error(f"Sample failed: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
