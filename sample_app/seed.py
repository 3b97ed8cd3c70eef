"""Initial sample data: a few departments and employees, one of them unassigned."""

from loguru import logger
from dataaccess.database import IDataAccessService
from .models import Department, Employee

SAMPLE_DEPARTMENTS = {
    "Development": [("John", "Smith"), ("Alice", "Walker")],
    "Sales": [("John", "Carter")],
    "Support": [],
}

SAMPLE_UNASSIGNED = [("Mary", "Jones")]


def seed_sample_data(service: IDataAccessService) -> bool:
    """Insert the sample data when there are no departments yet. Returns True if it seeded."""
    department_repo = service.get_repository(Department)
    employee_repo = service.get_repository(Employee)
    if department_repo.count() > 0:
        return False

    with service.get_unit_of_work() as uow:
        for name, people in SAMPLE_DEPARTMENTS.items():
            department = Department(name=name)
            department_repo.add(department)
            uow.register_new(department)
            for first_name, last_name in people:
                employee = Employee(first_name=first_name, last_name=last_name, department=department)
                employee_repo.add(employee)
                uow.register_new(employee)
        for first_name, last_name in SAMPLE_UNASSIGNED:
            employee = Employee(first_name=first_name, last_name=last_name)
            employee_repo.add(employee)
            uow.register_new(employee)

    logger.info(f"Sample data seeded | {len(SAMPLE_DEPARTMENTS)} departments")
    return True
