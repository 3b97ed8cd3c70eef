"""Sample domain repository implementations."""

from abc import abstractmethod
from typing import Tuple
from sqlmodel import col
from dataaccess.repository import BaseRepository, IRepository, QuerySpec
from .models import Department, Employee


class IEmployeeRepository(IRepository[Employee]):
    """Employee repository with department-aware queries."""

    @abstractmethod
    def count_by_department(self, department: Department) -> int:
        pass

    @abstractmethod
    def get_unassigned(self) -> Tuple[Employee, ...]:
        pass

    @abstractmethod
    def count_unassigned(self) -> int:
        pass

    @abstractmethod
    def get_all_ordered_by_name(self) -> Tuple[Employee, ...]:
        pass


class EmployeeRepository(BaseRepository[Employee], IEmployeeRepository):
    """Employee repository."""

    def __init__(self, session):
        super().__init__(session, Employee)

    def count_by_department(self, department: Department) -> int:
        """Count employees assigned to department."""
        return self.count(where={"department_id": department.id})

    def get_unassigned(self) -> Tuple[Employee, ...]:
        """Get employees not yet assigned to any department."""
        return self.get(QuerySpec(where=col(Employee.department_id).is_(None)))

    def count_unassigned(self) -> int:
        return self.count(where=col(Employee.department_id).is_(None))

    def get_all_ordered_by_name(self) -> Tuple[Employee, ...]:
        """Get all employees ordered by last name, then first name."""
        return self.get(QuerySpec(order_by=("last_name", "first_name")))
