from dataaccess.database import DataAccessService
from .repository import EmployeeRepository, IEmployeeRepository


class SampleDataAccessService(DataAccessService):
    """Data access service for the sample database; adds the specialised employee repository."""

    def get_employee_repository(self) -> IEmployeeRepository:
        return EmployeeRepository(self.session)
