"""Test config and shared fixtures."""
import pytest
from typing import Generator

from dataaccess.database import DataAccessService, IDataAccessService, SQLDriver
from dataaccess.memory import InMemoryDataAccessService
from sample_app.models import Department, Employee
from sample_app.service import SampleDataAccessService


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite://"

SEED_NAMES = ["A", "B", "C"]


@pytest.fixture(scope="function")
def driver() -> Generator[SQLDriver, None, None]:
    """Create test engine with schema."""
    driver = SQLDriver(TEST_DATABASE_URL)
    driver.create_all()
    yield driver
    driver.disconnect()


@pytest.fixture
def sql_service(driver: SQLDriver) -> Generator[DataAccessService, None, None]:
    """SQLModel data access service sharing the test engine."""
    service = DataAccessService(driver=driver)
    yield service
    service.close()


@pytest.fixture
def memory_service() -> Generator[InMemoryDataAccessService, None, None]:
    service = InMemoryDataAccessService()
    yield service
    service.close()


@pytest.fixture(params=["sql", "memory"])
def service(request, driver: SQLDriver) -> Generator[IDataAccessService, None, None]:
    """Data access service for each binding, seeded with departments A, B and C."""
    if request.param == "sql":
        service = DataAccessService(driver=driver)
    else:
        service = InMemoryDataAccessService()

    repo = service.get_repository(Department)
    uow = service.get_unit_of_work()
    for name in SEED_NAMES:
        department = Department(name=name)
        repo.add(department)
        uow.register_new(department)
    uow.commit()

    yield service
    service.close()


@pytest.fixture
def sample_service(driver: SQLDriver) -> Generator[SampleDataAccessService, None, None]:
    """Sample service with two departments and three employees."""
    service = SampleDataAccessService(driver=driver)
    session = service.session
    development = Department(name="Development")
    sales = Department(name="Sales")
    session.add_all([
        development,
        sales,
        Employee(first_name="John", last_name="Smith", department=development),
        Employee(first_name="Alice", last_name="Walker", department=development),
        Employee(first_name="Mary", last_name="Jones"),
    ])
    session.commit()
    yield service
    service.close()
