from typing import List, Optional
from sqlmodel import SQLModel, Field, Relationship


class Department(SQLModel, table=True):
    __tablename__ = "departments"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)

    employees: List["Employee"] = Relationship(
        back_populates="department",
        sa_relationship_kwargs={"order_by": "Employee.id"},
    )


class Employee(SQLModel, table=True):
    __tablename__ = "employees"
    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(index=True)
    last_name: str = Field(index=True)
    # None while the employee is not yet assigned to a department
    department_id: Optional[int] = Field(default=None, foreign_key="departments.id", index=True)

    department: Optional[Department] = Relationship(back_populates="employees")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
