"""
Employee/Department sample built on the data access layer.
Import models here so they are registered in SQLModel metadata before create_all().
"""
from .models import Department, Employee

__all__ = ["Department", "Employee"]
