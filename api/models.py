"""Pydantic schemas for Employee CRUD."""
from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """One row as returned to the client (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="employeeID")
    employee_name: str = Field(..., alias="employeeName")
    occupation: str = ""
    image_name: str = Field("", alias="imageName")
    image_src: str = Field("", alias="imageSrc")
