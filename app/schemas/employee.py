from pydantic import EmailStr, Field, field_validator
from typing import Optional
from decimal import Decimal
from app.models.base import CamelModel
from app.schemas.common import reject_null


class EmployeeBase(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    department: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    hourly_rate: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    is_active: bool = True

    @field_validator("is_active", mode="before")
    @classmethod
    def default_is_active(cls, v):
        return True if v is None else v


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    department: Optional[str] = Field(None, min_length=1)
    position: Optional[str] = Field(None, min_length=1)
    hourly_rate: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    is_active: Optional[bool] = None

    @field_validator("first_name", "last_name", "email", "department", "position", "is_active", mode="before")
    @classmethod
    def required_fields_not_null(cls, v):
        return reject_null(v)
