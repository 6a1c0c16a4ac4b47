from typing import Optional
from decimal import Decimal
from datetime import datetime
from app.models.base import CamelModel


class Employee(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
    department: str
    position: str
    hourly_rate: Optional[Decimal] = None
    is_active: bool = True
    created_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
