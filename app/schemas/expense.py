from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime

class ExpenseCreate(BaseModel):
    amount: float = Field(ge=0)
    category: str
    date: Optional[datetime] = None
    icon: Optional[str] = None

class ExpenseUpdate(BaseModel):
    amount: Optional[float] = Field(default=None, ge=0)
    category: Optional[str] = None
    date: Optional[datetime] = None
    icon: Optional[str] = None

    @field_validator("amount", "category", "date")
    @classmethod
    def not_null(cls, value):
        # solo icon admite null; el resto son columnas NOT NULL
        if value is None:
            raise ValueError("may not be null")
        return value

class ExpenseRead(BaseModel):
    id: int
    amount: float
    category: str
    date: datetime
    icon: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
