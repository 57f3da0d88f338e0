from uuid import UUID
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from app.models.types import UTCDateTime
from app.utils.dates import utc_now

class Income(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    amount: float
    source: str
    date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime, index=True)
    icon: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
