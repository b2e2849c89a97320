# storefront/schemas/health.py
from datetime import datetime

from sqlmodel import SQLModel


class HealthRead(SQLModel):
    status: str
    timestamp: datetime
