from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SubmissionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    message: str = Field(..., min_length=1, max_length=2000)
    timestamp: datetime


class SubmissionRecord(BaseModel):
    id: str
    name: Optional[str] = None
    message: Optional[str] = None
    timestamp: Optional[datetime] = None

    class Config:
        from_attributes = True
