from sqlmodel import SQLModel, Field
from typing import Optional

class Widget(SQLModel, table=True):
    __tablename__ = "widgets"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    quantity: int = Field(default=0)
    description: Optional[str] = None


class WidgetRead(SQLModel):
    """Read shape returned by the API."""
    id: int
    name: str
    quantity: int
    description: Optional[str] = None


class WidgetWrite(SQLModel):
    """Write shape accepted by the API; id is optional on create."""
    id: Optional[int] = None
    name: str
    quantity: int = 0
    description: Optional[str] = None
