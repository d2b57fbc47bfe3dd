"""Widget repository implementation."""

from typing import List
from sqlmodel import select
from crud_core.repository.base import BaseRepository
from .models import Widget


class WidgetRepository(BaseRepository[int, Widget]):
    """Widget repository."""

    def __init__(self, session):
        super().__init__(session, Widget)

    async def get_all(self) -> List[Widget]:
        """All widgets ordered by name."""
        result = await self.session.exec(select(Widget).order_by(Widget.name))
        return list(result.all())
