from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession
from crud_core.database.manager import DatabaseManager
from crud_core.repository.unit_of_work import UnitOfWork, default_registry

async def get_db():
    """Get database session."""
    manager = DatabaseManager.get_instance()
    async for session in manager.sql.get_session():
        yield session

def get_uow(
    db: AsyncSession = Depends(get_db)
) -> UnitOfWork:
    """Dependency: create UnitOfWork over the application registry."""
    return UnitOfWork(session=db, registry=default_registry)
