from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from crud_core.config import settings
from crud_core.database.manager import DatabaseManager
from crud_core.middleware.logging_md import LoggingMiddleware
from crud_core.logging.logger import LogConfig
from crud_core.exceptions.errors import UnauthorizedError
from crud_core.exceptions.handler import global_exception_handler
from crud_core.repository.unit_of_work import default_registry
import apps.models  # noqa: F401  registers tables on SQLModel metadata
from apps.registry import register_repositories
from apps.widgets.api.router import router as widget_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    manager = DatabaseManager.get_instance()
    if settings.DB_AUTO_CREATE:
        await manager.sql.create_all()
    yield
    await manager.sql.disconnect()


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Initialize logging configuration
LogConfig.setup_logging()

# Map every served entity to its repository
register_repositories(default_registry)

# Register global exception handlers
app.add_exception_handler(UnauthorizedError, global_exception_handler)
app.add_exception_handler(RequestValidationError, global_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(LoggingMiddleware)

# Mount routers under the API root from config
app.include_router(
    widget_router,
    prefix=f"/{settings.API_ROOT}/widgets",
    tags=["Widgets"]
)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
