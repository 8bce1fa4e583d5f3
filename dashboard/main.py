import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dashboard.api.customers import router as customers_router
from dashboard.api.invoices import router as invoices_router
from dashboard.api.overview import router as overview_router
from dashboard.config import get_settings
from dashboard.data.errors import DataAccessError
from dashboard.db.engine import build_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    app.state.engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    logger.info("Database engine ready")

    yield

    app.state.engine.dispose()
    logger.info("Database engine disposed")


app = FastAPI(
    title="Customers & Invoices Dashboard API",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(DataAccessError)
async def data_access_error_handler(request: Request, exc: DataAccessError):
    # The cause was logged where it happened; only the fixed message goes out
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(overview_router)
app.include_router(customers_router)
app.include_router(invoices_router)
