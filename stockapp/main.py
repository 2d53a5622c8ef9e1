# Main application file



import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockapp.database import Database
from stockapp.core.rate_limiter import configure_limiter, limiter
from stockapp.core.config import Settings, settings as default_settings
from stockapp.routers import (
    products,
    purchases,
    stock,
)
from stockapp.services.seed import seed_products


logger = logging.getLogger("stockapp")


# LIFESPAN (database is created at start, disposed at stop)

def build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.DATABASE_URL, echo=settings.DEBUG)
        database.create_all()

        if settings.SEED_ON_STARTUP:
            db = database.session()
            try:
                seed_products(db, stock_quantity=settings.SEED_STOCK_QUANTITY)
            finally:
                db.close()

        app.state.database = database
        logger.info(f"Stock app started ({settings.ENV})")

        try:
            yield
        finally:
            database.dispose()

    return lifespan


# ERROR HANDLERS (plain-text bodies, no internals leaked)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return PlainTextResponse("Invalid input", status_code=status.HTTP_400_BAD_REQUEST)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    response = PlainTextResponse(
        f"Rate limit exceeded: {exc.detail}",
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
    )
    return request.app.state.limiter._inject_headers(
        response, request.state.view_rate_limit
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    return PlainTextResponse(
        "Database error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    # LOGGING CONFIGURATION

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    # APP INIT

    app = FastAPI(
        title="Simple Stock",
        description="Track products, stock levels and purchases",
        version="1.0.0",
        lifespan=build_lifespan(settings),
    )

    # RATE LIMITING

    configure_limiter(settings)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    # REQUEST LOGGING MIDDLEWARE

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        response = await call_next(request)

        duration = round((time.time() - start_time) * 1000, 2)

        logger.info(
            f"{request.method} {request.url.path} "
            f"Status: {response.status_code} "
            f"Time: {duration}ms"
        )

        return response

    # ROUTERS

    app.include_router(products.router)
    app.include_router(purchases.router)
    app.include_router(stock.router)

    # HEALTH

    @app.get("/health")
    def health():
        logger.info("Health check endpoint called")
        return {"message": "Simple Stock is running"}

    return app


app = create_app()
