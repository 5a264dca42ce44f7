import logging

from fastapi import FastAPI

from car_ledger.entrypoints.http.exception_handlers import register_exception_handlers
from car_ledger.entrypoints.http.routes.assets import router as assets_router
from car_ledger.entrypoints.http.routes.cars import router as cars_router
from car_ledger.entrypoints.http.routes.health import router as health_router
from car_ledger.entrypoints.http.routes.ledger import router as ledger_router
from car_ledger.entrypoints.http.routes.users import router as users_router
from car_ledger.infra.config import log_level


def build_app() -> FastAPI:
    logging.basicConfig(level=log_level())

    app = FastAPI(
        title="Car Ledger API",
        description="""
        Shared ledger of cars and their owners.

        ## Features
        - Seed the ledger with genesis users and cars
        - Find cars by color and owner, or with a raw selector
        - Repaint, report malfunctions, repair and buy cars

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(ledger_router, prefix="/v1")
    app.include_router(cars_router, prefix="/v1")
    app.include_router(users_router, prefix="/v1")
    app.include_router(assets_router, prefix="/v1")

    return app


app = build_app()
