from fastapi import FastAPI
from .api import routes_table, routes_export, routes_utils


def create_app() -> FastAPI:
    """App factory to create FastAPI instance."""
    app = FastAPI(
        title="Truth Table API",
        description="Backend service for propositional formula scanning, validation and truth table generation.",
        version="1.0.0"
    )

    # Register API routers
    app.include_router(routes_utils.router, prefix="/api/utils", tags=["Utils"])
    app.include_router(routes_table.router, prefix="/api/table", tags=["Truth table"])
    app.include_router(routes_export.router, prefix="/api/export", tags=["Export"])

    return app
