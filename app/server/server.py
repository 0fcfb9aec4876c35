from fastapi import FastAPI

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from server.errors import setup_exception_handlers
from server.lifespan import lifespan
from server.middleware import CorrelationIdMiddleware


def create_app() -> FastAPI:
    app = FastAPI(title="Minerals Catalog", lifespan=lifespan)
    setup_rate_limiter(app)
    setup_exception_handlers(app)
    app.add_middleware(CorrelationIdMiddleware)
    app.include_router(api_router)
    return app


handler = create_app()
