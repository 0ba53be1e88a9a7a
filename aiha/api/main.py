# aiha/api/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import PRODUCT_NAME, PRODUCT_VERSION
from ..core.logs import configure_logging
from .cache import router as cache_router
from .health import router as health_router
from .models import router as models_router


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=PRODUCT_NAME,
        description="Model registry metadata and architecture resolution",
        version=PRODUCT_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router, tags=["system"])
    app.include_router(models_router, tags=["models"])
    app.include_router(cache_router, tags=["system"])
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
