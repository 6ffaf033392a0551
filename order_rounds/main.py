import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from order_rounds import __version__
from order_rounds.core.config import CORS_ORIGINS, ENV, SERVICE_NAME
from order_rounds.core.logging_setup import configure_logging
from order_rounds.middleware.observability import ObservabilityMiddleware
from order_rounds.routers.orders import router as orders_router

configure_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Order Rounds API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ObservabilityMiddleware)

app.include_router(orders_router)

logger.info("%s started env=%s", SERVICE_NAME, ENV)


@app.get("/")
def health():
    return {"status": "ok"}
