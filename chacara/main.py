import logging
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from chacara.api.v1.router import api_router
from chacara.core.config import Settings, settings
from chacara.services.advisor import Advisor
from chacara.services.board import TaskBoard
from chacara.services.logbook import LogBook
from chacara.stores import LocalStore, open_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

logger = logging.getLogger(__name__)


async def start_services(app: FastAPI, config: Settings) -> None:
    """Open the store, load the board and attach everything to app.state."""
    store = await open_store(config)
    board = TaskBoard(store)
    try:
        await board.load()
    except Exception as exc:
        if isinstance(store, LocalStore):
            raise
        logger.warning("loading tasks from %s store failed (%s); falling back to local store", store.name, exc)
        await store.close()
        store = LocalStore(config.LOCAL_STORE_PATH)
        board = TaskBoard(store)
        await board.load()

    app.state.store = store
    app.state.board = board
    app.state.logbook = LogBook(store, default_limit=config.RECENT_LOGS_LIMIT)
    app.state.advisor = Advisor.from_settings(config)


async def stop_services(app: FastAPI) -> None:
    store = getattr(app.state, "store", None)
    if store is not None:
        await store.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await start_services(app, settings)
    yield
    # Shutdown
    await stop_services(app)


app = FastAPI(
    title="Agenda Rural API",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    start = time.monotonic()
    response = await call_next(request)
    latency_ms = int((time.monotonic() - start) * 1000)
    logger.info(
        "%s %s -> %d (%d ms)",
        request.method, request.url.path, response.status_code, latency_ms,
    )
    return response


@app.get("/api/health", tags=["health"])
async def health(request: Request):
    board = getattr(request.app.state, "board", None)
    return {
        "status": "ok",
        "store": board.store_name if board is not None else None,
        "environment": settings.ENVIRONMENT,
    }


app.include_router(api_router, prefix="/api/v1")
