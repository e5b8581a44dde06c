import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings
from .lib.elasticsearch import create_es_client
from .lib.ranking import RelevanceRanker
from .routers import health, search

logger = logging.getLogger(__name__)

settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Application-scoped clients. Tests skip the lifespan and set
    # `app.state.es` / `app.state.ranker` to fakes directly.
    app.state.es = create_es_client(app.state.settings)
    app.state.ranker = RelevanceRanker.from_settings(app.state.settings)
    if app.state.ranker is None:
        logger.warning("OPENAI_API_KEY is not set; searches will use keyword matching only")
    yield
    await app.state.es.close()
    if app.state.ranker is not None:
        await app.state.ranker.client.close()


app = FastAPI(
    title="Scouting Search API",
    description="AI-assisted search over football players and scouting reports",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.settings = settings

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(health.router)
app.include_router(search.router)


def _describe_validation_error(error: dict) -> str:
    loc = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{loc}: {error['msg']}" if loc else error["msg"]


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies get the same {"error": ...} shape as every other failure.
    message = "; ".join(_describe_validation_error(e) for e in exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message or "Invalid request"})
