import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gitminer.comments import router as comments_router
from gitminer.commits import router as commits_router
from gitminer.core import db, settings
from gitminer.issues import router as issues_router
from gitminer.projects import router as projects_router
from gitminer.users import router as users_router

API_PREFIX = "/gitminer"

settings.configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One database (pool) per process, handed to every repository via app.state.
    database = db.Database(db.database_url())
    await database.connect()
    if settings.init_schema_on_startup():
        await database.init_schema()
        logger.info("schema_initialized")
    app.state.database = database
    try:
        yield
    finally:
        app.state.database = None
        await database.close()


app = FastAPI(title="GitMiner", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    # Invalid bodies and parameters are a plain 400, not FastAPI's default 422.
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(projects_router.router, prefix=API_PREFIX, tags=["projects"])
app.include_router(commits_router.router, prefix=API_PREFIX, tags=["commits"])
app.include_router(issues_router.router, prefix=API_PREFIX, tags=["issues"])
app.include_router(comments_router.router, prefix=API_PREFIX, tags=["comments"])
app.include_router(users_router.router, prefix=API_PREFIX, tags=["users"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "gitminer api"}
