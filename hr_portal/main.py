import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hr_portal.api.audit import router as audit_router
from hr_portal.api.auth import router as auth_router
from hr_portal.api.documents import router as documents_router
from hr_portal.api.health import router as health_router
from hr_portal.api.me import router as me_router
from hr_portal.api.ratings import router as ratings_router
from hr_portal.api.root import router as root_router
from hr_portal.api.users import router as users_router
from hr_portal.api.vacations import router as vacations_router
from hr_portal.core.config import settings
from hr_portal.core.errors import (
    DomainError,
    IllegalTransition,
    InvalidInput,
    NotFound,
    PermissionDenied,
    PreconditionFailed,
)
from hr_portal.core.logging_config import configure_logging
from hr_portal.db.base import Base
from hr_portal.db.seed import seed_demo_data
from hr_portal.db.session import SessionLocal, engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    if not settings.SEED_ON_STARTUP:
        return
    with SessionLocal() as db:
        seed_demo_data(db)
        db.commit()


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("HR portal started (env=%s)", settings.APP_ENV)
    yield


app = FastAPI(title="HR Self-Service Portal", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def status_for(exc: DomainError) -> int:
    match exc:
        case NotFound():
            return 404
        case InvalidInput():
            return 400
        case PermissionDenied():
            return 403
        case PreconditionFailed():
            return 412
        case IllegalTransition():
            return 409
    return 400


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    code = status_for(exc)
    logger.info("%s %s -> %s %s: %s", request.method, request.url.path, code, exc.kind, exc.message)
    return JSONResponse(status_code=code, content={"detail": exc.message, "error": exc.kind})


app.include_router(root_router)
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(me_router)
app.include_router(users_router)
app.include_router(documents_router)
app.include_router(ratings_router)
app.include_router(vacations_router)
app.include_router(audit_router)
