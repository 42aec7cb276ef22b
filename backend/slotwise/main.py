from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slotwise.api.routes import (
    calendar,
    conflicts,
    constraints,
    health,
    roster,
    schedule,
    timetable,
    usage,
    views,
)
from slotwise.core.config import get_settings
from slotwise.core.exceptions import AppError
from slotwise.core.logging_config import configure_logging
from slotwise.core.middleware import RequestLoggingMiddleware, RequestSizeLimitMiddleware
from slotwise.db.bootstrap import ensure_schema

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(_: FastAPI):
    ensure_schema()
    yield


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "details": exc.details},
    )

app = FastAPI(title=settings.project_name, lifespan=lifespan)
app.add_exception_handler(AppError, app_error_handler)

app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_size_bytes)
app.add_middleware(RequestLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(timetable.router, prefix=f"{settings.api_prefix}/timetable", tags=["timetable"])
app.include_router(roster.router, prefix=f"{settings.api_prefix}/roster", tags=["roster"])
app.include_router(schedule.router, prefix=f"{settings.api_prefix}/schedule", tags=["schedule"])
app.include_router(conflicts.router, prefix=f"{settings.api_prefix}/conflicts", tags=["conflicts"])
app.include_router(usage.router, prefix=f"{settings.api_prefix}/usage", tags=["usage"])
app.include_router(constraints.router, prefix=f"{settings.api_prefix}/constraints", tags=["constraints"])
app.include_router(calendar.router, prefix=f"{settings.api_prefix}/calendar", tags=["calendar"])
app.include_router(views.router, prefix=f"{settings.api_prefix}/views", tags=["views"])
