from __future__ import annotations
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List
import uuid

from fastapi import FastAPI, Depends, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from .config import settings
from .db import init_db, session_dependency
from .errors import NotFoundError, ValidationError
from .repositories.sql import SqlHabitRepository
from .schemas import DayRead, HabitCreate, HabitRead, SummaryRow
from .services.completion_service import CompletionService
from .services.day_service import DayService
from .services.habit_service import HabitService
from .services.summary_service import SummaryService


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # --- startup ---
    logger.remove()
    logger.add(lambda msg: print(msg, end=""), level=settings.LOG_LEVEL)

    await init_db()
    logger.info("Habit tracker started ({})", settings.ENV)

    yield

    # --- shutdown ---
    logger.info("Habit tracker shut down")


app = FastAPI(title="Habit Tracker", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning("Rejected {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse({"detail": str(exc)}, status_code=400)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse({"detail": str(exc)}, status_code=404)


def get_repository(session: AsyncSession = Depends(session_dependency)) -> SqlHabitRepository:
    return SqlHabitRepository(session)


@app.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}


@app.post("/habits", response_model=HabitRead, status_code=201)
async def create_habit(body: HabitCreate, repo: SqlHabitRepository = Depends(get_repository)):
    habit = await HabitService(repo).create_habit(body.title, body.weekDays)
    return HabitRead.from_habit(habit)


@app.get("/habits", response_model=List[HabitRead])
async def list_habits(repo: SqlHabitRepository = Depends(get_repository)):
    habits = await HabitService(repo).list_habits()
    return [HabitRead.from_habit(h) for h in habits]


@app.get("/day", response_model=DayRead)
async def get_day(
    date: datetime = Query(..., description="ISO date or datetime"),
    repo: SqlHabitRepository = Depends(get_repository),
):
    status = await DayService(repo).resolve(date)
    return DayRead(
        weekday=status.weekday,
        asignedhabits=[HabitRead.from_habit(h) for h in status.due_habits],
        completedHabits=status.completed_habit_ids,
    )


@app.patch("/habits/{habit_id}/toggle", response_class=PlainTextResponse)
async def toggle_habit(habit_id: uuid.UUID, repo: SqlHabitRepository = Depends(get_repository)):
    result = await CompletionService(repo).toggle(habit_id)
    return result.message


@app.get("/summary", response_model=List[SummaryRow])
async def summary(repo: SqlHabitRepository = Depends(get_repository)):
    rows = await SummaryService(repo).summarize()
    return [SummaryRow.from_summary(r) for r in rows]


def run() -> None:
    import uvicorn

    uvicorn.run("habit_tracker.main:app", host=settings.HOST, port=settings.PORT)
