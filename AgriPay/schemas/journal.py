# schemas/journal.py
from __future__ import annotations

from datetime import date
from pydantic import BaseModel

from schemas.harvest import HarvestOut
from schemas.work_task import WorkTaskOut
from schemas.advance import AdvanceOut
from schemas.rain_event import RainEventOut


class DayJournalOut(BaseModel):
    date: date
    harvests: list[HarvestOut]
    work_tasks: list[WorkTaskOut]
    advances: list[AdvanceOut]
    rain_events: list[RainEventOut]


class MonthDayOut(BaseModel):
    date: date
    harvest_count: int
    task_count: int
    advance_count: int
    external_expense_count: int
    has_rain: bool


class MonthJournalOut(BaseModel):
    year: int
    month: int
    days: list[MonthDayOut]
