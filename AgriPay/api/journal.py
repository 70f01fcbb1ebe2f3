# api/journal.py
from datetime import date

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.journal import DayJournalOut, MonthJournalOut
from services.journal_service import day_journal, month_journal

router = APIRouter(prefix="/journal", tags=["journal"])


@router.get("/day/{day}", response_model=DayJournalOut, summary="Registros de un día")
def get_day_journal(
        day: date,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return day_journal(db, day)


@router.get("/{year}/{month}", response_model=MonthJournalOut, summary="Calendario del mes")
def get_month_journal(
        year: int = Path(..., ge=2000, le=2100),
        month: int = Path(..., ge=1, le=12),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return month_journal(db, year, month)
