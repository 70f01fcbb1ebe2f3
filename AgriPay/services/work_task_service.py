# services/work_task_service.py
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from models.work_task import WorkTask
from schemas.work_task import WorkTaskCreate
from services.common import get_or_404, get_active_employee
from services.snapshot_service import list_work_tasks

logger = logging.getLogger(__name__)


def create_work_task(db: Session, payload: WorkTaskCreate, created_by_user_id: int | None) -> WorkTask:
    emp = get_active_employee(db, payload.employee_id)

    task = WorkTask(
        employee_id=emp.employee_id,
        date=payload.date,
        description=payload.description,
        amount=payload.amount,
        created_by=created_by_user_id,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    logger.info("Tarea %s registrada: empleado=%s monto=%s", task.work_task_id, emp.employee_id, task.amount)
    return task


def list_work_tasks_filtered(db: Session, employee_id: int | None = None) -> list[WorkTask]:
    if employee_id is None:
        return list_work_tasks(db)
    return (
        db.query(WorkTask)
        .filter(WorkTask.employee_id == employee_id)
        .order_by(WorkTask.date.desc(), WorkTask.work_task_id.desc())
        .all()
    )


def delete_work_task(db: Session, work_task_id: int) -> None:
    task = get_or_404(db, WorkTask, work_task_id, "Tarea no encontrada")
    db.delete(task)
    db.commit()
    logger.info("Tarea %s eliminada", work_task_id)
