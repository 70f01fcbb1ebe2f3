# api/work_tasks.py
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from utils.permissions import ensure_user_has_scope, Scopes
from models.user import User
from schemas.work_task import WorkTaskCreate, WorkTaskOut
from services.work_task_service import create_work_task, list_work_tasks_filtered, delete_work_task

router = APIRouter(prefix="/work_tasks", tags=["work_tasks"])


@router.get("", response_model=list[WorkTaskOut], summary="Listar tareas")
def list_work_tasks_endpoint(
        employee_id: int | None = Query(None, description="Filtrar por obrero"),
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.VER_REGISTROS)
    return list_work_tasks_filtered(db, employee_id)


@router.post("", response_model=WorkTaskOut, status_code=201, summary="Registrar tarea a destajo")
def create_work_task_endpoint(
        payload: WorkTaskCreate,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.CREAR_REGISTROS)
    return create_work_task(db, payload, current_user.user_id)


@router.delete("/{work_task_id}", status_code=204, summary="Eliminar tarea")
def delete_work_task_endpoint(
        work_task_id: int,
        db: Session = Depends(get_db),
        current_user: User = Depends(get_current_user),
):
    ensure_user_has_scope(current_user, Scopes.ELIMINAR_REGISTROS)
    delete_work_task(db, work_task_id)
    return Response(status_code=204)
