from enums.roles import Role
from models.user import User
from utils.security import create_access_token


def headers_for(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.user_id)}"}


def worker_with_employee(make_user, employee_id: int) -> dict:
    return headers_for(make_user(Role.WORKER, employee_id=employee_id))
