# scripts/create_admin.py
"""
Crear la primera cuenta ADMIN (y las tablas, si no existen).

Uso:
    python scripts/create_admin.py <username> <email> <password>
"""
import logging
import sys, pathlib
ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from config.settings import settings
from enums.roles import Role
from utils.db import SessionLocal, engine
from utils.logging_config import configure_logging
from utils.security import hash_password
from models import Base, User

logger = logging.getLogger("create_admin")


def create_initial_admin(username: str, email: str, password: str) -> None:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            logger.warning("Usuario '%s' ya existe (id: %s)", username, existing.user_id)
            return

        user = User(
            username=username,
            full_name="Administrador",
            email=email,
            password_hash=hash_password(password),
            role=Role.ADMIN,
            status="a",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Usuario ADMIN '%s' creado. ID: %s", username, user.user_id)
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL)
    if len(sys.argv) != 4:
        sys.exit(__doc__)
    create_initial_admin(*sys.argv[1:4])
