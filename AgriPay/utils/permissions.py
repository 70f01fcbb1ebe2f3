"""
Sistema de autorización basado en roles y scopes.

Arquitectura:
- Cada usuario tiene UN rol fijo (ADMIN, MANAGER, WORKER)
- Cada rol otorga un conjunto cerrado de scopes
- Los endpoints exigen scopes, nunca nombres de rol
"""
from fastapi import HTTPException, status

from enums.roles import Role
from models.user import User


# ============================================================================
# Catálogo de Scopes
# ============================================================================

class Scopes:
    """
    Catálogo completo de scopes del sistema.

    Nomenclatura:
    - ver_* : Solo lectura
    - crear_* : Solo crear
    - editar_* : Solo editar
    - eliminar_* : Solo eliminar
    - gestionar_* : Scope completo
    """

    # Obrero
    VER_MI_SALDO = "ver_mi_saldo"

    # Operación diaria
    VER_REGISTROS = "ver_registros"
    CREAR_REGISTROS = "crear_registros"
    EDITAR_PERSONAL = "editar_personal"
    ELIMINAR_REGISTROS = "eliminar_registros"

    # Nómina
    VER_NOMINA = "ver_nomina"
    LIQUIDAR_SALDOS = "liquidar_saldos"

    # Dueño
    VER_RENTABILIDAD = "ver_rentabilidad"
    EDITAR_PARAMETROS = "editar_parametros"
    GESTIONAR_USUARIOS = "gestionar_usuarios"


_MANAGER_SCOPES = frozenset({
    Scopes.VER_REGISTROS,
    Scopes.CREAR_REGISTROS,
    Scopes.EDITAR_PERSONAL,
    Scopes.VER_NOMINA,
    Scopes.LIQUIDAR_SALDOS,
    Scopes.VER_MI_SALDO,
})

SCOPES_BY_ROLE: dict[Role, frozenset[str]] = {
    Role.WORKER: frozenset({Scopes.VER_MI_SALDO}),
    Role.MANAGER: _MANAGER_SCOPES,
    Role.ADMIN: _MANAGER_SCOPES | {
        Scopes.VER_RENTABILIDAD,
        Scopes.EDITAR_PARAMETROS,
        Scopes.ELIMINAR_REGISTROS,
        Scopes.GESTIONAR_USUARIOS,
    },
}


# ============================================================================
# Funciones de Consulta de Permisos
# ============================================================================

def get_scopes_for_role(role: Role | str) -> frozenset[str]:
    return SCOPES_BY_ROLE.get(Role(role), frozenset())


def user_has_scope(user: User, required_scope: str) -> bool:
    """Verificar si el usuario (activo) tiene un scope."""
    if user.status != "a":
        return False
    return required_scope in get_scopes_for_role(user.role)


def ensure_user_has_scope(user: User, required_scope: str) -> None:
    """
    Validar que el usuario tenga el scope requerido.

    Raises:
        HTTPException 403: Si no tiene el scope
    """
    if not user_has_scope(user, required_scope):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"No tiene permiso para esta acción (requiere: {required_scope})",
        )


def ensure_can_view_employee(user: User, employee_id: int) -> None:
    """
    Saldo/actividad de un obrero:
    - con ver_nomina: cualquier obrero
    - con ver_mi_saldo: solo su propia ficha vinculada

    Raises:
        HTTPException 403: Si no puede ver ese obrero
    """
    if user_has_scope(user, Scopes.VER_NOMINA):
        return
    if user_has_scope(user, Scopes.VER_MI_SALDO) and user.employee_id == employee_id:
        return
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Solo puede consultar su propio saldo",
    )
