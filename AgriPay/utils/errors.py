import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError, OperationalError

logger = logging.getLogger(__name__)


def _normalize_errors(errs):
    norm = []
    for e in errs:
        e = dict(e)
        val = e.get("input")
        if isinstance(val, (bytes, bytearray)):
            try:
                e["input"] = val.decode("utf-8", errors="ignore")
            except Exception:
                e["input"] = repr(val)
        # ctx puede traer la excepción original (ValueError), no serializable
        if "ctx" in e:
            e["ctx"] = {k: str(v) for k, v in e["ctx"].items()}
        norm.append(e)
    return norm

def install_error_handlers(app: FastAPI):
    @app.exception_handler(RequestValidationError)
    async def validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"error": "validation_error", "detail": _normalize_errors(exc.errors())},
        )

    @app.exception_handler(IntegrityError)
    async def integrity_handler(request: Request, exc: IntegrityError):
        return JSONResponse(status_code=409, content={"error": "conflict", "detail": str(exc.orig)})

    @app.exception_handler(OperationalError)
    async def store_unavailable_handler(request: Request, exc: OperationalError):
        # Sin snapshot completo no se agrega nada: el cliente debe reintentar
        logger.warning("Base de datos no disponible en %s: %s", request.url.path, exc.orig)
        return JSONResponse(
            status_code=503,
            content={
                "error": "store_unavailable",
                "detail": "No se pudo contactar la base de datos. Intente de nuevo.",
                "retry": True,
            },
        )
