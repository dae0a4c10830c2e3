"""Handlers globais de exceção.

EscolaError vira o envelope {"message": ...}, erros do pydantic viram 400 com
a lista {campo, mensagem} e qualquer outra exceção vira 500 repassando a
mensagem original.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from escola_api.core.errors import EscolaError, ValidationError
from escola_api.core.logger import get_logger

logger = get_logger(__name__)

_LOCATION_MESSAGES = {
    "body": "Dados de entrada inválidos (BODY)",
    "path": "Parâmetros inválidos (URL PARAMS)",
    "query": "Parâmetros de consulta inválidos (QUERY)",
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EscolaError, escola_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_error_handler)


async def escola_error_handler(request: Request, exc: EscolaError):
    if exc.http_status >= 500:
        detail = getattr(exc, "detail", None) or exc.message
        logger.error(f"{type(exc).__name__} em {request.url.path}: {detail}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def validation_issues(exc: RequestValidationError) -> tuple[str, list[dict[str, str]]]:
    errors = exc.errors()
    location = errors[0]["loc"][0] if errors and errors[0]["loc"] else "body"
    message = _LOCATION_MESSAGES.get(location, _LOCATION_MESSAGES["body"])
    issues = [
        {
            "campo": ".".join(str(part) for part in e["loc"][1:]),
            "mensagem": e["msg"],
        }
        for e in errors
    ]
    return message, issues


async def validation_error_handler(request: Request, exc: RequestValidationError):
    message, issues = validation_issues(exc)
    logger.debug(f"Validação falhou em {request.url.path}: {issues}")
    error = ValidationError(message, issues)
    return JSONResponse(status_code=error.http_status, content=error.to_response())


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def generic_error_handler(request: Request, exc: Exception):
    logger.error(f"Erro não tratado em {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": str(exc)},
    )
