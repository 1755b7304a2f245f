"""Exception handlers rendering every failure as {message, code, errors}."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.errors import Internal, InvalidInput, NotFound, ShopError

logger = structlog.get_logger(__name__)


def _render(error: ShopError) -> JSONResponse:
    return JSONResponse(status_code=error.code, content=error.to_dict())


def _messages_from_validation_error(exc: ValidationError) -> dict[str, list[str]]:
    messages = exc.messages if isinstance(exc.messages, dict) else {"_entity": [str(exc.messages)]}
    return {field: texts if isinstance(texts, list) else [str(texts)] for field, texts in messages.items()}


async def shop_error_handler(request: Request, exc: ShopError) -> JSONResponse:
    return _render(exc)


async def domain_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _render(InvalidInput(_messages_from_validation_error(exc)))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages: dict[str, list[str]] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
        messages.setdefault(field, []).append(error["msg"])
    return _render(InvalidInput(messages))


async def not_found_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return _render(NotFound())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path)
    return _render(Internal())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ShopError, shop_error_handler)
    app.add_exception_handler(ValidationError, domain_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ObjectNotFoundError, not_found_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
