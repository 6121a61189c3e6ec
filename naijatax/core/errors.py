import logging
import uuid

from fastapi import Request
from fastapi.responses import JSONResponse

from naijatax.core.exceptions import NaijaTaxException
from naijatax.services.localization import translate

logger = logging.getLogger("naijatax.errors")


def _session_language(request: Request) -> str | None:
    store = getattr(request.app.state, "session_store", None)
    return store.state.language if store is not None else None


def register_error_handlers(app):
    @app.exception_handler(NaijaTaxException)
    async def naijatax_exception(request: Request, exc: NaijaTaxException):
        message = None
        if exc.message_key:
            message = translate(exc.message_key, _session_language(request))
        logger.info("Request rejected code=%s path=%s", exc.code, request.url.path)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict(message))

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):  # noqa: BLE001
        correlation_id = uuid.uuid4().hex
        logger.exception("Unhandled error cid=%s path=%s method=%s", correlation_id, request.url.path, request.method)
        return JSONResponse(status_code=500, content={"detail": "Internal server error", "cid": correlation_id})

    return app
