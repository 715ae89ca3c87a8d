"""Logfire setup for the API process and scripts.

Code logs and traces through the logfire module directly:

    logfire.info("Blog approved", blog_id=str(blog.id))

    with logfire.span("like_service.toggle_like", blog_id=str(blog_id)):
        ...

Span names follow `<service or use case>.<method>`.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request
from sqlalchemy.ext.asyncio import AsyncEngine

from devnovate.config import ObservabilitySettings, Settings

SERVICE_NAME = "devnovate-backend"

# Liveness checks would otherwise dominate the trace volume
UNTRACED_PATHS = "/health"


def _should_send(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send whenever a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app module is imported.

    Without a token (and without OBSERVABILITY__SEND_TO_LOGFIRE=true) output
    stays on the console.
    """
    send = _should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request: Request, attributes: dict[str, Any]) -> dict[str, Any]:
    """Attach route details to the request span without recording credentials."""
    return {
        **attributes,
        "method": request.method,
        "path": request.url.path,
        "client_host": request.client.host if request.client else None,
        "has_credentials": "auth_token" in request.cookies
        or "authorization" in request.headers,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except the health check."""
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=UNTRACED_PATHS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, tagging them with the active span context."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)


def instrument_httpx() -> None:
    """Trace outbound notification webhook calls."""
    logfire.instrument_httpx()
