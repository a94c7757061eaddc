"""Logfire setup and instrumentation.

Services log with logfire directly:

    with logfire.span("vote_service.submit_vote", report_id=str(report_id)):
        logfire.info("Vote recorded", choice=choice.value)
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from satya.config import Settings

SERVICE_NAME = "satya-api"


def should_send_to_logfire(settings: Settings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, then token presence."""
    explicit = settings.observability.send_to_logfire
    if explicit is not None:
        return explicit
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once per process, before the app is created."""
    send = should_send_to_logfire(settings)
    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            span_style="indented",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if settings.git_sha != "unknown":
        options["service_version"] = settings.git_sha
    if settings.observability.logfire_token:
        options["token"] = settings.observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
        platform_configured=settings.platform.is_configured,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Span attributes for a request; report ids are lifted out of the path."""
    result = dict(attributes)
    path_params = getattr(request, "path_params", None) or {}
    if "report_id" in path_params:
        result["report_id"] = path_params["report_id"]
    client = getattr(request, "client", None)
    if client is not None:
        result["client_host"] = client.host
    return result


def instrument_app(app: FastAPI, settings: Settings) -> None:
    """Trace incoming requests and outbound platform calls.

    Skipped under ``environment=test``.
    """
    if settings.environment == "test":
        return

    logfire.instrument_httpx()
    # Headers carry bearer tokens and the service role key
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
