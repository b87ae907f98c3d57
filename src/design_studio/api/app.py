from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from design_studio.catalog import TOOLS
from design_studio.config import Settings, settings as default_settings
from design_studio.dispatcher import ActionDispatcher, parse_action
from design_studio.errors import ConfigurationError, DesignStudioError
from design_studio.providers.base import GenerativeProvider
from design_studio.providers.gemini_provider import GeminiProvider

logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = "API_KEY is not configured in the server environment variables."
UNKNOWN_ERROR_MESSAGE = "An unknown server error occurred."

ProviderFactory = Callable[[Settings], GenerativeProvider]

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _get_gemini(cfg: Settings) -> GeminiProvider:
    if not cfg.api_key:
        raise ConfigurationError(CONFIG_ERROR_MESSAGE)
    return GeminiProvider(api_key=cfg.api_key, settings=cfg)


def _error(status_code: int, message: str, details: Any | None = None) -> JSONResponse:
    content: dict[str, Any] = {"error": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def create_app(settings: Settings | None = None, provider_factory: ProviderFactory | None = None) -> FastAPI:
    """
    Build the API. Tests pass their own settings and a provider factory.
    """
    cfg = settings or default_settings
    make_provider = provider_factory or _get_gemini
    logging.basicConfig(level=cfg.log_level.upper())

    app = FastAPI(title="design_studio action dispatcher")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.api_route(cfg.api_path, methods=ALL_METHODS)
    async def dispatch_action(request: Request):
        if request.method != "POST":
            return _error(405, "Method Not Allowed")

        try:
            body = await request.json()
        except ValueError:
            return _error(400, "Invalid request body")
        if not isinstance(body, dict):
            return _error(400, "Invalid request body")

        try:
            # Reject unknown actions before a provider (and its key) is needed.
            action = parse_action(body.get("action"))
            dispatcher = ActionDispatcher(make_provider(cfg))
            data = await dispatcher.dispatch(action, body.get("payload"))
        except ConfigurationError as exc:
            logger.error("configuration error: %s", exc.message)
            return _error(exc.status_code, exc.message)
        except DesignStudioError as exc:
            if exc.status_code >= 500:
                logger.error("action %r failed: %s", body.get("action"), exc.message)
            else:
                logger.info("rejected request for action %r: %s", body.get("action"), exc.message)
            return _error(exc.status_code, exc.message, exc.details)
        except Exception as exc:
            logger.exception("error in API handler for action %r", body.get("action"))
            return _error(500, str(exc) or UNKNOWN_ERROR_MESSAGE)

        return JSONResponse(status_code=200, content={"data": data})

    @app.get("/api/tools")
    def list_tools():
        return {"data": [tool.to_dict() for tool in TOOLS]}

    return app


app = create_app()
