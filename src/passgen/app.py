from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from .config import DEFAULT_LOCALE, GENERATE_PASSWORD_PATH
from .errors import ParameterError
from .handler import parse_password_config
from .messages import get_catalog
from .password_generator import generate_password

logger = logging.getLogger(__name__)


def create_app(locale: str = DEFAULT_LOCALE) -> FastAPI:
    """
    Build the password service.

    Args:
        locale: Locale of the error messages sent to clients.

    Raises:
        ValueError: If the locale has no message catalog.
    """
    catalog = get_catalog(locale)

    app = FastAPI(
        title='passgen',
        description='Random password generation over HTTP',
        version='1.0.0',
    )
    app.state.messages = catalog

    @app.exception_handler(ParameterError)
    async def parameter_error_handler(
        request: Request,
        exc: ParameterError,
    ) -> PlainTextResponse:
        logger.debug('Rejected %s: %s (%s)', request.url.path, exc.kind, exc.param)
        message = request.app.state.messages.render(exc.kind, exc.param)
        return PlainTextResponse(
            message + '\n',
            status_code=exc.status_code,
            headers={'X-Content-Type-Options': 'nosniff'},
        )

    @app.get(GENERATE_PASSWORD_PATH)
    def generate_password_endpoint(request: Request) -> JSONResponse:
        """Generate one password from the query-string constraints."""
        config = parse_password_config(request.query_params)
        logger.debug(
            'Generating password: length=%d upper=%s lower=%s numbers=%s special=%s',
            config.length,
            config.use_uppercase,
            config.use_lowercase,
            config.use_numbers,
            config.use_special_char,
        )
        return JSONResponse({'password': generate_password(config)})

    return app
