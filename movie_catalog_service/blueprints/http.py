"""Request parsing, API-key guard and JSON responses shared by blueprints."""
import functools
import hmac
import json
import logging
from typing import Any, Optional

import azure.functions as func

from movie_catalog_service.config import get_api_secret
from movie_catalog_service.exceptions import AuthenticationError, CatalogError, ValidationError

logger = logging.getLogger(__name__)


def json_response(body: Any, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body, default=str),  # default=str handles datetime/date
        status_code=status_code,
        mimetype="application/json"
    )


def error_response(message: str, status_code: int) -> func.HttpResponse:
    return json_response({"error": message}, status_code=status_code)


def no_content() -> func.HttpResponse:
    return func.HttpResponse(status_code=204)


def route_int(req: func.HttpRequest, name: str) -> int:
    """Read an integer route parameter."""
    value = req.route_params.get(name)
    if not value:
        raise ValidationError(f"{name} is required")
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def query_int(req: func.HttpRequest, name: str, default: Optional[int] = None) -> Optional[int]:
    """Read an optional integer query parameter."""
    value = req.params.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def json_body(req: func.HttpRequest) -> dict:
    """Read the JSON object sent as request body."""
    try:
        body = req.get_json()
    except ValueError:
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _extract_api_key(req: func.HttpRequest) -> Optional[str]:
    auth_header = req.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header[len("Bearer "):]
    return req.headers.get("x-api-key")


def require_api_key(req: func.HttpRequest) -> None:
    """
    Check the caller's API key against API_SECRET.

    The key is read from ``Authorization: Bearer <key>`` or ``x-api-key``.

    Raises:
        AuthenticationError: If the key is missing, wrong, or no secret is configured
    """
    api_key = _extract_api_key(req)
    secret = get_api_secret()
    if not api_key or not secret or not hmac.compare_digest(api_key, secret):
        raise AuthenticationError("Invalid API key")


def handle_errors(handler):
    """Turn catalog errors into JSON error responses; anything else becomes a 500."""
    @functools.wraps(handler)
    def wrapper(req: func.HttpRequest) -> func.HttpResponse:
        try:
            return handler(req)
        except CatalogError as e:
            if e.status_code >= 500:
                logger.error(f"Error in {handler.__name__}: {str(e)}", exc_info=True)
                return error_response("Internal server error", e.status_code)
            return error_response(str(e), e.status_code)
        except Exception as e:
            logger.error(f"Error in {handler.__name__}: {str(e)}", exc_info=True)
            return error_response("Internal server error", 500)

    return wrapper
