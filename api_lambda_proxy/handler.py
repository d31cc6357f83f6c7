"""
API Lambda proxy handler
"""

import json
import logging
from typing import Any, Dict, Optional

import requests  # type: ignore

from api_lambda_proxy.config import get_settings
from api_lambda_proxy.http import InboundRequest, OutboundResponse
from api_lambda_proxy.utils import (
    extract_request_id,
    get_header_case_insensitive,
    mask_url,
    resolve_target_url,
)

logger = logging.getLogger()
logger.setLevel(logging.INFO)

USER_AGENT = "API-Lambda-Proxy/1.0"

CORS_ORIGIN_HEADERS = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, X-Api-Url",
    "Access-Control-Max-Age": "86400",
}


class InvalidUpstreamResponse(ValueError):
    """The target URL answered with a body that is not JSON."""


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request_id = extract_request_id(context)

    try:
        request = InboundRequest.from_event(event, context)

        caller_info = _extract_caller_info(event, request.headers)
        logger.info(
            f"Processing {request.method} request to {request.path or '/'} "
            f"(request_id: {request.request_id}, caller: {caller_info})"
        )

        if request.method == "OPTIONS":
            return _create_preflight_response().to_dict()

        if request.method == "GET":
            settings = get_settings()
            target_url = resolve_target_url(
                request.query_params, settings.default_target_url
            )
            data = _fetch_json(target_url, settings.request_timeout)
            return _create_success_response(data, request.request_id).to_dict()

        logger.warning(f"Rejected unsupported method: {request.method}")
        return _create_method_not_allowed_response().to_dict()

    except InvalidUpstreamResponse as e:
        logger.error(f"Invalid response from target: {e}")
        return _create_error_response(
            502, "Bad Gateway", request_id, "Upstream response is not valid JSON"
        ).to_dict()
    except requests.exceptions.RequestException as e:
        logger.error(f"Request to target failed: {e}", exc_info=True)
        return _create_error_response(
            502, "Bad Gateway", request_id, str(e)
        ).to_dict()
    except Exception as e:
        logger.error(f"Error processing request: {str(e)}", exc_info=True)
        return _create_error_response(
            500, "Internal Server Error", request_id
        ).to_dict()


def _fetch_json(url: str, timeout: Optional[float]) -> Any:
    headers = {"Accept": "application/json", "User-Agent": USER_AGENT}

    logger.info(f"Making GET request to target: {mask_url(url)}")

    response = requests.get(url, headers=headers, timeout=timeout)

    logger.info(f"Target response: {response.status_code}")

    # Non-2xx answers are wrapped as-is as long as they carry JSON
    try:
        return json.loads(response.text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidUpstreamResponse(
            f"status {response.status_code}, {len(response.text)} bytes: {e}"
        ) from e


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise InvalidUpstreamResponse(f"non-standard JSON constant {name}")


def _json_headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    headers.update(CORS_ORIGIN_HEADERS)
    return headers


def _create_preflight_response() -> OutboundResponse:
    return OutboundResponse(200, dict(PREFLIGHT_HEADERS), "")


def _create_success_response(data: Any, request_id: str) -> OutboundResponse:
    body = {"success": True, "data": data, "requestId": request_id}
    return OutboundResponse(200, _json_headers(), json.dumps(body))


def _create_method_not_allowed_response() -> OutboundResponse:
    return OutboundResponse(
        405, _json_headers(), json.dumps({"error": "Method not allowed"})
    )


def _create_error_response(
    status_code: int,
    error: str,
    request_id: Optional[str] = None,
    message: Optional[str] = None,
) -> OutboundResponse:
    error_response: Dict[str, Any] = {
        "success": False,
        "error": error,
        "requestId": str(request_id),
    }
    if message:
        error_response["message"] = message

    return OutboundResponse(status_code, _json_headers(), json.dumps(error_response))


def _extract_caller_info(event: Dict[str, Any], headers: Dict[str, str]) -> str:
    """Extract caller information from the event and headers for logging purposes."""
    caller_parts = []

    source_ip = None
    request_context = event.get("requestContext") or {}
    # API Gateway format
    if "identity" in request_context:
        source_ip = (request_context["identity"] or {}).get("sourceIp")
    # Lambda Function URL format
    elif "http" in request_context:
        source_ip = (request_context["http"] or {}).get("sourceIp")

    if source_ip:
        caller_parts.append(f"ip={source_ip}")

    user_agent = get_header_case_insensitive(headers, "User-Agent")
    if user_agent:
        if len(user_agent) > 100:
            user_agent = user_agent[:97] + "..."
        caller_parts.append(f"ua={user_agent}")

    origin = get_header_case_insensitive(headers, "Origin")
    if origin:
        caller_parts.append(f"origin={origin}")

    if event.get("version") == "2.0":
        caller_parts.append("source=lambda_url")
    elif "apiId" in request_context:
        caller_parts.append("source=api_gateway")

    return " | ".join(caller_parts) if caller_parts else "unknown"
