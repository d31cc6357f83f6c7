"""
Utility functions for the API Lambda proxy
"""

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit, urlunsplit

logger = logging.getLogger(__name__)

# AWS exposes aws_request_id, other runtimes use request_id / requestId
REQUEST_ID_FIELDS = ["aws_request_id", "request_id", "requestId"]


def get_header_case_insensitive(
    headers: Dict[str, str], header_name: str
) -> Optional[str]:
    """
    Get header value in a case-insensitive manner.
    Lambda Function URL normalizes headers to lowercase, but API Gateway preserves case.
    """
    value = headers.get(header_name)
    if value is not None:
        return value

    header_lower = header_name.lower()
    for key, val in headers.items():
        if key.lower() == header_lower:
            return val

    return None


def extract_request_id(context: Any) -> str:
    if context is None:
        return "unknown"

    for field in REQUEST_ID_FIELDS:
        if isinstance(context, Mapping):
            value = context.get(field)
        else:
            value = getattr(context, field, None)

        if isinstance(value, str) and value:
            return value

    logger.debug("No request id found in invocation context")
    return "unknown"


def resolve_target_url(query_params: Dict[str, str], default_url: str) -> str:
    target_url = query_params.get("url")
    if target_url:
        return target_url
    return default_url


def mask_url(url: str) -> str:
    """Hide query string values and credentials so URLs are safe to log."""
    if not url:
        return url

    try:
        parts = urlsplit(url)
    except ValueError:
        return "<unparseable url>"

    netloc = parts.netloc
    if "@" in netloc:
        netloc = "***@" + netloc.rsplit("@", 1)[1]

    query = parts.query
    if query:
        masked_pairs = []
        for pair in query.split("&"):
            key = pair.split("=", 1)[0]
            masked_pairs.append(f"{key}=***")
        query = "&".join(masked_pairs)

    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))
