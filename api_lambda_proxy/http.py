"""
HTTP request/response models for the Lambda proxy.
"""

from typing import Any, Dict, Optional

from api_lambda_proxy.utils import extract_request_id


class InboundRequest:
    """
    A runtime-agnostic view of the invocation event.
    """

    def __init__(
        self,
        method: str,
        path: str = "",
        headers: Optional[Dict[str, str]] = None,
        query_params: Optional[Dict[str, str]] = None,
        request_id: str = "unknown",
    ):
        self.method = method
        self.path = path
        self.headers = headers or {}
        self.query_params = query_params or {}
        self.request_id = request_id

    @classmethod
    def from_event(cls, event: Dict[str, Any], context: Any) -> "InboundRequest":
        # Support both API Gateway REST API and Lambda Function URL formats
        if event.get("version") == "2.0":
            http_context = (event.get("requestContext") or {}).get("http") or {}
            method = http_context.get("method") or ""
            path = event.get("rawPath", "")
        else:
            method = event.get("httpMethod") or ""
            path = event.get("path", "")

        return cls(
            method=method,
            path=path,
            headers=event.get("headers") or {},
            query_params=event.get("queryStringParameters") or {},
            request_id=extract_request_id(context),
        )


class OutboundResponse:
    def __init__(
        self,
        status_code: int,
        headers: Dict[str, str],
        body: str = "",
    ):
        self.status_code = status_code
        self.headers = headers
        self.body = body
        self.is_base64_encoded = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
            "isBase64Encoded": self.is_base64_encoded,
        }
