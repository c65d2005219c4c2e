from typing import Dict, Any, Optional
import base64
import binascii
import json
from datetime import datetime
from decimal import Decimal
import uuid


class DecimalEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, Decimal):
            # Always return as string to preserve precision and ensure consistent type
            return str(obj)
        if isinstance(obj, uuid.UUID):
            return str(obj)
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super(DecimalEncoder, self).default(obj)

def create_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Create a standardized API response."""
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": "Content-Type,Authorization",
            "Access-Control-Allow-Methods": "GET,POST,OPTIONS"
        },
        "body": json.dumps(body, cls=DecimalEncoder)
    }



def handle_error(status_code: int, message: str) -> Dict[str, Any]:
    """Create a standardized error response."""
    return create_response(status_code, {"success": False, "message": message})


def raw_body(event: Dict[str, Any]) -> Optional[str]:
    """
    Extract the raw request body from an API Gateway proxy event.

    Base64-encoded bodies are decoded. Returns None when the event has no body.
    """
    body = (event or {}).get('body')
    if body is None:
        return None
    if event.get('isBase64Encoded'):
        try:
            return base64.b64decode(body).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError):
            raise ValueError("Request body is not valid base64-encoded UTF-8")
    return body


def http_method(event: Dict[str, Any]) -> Optional[str]:
    """Extract the HTTP method from a v2 (requestContext.http) or v1 (httpMethod) event."""
    method = (event or {}).get('requestContext', {}).get('http', {}).get('method')
    return method or (event or {}).get('httpMethod')
