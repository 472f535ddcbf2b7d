"""Reference raw requests and the records they are expected to parse into.

These double as sample inputs for the command line (``reqparse --examples``)
and as fixtures for the test suite.
"""
from typing import List, Tuple

from .models import ParsedRequest, parse_request

RAW_GET_REQUEST = """
GET / HTTP/1.1
Host: www.example.com
"""

RAW_GET_REQUEST_COMPLEX = """
GET /api/data/123?someValue=example HTTP/1.1
Host: www.example.com
Authorization: Bearer your_access_token
"""

# The body is separated from the headers by an empty line.
RAW_POST_REQUEST = """
POST /api/data HTTP/1.1
Host: www.example.com
Content-Type: application/json
Content-Length: 36

{"key1": "value1", "key2": "value2"}
"""

GET_REQUEST = ParsedRequest(
    method="GET",
    path="/",
    headers={"Host": "www.example.com"},
    body=None,
    query=None,
)

GET_REQUEST_COMPLEX = ParsedRequest(
    method="GET",
    path="/api/data/123",
    headers={
        "Host": "www.example.com",
        "Authorization": "Bearer your_access_token",
    },
    body=None,
    query={"someValue": "example"},
)

POST_REQUEST = ParsedRequest(
    method="POST",
    path="/api/data",
    headers={
        "Host": "www.example.com",
        "Content-Type": "application/json",
        "Content-Length": "36",
    },
    body={"key1": "value1", "key2": "value2"},
    query=None,
)

EXAMPLES: List[Tuple[str, str, ParsedRequest]] = [
    ("get", RAW_GET_REQUEST, GET_REQUEST),
    ("get-complex", RAW_GET_REQUEST_COMPLEX, GET_REQUEST_COMPLEX),
    ("post", RAW_POST_REQUEST, POST_REQUEST),
]

def check_examples() -> List[str]:
    """Return the names of examples whose parsed record differs from the expected one."""
    return [name for name, raw, expected in EXAMPLES if parse_request(raw) != expected]
