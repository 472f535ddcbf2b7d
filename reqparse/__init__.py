from .models import (
    BODY_UNPARSEABLE,
    BodyOutcome,
    DecodedBody,
    ParsedRequest,
    decode_body,
    extract_query,
    parse_body,
    parse_header,
    parse_request,
)

__all__ = [
    "BODY_UNPARSEABLE",
    "BodyOutcome",
    "DecodedBody",
    "ParsedRequest",
    "decode_body",
    "extract_query",
    "parse_body",
    "parse_header",
    "parse_request",
]
