import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import unquote

# Returned by parse_body when the body text is present but is not valid JSON.
BODY_UNPARSEABLE = ""

class BodyOutcome(Enum):
    DECODED = "decoded"
    EMPTY = "empty"
    FAILED = "failed"

@dataclass(frozen=True)
class DecodedBody:
    outcome: BodyOutcome
    value: Any = None

@dataclass(frozen=True)
class ParsedRequest:
    """Immutable parse result. Not hashable: headers and query are dicts."""
    method: str = ""
    path: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    query: Optional[Dict[str, str]] = None
    # Tells a JSON "" document apart from the BODY_UNPARSEABLE sentinel.
    body_outcome: BodyOutcome = field(default=BodyOutcome.EMPTY, compare=False, repr=False)

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "method": self.method,
            "path": self.path,
            "headers": dict(self.headers),
            "body": self.body,
            "query": dict(self.query) if self.query is not None else None,
        }

def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")

def parse_header(line: str, headers: Dict[str, str]) -> None:
    """Merge one ``Key: Value`` line into ``headers``. Later keys overwrite earlier ones."""
    if not line.strip():
        return
    key, sep, value = line.partition(": ")
    if not sep:
        logging.debug("Skipping malformed header line: %r", line)
        return
    headers[key.strip()] = value.strip()

def decode_body(text: str) -> DecodedBody:
    if not text.strip():
        return DecodedBody(BodyOutcome.EMPTY)
    try:
        return DecodedBody(BodyOutcome.DECODED, json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as exc:
        logging.debug("Body is not valid JSON: %s", exc)
        return DecodedBody(BodyOutcome.FAILED, BODY_UNPARSEABLE)

def parse_body(text: str) -> Any:
    """
    None       -> blank body
    value      -> decoded JSON document
    ""         -> body present but not JSON (BODY_UNPARSEABLE)
    """
    return decode_body(text).value

def extract_query(full_path: str) -> Optional[Dict[str, str]]:
    if "?" not in full_path:
        return None

    query_string = full_path.split("?", 1)[1]
    query: Dict[str, str] = {}
    for param in query_string.split("&"):
        if not param:
            continue
        key, _, value = param.partition("=")
        # unquote leaves "+" alone, matching URI component decoding.
        query[key] = unquote(value)
    return query

def _split_request_line(line: str) -> tuple[str, str]:
    tokens = line.split(" ")
    method = tokens[0]
    full_path = tokens[1] if len(tokens) > 1 else ""
    return method, full_path

def parse_request(raw_text: Optional[str]) -> ParsedRequest:
    """Convert raw HTTP text into a ParsedRequest. Never raises for str or None input."""
    if not raw_text:
        return ParsedRequest()

    lines = raw_text.strip().split("\n")
    method, full_path = _split_request_line(lines[0].rstrip("\r"))
    path = full_path.split("?", 1)[0]

    headers: Dict[str, str] = {}
    index = 1
    while index < len(lines) and lines[index].strip():
        parse_header(lines[index], headers)
        index += 1

    body = None
    body_outcome = BodyOutcome.EMPTY
    if index < len(lines):
        # lines[index] is the blank separator.
        decoded = decode_body("\n".join(lines[index + 1:]))
        body, body_outcome = decoded.value, decoded.outcome

    query = extract_query(full_path) if "?" in full_path else None

    return ParsedRequest(
        method=method,
        path=path,
        headers=headers,
        body=body,
        query=query,
        body_outcome=body_outcome,
    )
