"""
Response formatter: turns query results into printable, labeled sections.

Documents keep their ``_id`` unless the query projected it away; ObjectIds
become strings and every other BSON value is reduced to something
``json`` can encode.
"""

import base64
import datetime as _dt
import json
from typing import Any

from bson import Decimal128

INDENT = 2


def to_printable(obj: Any) -> Any:
    """Recursively convert non-JSON-safe types to safe representations."""
    if isinstance(obj, dict):
        return {str(k): to_printable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_printable(item) for item in obj]
    if isinstance(obj, bytes):
        return base64.b64encode(obj).decode("ascii")
    if isinstance(obj, (_dt.datetime, _dt.date)):
        return obj.isoformat()
    if isinstance(obj, Decimal128):
        return float(obj.to_decimal())
    if isinstance(obj, bool) or obj is None:
        return obj
    if isinstance(obj, int):
        # bson.Int64 is an int subclass
        return int(obj)
    if isinstance(obj, (float, str)):
        return obj
    # ObjectId, Timestamp, Regex, etc.
    return str(obj)


def format_section(label: str, result: Any) -> str:
    """Render one labeled section: blank line, ``label:``, indented JSON."""
    body = json.dumps(to_printable(result), indent=INDENT, ensure_ascii=False)
    return f"\n{label}:\n{body}"
