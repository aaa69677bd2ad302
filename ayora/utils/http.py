from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple, Type
from flask import request, jsonify
from marshmallow import Schema, ValidationError

def ok(payload: Any, status: int = 200):
    return jsonify(payload), status


def error(code: str, message: str, status: int = 400, **extra):
    body: Dict[str, Any] = {"error": {"code": code, "message": message}}
    if extra:
        body["error"].update(extra)
    return jsonify(body), status

def json_body() -> Dict[str, Any]:
    # force=True allows a missing Content-Type header
    data = request.get_json(force=True, silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}


def validate_schema(schema_cls: Type[Schema], data: Dict[str, Any], partial: bool = False) -> Tuple[Dict[str, Any], Optional[Dict[str, Any]]]:
    try:
        return schema_cls().load(data, partial=partial), None
    except ValidationError as e:
        return {}, e.messages


def arg_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = request.args.get(name)
    if val is None or val.strip() == "":
        return default
    return val.strip()


def arg_int(name: str, default: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    try:
        v = int(request.args.get(name, default))
    except (TypeError, ValueError):
        v = default
    if min_value is not None:
        v = max(min_value, v)
    if max_value is not None:
        v = min(max_value, v)
    return v


def parse_iso_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    # Stored timestamps are naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


LIKE_ESCAPE = "\\"


def like_pattern(text: str) -> str:
    """Build a ``%text%`` LIKE pattern with the wildcards in ``text`` escaped."""
    escaped = text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2).replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
