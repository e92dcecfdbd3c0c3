"""Helpers shared by the JSON controllers."""

from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from functools import wraps
from typing import Any

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError
from .datetime_utils import date_key
from .validators import require_date_range

logger = logging.getLogger(__name__)


def current_role() -> Role:
    try:
        return Role(session.get("role") or Role.STAFF.value)
    except ValueError:
        return Role.STAFF


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def api_view(view):
    """Map domain errors onto JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except AuthorizationError as e:
            return json_error(str(e), 403)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except DomainError as e:
            return json_error(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return json_error("Internal server error", 500)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_role() != Role.ADMIN:
            return json_error("Manager access required", 403)
        return view(*args, **kwargs)

    return wrapper


def range_args(default: tuple[str, str]) -> tuple[str, str]:
    """``start``/``end`` query args as canonical keys, falling back to ``default``."""
    start, end = require_date_range(request.args.get("start") or default[0], request.args.get("end") or default[1])
    return date_key(start), date_key(end)


def to_json(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, dict):
        return {str(k): to_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_json(v) for v in obj]
    return obj
