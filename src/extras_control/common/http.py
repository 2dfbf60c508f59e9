from __future__ import annotations

import logging
import math
from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import DomainError, NotFoundError, ValidationError
from .datetime_utils import try_parse_iso_date

logger = logging.getLogger(__name__)


def json_api(view):
    """Map domain errors to `{"success": false, "message": ...}` responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return jsonify({"success": False, "message": "Erro interno do sistema"}), 500

    return wrapper


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Corpo JSON inválido")
    return data


def query_date(name: str) -> Optional[date]:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return None
    d = try_parse_iso_date(raw)
    if d is None:
        raise ValidationError(f"Data inválida em '{name}' (AAAA-MM-DD)")
    return d


def to_number(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} deve ser numérico")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} deve ser numérico")
    return number


def to_count(value: Any, field_name: str) -> int:
    """Whole, non-fractional number (`3`, `3.0` or `"3"`)."""
    number = to_number(value, field_name)
    if not number.is_integer():
        raise ValidationError(f"{field_name} deve ser um número inteiro")
    return int(number)
