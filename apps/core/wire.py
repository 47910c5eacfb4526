# apps/core/wire.py
"""Konwersja między formatem JSON API (camelCase, `_id`) a polami modeli (snake_case)."""
import re
from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Mapping

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def to_snake(name: str) -> str:
    """assignedBy -> assigned_by"""
    if name == '_id':
        return 'id'
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def to_camel(name: str) -> str:
    """expected_end_date -> expectedEndDate"""
    if name == 'id':
        return '_id'
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def snake_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Tylko klucze najwyższego poziomu; zagnieżdżone obiekty zostają w formacie wire."""
    return {to_snake(key): value for key, value in data.items()}


def to_wire(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {to_camel(f.name): to_wire(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: to_wire(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(v) for v in value]
    return value
