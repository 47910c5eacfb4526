# apps/core/forms.py
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from django import forms
from django.core.exceptions import NON_FIELD_ERRORS
from django.core.validators import RegexValidator, validate_email
from django.forms.models import model_to_dict
from django.utils import timezone

from apps.core.domain.errors import FieldError
from apps.core.wire import to_camel

logger = logging.getLogger(__name__)

# 24h HH:MM (dopuszcza jednocyfrową godzinę, np. 9:30)
TIME_OF_DAY_PATTERN = r'^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$'


def time_of_day_validator(message='Invalid time format (HH:MM)'):
    return RegexValidator(TIME_OF_DAY_PATTERN, message)


def form_errors(form) -> List[FieldError]:
    """Błędy formularza Django -> lista naruszeń w nazwach pól API."""
    errors = []
    for name, messages in form.errors.items():
        field = 'body' if name == NON_FIELD_ERRORS else to_camel(name)
        for message in messages:
            errors.append(FieldError(field, str(message)))
    return errors


def clean_object_list(value: Any, label: str,
                      clean_item: Callable[[Dict[str, Any], int], Dict[str, Any]],
                      shorthand_key: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Waliduje listę obiektów JSON (członkowie zespołu, uczestnicy, dokumenty...).
    Jeśli podano shorthand_key, element-string traktujemy jak {shorthand_key: string}.
    """
    if value in (None, ''):
        return []
    if not isinstance(value, list):
        raise forms.ValidationError(f"{label} must be an array")

    cleaned = []
    for index, item in enumerate(value):
        if shorthand_key and isinstance(item, str):
            item = {shorthand_key: item}
        if not isinstance(item, dict):
            raise forms.ValidationError(f"{label}[{index}] must be an object")
        cleaned.append(clean_item(dict(item), index))
    return cleaned


def clean_string_list(value: Any, label: str) -> List[str]:
    """Lista tagów: tylko stringi, bez pustych, kolejność zachowana."""
    if value in (None, ''):
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise forms.ValidationError(f"{label} must be an array of strings")
    return [v.strip() for v in value if v.strip()]


def require_text(item: Dict[str, Any], key: str, message: str) -> None:
    if key not in item:
        return
    text = item[key]
    if not isinstance(text, str) or not text.strip():
        raise forms.ValidationError(message)
    item[key] = text.strip()


def optional_email(item: Dict[str, Any], key: str, message: str) -> None:
    email = item.get(key)
    if email in (None, ''):
        return
    try:
        validate_email(email)
    except forms.ValidationError:
        raise forms.ValidationError(message)


def require_choice(item: Dict[str, Any], key: str, choices, default: str, message: str) -> None:
    item.setdefault(key, default)
    if item[key] not in choices:
        raise forms.ValidationError(message)


def stamp_if_missing(item: Dict[str, Any], key: str) -> None:
    if not item.get(key):
        item[key] = timezone.now().isoformat()


class EntityForm(forms.ModelForm):
    """
    ModelForm jako lista dozwolonych pól encji.

    - create: brakujące pola dostają wartości domyślne modelu,
    - update: zmieniają się tylko przekazane pola (reszta z bieżącej instancji),
    - nieznane klucze są ignorowane.
    """

    # Pola JSON, które po walidacji mają być listą (pusta lista zamiast None)
    json_list_fields = ()

    @classmethod
    def allowed(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        allowed_fields = set(cls._meta.fields)
        ignored = sorted(k for k in data if k not in allowed_fields)
        if ignored:
            logger.debug("%s: ignoring unknown fields %s", cls.__name__, ignored)
        return {k: v for k, v in data.items() if k in allowed_fields}

    @classmethod
    def defaults(cls) -> Dict[str, Any]:
        values = {}
        for field in cls._meta.model._meta.concrete_fields:
            if field.name in cls._meta.fields and field.has_default():
                values[field.name] = field.get_default()
        return values

    @classmethod
    def for_create(cls, data: Mapping[str, Any]):
        payload = cls.defaults()
        payload.update(cls.allowed(data))
        return cls(data=payload)

    @classmethod
    def for_update(cls, instance, data: Mapping[str, Any]):
        payload = model_to_dict(instance, fields=cls._meta.fields)
        payload.update(cls.allowed(data))
        return cls(data=payload, instance=instance)

    def clean(self):
        cleaned = super().clean()
        for name in self.json_list_fields:
            if name in cleaned and cleaned[name] is None:
                cleaned[name] = []
        return cleaned
