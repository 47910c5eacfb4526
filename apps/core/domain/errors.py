# apps/core/domain/errors.py
from dataclasses import dataclass
from typing import List


@dataclass
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict:
        return {'field': self.field, 'message': self.message}


class DomainError(Exception):
    """Bazowy wyjątek warstwy domenowej."""


class ValidationFailure(DomainError):
    """Zapis odrzucony: lista naruszeń per pole. Stan bazy nie jest zmieniany."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        fields = ', '.join(e.field for e in self.errors)
        super().__init__(f"Validation failed: {fields}")

    @classmethod
    def single(cls, field: str, message: str) -> 'ValidationFailure':
        return cls([FieldError(field, message)])

    def to_list(self) -> List[dict]:
        return [e.to_dict() for e in self.errors]


class NotFound(DomainError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class StorageFailure(DomainError):
    """Baza niedostępna lub zwróciła błąd. Nie ponawiamy automatycznie."""
