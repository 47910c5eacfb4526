# apps/core/domain/derived.py
"""
Pola wyliczane przy odczycie (nigdy nie zapisywane w bazie).

Czyste funkcje na zwykłych danych, bez zależności od ORM.
"""
import math
from datetime import datetime
from typing import Any, Iterable, Optional


class ProjectHealth:
    GOOD = 'good'
    WARNING = 'warning'
    CRITICAL = 'critical'
    UNKNOWN = 'unknown'


def round_half_up(value: float) -> int:
    # Math.round z JS: .5 zawsze w górę (round() w Pythonie zaokrągla do parzystej)
    return int(math.floor(value + 0.5))


def clamp_percent(value: float) -> float:
    return max(0, min(100, value))


def goal_progress(current_value: float, target_value: float) -> int:
    """Postęp celu w procentach (0-100). Cel zerowy daje 0, nie błąd."""
    if not target_value:
        return 0
    ratio = min(current_value / target_value, 1)
    return int(clamp_percent(round_half_up(ratio * 100)))


def goal_is_overdue(status: str, target_date: Optional[datetime], now: datetime) -> bool:
    # Ukończony cel nigdy nie jest przeterminowany
    if status == 'completed':
        return False
    if target_date is None:
        return False
    return now > target_date


def project_health(progress: float, start_date: datetime,
                   expected_end_date: Optional[datetime], now: datetime) -> str:
    """
    Porównuje faktyczny postęp z oczekiwanym (upływ czasu / cały okres).
    good >= 90% oczekiwanego, warning >= 70%, poniżej critical.
    """
    if not expected_end_date or not start_date:
        return ProjectHealth.UNKNOWN

    total = (expected_end_date - start_date).total_seconds()
    if total == 0:
        return ProjectHealth.UNKNOWN

    elapsed = (now - start_date).total_seconds()
    expected_progress = (elapsed / total) * 100

    if progress >= expected_progress * 0.9:
        return ProjectHealth.GOOD
    if progress >= expected_progress * 0.7:
        return ProjectHealth.WARNING
    return ProjectHealth.CRITICAL


def _progress_of(record: Any) -> float:
    if isinstance(record, dict):
        return record.get('progress') or 0
    return getattr(record, 'progress', 0) or 0


def average_progress(records: Iterable[Any]) -> float:
    """Średnia arytmetyczna pola progress; 0 dla pustej listy."""
    values = [_progress_of(r) for r in records]
    if not values:
        return 0
    return sum(values) / len(values)
