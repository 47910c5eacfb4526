# apps/core/http.py
import json
import logging
from functools import wraps
from typing import Any, Dict

from django.db import DatabaseError
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.domain.errors import NotFound, StorageFailure, ValidationFailure
from apps.core.domain.querying import ListResult

logger = logging.getLogger(__name__)


def json_body(request) -> Dict[str, Any]:
    """Treść żądania jako słownik JSON (pusta treść = {})."""
    if not request.body:
        return {}
    try:
        data = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise ValidationFailure.single('body', 'Malformed JSON')
    if not isinstance(data, dict):
        raise ValidationFailure.single('body', 'Request body must be a JSON object')
    return data


def list_payload(key: str, result: ListResult) -> Dict[str, Any]:
    return {
        key: result.records,
        'totalPages': result.total_pages,
        'currentPage': result.current_page,
        'total': result.total,
    }


def api_view(methods):
    """
    Widok JSON API: NotFound -> 404, ValidationFailure -> 400,
    błąd bazy lub inny nieoczekiwany -> 500 (logowany).
    """
    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            try:
                result = view(request, *args, **kwargs)
            except NotFound as e:
                return JsonResponse({'message': str(e)}, status=404)
            except ValidationFailure as e:
                logger.info("%s %s rejected: %s", request.method, request.path, e.to_list())
                return JsonResponse({'errors': e.to_list()}, status=400)
            except (StorageFailure, DatabaseError):
                logger.exception("Storage failure on %s %s", request.method, request.path)
                return JsonResponse({'message': 'Server error'}, status=500)
            except Exception:
                logger.exception("Unexpected error on %s %s", request.method, request.path)
                return JsonResponse({'message': 'Server error'}, status=500)

            if isinstance(result, HttpResponse):
                return result
            return JsonResponse(result, safe=False)

        return csrf_exempt(require_http_methods(methods)(wrapper))
    return decorator
