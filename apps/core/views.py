# apps/core/views.py
from apps.core.http import api_view


@api_view(['GET'])
def health_view(request):
    return {'message': 'Server is running!'}
