from django.db import connection
from django.http import JsonResponse
from django.shortcuts import render
from django.urls import Resolver404


def _wants_json(request):
    return request.path.startswith('/api/')


def home(request):
    """Landing page with links to the farmer and buyer flows."""
    return render(request, 'home.html')


def health_check(request):
    """Liveness probe; also checks the database answers."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except Exception as e:
        return JsonResponse({'status': 'error', 'database': str(e)}, status=503)
    return JsonResponse({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    if _wants_json(request):
        return JsonResponse({
            'error': 'Not found',
            'status': 404
        }, status=404)
    # Resolver404 carries the tried patterns, not a message for the user
    message = None if isinstance(exception, Resolver404) else str(exception)
    return render(request, '404.html', {'message': message or None}, status=404)


def error_500(request):
    """Custom 500 handler."""
    if _wants_json(request):
        return JsonResponse({
            'error': 'Internal server error',
            'status': 500
        }, status=500)
    return render(request, '500.html', status=500)
