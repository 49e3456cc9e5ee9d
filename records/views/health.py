import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def healthz(request):
    """Liveness probe; reports whether the default database answers."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            db_ok = cursor.fetchone() == (1,)
    except DatabaseError as e:
        logger.warning('Health check could not reach the database: %s', e)
        return JsonResponse({'success': False, 'db': False}, status=503)
    return JsonResponse({'success': db_ok, 'db': db_ok}, status=200 if db_ok else 503)
