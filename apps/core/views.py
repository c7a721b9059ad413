import structlog
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

logger = structlog.get_logger(__name__)


@csrf_exempt
@require_http_methods(["GET"])
def health(request):
    """Liveness probe for the load balancer and the front-end."""
    logger.debug("health.ok")
    return JsonResponse({"status": "ok"}, status=200)
