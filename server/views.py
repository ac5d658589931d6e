"""Project-level views."""

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET


@require_GET
def health_check(request: HttpRequest) -> JsonResponse:
    """Report that the service is up."""
    return JsonResponse({'status': 'ok'})
