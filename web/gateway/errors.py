"""JSON replacements for Django's default HTML error pages.

Wired as ``handler404`` and ``handler500`` in ``config.urls`` so that
unknown routes and unhandled exceptions answer with the same
``{"success": false, "error": ...}`` body as every API endpoint. Django
only uses these handlers when ``DEBUG`` is off.
"""

from django.http import JsonResponse


def not_found(request, exception=None):
    return JsonResponse({"success": False, "error": "Route not found"}, status=404)


def server_error(request):
    return JsonResponse({"success": False, "error": "Internal server error"}, status=500)
