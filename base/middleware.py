# base/middleware.py
from __future__ import annotations

import logging

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from django.http import Http404, JsonResponse

from .exceptions import ApiError

logger = logging.getLogger(__name__)


def _validation_payload(exc: ValidationError) -> dict:
    if hasattr(exc, "error_dict"):
        fields = {name: [str(m) for m in msgs] for name, msgs in exc.message_dict.items()}
        return {"error": "Required information is missing or invalid.", "fields": fields}
    messages = [str(m) for m in exc.messages]
    return {"error": messages[0] if messages else "Required information is missing or invalid."}


class ApiErrorMiddleware:
    """
    يحوّل استثناءات الـ views إلى JSON موحّد {"error": ...} بالرموز:
      401 غير مسجّل / 403 غير مسموح / 404 غير موجود / 400 تحقق / 409 تعارض.
    يجب وضعه بعد AuthenticationMiddleware.
    الاستثناءات غير المتوقعة تمرّ إلى معالجة Django الافتراضية (500).
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exc):
        user_id = getattr(getattr(request, "user", None), "pk", None)

        if isinstance(exc, ApiError):
            if exc.status >= 401:
                logger.warning("%s %s → %s (user=%s): %s", request.method, request.path, exc.status, user_id, exc.message)
            return JsonResponse({"error": exc.message}, status=exc.status)

        if isinstance(exc, PermissionDenied):
            message = str(exc) or "You do not have permission to perform this operation."
            logger.warning("%s %s → 403 (user=%s): %s", request.method, request.path, user_id, message)
            return JsonResponse({"error": message}, status=403)

        if isinstance(exc, (Http404, ObjectDoesNotExist)):
            return JsonResponse({"error": "Resource not found."}, status=404)

        if isinstance(exc, ValidationError):
            return JsonResponse(_validation_payload(exc), status=400)

        return None
