# base/views/mixins.py
import json
from typing import Optional

from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.core.exceptions import PermissionDenied, ValidationError
from django.forms.models import model_to_dict
from django.http import Http404, JsonResponse
from django.views import View

from ..exceptions import AuthenticationRequired, BadRequest


def json_response(data, status: int = 200) -> JsonResponse:
    # JsonResponse يستعمل DjangoJSONEncoder (datetime/Decimal → ISO/str)
    return JsonResponse(data, status=status, safe=False)


def parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def parse_int(value, field: str) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadRequest(f"{field} must be an integer.")


class LoginRequired(LoginRequiredMixin):
    """Require authentication for all API views (401 JSON instead of a redirect)."""

    def handle_no_permission(self):
        raise AuthenticationRequired()


class JsonBodyMixin:
    """Parses the request body once; `self.payload` is always a dict."""

    _payload = None

    @property
    def payload(self) -> dict:
        if self._payload is None:
            raw = self.request.body or b"{}"
            try:
                data = json.loads(raw)
            except (ValueError, UnicodeDecodeError):
                raise BadRequest("Request body must be valid JSON.")
            if not isinstance(data, dict):
                raise BadRequest("Request body must be a JSON object.")
            self._payload = data
        return self._payload

    def bind_form(self, form_class, instance=None, data: Optional[dict] = None, **kwargs):
        """
        يربط ModelForm ببيانات JSON.
        في التحديث تُدمج القيم الحالية للكائن مع الحقول المرسلة فقط (PUT جزئي).
        """
        data = dict(self.payload if data is None else data)
        if instance is not None and instance.pk:
            # القيم الحالية لحقول Meta فقط (حقول مثل password لا تُملأ من الكائن)
            current = model_to_dict(instance, fields=list(form_class._meta.fields or ()))
            current.update({k: v for k, v in data.items() if k in form_class.base_fields})
            data = current
        return form_class(data=data, instance=instance, **kwargs)

    def validate(self, form):
        if not form.is_valid():
            # → 400 مع "fields"
            raise ValidationError({
                name: [e["message"] for e in errors]
                for name, errors in form.errors.get_json_data().items()
            })
        return form


class ObjectPermissionRequiredMixin(UserPassesTestMixin):
    """
    Enforce object-level permissions through user.has_perm(perm, obj)
    (RolePermissionBackend → base.acl_service).
    - Set `object_permission_map` like:
        {"GET": ["goals.view_goal"], "PUT": ["goals.change_goal"], ...}
      or a single `required_perms` iterable applied to all methods.
    - `permission_denied_messages` gives the 403 message per method.
    - Override `get_permission_object()` to return the model instance.
    """
    required_perms = None
    object_permission_map = None
    permission_denied_messages: dict = {}

    def get_permission_object(self):
        raise NotImplementedError("get_permission_object() must return the object to check permissions on.")

    def get_object(self):
        if not hasattr(self, "_object"):
            self._object = self.get_permission_object()
        return self._object

    def test_func(self):
        user = self.request.user
        if not user or not user.is_authenticated:
            return False

        obj = self.get_object()
        if obj is None:
            raise Http404("Object not found.")

        perms = None
        if self.object_permission_map:
            perms = self.object_permission_map.get(self.request.method, None)
        if perms is None:
            perms = self.required_perms or []

        for p in perms:
            if not user.has_perm(p, obj):
                return False
        return True

    def get_permission_denied_message(self):
        return self.permission_denied_messages.get(
            self.request.method,
            "You do not have permission to perform this operation.",
        )

    def handle_no_permission(self):
        if self.request.user.is_authenticated:
            raise PermissionDenied(self.get_permission_denied_message())
        raise AuthenticationRequired()


class ApiView(LoginRequired, JsonBodyMixin, View):
    """Base for every JSON endpoint: session auth + JSON body parsing."""
    http_method_names = ["get", "post", "put", "patch", "delete", "options"]
