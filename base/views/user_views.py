# base/views/user_views.py
import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied
from django.db.models import F
from django.shortcuts import get_object_or_404

from ..access import can_assign_role, can_change_role, can_manage_users, is_same_user
from ..exceptions import BadRequest, Conflict
from ..forms import UserCreateForm, UserUpdateForm
from ..serializers import serialize_supervisor, serialize_user
from .mixins import ApiView, ObjectPermissionRequiredMixin, json_response, parse_int

logger = logging.getLogger(__name__)

User = get_user_model()


def _with_department_key(data: dict) -> dict:
    # department_id (JSON) → department (ModelForm)
    data = dict(data)
    if "department_id" in data:
        data["department"] = data.pop("department_id")
    return data


class UserListCreateView(ApiView):
    """GET/POST /api/users/ (MANAGER فما فوق)."""

    def dispatch(self, request, *args, **kwargs):
        if request.user.is_authenticated and not can_manage_users(request.user):
            raise PermissionDenied("You do not have permission to manage users.")
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        qs = User.objects.select_related("department").order_by("-created_at")

        role = request.GET.get("role")
        if role:
            qs = qs.filter(role=role)
        department_id = parse_int(request.GET.get("department_id"), "department_id")
        if department_id is not None:
            qs = qs.filter(department_id=department_id)
        search = (request.GET.get("search") or "").strip()
        if search:
            qs = qs.search(search)

        return json_response([serialize_user(u) for u in qs])

    def post(self, request):
        data = _with_department_key(self.payload)
        email = (data.get("email") or "").strip().lower()
        if not data.get("name") or not email or not data.get("password"):
            raise BadRequest()

        if User.objects.filter(email__iexact=email).exists():
            raise Conflict("This email address is already in use.")

        role = data.get("role") or None
        if role and not can_assign_role(request.user, role):
            raise PermissionDenied("You cannot create a user with a role senior to your own.")

        form = self.validate(self.bind_form(UserCreateForm, data=data))
        user = form.save()
        logger.info("User %s created by %s (role=%s)", user.pk, request.user.pk, user.role)
        return json_response(serialize_user(user), status=201)


class UserDetailView(ObjectPermissionRequiredMixin, ApiView):
    """GET/PUT/DELETE /api/users/<id>/"""
    http_method_names = ["get", "put", "delete"]
    object_permission_map = {
        "GET": ["base.view_user"],
        "PUT": ["base.change_user"],
        "DELETE": ["base.delete_user"],
    }
    permission_denied_messages = {
        "GET": "You do not have permission to view this user.",
        "PUT": "You do not have permission to edit this user.",
        "DELETE": "You do not have permission to delete this user.",
    }

    def get_permission_object(self):
        return get_object_or_404(User.objects.select_related("department"), pk=self.kwargs["pk"])

    def dispatch(self, request, *args, **kwargs):
        # حذف الذات → 400 قبل فحص الصلاحية
        if request.method == "DELETE" and request.user.is_authenticated and request.user.pk == kwargs.get("pk"):
            get_object_or_404(User, pk=kwargs["pk"])
            raise BadRequest("You cannot delete your own account.")
        return super().dispatch(request, *args, **kwargs)

    def get(self, request, pk):
        return json_response(serialize_user(self.get_object()))

    def put(self, request, pk):
        target = self.get_object()
        data = _with_department_key(self.payload)

        new_role = data.pop("role", None)
        old_role = target.role
        if new_role is not None and new_role != target.role and not is_same_user(request.user, target):
            if not can_change_role(request.user, target, new_role):
                raise PermissionDenied("You do not have permission to change this user's role.")
            data["role"] = new_role

        form = self.validate(self.bind_form(UserUpdateForm, instance=target, data=data))
        user = form.save()
        if user.role != old_role:
            logger.info("User %s role changed %s → %s by %s", user.pk, old_role, user.role, request.user.pk)
        return json_response(serialize_user(user))

    def delete(self, request, pk):
        target = self.get_object()
        target.delete()
        logger.info("User %s deleted by %s", pk, request.user.pk)
        return json_response({"message": "User deleted."})


class SupervisorListView(ApiView):
    """LEADER فما فوق، باستثناء الطالب نفسه، الأعلى رتبة أولًا ثم الاسم."""
    http_method_names = ["get"]

    def get(self, request):
        qs = (
            User.objects.supervisors()
            .exclude(pk=request.user.pk)
            .with_role_rank()
            .order_by(F("role_rank").desc(), "name")
        )
        return json_response([serialize_supervisor(u) for u in qs])
