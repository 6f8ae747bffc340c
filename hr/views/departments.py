# hr/views/departments.py
import logging

from django.core.exceptions import PermissionDenied

from base.exceptions import BadRequest
from base.views.mixins import ApiView, json_response

from ..access import can_create_department
from ..forms import DepartmentForm
from ..models import Department

logger = logging.getLogger(__name__)


def serialize_department(department) -> dict:
    return {
        "id": department.pk,
        "name": department.name,
        "member_count": getattr(department, "member_count", None),
        "created_at": department.created_at,
        "updated_at": department.updated_at,
    }


class DepartmentListCreateView(ApiView):
    """
    GET  → كل الأقسام مرتبة بالاسم مع member_count
    POST → إنشاء قسم (MANAGER فما فوق)
    """
    http_method_names = ["get", "post"]

    def get(self, request):
        qs = Department.objects.with_member_count().order_by("name")
        return json_response([serialize_department(d) for d in qs])

    def post(self, request):
        if not can_create_department(request.user):
            raise PermissionDenied("You do not have permission to create departments.")
        if not (self.payload.get("name") or "").strip():
            raise BadRequest("Department name is required.")

        form = self.validate(self.bind_form(DepartmentForm))
        department = form.save()
        department = Department.objects.with_member_count().get(pk=department.pk)
        logger.info("Department %s created by %s", department.pk, request.user.pk)
        return json_response(serialize_department(department), status=201)
