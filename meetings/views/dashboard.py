# meetings/views/dashboard.py
from django.utils import timezone

from base.views.mixins import ApiView, json_response

from ..models import NextAction, NextActionStatus, OneOnOne
from ..serializers import serialize_next_action, serialize_one_on_one
from ..services.availability import CONDUCT_CLOSES_AFTER
from ..services.next_actions import get_next_action_stats, sort_next_actions

UPCOMING_LIMIT = 5
OPEN_ACTIONS_LIMIT = 10


class DashboardView(ApiView):
    """
    ملخص للمستخدم الحالي:
    - إحصاءات مهامه (Next Actions)
    - اجتماعاته القادمة (SCHEDULED، بما فيها الجارية الآن)
    - مهامه المفتوحة مرتبة (غير المكتملة أولًا ثم الأقرب موعدًا)
    """
    http_method_names = ["get"]

    def get(self, request):
        now = timezone.now()
        user = request.user

        actions = list(NextAction.objects.select_related("user", "one_on_one").filter(user=user))
        upcoming = (
            OneOnOne.objects
            .select_related("supervisor", "member")
            .for_participant(user.pk)
            .scheduled()
            .filter(scheduled_at__gte=now - CONDUCT_CLOSES_AFTER)
            .order_by("scheduled_at")[:UPCOMING_LIMIT]
        )
        open_actions = [a for a in sort_next_actions(actions) if a.status != NextActionStatus.COMPLETED]

        return json_response({
            "stats": get_next_action_stats(actions, now),
            "upcoming_one_on_ones": [serialize_one_on_one(o, user, now, detail=False) for o in upcoming],
            "open_actions": [serialize_next_action(a, user, now) for a in open_actions[:OPEN_ACTIONS_LIMIT]],
        })
