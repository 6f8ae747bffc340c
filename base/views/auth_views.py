# base/views/auth_views.py
import logging

from django.contrib.auth import login, logout
from django.contrib.sessions.models import Session
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import ensure_csrf_cookie

from ..exceptions import AuthenticationRequired
from ..forms import LoginForm
from ..serializers import serialize_user
from .mixins import ApiView, JsonBodyMixin, json_response

logger = logging.getLogger(__name__)


class LoginView(JsonBodyMixin, View):
    http_method_names = ["post"]

    def post(self, request):
        form = LoginForm(request, data={
            "username": self.payload.get("email", ""),
            "password": self.payload.get("password", ""),
        })
        if not form.is_valid():
            raise AuthenticationRequired("Invalid email or password.")
        user = form.get_user()

        # إنهاء جلسة قديمة إن وُجدت (جلسة واحدة لكل مستخدم)
        if user.last_session_key:
            Session.objects.filter(session_key=user.last_session_key).delete()

        login(request, user)
        user.last_session_key = request.session.session_key
        user.save(update_fields=["last_session_key"])

        logger.info("User %s logged in", user.pk)
        return json_response(serialize_user(user))


class LogoutView(ApiView):
    http_method_names = ["post"]

    def post(self, request):
        request.user.last_session_key = None
        request.user.save(update_fields=["last_session_key"])
        logout(request)
        return json_response({"message": "Logged out."})


@method_decorator(ensure_csrf_cookie, name="dispatch")
class MeView(ApiView):
    http_method_names = ["get"]

    def get(self, request):
        return json_response(serialize_user(request.user))
