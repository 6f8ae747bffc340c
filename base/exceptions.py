# base/exceptions.py
# أخطاء الواجهة البرمجية: كل صنف يحمل رمز HTTP الخاص به،
# وتحوّلها ApiErrorMiddleware إلى {"error": ...}.
from __future__ import annotations


class ApiError(Exception):
    status = 400
    default_message = "Bad request."

    def __init__(self, message: str | None = None, *, status: int | None = None):
        self.message = message or self.default_message
        if status is not None:
            self.status = status
        super().__init__(self.message)


class BadRequest(ApiError):
    status = 400
    default_message = "Required information is missing or invalid."


class AuthenticationRequired(ApiError):
    status = 401
    default_message = "Authentication required."


class Conflict(ApiError):
    status = 409
    default_message = "Conflicting schedule."
