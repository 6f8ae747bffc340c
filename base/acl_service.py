# base/acl_service.py
# ============================================================
# Global capability registry
#
# - Single source of truth for object-level permissions across ALL apps.
# - Rules are registered per (model label, action), e.g. ("goals.goal", "approve").
# - Each app registers its rules in <app>/access.py, imported from AppConfig.ready().
# - has_perm(obj, user, action): looks the rule up; unknown pairs are denied.
# ============================================================

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

logger = logging.getLogger(__name__)

Rule = Callable[[object, object], bool]

_RULES: Dict[Tuple[str, str], Rule] = {}


def _label_for(obj) -> str:
    meta = getattr(obj, "_meta", None)
    if meta is None:
        return ""
    return meta.label_lower


def _normalize(action: str) -> str:
    return (action or "").strip().lower()


def rule(model_label: str, action: str):
    """
    Decorator: يسجّل دالة (user, obj) -> bool لزوج (model, action).

        @rule("goals.goal", "approve")
        def _approve(user, goal): ...
    """
    key = (model_label.lower(), _normalize(action))

    def decorator(func: Rule) -> Rule:
        if key in _RULES and _RULES[key] is not func:
            logger.debug("ACL rule %s overridden by %s", key, func.__qualname__)
        _RULES[key] = func
        return func

    return decorator


def get_rule(model_label: str, action: str) -> Rule | None:
    return _RULES.get((model_label.lower(), _normalize(action)))


def registered_rules() -> list[Tuple[str, str]]:
    return sorted(_RULES)


def has_perm(obj, user, action: str) -> bool:
    """
    Object permission check.
    - Anonymous users never pass.
    - Unknown (model, action) pairs are denied.
    """
    if obj is None or not user or not getattr(user, "is_authenticated", False):
        return False

    check = get_rule(_label_for(obj), action)
    if check is None:
        return False
    return bool(check(user, obj))
