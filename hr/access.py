# file: hr/access.py

from base.access import can_manage_users


# ============================================================
#  Department rules
# ============================================================

def can_create_department(user) -> bool:
    """إنشاء الأقسام محصور في MANAGER فما فوق (مثل إدارة المستخدمين)."""
    return can_manage_users(user)
