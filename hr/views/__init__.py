from .departments import DepartmentListCreateView, serialize_department

__all__ = ["DepartmentListCreateView", "serialize_department"]
