from .department_form import DepartmentForm

__all__ = ["DepartmentForm"]
