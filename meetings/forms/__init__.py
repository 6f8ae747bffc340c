from .one_on_one_form import OneOnOneForm, AgendaForm, MinutesForm
from .next_action_form import NextActionForm

__all__ = ["OneOnOneForm", "AgendaForm", "MinutesForm", "NextActionForm"]
