from .one_on_one import OneOnOne, OneOnOneStatus
from .agenda import Agenda
from .minutes import Minutes
from .next_action import NextAction, NextActionStatus

__all__ = [
    "OneOnOne", "OneOnOneStatus",
    "Agenda",
    "Minutes",
    "NextAction", "NextActionStatus",
]
