from pinsetup.models.actions import ActionResult, FailureReason, ParseError, PinAction, PinOperation
from pinsetup.models.board import BoardProfile

__all__ = ['ActionResult', 'BoardProfile', 'FailureReason', 'ParseError', 'PinAction', 'PinOperation']
