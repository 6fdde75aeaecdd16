""" Pin actions queued from the command line and the outcome of applying them """
from enum import Enum

from pinsetup.common.pinsetup_base_model import PinSetupBaseModel


class PinOperation(Enum):
    EXPORT = 'export'
    UNEXPORT = 'unexport'
    SET_INPUT = 'in'
    SET_OUTPUT = 'out'

    @property
    def is_direction(self) -> bool:
        return self in (PinOperation.SET_INPUT, PinOperation.SET_OUTPUT)


class FailureReason(Enum):
    ILLEGAL_PIN = 'illegal-pin'
    OPEN_FAILED = 'open-failed'
    WRITE_FAILED = 'write-failed'


# Past tense used in the success messages, "Exported pin 4"
_DONE: dict[PinOperation, str] = {
    PinOperation.EXPORT: 'Exported pin {pin}',
    PinOperation.UNEXPORT: 'Unexported pin {pin}',
    PinOperation.SET_INPUT: 'Set pin {pin} direction to in',
    PinOperation.SET_OUTPUT: 'Set pin {pin} direction to out',
}

# Control file named in the failure messages
_TARGET: dict[PinOperation, str] = {
    PinOperation.EXPORT: 'export',
    PinOperation.UNEXPORT: 'unexport',
    PinOperation.SET_INPUT: 'direction',
    PinOperation.SET_OUTPUT: 'direction',
}


class PinAction(PinSetupBaseModel):
    """ One operation to apply to one pin """
    operation: PinOperation
    pin: int

    def __str__(self):
        return f'{self.operation.name.lower()}({self.pin})'


class ParseError(PinSetupBaseModel):
    """ A pin token that could not be converted to an integer """
    flag: str
    token: str

    @property
    def message(self) -> str:
        return f"Invalid pin '{self.token}' given to --{self.flag}, it will be ignored"


class ActionResult(PinSetupBaseModel):
    """
    Outcome of a single PinAction. Failures carry the reason and, for driver errors, a detail with the
    operating system error.
    """
    action: PinAction
    success: bool
    reason: FailureReason | None = None
    detail: str | None = None

    @classmethod
    def ok(cls, action: PinAction) -> 'ActionResult':
        return cls(action=action, success=True)

    @classmethod
    def failed(cls, action: PinAction, reason: FailureReason, detail: str | None = None) -> 'ActionResult':
        return cls(action=action, success=False, reason=reason, detail=detail)

    @property
    def pin(self) -> int:
        return self.action.pin

    @property
    def message(self) -> str:
        """ The single line reported to the user for this result """
        if self.success:
            return _DONE[self.action.operation].format(pin=self.pin)

        match self.reason:
            case FailureReason.ILLEGAL_PIN:
                board = self.detail or 'the board'
                return f'Warning, pin {self.pin} does not exist on {board}, it will be ignored'
            case FailureReason.OPEN_FAILED:
                msg = f'Failed to open {_TARGET[self.action.operation]} for pin {self.pin}'
            case _:
                msg = f'Failed to write {_TARGET[self.action.operation]} for pin {self.pin}'

        if self.detail:
            msg += f': {self.detail}'
        return msg
