"""
Turns the pin flags of the command line into the ordered list of PinAction to apply.

Flag groups are always processed in the order add, remove, input, output, whatever their position on the command
line, so pins are exported before their direction is set. Inside a group, pins keep the order they were given in.
Duplicated pins are kept.
"""
import logging
import re
from argparse import Namespace

from pinsetup.common.constants import CTE
from pinsetup.common.exceptions import UsageError
from pinsetup.common.pinsetup_base_model import PinSetupBaseModel
from pinsetup.models.actions import ParseError, PinAction, PinOperation

logger: logging.Logger = logging.getLogger(__name__)

_PIN_TOKEN: re.Pattern = re.compile(r'[+-]?[0-9]+')

FLAG_ORDER: tuple[tuple[str, PinOperation], ...] = (
    ('add', PinOperation.EXPORT),
    ('remove', PinOperation.UNEXPORT),
    ('input', PinOperation.SET_INPUT),
    ('output', PinOperation.SET_OUTPUT),
)


class PinArguments(PinSetupBaseModel):
    """ Raw values of the pin flags, one entry per occurrence of the flag """
    add: tuple[str, ...] = ()
    remove: tuple[str, ...] = ()
    input: tuple[str, ...] = ()
    output: tuple[str, ...] = ()

    @classmethod
    def from_namespace(cls, args: Namespace) -> 'PinArguments':
        return cls(**{flag: tuple(getattr(args, flag, None) or ()) for flag, _ in FLAG_ORDER})

    def is_empty(self) -> bool:
        return not any(getattr(self, flag) for flag, _ in FLAG_ORDER)


class ParsedCommand(PinSetupBaseModel):
    actions: tuple[PinAction, ...] = ()
    errors: tuple[ParseError, ...] = ()


def split_pins(flag: str, values: tuple[str, ...]) -> list[str]:
    """
    Flattens the values of a repeated flag into a list of pin tokens
    Raises:
        UsageError: if one of the values is empty
    """
    tokens: list[str] = []
    for value in values:
        if not value.strip():
            raise UsageError(f'argument --{flag}: expected a list of pins')
        tokens.extend(t.strip() for t in value.split(CTE.PIN_SEPARATOR))
    return tokens


def parse_pin(token: str) -> int | None:
    """ Decimal pin number of the token, None if it is not an optionally signed run of ASCII digits """
    if not _PIN_TOKEN.fullmatch(token):
        return None
    return int(token)


def interpret(arguments: PinArguments) -> ParsedCommand:
    """
    Builds the ordered action list from the pin flags. Tokens that are not integers are collected as ParseError
    and the remaining tokens are still processed.

    Raises:
        UsageError: no pin flag was given or one of them has an empty value
    """
    if arguments.is_empty():
        raise UsageError('no pin operation requested')

    actions: list[PinAction] = []
    errors: list[ParseError] = []

    for flag, operation in FLAG_ORDER:
        for token in split_pins(flag, getattr(arguments, flag)):
            pin = parse_pin(token)
            if pin is None:
                logger.debug(f'Token {token!r} of --{flag} is not a pin number')
                errors.append(ParseError(flag=flag, token=token))
                continue
            actions.append(PinAction(operation=operation, pin=pin))

    logger.debug(f'Interpreted actions: {", ".join(str(a) for a in actions)}')
    return ParsedCommand(actions=tuple(actions), errors=tuple(errors))
