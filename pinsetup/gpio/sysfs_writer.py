"""
    Writer of the GPIO sysfs control files.

    /sys/class/gpio/export              write "<pin>" to give the pin to userspace
    /sys/class/gpio/unexport            write "<pin>" to release it
    /sys/class/gpio/gpio<pin>/direction write "in" or "out"

Control files are never read back.
"""
import errno
import logging
from pathlib import Path
from typing import Literal

from pinsetup.common.constants import CTE
from pinsetup.common.file_operations import ControlFileError, ControlFileOpenError, write_control_file
from pinsetup.models.actions import ActionResult, FailureReason, PinAction, PinOperation

Direction = Literal['in', 'out']

logger: logging.Logger = logging.getLogger(__name__)

# Driver errors with a known meaning per operation
_KNOWN_ERRORS: dict[tuple[PinOperation, int], str] = {
    (PinOperation.EXPORT, errno.EBUSY): 'pin already exported',
    (PinOperation.UNEXPORT, errno.EINVAL): 'pin not exported',
    (PinOperation.SET_INPUT, errno.ENOENT): 'pin not exported',
    (PinOperation.SET_OUTPUT, errno.ENOENT): 'pin not exported',
}


class SysfsWriter:
    """
    Performs the export, unexport and set-direction driver operations. Every operation returns an ActionResult,
    errors are never raised to the caller.
    """

    def __init__(self, sysfs_path: str | Path = CTE.SYSFS_GPIO_PATH):
        if isinstance(sysfs_path, str):
            sysfs_path = Path(sysfs_path)
        self.sysfs_path: Path = sysfs_path

    @property
    def export_file(self) -> Path:
        return self.sysfs_path / CTE.EXPORT_FILE

    @property
    def unexport_file(self) -> Path:
        return self.sysfs_path / CTE.UNEXPORT_FILE

    def direction_file(self, pin: int) -> Path:
        return self.sysfs_path / f'{CTE.PIN_DIR_PREFIX}{pin}' / CTE.DIRECTION_FILE

    def export(self, pin: int) -> ActionResult:
        return self._write(PinAction(operation=PinOperation.EXPORT, pin=pin), self.export_file, str(pin))

    def unexport(self, pin: int) -> ActionResult:
        return self._write(PinAction(operation=PinOperation.UNEXPORT, pin=pin), self.unexport_file, str(pin))

    def set_direction(self, pin: int, direction: Direction) -> ActionResult:
        operation = PinOperation(direction)
        if not operation.is_direction:
            raise ValueError(f'Invalid direction {direction}, expected "in" or "out"')
        return self._write(PinAction(operation=operation, pin=pin), self.direction_file(pin), direction)

    def apply(self, action: PinAction) -> ActionResult:
        """ Dispatches the action to the operation it names """
        match action.operation:
            case PinOperation.EXPORT:
                return self.export(action.pin)
            case PinOperation.UNEXPORT:
                return self.unexport(action.pin)
            case PinOperation.SET_INPUT | PinOperation.SET_OUTPUT:
                return self.set_direction(action.pin, action.operation.value)

    def _write(self, action: PinAction, file: Path, content: str) -> ActionResult:
        logger.debug(f'Writing {content!r} to {file} for {action}')
        try:
            write_control_file(file, content)
        except ControlFileOpenError as ex:
            return ActionResult.failed(action, FailureReason.OPEN_FAILED, self._describe(action, ex))
        except ControlFileError as ex:
            return ActionResult.failed(action, FailureReason.WRITE_FAILED, self._describe(action, ex))
        except OSError as ex:
            # Raised by close(), the driver can report a rejected write there
            return ActionResult.failed(action, FailureReason.WRITE_FAILED, ex.strerror or str(ex))

        return ActionResult.ok(action)

    @staticmethod
    def _describe(action: PinAction, error: ControlFileError) -> str:
        return _KNOWN_ERRORS.get((action.operation, error.errno), error.reason)
