import logging
from typing import Iterable

from pinsetup.gpio.sysfs_writer import SysfsWriter
from pinsetup.gpio.validator import PinValidator
from pinsetup.models.actions import ActionResult, FailureReason, PinAction


logger: logging.Logger = logging.getLogger(__name__)


class ActionExecutor:
    """
    Applies a list of PinAction in order.

    Pins not legal on the board never reach the writer. A failure on one pin does not stop the remaining actions
    and nothing already applied is undone. Direction changes on pins that are not exported fail in the driver, the
    caller is responsible for exporting them first.
    """

    def __init__(self, validator: PinValidator, writer: SysfsWriter):
        self.validator = validator
        self.writer = writer

    def execute_action(self, action: PinAction) -> ActionResult:
        if not self.validator.is_legal(action.pin):
            return ActionResult.failed(action, FailureReason.ILLEGAL_PIN, f'board {self.validator.board.name}')
        return self.writer.apply(action)

    def execute(self, actions: Iterable[PinAction]) -> list[ActionResult]:
        """
        Applies every action and reports each outcome once, successes at INFO and failures at WARNING.
        Args:
            actions: the ordered actions

        Returns: one ActionResult per action, in the same order

        """
        results: list[ActionResult] = []
        for action in actions:
            result = self.execute_action(action)
            if result.success:
                logger.info(result.message)
            else:
                logger.warning(result.message)
            results.append(result)

        failed = sum(1 for r in results if not r.success)
        logger.debug(f'Executed {len(results)} actions, {failed} failed')
        return results
