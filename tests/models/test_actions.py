import unittest

from pinsetup.models.actions import ActionResult, FailureReason, ParseError, PinAction, PinOperation


class TestPinActions(unittest.TestCase):

    def test_pin_operation(self):
        self.assertEqual(PinOperation('in'), PinOperation.SET_INPUT)
        self.assertEqual(PinOperation('out'), PinOperation.SET_OUTPUT)
        self.assertTrue(PinOperation.SET_INPUT.is_direction)
        self.assertFalse(PinOperation.EXPORT.is_direction)

    def test_success_messages(self):
        expected = {
            PinOperation.EXPORT: 'Exported pin 4',
            PinOperation.UNEXPORT: 'Unexported pin 4',
            PinOperation.SET_INPUT: 'Set pin 4 direction to in',
            PinOperation.SET_OUTPUT: 'Set pin 4 direction to out',
        }
        for operation, message in expected.items():
            result = ActionResult.ok(PinAction(operation=operation, pin=4))
            self.assertTrue(result.success)
            self.assertIsNone(result.reason)
            self.assertEqual(result.message, message)

    def test_failure_messages(self):
        export = PinAction(operation=PinOperation.EXPORT, pin=99)
        result = ActionResult.failed(export, FailureReason.ILLEGAL_PIN, 'board raspberry-pi')
        self.assertFalse(result.success)
        self.assertEqual(result.pin, 99)
        self.assertEqual(result.message, 'Warning, pin 99 does not exist on board raspberry-pi, it will be ignored')
        self.assertEqual(ActionResult.failed(export, FailureReason.ILLEGAL_PIN).message,
                         'Warning, pin 99 does not exist on the board, it will be ignored')

        result = ActionResult.failed(export, FailureReason.OPEN_FAILED, 'Permission denied')
        self.assertEqual(result.message, 'Failed to open export for pin 99: Permission denied')

        direction = PinAction(operation=PinOperation.SET_OUTPUT, pin=4)
        result = ActionResult.failed(direction, FailureReason.WRITE_FAILED)
        self.assertEqual(result.message, 'Failed to write direction for pin 4')

    def test_parse_error(self):
        error = ParseError(flag='add', token='x1')
        self.assertEqual(error.message, "Invalid pin 'x1' given to --add, it will be ignored")

    def test_str(self):
        self.assertEqual(str(PinAction(operation=PinOperation.SET_INPUT, pin=17)), 'set_input(17)')
