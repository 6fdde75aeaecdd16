import unittest
from argparse import Namespace

from pinsetup.common.exceptions import UsageError
from pinsetup.gpio.interpreter import PinArguments, interpret, parse_pin, split_pins
from pinsetup.models.actions import ParseError, PinAction, PinOperation


def actions(*pairs: tuple[PinOperation, int]) -> tuple[PinAction, ...]:
    return tuple(PinAction(operation=op, pin=pin) for op, pin in pairs)


class TestInterpreter(unittest.TestCase):

    def test_from_namespace(self):
        args = Namespace(add=['2,3'], remove=[], input=None, output=['4'], board='raspberry-pi')
        arguments = PinArguments.from_namespace(args)
        self.assertEqual(arguments, PinArguments(add=('2,3',), output=('4',)))
        self.assertFalse(arguments.is_empty())
        self.assertTrue(PinArguments().is_empty())

    def test_split_pins(self):
        self.assertEqual(split_pins('add', ('2,3', ' 4 ', '5, 6')), ['2', '3', '4', '5', '6'])
        self.assertEqual(split_pins('add', ()), [])
        self.assertEqual(split_pins('add', ('2,,3',)), ['2', '', '3'])
        with self.assertRaises(UsageError):
            split_pins('add', ('2', ' '))

    def test_parse_pin(self):
        self.assertEqual(parse_pin('17'), 17)
        self.assertEqual(parse_pin('-1'), -1)
        self.assertEqual(parse_pin('07'), 7)
        self.assertIsNone(parse_pin('x'))
        self.assertIsNone(parse_pin(''))
        self.assertIsNone(parse_pin('0x11'))
        self.assertIsNone(parse_pin('4.5'))
        self.assertIsNone(parse_pin('1_7'))
        self.assertIsNone(parse_pin('\u0661\u0667'))
        self.assertIsNone(parse_pin(' 17'))
        self.assertEqual(parse_pin('+4'), 4)

    def test_non_ascii_digits(self):
        command = interpret(PinArguments(add=('1_7', '\u0661\u0667')))
        self.assertEqual(command.actions, ())
        self.assertEqual([e.token for e in command.errors], ['1_7', '\u0661\u0667'])

    def test_add_then_output(self):
        command = interpret(PinArguments(add=('2,3',), output=('2,3',)))
        self.assertEqual(command.actions, actions((PinOperation.EXPORT, 2), (PinOperation.EXPORT, 3),
                                                  (PinOperation.SET_OUTPUT, 2), (PinOperation.SET_OUTPUT, 3)))
        self.assertEqual(command.errors, ())

    def test_fixed_group_order(self):
        # output given before add on the command line, the group order is still add, remove, input, output
        args = Namespace(output=['4'], input=['5'], remove=['6'], add=['7', '8'])
        command = interpret(PinArguments.from_namespace(args))
        self.assertEqual(command.actions, actions((PinOperation.EXPORT, 7), (PinOperation.EXPORT, 8),
                                                  (PinOperation.UNEXPORT, 6),
                                                  (PinOperation.SET_INPUT, 5),
                                                  (PinOperation.SET_OUTPUT, 4)))

    def test_duplicates_kept(self):
        command = interpret(PinArguments(add=('2,2',)))
        self.assertEqual(command.actions, actions((PinOperation.EXPORT, 2), (PinOperation.EXPORT, 2)))

    def test_parse_errors(self):
        command = interpret(PinArguments(add=('2,x,3',), input=('4,,y',)))
        self.assertEqual(command.actions, actions((PinOperation.EXPORT, 2), (PinOperation.EXPORT, 3),
                                                  (PinOperation.SET_INPUT, 4)))
        self.assertEqual(command.errors, (ParseError(flag='add', token='x'),
                                          ParseError(flag='input', token=''),
                                          ParseError(flag='input', token='y')))

    def test_illegal_pins_not_filtered(self):
        command = interpret(PinArguments(add=('99,-1',)))
        self.assertEqual(command.actions, actions((PinOperation.EXPORT, 99), (PinOperation.EXPORT, -1)))

    def test_usage_errors(self):
        with self.assertRaises(UsageError):
            interpret(PinArguments())
        with self.assertRaises(UsageError):
            interpret(PinArguments(add=('2',), output=('',)))
