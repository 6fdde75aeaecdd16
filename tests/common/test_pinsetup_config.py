import unittest

from pinsetup.common.exceptions import UsageError
from pinsetup.common.pinsetup_config import parse_arg, pinsetup_arg_parser


class TestPinSetupConfig(unittest.TestCase):

    def setUp(self) -> None:
        self.parser = pinsetup_arg_parser()

    def test_repeated_flags(self):
        args = parse_arg(self.parser, ['-a', '2,3', '--add', '4', '-o', '2', '-i', '5', '-r', '6'])
        self.assertEqual(args.add, ['2,3', '4'])
        self.assertEqual(args.output, ['2'])
        self.assertEqual(args.input, ['5'])
        self.assertEqual(args.remove, ['6'])

    def test_defaults(self):
        args = parse_arg(self.parser, [])
        self.assertEqual((args.add, args.remove, args.input, args.output), ([], [], [], []))
        self.assertIsNone(args.board)
        self.assertIsNone(args.log_level)
        self.assertIsNone(args.debug)
        self.assertFalse(args.list_pins)

    def test_negative_pin_value(self):
        self.assertEqual(parse_arg(self.parser, ['-a', '-1']).add, ['-1'])

    def test_usage_errors(self):
        for argv in (['-x'], ['--add'], ['-l', 'LOUD'], ['-b', 'a', '--board-file', 'b']):
            with self.assertRaises(UsageError):
                parse_arg(self.parser, argv)

    def test_additional_arguments(self):
        parser = pinsetup_arg_parser(lambda p: p.add_argument('--dry-run', action='store_true'))
        self.assertTrue(parse_arg(parser, ['--dry-run']).dry_run)
