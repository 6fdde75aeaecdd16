import unittest
from dataclasses import FrozenInstanceError

from pinsetup.common.constants import CTE, Constants


class TestConstants(unittest.TestCase):

    def test_sysfs_layout(self):
        self.assertEqual(CTE.SYSFS_GPIO_PATH, '/sys/class/gpio')
        self.assertEqual((CTE.EXPORT_FILE, CTE.UNEXPORT_FILE, CTE.DIRECTION_FILE), ('export', 'unexport', 'direction'))

    def test_board_profiles_dir(self):
        self.assertTrue(CTE.BOARD_PROFILES_DIR.is_dir())
        self.assertTrue((CTE.BOARD_PROFILES_DIR / f'{CTE.DEFAULT_BOARD}{CTE.BOARD_PROFILE_SUFFIX}').is_file())

    def test_frozen(self):
        with self.assertRaises(FrozenInstanceError):
            CTE.SYSFS_GPIO_PATH = '/tmp'
        self.assertEqual(Constants(SYSFS_GPIO_PATH='/tmp/gpio').SYSFS_GPIO_PATH, '/tmp/gpio')
