import os
import sys
import unittest
from unittest.mock import patch
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from shutter_bridge.timezone_utils import get_host_timezone, get_host_timezone_name

# tzlocal's reader for the OS configuration (/etc/timezone, /etc/localtime, ...)
SYSTEM_READER = 'tzlocal.unix._get_localzone_name'


class TimezoneLookupTests(unittest.TestCase):
    def setUp(self):
        self.old_tz = os.environ.get('TZ')

    def tearDown(self):
        if self.old_tz is None:
            os.environ.pop('TZ', None)
        else:
            os.environ['TZ'] = self.old_tz

    def test_tz_env_new_york(self):
        os.environ['TZ'] = 'America/New_York'
        self.assertEqual(get_host_timezone_name(), 'America/New_York')

    def test_tz_env_utc(self):
        os.environ['TZ'] = 'UTC'
        self.assertEqual(get_host_timezone_name(), 'UTC')

    def test_leading_colon_is_stripped(self):
        os.environ['TZ'] = ':Europe/Berlin'
        self.assertEqual(get_host_timezone_name(), 'Europe/Berlin')

    def test_change_between_calls_is_seen(self):
        os.environ['TZ'] = 'Asia/Tokyo'
        first = get_host_timezone_name()
        os.environ['TZ'] = 'Europe/London'
        second = get_host_timezone_name()

        self.assertEqual(first, 'Asia/Tokyo')
        self.assertEqual(second, 'Europe/London')

    @unittest.skipIf(sys.platform == 'win32', 'tzlocal reads the registry on Windows')
    @patch(SYSTEM_READER, return_value='Australia/Sydney')
    def test_system_zone_used_without_tz_env(self, mock_reader):
        os.environ.pop('TZ', None)

        self.assertEqual(get_host_timezone_name(), 'Australia/Sydney')
        mock_reader.assert_called()

    @unittest.skipIf(sys.platform == 'win32', 'tzlocal reads the registry on Windows')
    @patch(SYSTEM_READER, return_value='America/Chicago')
    def test_unknown_tz_env_gives_fallback(self, mock_reader):
        os.environ['TZ'] = 'Not/AZone'

        self.assertEqual(get_host_timezone_name(), 'UTC')
        self.assertEqual(get_host_timezone_name(fallback='Etc/GMT'), 'Etc/GMT')
        mock_reader.assert_not_called()

    @unittest.skipIf(sys.platform == 'win32', 'tzlocal reads the registry on Windows')
    @patch(SYSTEM_READER, return_value='America/Chicago')
    def test_posix_rule_string_gives_fallback(self, mock_reader):
        os.environ['TZ'] = 'EST5EDT,M3.2.0,M11.1.0'

        self.assertEqual(get_host_timezone_name(), 'UTC')

    @patch('tzlocal.get_localzone_name', return_value=None)
    @patch('tzlocal.reload_localzone')
    def test_fallback_when_host_has_no_zone(self, mock_reload, mock_name):
        os.environ.pop('TZ', None)

        self.assertEqual(get_host_timezone_name(), 'UTC')
        self.assertEqual(get_host_timezone_name(fallback='Etc/GMT'), 'Etc/GMT')

    @patch('tzlocal.reload_localzone', side_effect=ZoneInfoNotFoundError('broken'))
    def test_fallback_when_system_lookup_raises(self, mock_reload):
        os.environ.pop('TZ', None)

        self.assertEqual(get_host_timezone_name(), 'UTC')

    def test_get_host_timezone_returns_zoneinfo(self):
        os.environ['TZ'] = 'America/New_York'
        self.assertEqual(get_host_timezone(), ZoneInfo('America/New_York'))


if __name__ == '__main__':
    unittest.main()
