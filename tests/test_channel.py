import unittest

from shutter_bridge.channel import ChannelRegistry, MethodChannel
from shutter_bridge.exceptions import BridgeError
from shutter_bridge.models import MethodCall, MethodResult


class MethodChannelTests(unittest.TestCase):
    def setUp(self):
        self.channel = MethodChannel('test/channel')

    def test_empty_name_rejected(self):
        with self.assertRaises(ValueError):
            MethodChannel('  ')

    def test_registered_method_returns_success(self):
        self.channel.register('echo', lambda args: args)
        result = self.channel.invoke('echo', {'a': 1})

        self.assertTrue(result.is_success)
        self.assertEqual(result.value, {'a': 1})

    def test_empty_string_value_is_still_success(self):
        self.channel.register('blank', lambda args: '')
        result = self.channel.invoke('blank')

        self.assertTrue(result.is_success)
        self.assertEqual(result.value, '')

    def test_unknown_method_not_implemented(self):
        self.assertEqual(self.channel.invoke('missing'), MethodResult.not_implemented())

    def test_bridge_error_keeps_code(self):
        def fail(args):
            raise BridgeError('nope', code='bad_args', details={'field': 'x'})

        self.channel.register('fail', fail)
        result = self.channel.invoke('fail')

        self.assertTrue(result.is_error)
        self.assertEqual(result.error_code, 'bad_args')
        self.assertEqual(result.error_message, 'nope')
        self.assertEqual(result.error_details, {'field': 'x'})

    def test_unexpected_exception_becomes_error(self):
        self.channel.register('boom', lambda args: 1 / 0)
        result = self.channel.invoke('boom')

        self.assertTrue(result.is_error)
        self.assertEqual(result.error_code, 'error')

    def test_call_handler_takes_over_dispatch(self):
        self.channel.register('echo', lambda args: args)

        def handler(call):
            if call.method == 'ping':
                return MethodResult.success('pong')
            return MethodResult.not_implemented()

        self.channel.set_method_call_handler(handler)

        self.assertEqual(self.channel.invoke('ping').value, 'pong')
        self.assertTrue(self.channel.invoke('echo').is_not_implemented)

        self.channel.set_method_call_handler(None)
        self.assertEqual(self.channel.handle(MethodCall('echo', 3)).value, 3)


class ChannelRegistryTests(unittest.TestCase):
    def test_add_and_describe(self):
        registry = ChannelRegistry()
        channel = registry.add(MethodChannel('b'))
        channel.register('z', lambda args: None)
        channel.register('a', lambda args: None)
        registry.add(MethodChannel('a'))

        self.assertIn('b', registry)
        self.assertIs(registry.get('b'), channel)
        self.assertIsNone(registry.get('c'))
        self.assertEqual(registry.describe(), {'a': [], 'b': ['a', 'z']})

    def test_duplicate_name_rejected(self):
        registry = ChannelRegistry()
        registry.add(MethodChannel('x'))
        with self.assertRaises(ValueError):
            registry.add(MethodChannel('x'))


if __name__ == '__main__':
    unittest.main()
