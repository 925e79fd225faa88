import math
import unittest

import pytest

from confreg.config.core.item import ConfigurationItem
from confreg.config.core.provider import (
    RuntimeConfigProvider,
    format_value,
    parse_bool,
    parse_float,
    parse_int
)
from confreg.core.enums import GetErrorReason
from confreg.core.exceptions import (
    OptionNotFoundError,
    SectionNotFoundError,
    ValueParseError
)

pytestmark = pytest.mark.unit


class TestTypedParsing(unittest.TestCase):
    """
    Test the typed parsing shared by every provider.
    """

    def test_bool_true_values(self):
        for value in ('t', 'TRUE', 'y', 'YES', 'On', '1'):
            self.assertTrue(parse_bool(value, 's', 'o'), value)

    def test_bool_false_values(self):
        for value in ('f', 'False', 'N', 'no', 'OFF', '0'):
            self.assertFalse(parse_bool(value, 's', 'o'), value)

    def test_bool_rejects_other_values(self):
        with self.assertRaises(ValueParseError) as context:
            parse_bool('maybe', 'features', 'beta')

        error = context.exception
        self.assertEqual(error.reason, GetErrorReason.COULD_NOT_PARSE)
        self.assertEqual(error.value_type, 'bool')
        self.assertEqual(error.value, 'maybe')
        self.assertEqual(error.section, 'features')
        self.assertEqual(error.option, 'beta')
        self.assertIn("could not parse bool value 'maybe'", str(error))

    def test_int(self):
        self.assertEqual(parse_int('42', 's', 'o'), 42)
        self.assertEqual(parse_int('-7', 's', 'o'), -7)
        self.assertEqual(parse_int('+3', 's', 'o'), 3)

    def test_int_rejects_non_decimal_text(self):
        for value in ('12abc', '1.5', '0x10', '1_000', '', ' 1'):
            with self.assertRaises(ValueParseError, msg=value):
                parse_int(value, 's', 'o')

    def test_float(self):
        self.assertEqual(parse_float('2.5', 's', 'o'), 2.5)
        self.assertEqual(parse_float('-1e3', 's', 'o'), -1000.0)
        self.assertEqual(parse_float('3', 's', 'o'), 3.0)

    def test_float_keeps_double_precision(self):
        self.assertEqual(parse_float('0.1', 's', 'o'), 0.1)
        self.assertEqual(parse_float('1e300', 's', 'o'), 1e300)

    def test_float_rejects_text(self):
        with self.assertRaises(ValueParseError) as context:
            parse_float('fast', 's', 'o')
        self.assertEqual(context.exception.value_type, 'float')

    def test_float_rejects_underscores_and_spaces(self):
        for value in ('1_000.5', ' 2.5 ', '2.5\n', '', '1e', '.'):
            with self.assertRaises(ValueParseError, msg=repr(value)):
                parse_float(value, 's', 'o')

    def test_float_accepts_short_and_special_forms(self):
        self.assertEqual(parse_float('1.', 's', 'o'), 1.0)
        self.assertEqual(parse_float('.5', 's', 'o'), 0.5)
        self.assertEqual(parse_float('-Inf', 's', 'o'), -math.inf)
        self.assertEqual(parse_float('+infinity', 's', 'o'), math.inf)
        self.assertTrue(math.isnan(parse_float('NaN', 's', 'o')))

    def test_format_value(self):
        self.assertEqual(format_value(True), 'true')
        self.assertEqual(format_value(False), 'false')
        self.assertEqual(format_value(None), '')
        self.assertEqual(format_value(60), '60')
        self.assertEqual(format_value(1.5), '1.5')
        self.assertEqual(format_value('text'), 'text')


class TestRuntimeConfigProvider(unittest.TestCase):
    """
    Test the in-memory provider's storage rules.
    """

    def setUp(self):
        self.provider = RuntimeConfigProvider({'Foo': {'Bar': 'baz', 'Count': 3}})

    def test_initial_data_is_folded(self):
        self.assertEqual(self.provider.data, {'foo': {'bar': 'baz', 'count': '3'}})

    def test_lookup_is_case_insensitive(self):
        self.assertEqual(self.provider.get_raw_string('Foo', 'Bar'), 'baz')
        self.assertEqual(self.provider.get_raw_string('foo', 'bar'), 'baz')
        self.assertEqual(self.provider.get_raw_string('FOO', 'BAR'), 'baz')

    def test_getters_use_item_identity(self):
        item = ConfigurationItem('FOO', 'count')
        self.assertEqual(self.provider.get_string(item), '3')
        self.assertEqual(self.provider.get_int(item), 3)
        self.assertEqual(self.provider.get_float(item), 3.0)

    def test_missing_section(self):
        with self.assertRaises(SectionNotFoundError) as context:
            self.provider.get_raw_string('nope', 'bar')

        self.assertEqual(context.exception.reason, GetErrorReason.SECTION_NOT_FOUND)
        self.assertEqual(str(context.exception), "section 'nope' not found")

    def test_missing_option(self):
        with self.assertRaises(OptionNotFoundError) as context:
            self.provider.get_raw_string('foo', 'nope')

        self.assertEqual(context.exception.reason, GetErrorReason.OPTION_NOT_FOUND)
        self.assertEqual(str(context.exception), "option 'nope' not found in section 'foo'")

    def test_empty_section_is_default(self):
        self.provider.add_option('', 'Timeout', '30')

        self.assertIn('default', self.provider.data)
        self.assertEqual(self.provider.get_raw_string('', 'timeout'), '30')
        self.assertEqual(self.provider.get_raw_string('DEFAULT', 'TIMEOUT'), '30')

    def test_add_section_is_idempotent(self):
        self.assertTrue(self.provider.add_section('New'))
        self.assertFalse(self.provider.add_section('new'))
        self.assertFalse(self.provider.add_section('NEW'))
        self.assertEqual(self.provider.sections(), ['foo', 'new'])

    def test_add_option_upserts(self):
        self.assertTrue(self.provider.add_option('other', 'Key', 'one'))
        self.assertFalse(self.provider.add_option('OTHER', 'key', 'two'))
        self.assertEqual(self.provider.get_raw_string('other', 'key'), 'two')
        self.assertEqual(self.provider.options('other'), ['key'])

    def test_options_of_missing_section(self):
        with self.assertRaises(SectionNotFoundError):
            self.provider.options('nope')

    def test_set_value(self):
        self.provider.set_value(ConfigurationItem('Foo', 'Flag'), True)
        self.assertEqual(self.provider.data['foo']['flag'], 'true')

    def test_set_value_unknown_section(self):
        with self.assertRaises(SectionNotFoundError):
            self.provider.set_value(ConfigurationItem('nope', 'x'), 1)

        self.assertNotIn('nope', self.provider.data)

    def test_parse_error_does_not_mutate(self):
        with self.assertRaises(ValueParseError):
            self.provider.get_bool(ConfigurationItem('foo', 'bar'))

        self.assertEqual(self.provider.data['foo']['bar'], 'baz')

    def test_initialize_seeds_only_missing(self):
        present = ConfigurationItem('foo', 'bar', 'Bar', 'default-bar')
        missing = ConfigurationItem('foo', 'size', 'Size', 10)
        collection = {'foo': {'bar': present, 'size': missing}}

        self.assertEqual(self.provider.initialize(collection), 1)
        self.assertEqual(self.provider.get_string(present), 'baz')
        self.assertEqual(self.provider.get_int(missing), 10)

        self.assertEqual(self.provider.initialize(collection), 0)


if __name__ == "__main__":
    unittest.main()
