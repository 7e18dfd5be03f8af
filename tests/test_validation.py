import unittest
from textcase.validation import validate_and_clean
from textcase.errors import InvalidInputType, INVALID_INPUT_MESSAGE

class TestValidateAndClean(unittest.TestCase):
    def test_trims(self):
        self.assertEqual(validate_and_clean('  Cross Lake \n'), 'Cross Lake')

    def test_keeps_inner_whitespace(self):
        self.assertEqual(validate_and_clean(' a  b '), 'a  b')

    def test_whitespace_only(self):
        self.assertEqual(validate_and_clean(' \t\n '), '')

    def test_empty(self):
        self.assertEqual(validate_and_clean(''), '')

    def test_unicode_whitespace(self):
        self.assertEqual(validate_and_clean('\u00a0\u3000Fort Kent\u2028\x85'), 'Fort Kent')

    def test_information_separators_are_not_whitespace(self):
        self.assertEqual(validate_and_clean('\x1ca\x1f'), '\x1ca\x1f')

    def test_rejects_non_strings(self):
        for value in [None, 0, 1.5, b'text', object()]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidInputType) as context:
                    validate_and_clean(value)
                self.assertEqual(str(context.exception), INVALID_INPUT_MESSAGE)

    def test_error_is_type_error(self):
        with self.assertRaises(TypeError):
            validate_and_clean(None)

class TestInvalidInputType(unittest.TestCase):
    def test_default_message(self):
        self.assertEqual(str(InvalidInputType()), 'Input must be a string')
