import unittest
from textcase.styles import CaseStyle, convert
from textcase import transforms
from textcase.errors import InvalidInputType

class TestCaseStyle(unittest.TestCase):
    def test_every_style_has_transform(self):
        for style in CaseStyle:
            with self.subTest(style=style):
                self.assertTrue(callable(style.transform))

    def test_transform(self):
        self.assertIs(CaseStyle.SNAKE.transform, transforms.to_snake_case)

    def test_parse_member(self):
        self.assertIs(CaseStyle.parse(CaseStyle.CAMEL), CaseStyle.CAMEL)

    def test_parse_name(self):
        self.assertIs(CaseStyle.parse('Pascal'), CaseStyle.PASCAL)

    def test_parse_unknown(self):
        with self.assertRaises(ValueError) as context:
            CaseStyle.parse('screaming')
        self.assertIn('snake', str(context.exception))

class TestConvert(unittest.TestCase):
    def test_convert(self):
        cases = [
            ('upper', 'Fort Kent', 'FORT KENT'),
            ('lower', 'Fort Kent', 'fort kent'),
            ('capitalize', 'fort kent', 'Fort Kent'),
            ('camel', 'fort kent', 'fortKent'),
            ('snake', 'Fort Kent', 'fort_kent'),
            ('kebab', 'Fort Kent', 'fort-kent'),
            ('pascal', 'fort kent', 'FortKent'),
            ('separated', 'fortKent', 'fort Kent')
        ]
        for style, text, expected in cases:
            with self.subTest(style=style):
                self.assertEqual(convert(text, style), expected)

    def test_convert_member(self):
        self.assertEqual(convert('Hello World', CaseStyle.KEBAB), 'hello-world')

    def test_propagates_validation_error(self):
        with self.assertRaises(InvalidInputType):
            convert(None, CaseStyle.SNAKE)
