"""Test cases for paragraph normalization functionality."""

import unittest

from docx_structure.model.elements import ParagraphElement, RunFragment
from docx_structure.utils.text_normalizer import DRAWING_PLACEHOLDER, TextNormalizer


class TextNormalizerTest(unittest.TestCase):
    """Test run flattening and formatting selection."""

    def setUp(self):
        self.normalizer = TextNormalizer()

    def test_runs_are_concatenated_and_trimmed(self):
        paragraph = ParagraphElement(runs=[
            RunFragment("  Hello "),
            RunFragment("big\tworld"),
            RunFragment("\nagain  "),
        ])

        result = self.normalizer.normalize_paragraph(paragraph)

        self.assertEqual(result.text, "Hello big\tworld\nagain")
        self.assertEqual(result.raw_text, "  Hello big\tworld\nagain  ")
        self.assertEqual(result.word_count, 4)
        self.assertEqual(result.leading_spaces, 2)

    def test_empty_paragraphs_are_dropped(self):
        test_cases = [
            ParagraphElement(runs=[]),
            ParagraphElement(runs=[RunFragment("   ")]),
            ParagraphElement(runs=[RunFragment("\t"), RunFragment("\n")]),
        ]

        for paragraph in test_cases:
            self.assertIsNone(self.normalizer.normalize_paragraph(paragraph), repr(paragraph))

    def test_drawing_placeholder(self):
        paragraph = ParagraphElement(runs=[RunFragment("Figure:"), RunFragment("", drawing=True)])

        result = self.normalizer.normalize_paragraph(paragraph)

        self.assertEqual(result.text, "Figure:" + DRAWING_PLACEHOLDER)

    def test_drawing_only_paragraph_is_kept(self):
        paragraph = ParagraphElement(runs=[RunFragment("", drawing=True)])

        result = self.normalizer.normalize_paragraph(paragraph)

        self.assertEqual(result.text, DRAWING_PLACEHOLDER)

    def test_first_bold_or_italic_run_wins(self):
        paragraph = ParagraphElement(runs=[
            RunFragment("plain "),
            RunFragment("bold ", bold=True, color="FF0000"),
            RunFragment("italic", italic=True, underline=True),
        ])

        formatting = self.normalizer.normalize_paragraph(paragraph).formatting

        self.assertTrue(formatting.bold)
        self.assertFalse(formatting.italic)
        self.assertFalse(formatting.underline)
        self.assertEqual(formatting.color, "FF0000")

    def test_without_bold_or_italic_last_run_formatting_remains(self):
        paragraph = ParagraphElement(runs=[
            RunFragment("one ", underline=True),
            RunFragment("two", color="00FF00", font_size=12.0),
        ])

        formatting = self.normalizer.normalize_paragraph(paragraph).formatting

        self.assertFalse(formatting.bold)
        self.assertFalse(formatting.underline)
        self.assertEqual(formatting.color, "00FF00")
        self.assertEqual(formatting.font_size, 12.0)


if __name__ == '__main__':
    unittest.main()
