"""Tests for the shared text predicates."""
import unittest

from docx_structure.utils.text_heuristics import (
    is_list_item_like,
    is_sentence_like,
    match_manual_numbering,
)


class ListItemLikeTest(unittest.TestCase):

    def test_bullets(self) -> None:
        for text in ("• First item", "- dash item", "* star item"):
            self.assertTrue(is_list_item_like(text), text)

    def test_numbered_item_needs_substantial_tail(self) -> None:
        self.assertTrue(is_list_item_like("1. Install the package from the index"))
        self.assertFalse(is_list_item_like("1. Introduction"))
        self.assertFalse(is_list_item_like("2024 Report"))

    def test_lettered_items(self) -> None:
        self.assertTrue(is_list_item_like("a. apples"))
        self.assertTrue(is_list_item_like("B. Bananas"))
        self.assertFalse(is_list_item_like("a."))
        self.assertFalse(is_list_item_like("é. accent"))

    def test_plain_text(self) -> None:
        self.assertFalse(is_list_item_like("Project Overview"))
        self.assertFalse(is_list_item_like("•no space"))


class SentenceLikeTest(unittest.TestCase):

    def test_multiple_sentences(self) -> None:
        self.assertTrue(is_sentence_like("One. Two. Three"))
        self.assertFalse(is_sentence_like("One. Two"))

    def test_long_terminated_text(self) -> None:
        long_text = "x" * 81 + "."
        self.assertTrue(is_sentence_like(long_text))
        self.assertFalse(is_sentence_like("x" * 81))

    def test_connectors(self) -> None:
        self.assertTrue(is_sentence_like("Bread and Butter"))
        self.assertTrue(is_sentence_like("Fast however fragile"))
        self.assertFalse(is_sentence_like("Quarterly Results"))


class ManualNumberingTest(unittest.TestCase):

    def test_decimal_numbers(self) -> None:
        self.assertEqual(match_manual_numbering("1. Introduction"), ("1", "Introduction"))
        self.assertEqual(match_manual_numbering("1.1 Project Overview"), ("1.1", "Project Overview"))
        self.assertEqual(
            match_manual_numbering("2.1.1 Something Important"), ("2.1.1", "Something Important")
        )

    def test_alternative_schemes(self) -> None:
        self.assertEqual(match_manual_numbering("A. First Section"), ("A", "First Section"))
        self.assertEqual(match_manual_numbering("I. Roman Numeral"), ("I", "Roman Numeral"))
        self.assertEqual(match_manual_numbering("IV. Results"), ("IV", "Results"))
        self.assertEqual(match_manual_numbering("Section 1.2 Overview"), ("Section 1.2", "Overview"))
        self.assertEqual(match_manual_numbering("Chapter 3 Methods"), ("Chapter 3", "Methods"))

    def test_no_numbering(self) -> None:
        self.assertIsNone(match_manual_numbering("Introduction"))
        self.assertIsNone(match_manual_numbering("1."))
        self.assertIsNone(match_manual_numbering(""))
        self.assertIsNone(match_manual_numbering("Section Overview"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
