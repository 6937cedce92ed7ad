"""Tests for list detection, rendering and grouping."""
import unittest

from docx_structure.model.document_model import Heading, ListBlock, ListItem, Paragraph
from docx_structure.model.elements import NumberingInfo
from docx_structure.structure.list_classifier import (
    ListAccumulator,
    PendingParagraph,
    clean_list_item_text,
    clear_list_tags,
    group_list_items,
    is_ordered_numbering,
    list_marker,
    render_numbered_item,
)


class NumberingOrderTest(unittest.TestCase):

    def test_mixed_list_levels(self) -> None:
        self.assertFalse(is_ordered_numbering(NumberingInfo(1, 0)))
        self.assertFalse(is_ordered_numbering(NumberingInfo(1, None)))
        self.assertTrue(is_ordered_numbering(NumberingInfo(1, 1)))
        self.assertTrue(is_ordered_numbering(NumberingInfo(1, 2)))
        self.assertTrue(is_ordered_numbering(NumberingInfo(1, 3)))
        self.assertFalse(is_ordered_numbering(NumberingInfo(1, 4)))
        self.assertTrue(is_ordered_numbering(NumberingInfo(1, 5)))

    def test_other_numbering_ids(self) -> None:
        self.assertTrue(is_ordered_numbering(NumberingInfo(2, 0)))
        self.assertTrue(is_ordered_numbering(NumberingInfo(12, 4)))
        self.assertFalse(is_ordered_numbering(NumberingInfo(None, 1)))

    def test_markers(self) -> None:
        self.assertEqual(list_marker(0, True), "1. ")
        self.assertEqual(list_marker(1, True), "a) ")
        self.assertEqual(list_marker(2, True), "i. ")
        self.assertEqual(list_marker(3, True), "A. ")
        self.assertEqual(list_marker(4, True), "I. ")
        self.assertEqual(list_marker(6, True), "7. ")
        self.assertEqual(list_marker(3, False), "* ")

    def test_render_numbered_item(self) -> None:
        self.assertEqual(render_numbered_item("Top", NumberingInfo(1, 0)), "* Top")
        self.assertEqual(render_numbered_item("Letter", NumberingInfo(1, 1)), "  a) Letter")
        self.assertEqual(render_numbered_item("Roman ", NumberingInfo(5, 2)), "    i. Roman")
        self.assertEqual(render_numbered_item("First", NumberingInfo(5)), "1. First")


class CleanListItemTextTest(unittest.TestCase):

    def test_marker_removal(self) -> None:
        test_cases = [
            ("• First item", "First item"),
            ("-  dash item", "dash item"),
            ("* star", "star"),
            ("12. Twelfth entry in the numbered list", "Twelfth entry in the numbered list"),
            ("b. second letter", "second letter"),
            ("plain text", "plain text"),
        ]
        for text, expected in test_cases:
            self.assertEqual(clean_list_item_text(text), expected, text)


class ListAccumulatorTest(unittest.TestCase):

    def test_flush_empty_is_noop(self) -> None:
        self.assertIsNone(ListAccumulator().flush())

    def test_ordering_switch_returns_previous_block(self) -> None:
        accumulator = ListAccumulator()
        self.assertIsNone(accumulator.add(ListItem("one"), ordered=False))
        flushed = accumulator.add(ListItem("two"), ordered=True)
        self.assertEqual(flushed, ListBlock(items=[ListItem("one")], ordered=False))
        self.assertEqual(accumulator.flush(), ListBlock(items=[ListItem("two")], ordered=True))
        self.assertIsNone(accumulator.flush())


class GroupListItemsTest(unittest.TestCase):

    def test_consecutive_bullets_form_one_list(self) -> None:
        elements = group_list_items([
            PendingParagraph("• First item"),
            PendingParagraph("• Second item"),
        ])

        self.assertEqual(len(elements), 1)
        block = elements[0]
        self.assertIsInstance(block, ListBlock)
        self.assertFalse(block.ordered)
        self.assertEqual([item.text for item in block.items], ["First item", "Second item"])

    def test_ordering_change_splits_lists(self) -> None:
        elements = group_list_items([
            PendingParagraph("• First item"),
            PendingParagraph("1. Third item that is long enough to be listed"),
            PendingParagraph("• Second item"),
        ])

        self.assertEqual([type(element) for element in elements], [ListBlock, ListBlock, ListBlock])
        self.assertEqual([element.ordered for element in elements], [False, True, False])
        self.assertEqual(elements[1].items[0].text, "Third item that is long enough to be listed")

    def test_short_numbered_line_is_not_a_list_item(self) -> None:
        elements = group_list_items([
            PendingParagraph("\u2022 First item"),
            PendingParagraph("1. Third item"),
            PendingParagraph("\u2022 Second item"),
        ])

        self.assertEqual([type(element) for element in elements], [ListBlock, PendingParagraph, ListBlock])
        self.assertEqual(elements[1].text, "1. Third item")
        self.assertEqual([element.ordered for element in (elements[0], elements[2])], [False, False])

    def test_non_list_element_flushes(self) -> None:
        heading = Heading(level=1, text="Title")
        elements = group_list_items([
            PendingParagraph("- alpha"),
            heading,
            PendingParagraph("- beta"),
            PendingParagraph("Closing words"),
        ])

        self.assertEqual(len(elements), 4)
        self.assertEqual(elements[0].items, [ListItem("alpha")])
        self.assertIs(elements[1], heading)
        self.assertEqual(elements[2].items, [ListItem("beta")])
        self.assertIsInstance(elements[3], PendingParagraph)

    def test_indent_sets_level(self) -> None:
        elements = group_list_items([
            PendingParagraph("• Parent"),
            PendingParagraph("• Child", indent=2),
            PendingParagraph("• Grandchild", indent=5),
        ])

        self.assertEqual([item.level for item in elements[0].items], [0, 1, 2])

    def test_preformatted_items_are_not_regrouped(self) -> None:
        elements = group_list_items([
            PendingParagraph("* Bullet from numbering", preformatted=True),
            PendingParagraph("* Typed bullet"),
        ])

        self.assertIsInstance(elements[0], PendingParagraph)
        self.assertIsInstance(elements[1], ListBlock)

    def test_clear_list_tags(self) -> None:
        elements = clear_list_tags([
            PendingParagraph("  a) Letter", preformatted=True),
            Heading(level=1, text="Title"),
        ])

        self.assertEqual(elements[0], Paragraph(text="  a) Letter"))
        self.assertIsInstance(elements[1], Heading)

    def test_stripped_item_reclassifies_differently(self) -> None:
        rendered = clear_list_tags(
            group_list_items([PendingParagraph("  a) Letter item", preformatted=True)])
        )[0]
        self.assertIsInstance(rendered, Paragraph)

        reparsed = group_list_items([PendingParagraph(rendered.text.strip())])[0]
        self.assertIsInstance(reparsed, PendingParagraph)

        bullet = clear_list_tags(
            group_list_items([PendingParagraph("* Bullet item", preformatted=True)])
        )[0]
        self.assertIsInstance(bullet, Paragraph)
        self.assertIsInstance(group_list_items([PendingParagraph(bullet.text)])[0], ListBlock)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
