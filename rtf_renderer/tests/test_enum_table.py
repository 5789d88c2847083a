"""Tests for the enum to RTF token translation table."""
import inspect
import threading
import unittest
from enum import Enum
from unittest import mock

from rtf_renderer.model import enums
from rtf_renderer.model.enums import (
    BorderStyle,
    BreakType,
    DashStyle,
    FootnoteLocation,
    FootnoteNumberingRule,
    FootnoteNumberStyle,
    LineSpacingRule,
    LineStyle,
    ListType,
    OutlineLevel,
    ParagraphAlignment,
    RelativeHorizontal,
    RelativeVertical,
    RowAlignment,
    TabAlignment,
    TabLeader,
    TextOrientation,
    Underline,
    VerticalAlignment,
    WrapStyle,
)
from rtf_renderer.model.errors import TranslationContractError
from rtf_renderer.renderer import enum_table
from rtf_renderer.renderer.enum_table import RENDERED_BY_OMISSION, get_enum_translation_table, lookup_token


def _model_enums():
    return [
        obj
        for _, obj in inspect.getmembers(enums, inspect.isclass)
        if issubclass(obj, Enum) and obj.__module__ == enums.__name__
    ]


class EnumTranslationTableTest(unittest.TestCase):
    """Every enum member the renderers can meet must translate."""

    def test_every_member_has_a_token(self) -> None:
        families = _model_enums()
        self.assertEqual(len(families), 20)
        for family in families:
            for member in family:
                if member in RENDERED_BY_OMISSION:
                    continue
                with self.subTest(member=member):
                    self.assertIsInstance(lookup_token(member), (str, int))

    def test_omitted_members_are_contract_violations(self) -> None:
        for member in (OutlineLevel.BODY_TEXT, BorderStyle.NONE, TabLeader.SPACES):
            with self.subTest(member=member):
                with self.assertRaises(TranslationContractError):
                    lookup_token(member)

    def test_sample_tokens(self) -> None:
        self.assertEqual(lookup_token(ParagraphAlignment.CENTER), "c")
        self.assertEqual(lookup_token(LineSpacingRule.EXACTLY), 0)
        self.assertEqual(lookup_token(OutlineLevel.LEVEL1), 0)
        self.assertEqual(lookup_token(OutlineLevel.LEVEL9), 8)
        self.assertEqual(lookup_token(Underline.SINGLE), "")
        self.assertEqual(lookup_token(BreakType.BREAK_ODD_PAGE), "odd")
        self.assertEqual(lookup_token(ListType.NUMBER_LIST3), 4)
        self.assertEqual(lookup_token(WrapStyle.THROUGH), 3)
        self.assertEqual(lookup_token(TextOrientation.UPWARD), 2)

    def test_table_matches_expected_tokens(self) -> None:
        expected = {
            ParagraphAlignment.LEFT: "l",
            ParagraphAlignment.RIGHT: "r",
            ParagraphAlignment.CENTER: "c",
            ParagraphAlignment.JUSTIFY: "j",
            LineSpacingRule.AT_LEAST: 0,
            LineSpacingRule.EXACTLY: 0,
            LineSpacingRule.DOUBLE: 1,
            LineSpacingRule.ONE_PT_FIVE: 1,
            LineSpacingRule.MULTIPLE: 1,
            LineSpacingRule.SINGLE: 1,
            OutlineLevel.LEVEL1: 0,
            OutlineLevel.LEVEL2: 1,
            OutlineLevel.LEVEL3: 2,
            OutlineLevel.LEVEL4: 3,
            OutlineLevel.LEVEL5: 4,
            OutlineLevel.LEVEL6: 5,
            OutlineLevel.LEVEL7: 6,
            OutlineLevel.LEVEL8: 7,
            OutlineLevel.LEVEL9: 8,
            Underline.DASH: "dash",
            Underline.DOT_DASH: "dashd",
            Underline.DOT_DOT_DASH: "dashdd",
            Underline.DOTTED: "d",
            Underline.NONE: "none",
            Underline.SINGLE: "",
            Underline.WORDS: "w",
            BorderStyle.DASH_DOT: "dashd",
            BorderStyle.DASH_DOT_DOT: "dashdd",
            BorderStyle.DASH_LARGE_GAP: "dash",
            BorderStyle.DASH_SMALL_GAP: "dashsm",
            BorderStyle.DOT: "dot",
            BorderStyle.SINGLE: "s",
            TabLeader.DASHES: "hyph",
            TabLeader.DOTS: "dot",
            TabLeader.HEAVY: "th",
            TabLeader.LINES: "ul",
            TabLeader.MIDDLE_DOT: "mdot",
            TabAlignment.CENTER: "c",
            TabAlignment.DECIMAL: "dec",
            TabAlignment.RIGHT: "r",
            TabAlignment.LEFT: "l",
            FootnoteNumberStyle.ARABIC: "ar",
            FootnoteNumberStyle.LOWERCASE_LETTER: "alc",
            FootnoteNumberStyle.LOWERCASE_ROMAN: "rlc",
            FootnoteNumberStyle.UPPERCASE_LETTER: "auc",
            FootnoteNumberStyle.UPPERCASE_ROMAN: "ruc",
            FootnoteNumberingRule.RESTART_CONTINUOUS: "rstcont",
            FootnoteNumberingRule.RESTART_PAGE: "rstpg",
            FootnoteNumberingRule.RESTART_SECTION: "restart",
            FootnoteLocation.BENEATH_TEXT: "tj",
            FootnoteLocation.BOTTOM_OF_PAGE: "bj",
            BreakType.BREAK_EVEN_PAGE: "even",
            BreakType.BREAK_ODD_PAGE: "odd",
            BreakType.BREAK_NEXT_PAGE: "page",
            ListType.BULLET_LIST1: 23,
            ListType.BULLET_LIST2: 23,
            ListType.BULLET_LIST3: 23,
            ListType.NUMBER_LIST1: 0,
            ListType.NUMBER_LIST2: 0,
            ListType.NUMBER_LIST3: 4,
            RowAlignment.CENTER: "c",
            RowAlignment.LEFT: "l",
            RowAlignment.RIGHT: "r",
            VerticalAlignment.TOP: "t",
            VerticalAlignment.CENTER: "c",
            VerticalAlignment.BOTTOM: "b",
            RelativeHorizontal.CHARACTER: "margin",
            RelativeHorizontal.COLUMN: "margin",
            RelativeHorizontal.MARGIN: "margin",
            RelativeHorizontal.PAGE: "page",
            RelativeVertical.LINE: "para",
            RelativeVertical.MARGIN: "margin",
            RelativeVertical.PAGE: "page",
            RelativeVertical.PARAGRAPH: "para",
            WrapStyle.NONE: 3,
            WrapStyle.THROUGH: 3,
            WrapStyle.TOP_BOTTOM: 1,
            LineStyle.SINGLE: 0,
            DashStyle.SOLID: 0,
            DashStyle.DASH: 1,
            DashStyle.SQUARE_DOT: 2,
            DashStyle.DASH_DOT: 3,
            DashStyle.DASH_DOT_DOT: 4,
            TextOrientation.DOWNWARD: 3,
            TextOrientation.HORIZONTAL: 0,
            TextOrientation.HORIZONTAL_ROTATED_FAR_EAST: 0,
            TextOrientation.UPWARD: 2,
            TextOrientation.VERTICAL: 3,
            TextOrientation.VERTICAL_FAR_EAST: 3,
        }
        self.assertEqual(dict(get_enum_translation_table()), expected)

    def test_same_name_in_different_families_is_distinct(self) -> None:
        self.assertEqual(lookup_token(BorderStyle.SINGLE), "s")
        self.assertEqual(lookup_token(Underline.SINGLE), "")

    def test_table_is_stable_and_read_only(self) -> None:
        table = get_enum_translation_table()
        self.assertIs(table, get_enum_translation_table())
        with self.assertRaises(TypeError):
            table[ParagraphAlignment.LEFT] = "x"  # type: ignore[index]

    def test_concurrent_first_use_builds_once(self) -> None:
        results = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(get_enum_translation_table())

        with mock.patch.object(enum_table, "_table", None), mock.patch.object(
            enum_table, "_build_table", wraps=enum_table._build_table
        ) as build:
            threads = [threading.Thread(target=worker) for _ in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()
            self.assertEqual(build.call_count, 1)

        self.assertEqual(len(results), 8)
        self.assertTrue(all(result is results[0] for result in results))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
