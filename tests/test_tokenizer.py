from __future__ import annotations

import unittest

from turtlefont.errors import MalformedGlyphProgram
from turtlefont.tokenizer import TERMINATOR, GlyphTokenizer


class GlyphTokenizerTests(unittest.TestCase):
    def test_whitespace_is_skipped_between_opcodes(self) -> None:
        tokens = GlyphTokenizer(" \ta\r\n 6 ")
        self.assertEqual(tokens.next_opcode(), "a")
        self.assertEqual(tokens.next_number(), 6)
        self.assertEqual(tokens.next_opcode(), TERMINATOR)
        self.assertTrue(tokens.at_end())

    def test_terminator_is_sticky(self) -> None:
        tokens = GlyphTokenizer("")
        self.assertEqual(tokens.next_opcode(), TERMINATOR)
        self.assertEqual(tokens.next_opcode(), TERMINATOR)

    def test_numbers_are_single_signed_hex_nibbles(self) -> None:
        tokens = GlyphTokenizer("F-f a -0 9 12")
        self.assertEqual(tokens.next_number(), 15)
        self.assertEqual(tokens.next_number(), -15)
        self.assertEqual(tokens.next_number(), 10)
        self.assertEqual(tokens.next_number(), 0)
        self.assertEqual(tokens.next_number(), 9)
        self.assertEqual(tokens.next_number(), 1)
        self.assertEqual(tokens.next_number(), 2)

    def test_non_digits_are_skipped_while_searching(self) -> None:
        tokens = GlyphTokenizer("x-zq3")
        self.assertEqual(tokens.next_number(), -3)

    def test_missing_operand_raises_with_offset(self) -> None:
        tokens = GlyphTokenizer("M4")
        self.assertEqual(tokens.next_opcode(), "M")
        self.assertEqual(tokens.next_number(), 4)
        with self.assertRaises(MalformedGlyphProgram) as ctx:
            tokens.next_number()
        self.assertEqual(ctx.exception.offset, 2)
        self.assertEqual(ctx.exception.program, "M4")

    def test_dangling_sign_is_malformed(self) -> None:
        with self.assertRaises(MalformedGlyphProgram):
            GlyphTokenizer("  -  ").next_number()


if __name__ == "__main__":
    unittest.main()
