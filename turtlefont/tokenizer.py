from __future__ import annotations

from turtlefont.errors import MalformedGlyphProgram


TERMINATOR = ""
WHITESPACE = frozenset(" \t\r\n")


class GlyphTokenizer:
    """Bounded cursor over one glyph program.

    Opcodes are single non-whitespace characters. Operands are one signed hex
    nibble, so every number lies in [-15, 15].
    """

    def __init__(self, program: str) -> None:
        self._program = program
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._program)

    def next_opcode(self) -> str:
        program = self._program
        while self._pos < len(program):
            c = program[self._pos]
            self._pos += 1
            if c not in WHITESPACE:
                return c
        return TERMINATOR

    def next_number(self) -> int:
        sign = 1
        while True:
            c = self.next_opcode()
            if c == TERMINATOR:
                raise MalformedGlyphProgram(self._program, self._pos)
            if c == "-":
                sign = -1
                continue
            value = _hex_value(c)
            if value is not None:
                return sign * value


def _hex_value(c: str) -> int | None:
    if "0" <= c <= "9":
        return ord(c) - ord("0")
    if "A" <= c <= "F":
        return 10 + ord(c) - ord("A")
    if "a" <= c <= "f":
        return 10 + ord(c) - ord("a")
    return None
