from __future__ import annotations


class MalformedGlyphProgram(ValueError):
    """Raised when an operand scan runs off the end of a glyph program."""

    def __init__(self, program: str, offset: int) -> None:
        super().__init__(f"glyph program ended while reading an operand at offset {offset}: {program!r}")
        self.program = program
        self.offset = offset


class RenderConfigError(ValueError):
    pass
