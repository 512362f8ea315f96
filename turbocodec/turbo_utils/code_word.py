# code_word.py
"""
10-bit Turbo code words.

    9876543210
    ----------
    00xxxxxxxx   original byte xxxxxxxx
    01iiiiiiii   4 bytes starting at window index iiiiiiii
    10iiiiiiii   8 bytes starting at window index iiiiiiii
    11iiiiiiii   16 bytes starting at window index iiiiiiii
"""

from enum import IntEnum
from typing import NamedTuple

CODE_SIZE = 10
VALUE_BITS = 8
VALUE_MASK = (1 << VALUE_BITS) - 1


class Command(IntEnum):
    LITERAL = 0
    COPY_4 = 1
    COPY_8 = 2
    COPY_16 = 3

    @property
    def length(self) -> int:
        """Number of original bytes the command produces."""
        return _LENGTHS[self]

    @classmethod
    def for_length(cls, length: int) -> "Command":
        for command, command_length in _LENGTHS.items():
            if command != cls.LITERAL and command_length == length:
                return command
        raise ValueError(f"No copy command for length {length}")


_LENGTHS = {
    Command.LITERAL: 1,
    Command.COPY_4: 4,
    Command.COPY_8: 8,
    Command.COPY_16: 16,
}


class CodeWord(NamedTuple):
    """
    One code word: command tag plus 8-bit value (literal byte or window index).
    """

    command: Command
    value: int

    @classmethod
    def literal(cls, byte: int) -> "CodeWord":
        return cls(Command.LITERAL, byte & VALUE_MASK)

    @classmethod
    def copy(cls, length: int, index: int) -> "CodeWord":
        return cls(Command.for_length(length), index & VALUE_MASK)

    @classmethod
    def unpack(cls, code: int) -> "CodeWord":
        """
        Splits a 10-bit integer into command (top 2 bits) and value (low 8 bits).
        """
        return cls(Command((code >> VALUE_BITS) & 0b11), code & VALUE_MASK)

    def pack(self) -> int:
        return (int(self.command) << VALUE_BITS) | self.value

    @property
    def length(self) -> int:
        return self.command.length
