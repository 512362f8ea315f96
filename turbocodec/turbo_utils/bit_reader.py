from typing import Callable

from bitarray import bitarray
from bitarray.util import ba2int


class CodeAccumulator:
    """
    Collects bits from packed bytes into fixed-size codes.
    """

    def __init__(self, code_size: int, on_code: Callable[[int], None]):
        """
        Initialises an empty accumulator.
        :param code_size: number of bits in one code
        :param on_code: called with each completed code as an int
        """
        if code_size <= 0:
            raise ValueError("Code size must be positive")
        self.code_size = code_size
        self.on_code = on_code
        self.bits = bitarray(endian="big")

    @property
    def pending_bits(self) -> int:
        return len(self.bits)

    def read_byte(self, byte: int):
        """
        Shifts in the 8 bits of `byte`, most significant first.
        Each time `code_size` bits are collected the code is dispatched.
        """
        incoming = bitarray(endian="big")
        incoming.frombytes(bytes((byte,)))
        for bit in incoming:
            self.bits.append(bit)
            if len(self.bits) == self.code_size:
                code = ba2int(self.bits)
                self.bits.clear()
                self.on_code(code)

    def discard(self) -> int:
        """
        Drops an incomplete trailing code (stream padding).
        :return: number of bits dropped
        """
        dropped = len(self.bits)
        self.bits.clear()
        return dropped
