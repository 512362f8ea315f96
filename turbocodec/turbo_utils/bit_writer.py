from typing import Callable

from bitarray import bitarray


class BitPacker:
    """
    A class for packing bits MSB-first into bytes.
    Every completed byte is handed to the sink as soon as its 8th bit arrives.
    """

    def __init__(self, sink: Callable[[int], None]) -> None:
        """
        Args:
            sink: Callable receiving each completed output byte (0-255)
        """
        self.sink = sink
        self.bits = bitarray(endian="big")
        self.byte_count = 0

    @property
    def pending_bits(self) -> int:
        """Number of bits waiting for their byte to be completed."""
        return len(self.bits)

    def write_bit(self, bit: int) -> None:
        self.bits.append(bit)
        if len(self.bits) == 8:
            self._emit()

    def write_bits_msb(self, value: int, length: int) -> None:
        """
        Pack the low `length` bits of value, highest bit first.
        Codes are not byte aligned: whichever bit completes the pending byte
        sends it to the sink, so one call can emit zero, one or two bytes.

        Args:
            value: Code to pack (a 10-bit code word for Turbo streams)
            length: Width of the code in bits

        Raises:
            ValueError: If length is negative
        """
        if length < 0:
            raise ValueError("Length cannot be negative")
        for shift in reversed(range(length)):
            self.write_bit((value >> shift) & 1)

    def flush(self) -> None:
        """
        Emit the final partial byte, left-justified and zero-filled.
        Nothing is emitted when no bits are pending.
        """
        if self.bits:
            self.bits.fill()
            self._emit()

    def _emit(self) -> None:
        self.sink(self.bits.tobytes()[0])
        self.bits.clear()
        self.byte_count += 1
