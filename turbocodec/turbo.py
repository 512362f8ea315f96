"""
Turbo compression: a 256-byte window dictionary coder with 10-bit codes.

Every code is either a literal byte or a back-reference of 4, 8 or 16 bytes
into the window. Worst case, the output is 25% larger than the input.
"""

import io
from typing import BinaryIO, Callable

from turbocodec.compressor_ABC import Compressor
from turbocodec.turbo_utils.bit_reader import CodeAccumulator
from turbocodec.turbo_utils.bit_writer import BitPacker
from turbocodec.turbo_utils.code_word import CODE_SIZE, CodeWord, Command
from turbocodec.turbo_utils.file_header import HEADER_SIZE, FileHeader
from turbocodec.turbo_utils.ring_buffer import RingBuffer

WINDOW_SIZE = 256
LOOKAHEAD_SIZE = 16


def compression_ratio(output_count: int, input_count: int) -> int | None:
    """
    Output size as an integer percentage of the input size.
    Returns None for empty input.
    """
    if input_count == 0:
        return None
    return output_count * 100 // input_count


class TurboEncoder:
    """
    Push-style encoder: feed original bytes, collect packed bytes through the sink.
    """

    MATCH_LENGTHS = (16, 8, 4)

    def __init__(self, sink: Callable[[int], None], verbose: bool = False):
        self.window = RingBuffer(WINDOW_SIZE)
        self.lookahead = RingBuffer(LOOKAHEAD_SIZE)
        self.packer = BitPacker(sink)
        self.verbose = verbose
        self.input_count = 0
        self.finished = False

    @property
    def output_count(self) -> int:
        return self.packer.byte_count

    def compress(self, data: bytes):
        for byte in data:
            self.compress_byte(byte)

    def compress_byte(self, orig_byte: int):
        """
        Adds one original byte. Once the lookahead is full, exactly one code
        is emitted: the longest of 16/8/4 found in the window, else a literal.
        """
        if self.finished:
            raise ValueError("Cannot compress after finish()")
        self.input_count += 1
        self.lookahead.push(orig_byte)
        if not self.lookahead.is_full():
            return

        for length in self.MATCH_LENGTHS:
            start = self.find_match(length)
            if start is not None:
                self._emit(CodeWord.copy(length, start))
                # Already in the window, so not pushed again.
                self.lookahead.discard(length)
                return

        old_byte = self.lookahead.pop()
        self._emit(CodeWord.literal(old_byte))
        self.window.push(old_byte)

    def find_match(self, length: int) -> int | None:
        """
        Lowest window index holding the oldest `length` lookahead bytes.
        """
        if len(self.window) < length or len(self.lookahead) < length:
            return None
        start = self.window.find(self.lookahead.peek_bytes(length))
        return start if start >= 0 else None

    def finish(self):
        """
        Emits every remaining lookahead byte as a literal (no match search)
        and flushes the final partial byte.
        """
        if self.finished:
            return
        while self.lookahead:
            self._emit(CodeWord.literal(self.lookahead.pop()))
        self.packer.flush()
        self.finished = True

    def _emit(self, code: CodeWord):
        if self.verbose:
            if code.command is Command.LITERAL:
                print(f"Literal at input {self.input_count}: {code.value}")
            else:
                print(f"Match at input {self.input_count}: index={code.value}, length={code.length}")
        self.packer.write_bits_msb(code.pack(), CODE_SIZE)


class TurboDecoder:
    """
    Push-style decoder: feed packed bytes, collect original bytes through the sink.
    """

    def __init__(self, sink: Callable[[int], None], verbose: bool = False):
        self.sink = sink
        self.window = RingBuffer(WINDOW_SIZE)
        self.codes = CodeAccumulator(CODE_SIZE, self._dispatch)
        self.verbose = verbose
        self.input_count = 0
        self.output_count = 0

    def decompress(self, data: bytes):
        for byte in data:
            self.decompress_byte(byte)

    def decompress_byte(self, comp_byte: int):
        self.input_count += 1
        self.codes.read_byte(comp_byte)

    def finish(self) -> int:
        """
        Drops the padding bits of the last byte; returns how many there were.
        """
        return self.codes.discard()

    def _dispatch(self, code: int):
        word = CodeWord.unpack(code)
        if word.command is Command.LITERAL:
            if self.verbose:
                print(f"Literal: {word.value}")
            self.window.push(word.value)
            self._write(word.value)
        else:
            if self.verbose:
                print(f"Copy: index={word.value}, length={word.length}")
            for i in range(word.length):
                self._write(self.window.slot(word.value + i))

    def _write(self, byte: int):
        self.sink(byte)
        self.output_count += 1


class TurboCompressor(Compressor):
    """
    Turbo file format: FileHeader followed by the packed code stream.
    """

    CHUNK_SIZE = 8192

    def __init__(self, verbose: bool = False, show_progress: bool = False, strict: bool = False):
        """
        :param verbose: print every code word
        :param show_progress: print the processed percentage as it changes
        :param strict: raise if the decoded size differs from the header
        """
        self.verbose = verbose
        self.show_progress = show_progress
        self.strict = strict
        self.last_percent = -1
        self.log = []

    @staticmethod
    def encode(data: bytes) -> bytes:
        """Packed code stream for `data`, without a header."""
        out = bytearray()
        encoder = TurboEncoder(out.append)
        encoder.compress(data)
        encoder.finish()
        return bytes(out)

    @staticmethod
    def decode(data: bytes) -> bytes:
        """Original bytes for a packed code stream without a header."""
        out = bytearray()
        decoder = TurboDecoder(out.append)
        decoder.decompress(data)
        decoder.finish()
        return bytes(out)

    def update_progress(self, done: int, total: int):
        if self.show_progress and total:
            percent = done * 100 // total
            if percent != self.last_percent:
                print(f"{percent}%")
                self.last_percent = percent

    @staticmethod
    def _remaining_size(stream: BinaryIO) -> int:
        """Bytes left after the current position; the position is kept."""
        pos = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(pos)
        return end - pos

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        self.last_percent = -1
        # The header needs the original size up front.
        if not input_stream.seekable():
            input_stream = io.BytesIO(input_stream.read())
        total = self._remaining_size(input_stream)
        if self.verbose:
            print(f"Compressing {total} bytes")

        FileHeader(total).write(output_stream)
        out = bytearray()
        encoder = TurboEncoder(out.append, verbose=self.verbose)
        while True:
            chunk = input_stream.read(self.CHUNK_SIZE)
            if not chunk:
                break
            encoder.compress(chunk)
            output_stream.write(out)
            out.clear()
            self.update_progress(encoder.input_count, total)
        encoder.finish()
        output_stream.write(out)

        self.log.append(self._stats("Compressed", encoder.input_count,
                                    encoder.output_count + HEADER_SIZE))
        return '\n'.join(self.log)

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        self.log.clear()
        self.last_percent = -1
        header = FileHeader.read(input_stream)
        # Progress is only known for seekable input.
        total = self._remaining_size(input_stream) if input_stream.seekable() else 0
        if self.verbose:
            print(f"Decompressing {total} bytes ({header.orig_size} expected)")

        out = bytearray()
        decoder = TurboDecoder(out.append, verbose=self.verbose)
        while True:
            chunk = input_stream.read(self.CHUNK_SIZE)
            if not chunk:
                break
            decoder.decompress(chunk)
            output_stream.write(out)
            out.clear()
            self.update_progress(decoder.input_count, total)
        dropped = decoder.finish()
        if self.verbose:
            print(f"Dropped {dropped} padding bits")

        self.log.append(self._stats("Decompressed", decoder.input_count + HEADER_SIZE,
                                    decoder.output_count))
        if decoder.output_count != header.orig_size:
            message = f"Size mismatch: expected {header.orig_size}, got {decoder.output_count}"
            if self.strict:
                raise ValueError(message)
            self.log.append(message)
        return '\n'.join(self.log)

    @staticmethod
    def _stats(action: str, input_count: int, output_count: int) -> str:
        ratio = compression_ratio(output_count, input_count)
        pct = "n/a" if ratio is None else f"{ratio}%"
        return f"{action} {input_count} input bytes to {output_count} output bytes ({pct})"
