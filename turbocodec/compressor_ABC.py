from abc import ABC, abstractmethod
import io
from typing import BinaryIO, Tuple


class Compressor(ABC):
    """
    Interface for compressors that work on binary streams.
    File and in-memory helpers are built on top of the two stream operations.
    """

    @abstractmethod
    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads the original bytes from input_stream and writes the compressed
        file (header included) to output_stream.

        Returns:
            Log information about the run
        """

    @abstractmethod
    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Reads a compressed file from input_stream and writes the restored
        bytes to output_stream.

        Returns:
            Log information about the run
        """

    @classmethod
    def compress_file(cls, input_file: str, output_file: str, **options) -> str:
        """
        Compress input_file into output_file.

        Args:
            input_file: Path to the original file
            output_file: Path to the compressed file
            **options: Passed to the compressor constructor

        Returns:
            Log information about the run

        Raises:
            OSError: If either file cannot be opened
        """
        compressor = cls(**options)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.compress(in_file, out_file)

    @classmethod
    def decompress_file(cls, input_file: str, output_file: str, **options) -> str:
        """Decompress input_file into output_file; see compress_file."""
        compressor = cls(**options)
        with open(input_file, 'rb') as in_file, open(output_file, 'wb') as out_file:
            return compressor.decompress(in_file, out_file)

    @classmethod
    def compress_bytes(cls, data: bytes, **options) -> Tuple[bytes, str]:
        """
        Compress an in-memory buffer.

        Returns:
            Tuple (compressed file bytes, log information)
        """
        compressor = cls(**options)
        out_buffer = io.BytesIO()
        log_info = compressor.compress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info

    @classmethod
    def decompress_bytes(cls, data: bytes, **options) -> Tuple[bytes, str]:
        """
        Decompress an in-memory compressed file.

        Returns:
            Tuple (restored bytes, log information)
        """
        compressor = cls(**options)
        out_buffer = io.BytesIO()
        log_info = compressor.decompress(io.BytesIO(data), out_buffer)
        return out_buffer.getvalue(), log_info
