import io

import pytest

from turbocodec.turbo_utils.file_header import HEADER_SIZE, FileHeader


class TestFileHeader:
    def test_layout(self):
        assert HEADER_SIZE == 8
        assert FileHeader(20).to_bytes() == b"CmpT\x14\x00\x00\x00"

    def test_read_write(self):
        stream = io.BytesIO()
        assert FileHeader(70000).write(stream) == HEADER_SIZE
        stream.seek(0)
        assert FileHeader.read(stream) == FileHeader(70000)

    def test_size_is_stored_modulo_32_bits(self):
        assert FileHeader(2**32 + 5).orig_size == 5

    @pytest.mark.parametrize("raw", [
        b"",
        b"Cmp",
        b"XyzT\x00\x00\x00\x00",
        b"CmpZ\x00\x00\x00\x00",
    ])
    def test_rejects_invalid_header(self, raw):
        with pytest.raises(ValueError):
            FileHeader.from_bytes(raw)
