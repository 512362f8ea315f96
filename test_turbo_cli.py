from turbo_cli import (
    EXIT_FORMAT,
    EXIT_INPUT,
    EXIT_OK,
    EXIT_OUTPUT,
    EXIT_USAGE,
    compress_main,
    decompress_main,
)


class TestTurboCli:
    def test_usage(self, capsys):
        assert compress_main(["only-one"]) == EXIT_USAGE
        assert "Use: compress <inputfilepath> <outputfilepath>" in capsys.readouterr().out
        assert decompress_main([]) == EXIT_USAGE

    def test_missing_input(self, tmp_path, capsys):
        missing = tmp_path / "missing.bin"
        assert compress_main([str(missing), str(tmp_path / "out.cmp")]) == EXIT_INPUT
        assert f"Cannot open {missing}" in capsys.readouterr().out

    def test_unwritable_output(self, tmp_path, capsys):
        source = tmp_path / "in.txt"
        source.write_bytes(b"data")
        target = tmp_path / "no-such-dir" / "out.cmp"
        assert compress_main([str(source), str(target)]) == EXIT_OUTPUT
        assert f"Cannot open {target}" in capsys.readouterr().out

    def test_round_trip(self, tmp_path, capsys):
        source = tmp_path / "in.txt"
        packed = tmp_path / "in.cmp"
        restored = tmp_path / "in.out"
        source.write_bytes(b"abcdefgh" * 64)

        assert compress_main([str(source), str(packed)]) == EXIT_OK
        out = capsys.readouterr().out
        assert f"Compressing {source} to {packed}" in out
        assert "Compressed 512 input bytes" in out

        assert decompress_main([str(packed), str(restored)]) == EXIT_OK
        assert f"Decompressing {packed} to {restored}" in capsys.readouterr().out
        assert restored.read_bytes() == source.read_bytes()

    def test_empty_input(self, tmp_path, capsys):
        source = tmp_path / "empty"
        source.write_bytes(b"")
        assert compress_main([str(source), str(tmp_path / "empty.cmp")]) == EXIT_OK
        assert "(n/a)" in capsys.readouterr().out

    def test_not_a_turbo_file(self, tmp_path, capsys):
        source = tmp_path / "plain.txt"
        source.write_bytes(b"plain text, no header")
        assert decompress_main([str(source), str(tmp_path / "out")]) == EXIT_FORMAT
        assert "Invalid magic number" in capsys.readouterr().out
        assert not (tmp_path / "out").exists()

    def test_invalid_header_leaves_no_output(self, tmp_path, capsys):
        source = tmp_path / "short.cmp"
        target = tmp_path / "short.out"
        source.write_bytes(b"Cmp")
        assert decompress_main([str(source), str(target)]) == EXIT_FORMAT
        assert "File is corrupted or empty" in capsys.readouterr().out
        assert not target.exists()
