"""
Command-line front-end for the Turbo compressor.

    turbo-compress <inputfilepath> <outputfilepath>
    turbo-decompress <inputfilepath> <outputfilepath>
"""
import sys

from turbocodec.turbo import TurboCompressor
from turbocodec.turbo_utils.file_header import FileHeader

EXIT_OK = 0
EXIT_INPUT = -1
EXIT_OUTPUT = -2
EXIT_USAGE = -3
EXIT_FORMAT = -4


def _run(argv, name: str, action: str, method: str) -> int:
    if len(argv) != 2:
        print(f"Use: {name} <inputfilepath> <outputfilepath>")
        return EXIT_USAGE

    input_path, output_path = argv
    print(f"{action} {input_path} to {output_path}")
    try:
        fin = open(input_path, "rb")
    except OSError:
        print(f"Cannot open {input_path}")
        return EXIT_INPUT

    with fin:
        if method == "decompress":
            # Validate before the output file is created.
            try:
                FileHeader.read(fin)
            except ValueError as e:
                print(f"Invalid compressed file {input_path}: {e}")
                return EXIT_FORMAT
            fin.seek(0)

        try:
            fout = open(output_path, "wb")
        except OSError:
            print(f"Cannot open {output_path}")
            return EXIT_OUTPUT
        with fout:
            log_info = getattr(TurboCompressor(), method)(fin, fout)

    for line in log_info.splitlines():
        print(f"  {line}")
    return EXIT_OK


def compress_main(argv=None) -> int:
    """Entry point of turbo-compress."""
    if argv is None:
        argv = sys.argv[1:]
    return _run(argv, "compress", "Compressing", "compress")


def decompress_main(argv=None) -> int:
    """Entry point of turbo-decompress."""
    if argv is None:
        argv = sys.argv[1:]
    return _run(argv, "decompress", "Decompressing", "decompress")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] in ("compress", "decompress"):
        main = compress_main if sys.argv[1] == "compress" else decompress_main
        sys.exit(main(sys.argv[2:]))
    print("Use: turbo_cli.py compress|decompress <inputfilepath> <outputfilepath>")
    sys.exit(EXIT_USAGE)
