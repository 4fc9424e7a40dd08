import argparse
import sys

from typing import List, Optional
from decoder import HuffmanDecoder
from errors import FormatError
from huffman import build_tree, code_table


class InvalidHexError(ValueError):
    """Raised when a --hex argument is not a valid hex string."""


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Decoder for frequency-table-prefixed Huffman buffers"
    )
    subparsers = parser.add_subparsers(
        title="subcommands", dest="cmd", required=True
    )

    decode = subparsers.add_parser(
        "decode", aliases=["d"], help="Decode a buffer to text"
    )
    decode.add_argument("input", help="Encoded file, or hex string with --hex")
    decode.add_argument(
        "--hex",
        action="store_true",
        help="Treat INPUT as a hex string instead of a file path",
    )
    decode.add_argument(
        "-o", "--output", help="Write decoded text here (default: stdout)"
    )
    decode.add_argument(
        "--strict",
        action="store_true",
        help="Check size and symbol-count header fields",
    )

    info = subparsers.add_parser(
        "info", aliases=["i"], help="Show headers and frequency table"
    )
    info.add_argument("input", help="Encoded file, or hex string with --hex")
    info.add_argument(
        "--hex",
        action="store_true",
        help="Treat INPUT as a hex string instead of a file path",
    )

    return parser


def load_input(source: str, is_hex: bool) -> bytes:
    """Load an encoded buffer from a file or a hex string.

    :param source: File path, or hex digits when ``is_hex`` is set.
        Whitespace inside hex strings is ignored.
    :type source: str
    :param is_hex: Whether ``source`` is a hex string.
    :type is_hex: bool
    :returns: Encoded buffer.
    :rtype: bytes
    :raises InvalidHexError: If the hex string is invalid.
    :raises FileNotFoundError: If the file does not exist.
    """
    if is_hex:
        try:
            return bytes.fromhex("".join(source.split()))
        except ValueError as e:
            raise InvalidHexError(str(e)) from e
    with open(source, "rb") as f:
        return f.read()


def decode_command(
    source: str, is_hex: bool, output: Optional[str], strict: bool
) -> None:
    """Decode ``source`` and print or save the text.

    :param source: File path or hex string.
    :type source: str
    :param is_hex: Whether ``source`` is a hex string.
    :type is_hex: bool
    :param output: Destination file, or ``None`` for stdout.
    :type output: Optional[str]
    :param strict: Check informational header fields.
    :type strict: bool
    :returns: None
    :rtype: None
    :raises FormatError: If the buffer is malformed.
    """
    text = HuffmanDecoder().decode(load_input(source, is_hex), strict=strict)
    if output is None:
        print(text)
        return
    with open(output, "w", encoding="latin-1", newline="") as out:
        out.write(text)
    print(f"Decoded {len(text)} symbols to {output}")


def _format_info(data: bytes) -> List[str]:
    info = HuffmanDecoder().inspect(data)
    codes = code_table(build_tree(info.frequencies)) if info.frequencies else {}
    lines = [
        f"Buffer size:   {len(data)} (header: {info.header.total_size})",
        f"Symbols:       {info.header.symbol_count}",
        f"Packed bits:   {info.bit_header.packed_bits}",
        f"Packed bytes:  {info.bit_header.packed_bytes} "
        f"(present: {info.payload_size})",
        f"Symbol total:  {info.bit_header.symbol_total}",
        "Frequencies:",
    ]
    for symbol, freq in info.frequencies.items():
        lines.append(f"  {symbol!r:>6} {freq:>8}  {codes.get(symbol, '')}")
    return lines


def info_command(source: str, is_hex: bool) -> None:
    """Print the headers and frequency table of ``source``.

    :param source: File path or hex string.
    :type source: str
    :param is_hex: Whether ``source`` is a hex string.
    :type is_hex: bool
    :returns: None
    :rtype: None
    :raises FormatError: If a header section is malformed.
    """
    for line in _format_info(load_input(source, is_hex)):
        print(line)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI tool.

    :param argv: Arguments to parse instead of ``sys.argv``.
    :type argv: Optional[List[str]]
    :returns: Process exit status.
    :rtype: int
    """
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        if args.cmd in ["decode", "d"]:
            decode_command(args.input, args.hex, args.output, args.strict)
        elif args.cmd in ["info", "i"]:
            info_command(args.input, args.hex)
    except FileNotFoundError:
        print(f"[!] Input file not found: {args.input}")
        return 1
    except FormatError as e:
        print(f"[!] Malformed input: {e}")
        return 2
    except InvalidHexError as e:
        print(f"[!] Invalid hex input: {e}")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
