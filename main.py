#!/usr/bin/env python3
"""
Main entry point for the VSpace encoder
Hides text in blank-rendering characters and recovers it

Usage:
    python main.py encode "Hello"            Encode text from the argument
    python main.py encode --input note.txt   Encode a file
    python main.py decode --input hidden.txt Decode a file
    python main.py info                      Show the active configuration
"""

import sys
import os
import logging
import argparse
from typing import Dict, List, Optional

from dotenv import load_dotenv

from vspace import EncoderFactory, VSpaceError, split_blocks, render_visible

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def build_config(args: argparse.Namespace) -> Dict[str, Optional[str]]:
    """
    Create configuration from environment variables, overridden by CLI flags.
    """
    config = {
        'VSPACE_ALPHABET': os.getenv('VSPACE_ALPHABET'),
        'VSPACE_PRE_ENCODER': os.getenv('VSPACE_PRE_ENCODER', 'base64'),
        'VSPACE_LOG_LEVEL': os.getenv('VSPACE_LOG_LEVEL', 'WARNING')
    }

    if args.alphabet is not None:
        config['VSPACE_ALPHABET'] = args.alphabet
    if args.pre_encoder is not None:
        config['VSPACE_PRE_ENCODER'] = args.pre_encoder
    if args.log_level is not None:
        config['VSPACE_LOG_LEVEL'] = args.log_level

    return config


def read_input(text: Optional[str], input_path: Optional[str], strip_newline: bool) -> str:
    """
    Read the payload from the argument, a file, or stdin (in that order).
    """
    if text is not None:
        return text

    if input_path:
        # newline='' keeps CR/LF untouched, they may be alphabet members
        with open(input_path, 'r', encoding='utf-8', newline='') as f:
            data = f.read()
    else:
        data = sys.stdin.read()

    if strip_newline and data.endswith('\n'):
        data = data[:-1]

    return data


def write_output(data: str, output_path: Optional[str]):
    if output_path:
        with open(output_path, 'w', encoding='utf-8', newline='') as f:
            f.write(data)
        logger.info(f"Wrote {len(data)} characters to {output_path}")
    else:
        sys.stdout.write(data)
        if sys.stdout.isatty():
            sys.stdout.write('\n')


def run_encode(encoder, args) -> None:
    """Encode text and write the invisible result."""
    plain = read_input(args.text, args.input, strip_newline=True)
    encoded = encoder.encode(plain)

    logger.info(
        f"Encoded {len(plain)} characters into {len(encoded)} symbols "
        f"({len(encoded) // encoder.symbols_needed if encoded else 0} values)"
    )

    if args.show:
        blocks = split_blocks(encoded, encoder.symbols_needed)
        print(' '.join(render_visible(block, encoder.symbols) for block in blocks))
    else:
        write_output(encoded, args.output)


def run_decode(encoder, args) -> None:
    """Decode invisible text and write the recovered payload."""
    # Encoded text may legitimately end with a line feed symbol, keep it
    encoded = read_input(args.text, args.input, strip_newline=False)
    decoded = encoder.decode(encoded)

    logger.info(f"Decoded {len(encoded)} symbols into {len(decoded)} characters")

    write_output(decoded, args.output)


def run_info(encoder, args) -> None:
    """Print the active encoder configuration."""
    print(f"\n{'='*60}")
    print("VSPACE ENCODER")
    print(f"{'='*60}")
    print(f"  - Pre-encoder: {type(encoder.pre_encoder).__name__} "
          f"({encoder.pre_encoder.symbol_count} symbols)")
    print(f"  - Alphabet size: {len(encoder.symbols)}")
    print(f"  - Alphabet: {render_visible(''.join(encoder.symbols), encoder.symbols)}")
    print(f"  - Code points: {', '.join(f'U+{ord(s):04X}' for s in encoder.symbols)}")
    print(f"  - Symbols per value: {encoder.symbols_needed}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI argument parsing"""
    parser = argparse.ArgumentParser(
        description="Hide extended ASCII text in blank-rendering characters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode with the default alphabet (space, non-breaking space, tab)
  python3 main.py encode "Hello, World!" --output hidden.txt

  # Decode it again
  python3 main.py decode --input hidden.txt

  # Show the encoding with visible glyphs
  python3 main.py encode "Hello" --show

  # Use a zero-width binary alphabet and the Base32 pre-encoder
  python3 main.py --alphabet "\\u200b\\u200c" --pre-encoder base32 encode "Hello"

Environment (.env):
  VSPACE_ALPHABET     Alphabet with escape sequences (default alphabet if unset)
  VSPACE_PRE_ENCODER  base64 | base32 | base16 (default: base64)
  VSPACE_LOG_LEVEL    Logging level (default: WARNING)
        """
    )

    parser.add_argument(
        '--alphabet',
        type=str,
        default=None,
        help='Output alphabet, escape sequences allowed (overrides VSPACE_ALPHABET)'
    )

    parser.add_argument(
        '--pre-encoder',
        type=str,
        choices=EncoderFactory.get_supported_pre_encoders(),
        default=None,
        help='Pre-encoder (overrides VSPACE_PRE_ENCODER, default: base64)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (overrides VSPACE_LOG_LEVEL, default: WARNING)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Encode command
    encode_parser = subparsers.add_parser('encode', help='Encode text')
    encode_parser.add_argument('text', nargs='?', default=None, help='Text to encode (default: stdin)')
    encode_parser.add_argument('--input', '-i', default=None, help='Read text from file')
    encode_parser.add_argument('--output', '-o', default=None, help='Write result to file')
    encode_parser.add_argument('--show', action='store_true', help='Print with visible glyphs')

    # Decode command
    decode_parser = subparsers.add_parser('decode', help='Decode encoded text')
    decode_parser.add_argument('text', nargs='?', default=None, help='Encoded text (default: stdin)')
    decode_parser.add_argument('--input', '-i', default=None, help='Read encoded text from file')
    decode_parser.add_argument('--output', '-o', default=None, help='Write result to file')

    # Info command
    subparsers.add_parser('info', help='Show encoder configuration')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = build_config(args)

    log_level = config['VSPACE_LOG_LEVEL'].upper()
    if not isinstance(logging.getLevelName(log_level), int):
        print(f"ERROR: Unknown log level: {config['VSPACE_LOG_LEVEL']}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        encoder = EncoderFactory.create_encoder(config)
    except ValueError as e:
        print(f"ERROR: Invalid configuration: {e}", file=sys.stderr)
        return 1

    commands = {
        'encode': run_encode,
        'decode': run_decode,
        'info': run_info,
    }

    try:
        commands[args.command](encoder, args)
    except VSpaceError as e:
        logger.debug("Codec error", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


def cli():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    cli()
