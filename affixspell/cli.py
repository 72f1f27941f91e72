"""Command-line interface."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="affixspell",
        description="Check spelling against a Hunspell-style affix dictionary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check words against .aff/.dic files
  %(prog)s --aff en_US.aff --dic en_US.dic helo wrld

  # Parse once, cache the tables, then reuse them
  %(prog)s --aff en_US.aff --dic en_US.dic --save-snapshot en_US.json
  %(prog)s --snapshot en_US.json --input words.txt -v

  # Using JSON config (CLI args override JSON values)
  %(prog)s --config config.json teh

Accepted words are printed as-is; rejected words are printed as
"word: suggestion, suggestion".

Example config.json:
{
  "snapshot": "~/dicts/en_US.json",
  "limit": 5,
  "max_distance": 2,
  "verbose": false
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Dictionary sources
    parser.add_argument("--aff", type=str, help="Affix file (.aff)")
    parser.add_argument("--dic", type=str, help="Word list file (.dic)")
    parser.add_argument("--snapshot", type=str, help="Load tables from a JSON snapshot")
    parser.add_argument(
        "--save-snapshot", type=str, help="Write the parsed tables to a JSON snapshot"
    )

    # Words
    parser.add_argument("words", nargs="*", help="Words to check")
    parser.add_argument("-i", "--input", type=str, help="File with words to check, one per line")

    # Parameters
    parser.add_argument("-n", "--limit", type=int, help="Maximum suggestions per word (default: 5)")
    parser.add_argument(
        "--max-distance", type=int, help="Edit distance for suggestion candidates (default: 2)"
    )

    # Flags
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=None, help="Verbose output"
    )
    parser.add_argument(
        "--debug", action="store_true", default=None, help="Debug output (implies --verbose)"
    )
    parser.add_argument(
        "--debug-words",
        type=str,
        help="Comma-separated words to trace through checking (requires --debug)",
    )

    return parser
