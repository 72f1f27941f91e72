"""Main entry point for affixspell."""

from loguru import logger
from tqdm import tqdm

from affixspell.cli import create_parser
from affixspell.core import Config, load_config
from affixspell.dictionary import DictionarySnapshot, build_snapshot, load_snapshot, save_snapshot
from affixspell.spellchecker import Spellchecker
from affixspell.utils.helpers import load_word_file, read_text_file
from affixspell.utils.logging import setup_logger


def _validate_config(config: Config, parser) -> None:
    """Validate configuration settings."""
    if not config.has_source:
        parser.error("Must specify either --snapshot or both --aff and --dic")

    if config.snapshot and config.aff:
        logger.warning("Both --snapshot and --aff/--dic given; using --aff/--dic")


def _load_snapshot(config: Config) -> DictionarySnapshot:
    """Parse source files or read a cached snapshot."""
    if config.aff and config.dic:
        if config.verbose:
            logger.info(f"Parsing {config.aff} and {config.dic}...")
        return build_snapshot(read_text_file(config.aff), read_text_file(config.dic))

    if config.verbose:
        logger.info(f"Loading snapshot {config.snapshot}...")
    return load_snapshot(config.snapshot)


def _format_result(word: str, accepted: bool, suggestions: list[str]) -> str:
    if accepted:
        return word
    if not suggestions:
        return f"{word}: (no suggestions)"
    return f"{word}: {', '.join(suggestions)}"


def check_words(spellchecker: Spellchecker, words: list[str], config: Config) -> list[str]:
    """Check each word and format one output line per word."""
    lines = []
    iterator = words
    if config.verbose and len(words) > 1:
        iterator = tqdm(words, desc="Checking words", unit="word")

    for word in iterator:
        accepted = spellchecker.check(word)
        suggestions = [] if accepted else spellchecker.suggest(word, config.limit)
        lines.append(_format_result(word.strip(), accepted, suggestions))

    return lines


def _run_with_error_handling(config: Config) -> None:
    """Load the dictionary and check words with proper error handling."""
    try:
        snapshot = _load_snapshot(config)
        if config.save_snapshot:
            save_snapshot(snapshot, config.save_snapshot)
            if config.verbose:
                logger.info(f"Saved snapshot to {config.save_snapshot}")

        spellchecker = Spellchecker(
            snapshot, max_distance=config.max_distance, debug_words=config.debug_words
        )

        words = list(config.words) + load_word_file(config.input)
        for line in check_words(spellchecker, words, config):
            print(line)
    except KeyboardInterrupt:
        logger.warning("Checking interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("✗ Spellchecking failed")
        raise


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Validate configuration
    _validate_config(config, parser)

    _run_with_error_handling(config)


if __name__ == "__main__":
    main()
