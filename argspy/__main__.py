"""Demo entry point: ``python -m argspy --help``."""

from loguru import logger

from argspy.core import load_config
from argspy.parser import ArgsParser
from argspy.utils.logging import setup_logger


def main():
    """Main entry point."""
    config = load_config({"verbose": True})
    setup_logger(verbose=config.verbose, debug=config.debug)

    parser = ArgsParser(config)
    source = parser.add_path("source", "s", "File to read the words from", mandatory=True)
    words = parser.add_string(
        "words", "w", "Words to look for,\nseparated by whitespace", array=True
    )
    limit = parser.add_integer("limit", "l", "Maximum number of matches", default=10)
    ratio = parser.add_double("ratio", "r", "Minimum similarity of a match", default=0.5)
    quiet = parser.add_command("quiet", "q", "Only print the summary")
    loud = parser.add_command("loud", "L", "Print every comparison")
    parser.toggle(quiet, loud)

    parser.parse()

    logger.info("Resolved arguments:")
    logger.info(f"  source: {source.value}")
    logger.info(f"  words:  {list(words.value or ())}")
    logger.info(f"  limit:  {limit.value}")
    logger.info(f"  ratio:  {ratio.value}")
    if quiet.is_provided:
        logger.info("  mode:   quiet")
    elif loud.is_provided:
        logger.info("  mode:   loud")


if __name__ == "__main__":
    main()
