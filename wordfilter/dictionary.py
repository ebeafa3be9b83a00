from . import logger
from .errors import WordError
from .word import Word


def read_lines(path):
    """
    yield every non blank line of the file at path, stripped

    the file stays open only while the generator is being consumed
    """
    with path.open(errors='replace') as f:
        for line in f:
            line = line.strip()
            if line:
                yield line


def read_words(path):
    """
    return every line of path that parses as a Word, dropping the rest
    """
    words = []

    for line in read_lines(path):
        try:
            words.append(Word(line))
        except WordError as e:
            logger.debug(f"skipping {line!r}: {e}")

    logger.debug(f"our word list contains {len(words)} words")
    return words


def filter_words(result, lines, excluded, included):
    """
    run every line through result.is_word_possible

    lines that aren't valid words are logged and skipped, returns how many
    lines were skipped
    """
    skipped = 0

    for line in lines:
        try:
            result.is_word_possible(line, excluded, included)
        except WordError as e:
            logger.debug(f"skipping {line!r}: {e}")
            skipped += 1

    if skipped:
        logger.info(f"skipped {skipped} invalid dictionary lines")

    return skipped
