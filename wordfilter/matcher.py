from . import logger
from .word import Word, Letter, WILDCARD, Excluded, Included


def matches(chosen, candidate, excluded=Excluded(), included=Included()):
    """
    return True if candidate could be the chosen word

    Positions are checked left to right and the first decisive position wins:
      - a wildcard in chosen says nothing about that position
      - a candidate letter in included accepts the word outright, even if
        this position doesn't otherwise match
      - a chosen letter in excluded rejects the word
      - a chosen letter different from the candidate rejects the word

    NOTE: the included check doesn't look at the chosen letter at all, so
    chosen=AARGH, included=I accepts "IXXXX". Kept on purpose until someone
    decides what included should really mean.
    """
    for chosen_slot, candidate_slot in zip(chosen, candidate):
        if chosen_slot is WILDCARD:
            continue

        # a wildcard in the candidate is never a real letter
        candidate_letter = candidate_slot.value if isinstance(candidate_slot, Letter) else None

        if candidate_letter is not None and candidate_letter in included:
            return True

        if chosen_slot.value in excluded:
            return False

        if chosen_slot != candidate_slot:
            return False

    return True


class WordsResult:
    """
    the chosen word and every dictionary word found to match it so far
    """

    HEADER = 'List of possible matching words:'

    def __init__(self, chosen_word):
        if not isinstance(chosen_word, Word):
            chosen_word = Word(chosen_word)

        self.chosen_word = chosen_word
        self.possible_words = []

    @property
    def length(self):
        return len(self.possible_words)

    def is_word_possible(self, target, excluded, included):
        """
        parse target and append it to possible_words if it matches

        raises WordError if target isn't a valid word, it's up to the caller
        to skip bad dictionary lines
        """
        target_word = Word(target)

        if not matches(self.chosen_word, target_word, excluded, included):
            return False

        logger.debug(f"match: {target_word}")
        self.possible_words.append(target_word)
        return True

    def render(self):
        lines = [self.HEADER]

        for i, word in enumerate(self.possible_words, start=1):
            lines.append(f"{i}. {word}")

        return '\n'.join(lines) + '\n'

    def __str__(self):
        return self.render()
