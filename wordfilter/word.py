from . import wordlen, wildcards
from .errors import InvalidWordLength, InvalidCharValue


def to_upper(c):
    """
    uppercase a single character, leaving it alone if uppercasing would
    change its length (eg. 'ß' -> 'SS')
    """
    upper = c.upper()
    return upper if len(upper) == 1 else c


class Letter:
    """
    a concrete letter in a word, always stored uppercase
    """

    __slots__ = ('value',)

    def __init__(self, value):
        object.__setattr__(self, 'value', to_upper(value))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __eq__(self, other):
        return isinstance(other, Letter) and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"Letter({self.value!r})"


class _Wildcard:
    """
    matches any letter in the same position
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __str__(self):
        return ' '

    def __repr__(self):
        return 'Wildcard'

WILDCARD = _Wildcard()


def classify(c):
    """
    convert a single character into a Letter or WILDCARD
    """
    if len(c) != 1:
        raise InvalidCharValue(c)

    if c in wildcards:
        return WILDCARD

    if c.isalpha():
        return Letter(c)

    raise InvalidCharValue(c)


class Word:
    """
    exactly `wordlen` slots, each a Letter or WILDCARD

    the first bad character raises, later characters aren't looked at
    """

    __slots__ = ('_slots',)

    def __init__(self, text):
        if len(text) != wordlen:
            raise InvalidWordLength(len(text))

        object.__setattr__(self, '_slots', tuple(classify(c) for c in text))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def slots(self):
        return self._slots

    def __getitem__(self, i):
        return self._slots[i]

    def __iter__(self):
        return iter(self._slots)

    def __len__(self):
        return len(self._slots)

    def __eq__(self, other):
        return isinstance(other, Word) and self._slots == other._slots

    def __hash__(self):
        return hash(self._slots)

    def __str__(self):
        return ''.join(str(s) for s in self._slots)

    def __repr__(self):
        return f"Word({str(self)!r})"


def parse_pattern(text):
    return Word(text)


class LetterSet(frozenset):
    """
    unordered set of uppercase letters, any input string is accepted
    """

    @classmethod
    def parse(cls, text):
        if not text:
            return cls()

        return cls(to_upper(c) for c in text)

    def __repr__(self):
        return f"{self.__class__.__name__}({''.join(sorted(self))!r})"


class Excluded(LetterSet):
    """
    letters that can't be in a position where the chosen word has a letter
    """


class Included(LetterSet):
    """
    letters known to be in the answer, any one of them accepts a word
    """


def parse_excluded(text):
    return Excluded.parse(text)

def parse_included(text):
    return Included.parse(text)
