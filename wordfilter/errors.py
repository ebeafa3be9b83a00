from . import wordlen


class WordError(ValueError):
    """
    base class for anything that can't be parsed into a Word

    errors compare equal when they are the same kind with the same value,
    eg. InvalidWordLength(6) == InvalidWordLength(6)
    """

    def __init__(self, value):
        self.value = value
        super().__init__(self.message())

    def message(self):
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.value!r})"


class InvalidWordLength(WordError):

    def message(self):
        return f"Word must be {wordlen} characters long. Given word has length of '{self.value}'"


class InvalidCharValue(WordError):

    def message(self):
        return f"Can not parse given char '{self.value}' as wildcard or normal char"
