from . import wordlen, wildcards


class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def pad_pattern(text, wordlen=wordlen):
    """
    fill a partially typed pattern with wildcards on the right
    eg. 'ab' -> 'ab***'
    """
    return text + wildcards[0] * (wordlen - len(text))
