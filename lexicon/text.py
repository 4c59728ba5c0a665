import re

NON_WORD = re.compile(r"\W+")


def tokenize(text):
    """
    The one tokenizer used for commands, descriptions and template literals.
    Splits on runs of non-word characters and drops the empty pieces.

    'put ball, in box!' -> ['put', 'ball', 'in', 'box']
    """
    return [t for t in NON_WORD.split(text) if t]


def distinct_sorted(words):
    return tuple(sorted(set(words)))
