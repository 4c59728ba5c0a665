class LexiconError(Exception):
    """Base class for everything the lexicon raises."""


class TemplateError(LexiconError):
    """
    A grammar template string could not be compiled.
    Carries the offending template text so the loader can report it.
    """
    def __init__(self, template, reason):
        super().__init__(f"Bad grammar template '{template}': {reason}")
        self.template = template
        self.reason = reason


class CatalogError(LexiconError):
    """A world or grammar catalog is malformed or inconsistent."""
