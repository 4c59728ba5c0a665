import re
from dataclasses import dataclass

from lexicon.errors import TemplateError
from lexicon.text import tokenize

SLOT_PATTERN = re.compile(r"^\{(\w+)\}$")
MAX_SLOTS = 2


@dataclass(frozen=True)
class Slot:
    """A placeholder that must be filled by a phrase naming an object of `kind`."""
    kind: str

    def __str__(self):
        return "{" + self.kind + "}"


@dataclass(frozen=True)
class GrammarTemplate:
    """
    A command pattern rooted at a verb.
    `tokens` holds the template's own words (plain strings for literals,
    Slot for placeholders); the word tables are built from these.
    `steps` is what commands are matched against: the same sequence with
    every literal run through the command tokenizer, so "pick-up" becomes
    'pick', 'up' and "look!" becomes 'look'.
    """
    text: str
    tokens: tuple
    steps: tuple

    @classmethod
    def parse(cls, text):
        """
        Compiles "put {item} in {container}" into
        ('put', Slot('item'), 'in', Slot('container')).
        """
        words = text.split()
        if not words:
            raise TemplateError(text, "template is empty")

        tokens = []
        for word in words:
            if word.startswith("{") or word.endswith("}"):
                m = SLOT_PATTERN.match(word)
                if not m:
                    raise TemplateError(text, f"malformed slot '{word}'")
                if tokens and isinstance(tokens[-1], Slot):
                    raise TemplateError(text, "adjacent slots cannot be delimited")
                tokens.append(Slot(m.group(1)))
            else:
                tokens.append(word)

        if isinstance(tokens[0], Slot):
            raise TemplateError(text, "a template must start with a verb")
        if sum(1 for t in tokens if isinstance(t, Slot)) > MAX_SLOTS:
            raise TemplateError(text, f"more than {MAX_SLOTS} slots")

        steps = []
        for token in tokens:
            if isinstance(token, Slot):
                if steps and isinstance(steps[-1], Slot):
                    raise TemplateError(text, "adjacent slots cannot be delimited")
                steps.append(token)
            else:
                steps.extend(tokenize(token))

        if not steps or isinstance(steps[0], Slot):
            raise TemplateError(text, "the verb has no word characters")

        return cls(" ".join(words), tuple(tokens), tuple(steps))

    @property
    def verb(self):
        return self.tokens[0]

    @property
    def literals(self):
        return tuple(t for t in self.tokens if not isinstance(t, Slot))

    @property
    def slots(self):
        return tuple(t for t in self.tokens if isinstance(t, Slot))

    @property
    def action(self):
        # put {item} in {container} -> put_in
        return "_".join(self.literals)

    def __str__(self):
        return self.text


class GrammarCatalog:
    def __init__(self, templates):
        """Accepts GrammarTemplates or raw template strings, in declaration order."""
        self._templates = tuple(
            t if isinstance(t, GrammarTemplate) else GrammarTemplate.parse(t)
            for t in templates
        )

    def __len__(self):
        return len(self._templates)

    def __iter__(self):
        return iter(self._templates)

    def all_templates(self):
        return self._templates

    def templates_starting_with(self, verb):
        """
        Templates whose raw text begins with `verb`.
        This is a string prefix test: "loo" also picks up "look".
        Identical template strings are collapsed, first one wins.
        """
        found = {}
        for t in self._templates:
            if t.text.startswith(verb) and t.text not in found:
                found[t.text] = t
        return tuple(found.values())

    def templates_for_verb(self, verb):
        """Strict lookup: only templates whose first word is exactly `verb`."""
        found = {}
        for t in self._templates:
            if t.verb == verb and t.text not in found:
                found[t.text] = t
        return tuple(found.values())
