import logging
from dataclasses import dataclass

from lexicon.grammar import GrammarTemplate, Slot
from lexicon.text import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotBinding:
    """The words one slot captured and the objects of its kind they name."""
    kind: str
    phrase: tuple
    candidates: tuple

    @property
    def text(self):
        return " ".join(self.phrase)


@dataclass(frozen=True)
class CommandMatch:
    command: str
    template: GrammarTemplate
    bindings: tuple

    @property
    def action(self):
        return self.template.action

    @property
    def is_ambiguous(self):
        return any(len(b.candidates) > 1 for b in self.bindings)

    def phrase(self, index):
        return self.bindings[index].text

    def objects(self, index):
        return self.bindings[index].candidates


class PatternMatcher:
    def __init__(self, world, vocabulary):
        """
        Matches raw command text against grammar templates.
        Holds no state beyond the (immutable) world table and preposition set.
        """
        self.world = world
        self._prepositions = frozenset(vocabulary.prepositions)
        # Description tokens per object, looked up on every slot check
        self._object_words = {o: frozenset(tokenize(o.description)) for o in world.all_objects()}

    # ==========================================================
    # 1. WORD-LEVEL CHECKS
    # ==========================================================
    def has_preposition(self, text):
        return any(t in self._prepositions for t in tokenize(text))

    def phrase_matches_object(self, phrase, obj):
        """
        True when every word of the phrase appears in the object's description.
        Order and repetition don't matter: "tree tree" matches "small tree frog".
        A phrase with no words matches nothing.
        """
        words = tokenize(" ".join(phrase) if isinstance(phrase, (list, tuple)) else phrase)
        if not words:
            return False
        obj_words = self._object_words.get(obj)
        if obj_words is None:
            obj_words = frozenset(tokenize(obj.description))
        return all(w in obj_words for w in words)

    def resolve(self, phrase, kind=None):
        """Objects (optionally of one kind) the phrase could be referring to."""
        objects = self.world.all_objects() if kind is None else self.world.objects_of_kind(kind)
        return tuple(o for o in objects if self.phrase_matches_object(phrase, o))

    # ==========================================================
    # 2. TEMPLATE MATCHING
    # ==========================================================
    def command_matches_template(self, command, template):
        return self.match_template(command, template) is not None

    def match_template(self, command, template):
        """
        Input: "put soccer ball in large wooden box", "put {item} in {container}"
        Returns: CommandMatch with one SlotBinding per slot, or None.

        The verb and every literal must line up with command words exactly.
        Each slot takes a non-empty run of words, and that run on its own must
        name at least one object of the slot's kind. When several splits are
        possible the greedy one (earlier slots take as many words as they can)
        is tried first and the first split that resolves wins.
        """
        if not isinstance(template, GrammarTemplate):
            template = GrammarTemplate.parse(template)

        words = tokenize(command)
        if not words or words[0] != template.steps[0]:
            return None

        for bindings in self._align(template.steps[1:], words[1:]):
            logger.debug("'%s' matched '%s' with %s", command, template.text,
                         [(b.kind, b.text, len(b.candidates)) for b in bindings])
            return CommandMatch(command, template, tuple(bindings))

        return None

    def _align(self, steps, words):
        """
        Yields every way `words` can be laid over `steps` where each slot
        resolves, greediest first. Each result is a list of SlotBindings.
        """
        if not steps:
            if not words:
                yield []
            return

        step, rest = steps[0], steps[1:]

        if not isinstance(step, Slot):
            if words and words[0] == step:
                yield from self._align(rest, words[1:])
            return

        # Every remaining step needs at least one word
        longest = len(words) - len(rest)
        for end in range(longest, 0, -1):
            phrase = tuple(words[:end])
            candidates = self.resolve(phrase, step.kind)
            if not candidates:
                continue
            binding = SlotBinding(step.kind, phrase, candidates)
            for tail in self._align(rest, words[end:]):
                yield [binding] + tail
