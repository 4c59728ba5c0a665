from lexicon.text import tokenize, distinct_sorted


class VocabularyExtractor:
    def __init__(self, world, grammar):
        """
        Derives every word table from the two catalogs.
        Everything is computed here, once, so the instance is read-only
        afterwards and can be shared between threads.

        All tables are tuples with no duplicates, in ascending order.
        """
        self.world = world
        self.grammar = grammar

        objects = world.all_objects()
        templates = grammar.all_templates()

        # --- WORLD ---
        self.adjectives = distinct_sorted(w for o in objects for w in o.adjectives)
        self.nouns = distinct_sorted(o.noun for o in objects)
        self.world_kinds = world.kinds()

        # --- GRAMMAR ---
        self.verbs = distinct_sorted(t.verb for t in templates)
        self.prepositions = distinct_sorted(
            p for p in (" ".join(t.literals[1:]) for t in templates) if p
        )
        self.actions = distinct_sorted(t.action for t in templates)
        self.grammar_kinds = distinct_sorted(s.kind for t in templates for s in t.slots)

        # --- EVERYTHING ---
        # Kind names count as words ("item"), their placeholders ("{item}") do not
        template_words = [w for t in templates for w in tokenize(t.text)]
        object_words = [w for o in objects for w in tokenize(o.description)]
        self.full_vocabulary = distinct_sorted(template_words + object_words)

    def as_dict(self):
        """All tables keyed by name, handy for dumping or the shell's table view."""
        return {
            "verbs": self.verbs,
            "prepositions": self.prepositions,
            "actions": self.actions,
            "grammar_kinds": self.grammar_kinds,
            "adjectives": self.adjectives,
            "nouns": self.nouns,
            "world_kinds": self.world_kinds,
            "full_vocabulary": self.full_vocabulary,
        }
