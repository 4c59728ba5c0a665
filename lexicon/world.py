from dataclasses import dataclass

from lexicon.errors import CatalogError


@dataclass(frozen=True)
class GameObject:
    """
    One entry of the world table: an ordered run of description words
    plus the kind tag slots are checked against.
    """
    words: tuple
    kind: str

    @classmethod
    def from_text(cls, description, kind):
        words = tuple(description.split())
        if not words:
            raise CatalogError(f"Object of kind '{kind}' has an empty description.")
        return cls(words, kind)

    @property
    def description(self):
        return " ".join(self.words)

    @property
    def noun(self):
        # The head noun is always the last word ("small tree frog" -> frog)
        return self.words[-1]

    @property
    def adjectives(self):
        return self.words[:-1]

    def __str__(self):
        return self.description


class WorldCatalog:
    def __init__(self, objects):
        """
        The WORLD TABLE. Loaded once, never changed afterwards.
        Accepts GameObjects or (description, kind) pairs.
        """
        loaded = []
        for obj in objects:
            if not isinstance(obj, GameObject):
                description, kind = obj
                obj = GameObject.from_text(description, kind)
            if not obj.words:
                raise CatalogError(f"Object of kind '{obj.kind}' has an empty description.")
            loaded.append(obj)
        self._objects = tuple(loaded)
        self._kinds = tuple(sorted({o.kind for o in self._objects}))

    def __len__(self):
        return len(self._objects)

    def __iter__(self):
        return iter(self._objects)

    def all_objects(self):
        return self._objects

    def objects_with_noun(self, noun):
        """
        Objects whose head noun is exactly `noun`.
        Example: objects_with_noun("frog") -> small green frog, small tree frog
        """
        return tuple(dict.fromkeys(o for o in self._objects if o.noun == noun))

    def objects_of_kind(self, kind):
        return tuple(o for o in self._objects if o.kind == kind)

    def kinds(self):
        return self._kinds
