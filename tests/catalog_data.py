from lexicon.grammar import GrammarCatalog
from lexicon.world import WorldCatalog

# MOCK DATA (mirrors data/catalogs/house)
GRAMMAR = [
    "look",
    "inventory",
    "go {direction}",
    "climb {object}",
    "take {object}",
    "drop {object}",
    "examine {object}",
    "search {object}",
    "sit on {object}",
    "lie on {object}",
    "open {container}",
    "close {container}",
    "lock {container}",
    "unlock {container}",
    "put {item} in {container}",
    "put {item} on {supporter}",
    "wear {clothing}",
    "take off {clothing}",
    "tie {item} to {object}",
    "talk to {person}",
]

WORLD = [
    ("north", "direction"),
    ("south", "direction"),
    ("east", "direction"),
    ("west", "direction"),
    ("comfy chair", "object"),
    ("shabby twin bed", "object"),
    ("elegant carpet", "object"),
    ("soccer ball", "item"),
    ("beach ball", "item"),
    ("small green frog", "item"),
    ("small tree frog", "item"),
    ("large wooden box", "container"),
    ("flimsy cardboard box", "container"),
    ("solid wooden table", "supporter"),
    ("glass side stand", "supporter"),
    ("purple hoodie", "clothing"),
    ("leather jacket", "clothing"),
    ("very old man", "person"),
    ("very young woman", "person"),
]


def house_world():
    return WorldCatalog(WORLD)


def house_grammar():
    return GrammarCatalog(GRAMMAR)
