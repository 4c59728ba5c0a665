from lexicon.analyzer import CommandAnalyzer
from lexicon.errors import CatalogError, LexiconError, TemplateError
from lexicon.grammar import GrammarCatalog, GrammarTemplate, Slot
from lexicon.matcher import CommandMatch, PatternMatcher, SlotBinding
from lexicon.text import tokenize
from lexicon.vocabulary import VocabularyExtractor
from lexicon.world import GameObject, WorldCatalog
