import logging

from lexicon.grammar import GrammarTemplate
from lexicon.matcher import PatternMatcher
from lexicon.text import tokenize
from lexicon.vocabulary import VocabularyExtractor

logger = logging.getLogger(__name__)


class CommandAnalyzer:
    def __init__(self, world, grammar):
        """
        The front door for the game loop.
        Wires the world and grammar tables into the vocabulary and the matcher;
        nothing here changes after construction.
        """
        self.world = world
        self.grammar = grammar
        self.vocabulary = VocabularyExtractor(world, grammar)
        self.matcher = PatternMatcher(world, self.vocabulary)

    # ==========================================================
    # 1. LOOKUPS
    # ==========================================================
    def objects_with_noun(self, noun):
        return self.world.objects_with_noun(noun)

    def templates_starting_with(self, verb):
        return self.grammar.templates_starting_with(verb)

    def action_for(self, template):
        if not isinstance(template, GrammarTemplate):
            template = GrammarTemplate.parse(template)
        return template.action

    # ==========================================================
    # 2. COMMAND CHECKS
    # ==========================================================
    def has_preposition(self, text):
        return self.matcher.has_preposition(text)

    def phrase_matches_object(self, phrase, obj):
        return self.matcher.phrase_matches_object(phrase, obj)

    def command_matches_template(self, command, template):
        return self.matcher.command_matches_template(command, template)

    def resolve(self, phrase, kind=None):
        return self.matcher.resolve(phrase, kind)

    # ==========================================================
    # 3. WHOLE-COMMAND ANALYSIS
    # ==========================================================
    def candidate_templates(self, command):
        """Templates worth trying for this command, picked by its first word."""
        words = tokenize(command)
        if not words:
            return ()
        return self.grammar.templates_starting_with(words[0])

    def analyze(self, command):
        """
        Input: "put soccer ball in large wooden box"
        Returns: the CommandMatch of the first template (declaration order)
        that accepts the command, or None.
        """
        for template in self.candidate_templates(command):
            match = self.matcher.match_template(command, template)
            if match:
                return match
        logger.debug("No template accepts '%s'", command)
        return None

    def match_all(self, command):
        matches = []
        for template in self.candidate_templates(command):
            match = self.matcher.match_template(command, template)
            if match:
                matches.append(match)
        return matches
