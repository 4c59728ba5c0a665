import unittest
from concurrent.futures import ThreadPoolExecutor

from catalog_data import house_grammar, house_world
from lexicon.analyzer import CommandAnalyzer
from lexicon.grammar import GrammarCatalog
from lexicon.world import GameObject


class TestCommandAnalyzer(unittest.TestCase):
    def setUp(self):
        self.analyzer = CommandAnalyzer(house_world(), house_grammar())

    def test_lookups(self):
        self.assertEqual(len(self.analyzer.objects_with_noun("box")), 2)
        texts = [t.text for t in self.analyzer.templates_starting_with("put")]
        self.assertEqual(texts, ["put {item} in {container}", "put {item} on {supporter}"])
        self.assertEqual(self.analyzer.action_for("take off {clothing}"), "take_off")

    def test_checks_delegate_to_matcher(self):
        frog = GameObject.from_text("small tree frog", "item")
        self.assertTrue(self.analyzer.has_preposition("put ball in box"))
        self.assertFalse(self.analyzer.has_preposition("look"))
        self.assertTrue(self.analyzer.phrase_matches_object("tree tree", frog))
        self.assertTrue(self.analyzer.command_matches_template(
            "put soccer ball in large wooden box", "put {item} in {container}"))
        self.assertFalse(self.analyzer.command_matches_template(
            "put soccer ball in comfy chair", "put {item} in {container}"))
        self.assertEqual(len(self.analyzer.resolve("frog", kind="item")), 2)

    def test_analyze_picks_first_accepting_template(self):
        match = self.analyzer.analyze("put beach ball on solid wooden table")
        self.assertEqual(match.template.text, "put {item} on {supporter}")
        self.assertEqual(match.action, "put_on")

    def test_analyze_skips_templates_that_do_not_resolve(self):
        # "take {object}" comes first but "off purple hoodie" is no object
        match = self.analyzer.analyze("take off purple hoodie")
        self.assertEqual(match.action, "take_off")
        self.assertEqual(match.phrase(0), "purple hoodie")

    def test_analyze_punctuated_template(self):
        analyzer = CommandAnalyzer(house_world(), GrammarCatalog(["pick-up {item}", "look!"]))
        match = analyzer.analyze("pick-up beach ball")
        self.assertEqual(match.template.text, "pick-up {item}")
        self.assertEqual(match.phrase(0), "beach ball")
        self.assertEqual(analyzer.analyze("look!").template.text, "look!")

    def test_analyze_rejects(self):
        self.assertIsNone(self.analyzer.analyze(""))
        self.assertIsNone(self.analyzer.analyze("dance"))
        self.assertIsNone(self.analyzer.analyze("put soccer ball in comfy chair"))
        self.assertIsNone(self.analyzer.analyze("loo"))

    def test_match_all(self):
        matches = self.analyzer.match_all("take comfy chair")
        self.assertEqual([m.action for m in matches], ["take"])
        self.assertEqual(self.analyzer.match_all("fly north"), [])

    def test_candidate_templates(self):
        texts = [t.text for t in self.analyzer.candidate_templates("sit on comfy chair")]
        self.assertEqual(texts, ["sit on {object}"])
        self.assertEqual(self.analyzer.candidate_templates("   "), ())

    def test_safe_to_share_between_threads(self):
        commands = ["put soccer ball in large wooden box", "go west", "talk to very young woman"] * 20
        with ThreadPoolExecutor(max_workers=4) as pool:
            actions = list(pool.map(lambda c: self.analyzer.analyze(c).action, commands))
        self.assertEqual(actions, ["put_in", "go", "talk_to"] * 20)


if __name__ == '__main__':
    unittest.main()
