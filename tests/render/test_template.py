import unittest

from vc_release_notes.render.template import render


class TestRender(unittest.TestCase):
    def test_template_substitution(self) -> None:
        self.assertEqual(render("## Changes\n\n$changes", ["### Fix", "- a"]), "## Changes\n\n### Fix\n- a")

    def test_without_template(self) -> None:
        self.assertEqual(render(None, ["x"]), "x")

    def test_only_first_placeholder_is_replaced(self) -> None:
        self.assertEqual(render("$changes | $changes", ["a", "b"]), "a\nb | $changes")

    def test_template_without_placeholder(self) -> None:
        self.assertEqual(render("static text", ["a"]), "static text")


if __name__ == "__main__":
    unittest.main()
