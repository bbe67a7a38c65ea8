import unittest
from dataclasses import FrozenInstanceError

from vc_release_notes.config.loader import load_config
from vc_release_notes.context import RunContext, split_repository
from vc_release_notes.history.github_client import DEFAULT_API_URL


class TestRunContext(unittest.TestCase):
    def test_split_repository(self) -> None:
        self.assertEqual(split_repository("acme/widget"), ("acme", "widget"))
        self.assertEqual(split_repository(" acme/widget "), ("acme", "widget"))

    def test_split_repository_invalid(self) -> None:
        for slug in ["", "acme", "/widget", "acme/", "acme/widget/extra"]:
            with self.subTest(slug=slug):
                with self.assertRaises(ValueError):
                    split_repository(slug)

    def test_context_is_immutable(self) -> None:
        context = RunContext(owner="acme", repo="widget", token="t", config=load_config())
        self.assertEqual(context.full_name, "acme/widget")
        self.assertEqual(context.branch, "master")
        self.assertFalse(context.use_icons)
        with self.assertRaises(FrozenInstanceError):
            context.branch = "main"

    def test_context_uses_client_default_endpoint(self) -> None:
        context = RunContext(owner="acme", repo="widget", token="t", config=load_config())
        self.assertEqual(context.api_url, DEFAULT_API_URL)


if __name__ == "__main__":
    unittest.main()
