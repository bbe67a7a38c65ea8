import json
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

import vc_release_notes.cli as cli
from vc_release_notes.history.model import HistoryPage, HistoryUnavailable, RawCommit, ReleaseTag


def raw(commit_id, message):
    return RawCommit(
        commit_id=commit_id,
        message=message,
        url=f"https://github.com/acme/widget/commit/{commit_id}",
        author_login="alice",
        author_url="https://github.com/alice",
    )


class DummySource:
    def __init__(self, entries, tag=None, error=None):
        self.entries = entries
        self.tag = tag
        self.error = error
        self.init_kwargs = None

    def __call__(self, **kwargs):
        self.init_kwargs = kwargs
        return self

    def resolve_latest_tag(self):
        return self.tag

    def fetch_history_page(self, after_cursor=None):
        if self.error is not None:
            raise self.error
        return HistoryPage(entries=list(self.entries), has_more=False)


BASE_ARGS = ["--token", "secret", "--repository", "acme/widget"]


class TestCLI(unittest.TestCase):
    def invoke(self, source, args=None):
        runner = CliRunner()
        with patch.object(cli, "GitHubClient", source):
            return runner.invoke(cli.main, BASE_ARGS + (args or []))

    def test_cli_success_writes_step_output(self) -> None:
        source = DummySource(
            [raw("aaaaaaa111", "feat: add export"), raw("bbbbbbb222", "chore: release")],
            tag=ReleaseTag(name="v1.0.0", commit_id="bbbbbbb222"),
        )
        with CliRunner().isolated_filesystem() as workdir:
            output_file = Path(workdir) / "github_output"
            result = self.invoke(source, ["--github-output", str(output_file), "--branch", "main"])
            self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
            content = output_file.read_text(encoding="utf-8")
        self.assertTrue(content.startswith("changelog<<ghadelimiter_"))
        self.assertIn("## Новые изменения", content)
        self.assertIn("add export", content)
        self.assertIn("add export", result.output)
        self.assertEqual(source.init_kwargs["owner"], "acme")
        self.assertEqual(source.init_kwargs["repo"], "widget")
        self.assertEqual(source.init_kwargs["branch"], "main")
        self.assertEqual(source.init_kwargs["token"], "secret")

    def test_cli_reads_environment(self) -> None:
        source = DummySource([raw("aaaaaaa111", "fix: crash")])
        runner = CliRunner()
        env = {"GH_TOKEN": "from-env", "GITHUB_REPOSITORY": "acme/widget"}
        with patch.object(cli, "GitHubClient", source):
            result = runner.invoke(cli.main, ["--output-name", "notes"], env=env)
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertEqual(source.init_kwargs["token"], "from-env")
        self.assertIn("GITHUB_OUTPUT not set", result.output)

    def test_cli_invalid_repository(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli.main, ["--token", "t", "--repository", "widget"])
        self.assertEqual(result.exit_code, cli.EXIT_INVALID_USAGE)

    def test_cli_missing_token(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli.main, ["--repository", "acme/widget"])
        self.assertEqual(result.exit_code, cli.EXIT_INVALID_USAGE)

    def test_cli_config_error(self) -> None:
        with CliRunner().isolated_filesystem() as workdir:
            config_file = Path(workdir) / "changelog.json"
            config_file.write_text(json.dumps({"groups": "nope"}), encoding="utf-8")
            result = self.invoke(DummySource([]), ["--config-path", str(config_file)])
        self.assertEqual(result.exit_code, cli.EXIT_CONFIG_ERROR)

    def test_cli_custom_config(self) -> None:
        source = DummySource([raw("aaaaaaa111", "fix: crash")])
        with CliRunner().isolated_filesystem() as workdir:
            config_file = Path(workdir) / "changelog.yml"
            config_file.write_text(
                "template: \"# Release\\n$changes\"\n"
                "groups:\n"
                "  - title: Fixes\n"
                "    icon: \":bug:\"\n"
                "    types: [fix]\n",
                encoding="utf-8",
            )
            result = self.invoke(source, ["--config-path", str(config_file), "--use-icons"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn("# Release\n### :bug: Fixes", result.output)

    def test_cli_history_unavailable(self) -> None:
        result = self.invoke(DummySource([], error=HistoryUnavailable("boom")))
        self.assertEqual(result.exit_code, cli.EXIT_HISTORY_UNAVAILABLE)

    def test_cli_no_commits(self) -> None:
        result = self.invoke(DummySource([]))
        self.assertEqual(result.exit_code, cli.EXIT_NO_COMMITS)

    def test_cli_no_valid_commits(self) -> None:
        result = self.invoke(DummySource([raw("a", "wip"), raw("b", "feat: x [skip]")]))
        self.assertEqual(result.exit_code, cli.EXIT_NO_VALID_COMMITS)

    def test_cli_nothing_to_publish(self) -> None:
        source = DummySource([raw("aaaaaaa111", "release: bump deps")])
        with CliRunner().isolated_filesystem() as workdir:
            output_file = Path(workdir) / "github_output"
            result = self.invoke(source, ["--github-output", str(output_file)])
            self.assertEqual(result.exit_code, cli.EXIT_SUCCESS)
            self.assertFalse(output_file.exists())
        self.assertIn("Nothing to add", result.output)

    def test_cli_output_failure(self) -> None:
        source = DummySource([raw("aaaaaaa111", "feat: x")])
        with CliRunner().isolated_filesystem() as workdir:
            output_file = Path(workdir) / "missing" / "github_output"
            result = self.invoke(source, ["--github-output", str(output_file)])
        self.assertEqual(result.exit_code, cli.EXIT_OUTPUT_FAILURE)

    def test_cli_unexpected_error(self) -> None:
        with patch.object(cli, "build_changelog", side_effect=RuntimeError("kaput")):
            result = self.invoke(DummySource([]))
        self.assertEqual(result.exit_code, cli.EXIT_GENERIC_ERROR)


if __name__ == "__main__":
    unittest.main()
