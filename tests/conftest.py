import pytest


@pytest.fixture(autouse=True)
def isolate_ci_environment(monkeypatch):
    """Remove CI variables that would leak into CLI option defaults.

    Tests may run inside a GitHub Actions job, where ``GITHUB_OUTPUT`` and
    friends are set. Each test starts from a clean slate instead.
    """
    for name in (
        "GITHUB_OUTPUT",
        "GITHUB_TOKEN",
        "GH_TOKEN",
        "GITHUB_REPOSITORY",
        "GITHUB_GRAPHQL_URL",
        "RELEASE_NOTES_CONFIG",
        "RELEASE_NOTES_BRANCH",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
