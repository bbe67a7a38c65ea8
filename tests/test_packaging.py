import re
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_readme_is_the_package_description():
    pyproject = (PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8")
    match = re.search(r'^readme\s*=\s*"([^"]+)"', pyproject, re.MULTILINE)
    assert match is not None
    assert match.group(1) == "README.md"
    readme = (PROJECT_ROOT / match.group(1)).read_text(encoding="utf-8")
    assert readme.startswith("# vc-release-notes")
    assert "release-notes --repository" in readme
