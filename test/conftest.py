"""
Test configuration and fixtures
"""
import logging

import pytest

from app.logging_config import ROOT_LOGGER_NAME


LATEST_CHANGELOG = """# Changelog

## [4.87.0](https://github.com/algolia/instantsearch/compare/instantsearch.js@4.86.0...instantsearch.js@4.87.0) (2025-01-10)

### Features

* **widgets:** add `chat` widget with streaming answers
* **hits:** support `bannerComponent` in hits template

## [4.86.0] (2024-12-02)

### Bug Fixes

* **searchbox:** keep focus after reset
"""

BUMP_CHANGELOG = """# Change Log

## [7.15.1]

**Note:** Version bump only
"""


def write_changelog(repo_root, package_name, content):
    """Write packages/<package_name>/CHANGELOG.md under repo_root."""
    package_dir = repo_root / "packages" / package_name
    package_dir.mkdir(parents=True, exist_ok=True)
    path = package_dir / "CHANGELOG.md"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def changelog_writer():
    """Helper that writes a package changelog into a repo root."""
    return write_changelog


@pytest.fixture
def latest_changelog():
    """Changelog whose newest release has real changes."""
    return LATEST_CHANGELOG


@pytest.fixture
def monorepo(tmp_path):
    """Monorepo with one package that has real changes and one version bump."""
    write_changelog(tmp_path, "instantsearch.js", LATEST_CHANGELOG)
    write_changelog(tmp_path, "react-instantsearch", BUMP_CHANGELOG)
    return tmp_path


@pytest.fixture
def sample_changelog_text():
    """Changelog text from the end-to-end example."""
    return (
        "## [4.87.0]\n"
        "- Added widget X\n"
        "- Fixed bug Y in component Z\n"
        "## [4.86.0]\n"
        "- Older entry\n"
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by setup_logging between tests."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
