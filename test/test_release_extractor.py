"""
Tests for release_extractor module
"""
from domain.changelog.release_extractor import (
    VersionHeading,
    extract_latest_release,
    find_version_headings
)
from domain.changelog.schema import ReleaseSection


LONG_BODY = "- Added the `refinementList` sorting option for faceted search\n"


class TestFindVersionHeadings:
    """Test version heading detection."""

    def test_headings_in_order(self, sample_changelog_text):
        """Test all headings are returned in order with their offsets."""
        headings = find_version_headings(sample_changelog_text)

        assert [h.version for h in headings] == ["4.87.0", "4.86.0"]
        assert headings[0] == VersionHeading(version="4.87.0", start=0)
        assert sample_changelog_text[headings[1].start:].startswith("## [4.86.0]")

    def test_ignores_non_version_headings(self):
        """Test unreleased and sub headings are not version headings."""
        text = "# Changelog\n\n## [Unreleased]\n\n### Features\n\n## Notes 1.2\n"

        assert find_version_headings(text) == []

    def test_heading_must_start_line(self):
        """Test a version inside a line is not a heading."""
        text = "See ## [1.2.3] for details\n"

        assert find_version_headings(text) == []


class TestExtractLatestRelease:
    """Test latest release extraction."""

    def test_no_heading_returns_none(self):
        """Test text without any version heading yields no release."""
        text = "# Changelog\n\nNothing has been released yet, stay tuned for updates.\n"

        assert extract_latest_release(text, "instantsearch.js") is None

    def test_empty_text_returns_none(self):
        """Test empty input yields no release."""
        assert extract_latest_release("", "instantsearch.js") is None

    def test_single_heading_spans_to_end(self):
        """Test a single heading section runs to the end of text."""
        text = "# Changelog\n\n## [1.0.0]\n" + LONG_BODY + "\n\n"

        release = extract_latest_release(text, "vue-instantsearch")

        assert release is not None
        assert release.version == "1.0.0"
        assert release.body == "## [1.0.0]\n" + LONG_BODY.strip()

    def test_section_stops_before_next_heading(self, sample_changelog_text):
        """Test the end-to-end example keeps only the newest section."""
        release = extract_latest_release(sample_changelog_text, "instantsearch.js")

        assert release == ReleaseSection(
            package_name="instantsearch.js",
            version="4.87.0",
            body="## [4.87.0]\n- Added widget X\n- Fixed bug Y in component Z"
        )
        assert "4.86.0" not in release.body
        assert "Older entry" not in release.body

    def test_section_excludes_everything_after_second_heading(self):
        """Test three sections only return the first one."""
        text = (
            "## 3.0.0\n" + LONG_BODY +
            "## 2.0.0\n" + LONG_BODY +
            "## 1.0.0\n" + LONG_BODY
        )

        release = extract_latest_release(text, "react-instantsearch")

        assert release.version == "3.0.0"
        assert "## 2.0.0" not in release.body
        assert "## 1.0.0" not in release.body

    def test_bracketed_and_plain_headings_match(self):
        """Test `## [1.2.3]` and `## 1.2.3` give the same version."""
        bracketed = extract_latest_release("## [1.2.3]\n" + LONG_BODY, "pkg")
        plain = extract_latest_release("## 1.2.3\n" + LONG_BODY, "pkg")

        assert bracketed.version == "1.2.3"
        assert plain.version == "1.2.3"

    def test_prerelease_suffix_preserved(self):
        """Test pre-release tags stay in the version."""
        release = extract_latest_release("## [1.2.3-beta.1]\n" + LONG_BODY, "pkg")

        assert release.version == "1.2.3-beta.1"

    def test_heading_with_link_and_date(self):
        """Test conventional-changelog headings with a compare link and date."""
        text = (
            "## [4.87.0](https://github.com/org/repo/compare/v4.86.0...v4.87.0) (2025-01-10)\n"
            + LONG_BODY
        )

        release = extract_latest_release(text, "instantsearch.js")

        assert release.version == "4.87.0"
        assert release.body.startswith("## [4.87.0](https://github.com")

    def test_trivial_section_returns_none(self):
        """Test a bare version bump is skipped even though a heading exists."""
        assert extract_latest_release("## [4.87.1]\n- bump\n", "instantsearch.js") is None

    def test_trivial_latest_section_is_not_replaced_by_older(self):
        """Test an older, longer release is not picked when the newest is trivial."""
        text = "## [2.0.1]\n- bump\n## [2.0.0]\n" + LONG_BODY

        assert extract_latest_release(text, "pkg") is None

    def test_min_length_is_configurable(self):
        """Test the triviality threshold can be lowered or raised."""
        text = "## [4.87.1]\n- bump\n"

        release = extract_latest_release(text, "pkg", min_length=0)
        assert release.body == "## [4.87.1]\n- bump"

        long_text = "## [1.0.0]\n" + LONG_BODY
        assert extract_latest_release(long_text, "pkg", min_length=10_000) is None

    def test_threshold_boundary(self):
        """Test a section exactly at the threshold is kept."""
        text = "## [1.0.0]\n- abc"

        assert extract_latest_release(text, "pkg", min_length=len(text)) is not None
        assert extract_latest_release(text, "pkg", min_length=len(text) + 1) is None

    def test_body_keeps_inner_structure(self):
        """Test sub headings and bullets are passed through verbatim."""
        body = (
            "## [5.0.0]\n\n"
            "### ⚠ BREAKING CHANGES\n\n"
            "* **connectors:** remove deprecated `connectRange` options\n\n"
            "### Features\n\n"
            "* add `useChat` hook"
        )

        release = extract_latest_release(body + "\n\n## [4.0.0]\n- old\n", "react-instantsearch")

        assert release.body == body
