"""
Changelog 모듈

패키지 changelog에서 최신 릴리스 섹션을 추출합니다.
"""

from .schema import ReleaseSection, PackageInfo

from .release_extractor import (
    VERSION_HEADER_PATTERN,
    VersionHeading,
    find_version_headings,
    extract_latest_release
)

from .changelog_reader import (
    ChangelogReadError,
    find_repo_root,
    changelog_path,
    read_changelog,
    collect_latest_releases
)

__all__ = [
    'ReleaseSection',
    'PackageInfo',
    'VERSION_HEADER_PATTERN',
    'VersionHeading',
    'find_version_headings',
    'extract_latest_release',
    'ChangelogReadError',
    'find_repo_root',
    'changelog_path',
    'read_changelog',
    'collect_latest_releases',
]
