"""
Changelog 파일 로딩

모노레포의 packages/<name>/CHANGELOG.md를 읽고 패키지별 최신 릴리스를 모읍니다.
"""
from pathlib import Path
from typing import Iterable, List, Optional, Union

from app.config import CHANGELOG_FILENAME, PACKAGES_DIRNAME, get_doc_packages, get_min_section_length
from app.logging_config import get_logger
from .release_extractor import extract_latest_release
from .schema import ReleaseSection

logger = get_logger("changelog_reader")

PathLike = Union[str, Path]


class ChangelogReadError(Exception):
    """changelog 파일을 읽을 수 없을 때 (릴리스 없음과는 다른 실패)"""

    def __init__(self, path: PathLike, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to read changelog {self.path}: {cause}")


def find_repo_root(start: Optional[PathLike] = None, marker_package: Optional[str] = None) -> Path:
    """
    start에서 상위로 올라가며 packages/<marker_package>가 있는 디렉터리를 찾음.
    찾지 못하면 start를 그대로 반환.
    """
    start_dir = Path(start).resolve() if start else Path.cwd()
    marker = marker_package or get_doc_packages()[0].name

    for directory in (start_dir, *start_dir.parents):
        if (directory / PACKAGES_DIRNAME / marker).exists():
            return directory
    return start_dir


def changelog_path(packages_dir: PathLike, package_name: str) -> Path:
    return Path(packages_dir) / package_name / CHANGELOG_FILENAME


def read_changelog(path: PathLike) -> str:
    """UTF-8로 changelog 읽기. 실패는 ChangelogReadError로 전파"""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ChangelogReadError(path, e) from e


def collect_latest_releases(
    packages_dir: PathLike,
    package_names: Iterable[str],
    min_length: Optional[int] = None
) -> List[ReleaseSection]:
    """
    패키지 순서대로 최신 릴리스를 수집

    - CHANGELOG가 없는 패키지: 건너뜀
    - 릴리스가 없거나 너무 짧은 패키지: 건너뜀
    - 읽기 실패: ChangelogReadError 전파
    """
    if min_length is None:
        min_length = get_min_section_length()
    releases: List[ReleaseSection] = []

    for package_name in package_names:
        path = changelog_path(packages_dir, package_name)

        if not path.exists():
            logger.debug(f"Skipping {package_name} (no {CHANGELOG_FILENAME})")
            continue

        release = extract_latest_release(read_changelog(path), package_name, min_length=min_length)

        if release is not None:
            releases.append(release)
            logger.debug(f"Found: {package_name}@{release.version}")
        else:
            logger.debug(f"Skipping {package_name} (no significant changes)")

    return releases
