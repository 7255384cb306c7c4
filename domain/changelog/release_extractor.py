"""
최신 릴리스 추출 모듈

changelog 텍스트에서 가장 최근 릴리스 섹션을 잘라냅니다.
섹션 내부 구조(불릿, 하위 헤더 등)는 해석하지 않고 그대로 전달합니다.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from app.config import get_min_section_length
from .schema import ReleaseSection


# ## [4.87.0], ## 4.87.0, ## [1.2.3-beta.1]
VERSION_HEADER_PATTERN = re.compile(
    r'^## \[?(\d+\.\d+\.\d+(?:-[a-zA-Z0-9.]+)?)\]?',
    re.MULTILINE
)


@dataclass(frozen=True)
class VersionHeading:
    """버전 헤더 위치"""
    version: str
    start: int


def find_version_headings(text: str) -> List[VersionHeading]:
    """등장 순서대로 모든 버전 헤더 반환"""
    return [
        VersionHeading(version=m.group(1), start=m.start())
        for m in VERSION_HEADER_PATTERN.finditer(text)
    ]


def extract_latest_release(
    text: str,
    package_name: str,
    min_length: Optional[int] = None
) -> Optional[ReleaseSection]:
    """
    첫 번째 버전 헤더부터 두 번째 버전 헤더(또는 텍스트 끝)까지를 최신 릴리스로 추출.

    Args:
        text: changelog 원문
        package_name: 섹션에 붙일 패키지 이름
        min_length: 이보다 짧은 섹션은 변경 없는 버전 bump로 보고 무시
            (None이면 DOCS_MIN_SECTION_LENGTH 설정값)

    Returns:
        ReleaseSection, 버전 헤더가 없거나 섹션이 너무 짧으면 None
    """
    headings = find_version_headings(text)
    if not headings:
        return None

    latest = headings[0]
    end = headings[1].start if len(headings) > 1 else len(text)
    section = text[latest.start:end].strip()

    if min_length is None:
        min_length = get_min_section_length()
    if len(section) < min_length:
        return None

    return ReleaseSection(package_name=package_name, version=latest.version, body=section)
