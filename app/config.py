"""
애플리케이션 설정

.env 파일과 환경 변수에서 문서 자동화 설정을 읽어옵니다.
"""
import os
from typing import List, NamedTuple

from dotenv import load_dotenv

load_dotenv()


class ConfigError(ValueError):
    """잘못된 설정 값"""


class DocPackage(NamedTuple):
    """문서가 있는 패키지 (이름, 문서 flavor, 표시 이름)"""
    name: str
    flavor: str
    label: str


DEFAULT_DOC_PACKAGES = (
    "instantsearch.js:js:vanilla JS,"
    "react-instantsearch:react:React,"
    "vue-instantsearch:vue:Vue"
)


def parse_doc_packages(raw: str) -> List[DocPackage]:
    """'name:flavor:label' 항목을 콤마로 구분한 문자열을 파싱"""
    packages: List[DocPackage] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        # 패키지 이름에는 ':'가 없다고 가정 (label에는 허용)
        parts = entry.split(":", 2)
        if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
            raise ConfigError(f"Invalid DOCS_PACKAGES entry: {entry!r} (expected name:flavor[:label])")
        name, flavor = parts[0].strip(), parts[1].strip()
        label = parts[2].strip() if len(parts) == 3 and parts[2].strip() else name
        packages.append(DocPackage(name=name, flavor=flavor, label=label))

    if not packages:
        raise ConfigError("DOCS_PACKAGES must name at least one package")
    return packages


def parse_min_length(raw: str) -> int:
    """최소 섹션 길이 파싱 (0 이상의 정수)"""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid minimum section length: {raw!r}") from None
    if value < 0:
        raise ConfigError(f"Minimum section length must be >= 0, got {value}")
    return value


# ============================================================
# 문서 대상 패키지
# ============================================================
# 파싱은 get_doc_packages() 호출 시점에 수행 (잘못된 값은 CLI에서 에러로 보고)
PRODUCT_NAME = os.getenv("DOCS_PRODUCT_NAME", "InstantSearch")
SOURCE_REFERENCE = os.getenv("DOCS_SOURCE_REFERENCE", "../instantsearch")

# ============================================================
# Changelog
# ============================================================
PACKAGES_DIRNAME = "packages"
CHANGELOG_FILENAME = os.getenv("DOCS_CHANGELOG_FILENAME", "CHANGELOG.md")
# 이보다 짧은 섹션은 버전 bump만 있는 릴리스로 보고 건너뜀
DEFAULT_MIN_SECTION_LENGTH = 50

# ============================================================
# 로깅
# ============================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "text")


def get_doc_packages() -> List[DocPackage]:
    """DOCS_PACKAGES 환경 변수를 읽어 파싱 (잘못된 값이면 ConfigError)"""
    return parse_doc_packages(os.getenv("DOCS_PACKAGES", DEFAULT_DOC_PACKAGES))


def get_min_section_length() -> int:
    """DOCS_MIN_SECTION_LENGTH 환경 변수를 읽어 파싱 (잘못된 값이면 ConfigError)"""
    return parse_min_length(os.getenv("DOCS_MIN_SECTION_LENGTH", str(DEFAULT_MIN_SECTION_LENGTH)))
