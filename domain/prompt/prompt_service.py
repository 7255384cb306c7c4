"""
문서 프롬프트 서비스
저장소의 changelog를 읽어 문서 업데이트 프롬프트를 만드는 서비스
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from app.config import (
    PACKAGES_DIRNAME, PRODUCT_NAME, SOURCE_REFERENCE, DocPackage, get_doc_packages, get_min_section_length
)
from app.logging_config import get_logger
from domain.changelog.changelog_reader import collect_latest_releases
from domain.changelog.schema import ReleaseSection
from .prompt_builder import build_docs_prompt

logger = get_logger("prompt_service")


@dataclass
class PromptResult:
    """프롬프트 생성 결과 (릴리스가 없으면 prompt는 None)"""
    releases: List[ReleaseSection] = field(default_factory=list)
    prompt: Optional[str] = None

    @property
    def has_changes(self) -> bool:
        return bool(self.releases)


class DocsPromptService:
    """문서 업데이트 프롬프트 생성 서비스"""

    def __init__(
        self,
        repo_root: Union[str, Path],
        packages: Optional[Sequence[DocPackage]] = None,
        min_length: Optional[int] = None,
        product_name: str = PRODUCT_NAME,
        source_reference: Optional[str] = SOURCE_REFERENCE
    ):
        self.repo_root = Path(repo_root)
        self.packages_dir = self.repo_root / PACKAGES_DIRNAME
        # 설정 값은 여기서 파싱 (잘못된 값이면 ConfigError)
        self.packages = list(packages) if packages is not None else get_doc_packages()
        self.min_length = min_length if min_length is not None else get_min_section_length()
        self.product_name = product_name
        self.source_reference = source_reference
        logger.debug(f"Repo root: {self.repo_root}")
        logger.debug(f"Packages dir: {self.packages_dir}")

    def collect_releases(self) -> List[ReleaseSection]:
        """설정된 패키지 순서대로 최신 릴리스 수집"""
        return collect_latest_releases(
            self.packages_dir,
            [p.name for p in self.packages],
            min_length=self.min_length
        )

    def generate(self) -> PromptResult:
        """
        최신 릴리스를 모아 프롬프트 생성

        Returns:
            PromptResult (문서화할 릴리스가 없으면 prompt=None)

        Raises:
            ChangelogReadError: changelog를 읽지 못한 경우
        """
        releases = self.collect_releases()
        if not releases:
            return PromptResult()

        prompt = build_docs_prompt(
            releases,
            packages=self.packages,
            product_name=self.product_name,
            source_reference=self.source_reference
        )
        logger.info("Prompt generated", extra={
            "packages": [r.package_name for r in releases],
            "prompt_length": len(prompt)
        })
        return PromptResult(releases=releases, prompt=prompt)
