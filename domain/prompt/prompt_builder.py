"""
문서 업데이트 프롬프트 빌더

AI 코딩 에이전트에게 넘길 프롬프트를 생성합니다.
changelog는 원문 그대로 넣고 해석은 에이전트에게 맡깁니다.
"""

from typing import List, Optional, Sequence

from app.config import PRODUCT_NAME, SOURCE_REFERENCE, DocPackage, get_doc_packages
from domain.changelog.schema import ReleaseSection


def unique_flavors(
    releases: Sequence[ReleaseSection],
    packages: Optional[Sequence[DocPackage]] = None
) -> List[str]:
    """이번 릴리스에 포함된 flavor (릴리스 순서, 중복 제거)"""
    if packages is None:
        packages = get_doc_packages()
    flavor_by_name = {p.name: p.flavor for p in packages}
    flavors = [flavor_by_name.get(r.package_name) for r in releases]
    return list(dict.fromkeys(f for f in flavors if f))


def build_docs_prompt(
    releases: Sequence[ReleaseSection],
    packages: Optional[Sequence[DocPackage]] = None,
    product_name: str = PRODUCT_NAME,
    source_reference: Optional[str] = SOURCE_REFERENCE
) -> str:
    """
    문서 업데이트용 프롬프트 생성.
    - 패키지 목록 / flavor 개요 / 작업 순서
    - 패키지별 changelog 원문 (markdown 코드블록)
    - 고정 지침과 소스 코드 참조 경로
    """
    if packages is None:
        packages = get_doc_packages()
    package_list = "\n".join(f"- {r.package_name} v{r.version}" for r in releases)
    flavor_lines = "\n".join(
        f"- `{p.name}` ({p.label}) → `.{p.flavor}.mdx` files" for p in packages
    )
    release_flavors = ", ".join(f".{f}.mdx" for f in unique_flavors(releases, packages))

    # ------------------------------------------------------------
    # 1) 개요 + 작업 순서
    # ------------------------------------------------------------
    prompt = (
        f"You are updating documentation for {product_name} releases:\n"
        f"{package_list}\n\n"
        "## Overview\n\n"
        f"{product_name} has multiple flavors, each with its own documentation file suffix:\n"
        f"{flavor_lines}\n\n"
        f"**Flavors in this release:** {release_flavors}\n\n"
        "## Task\n\n"
        "1. **Explore first**: Use `Glob` to find documentation files - look for patterns like "
        f"`**/{product_name.lower()}/**`, `**/widgets/**`, or `**/api-reference/**`\n"
        "2. **Read existing docs**: Look at a few existing widget/hook docs to understand the format\n"
        "3. **Read the changelogs below**: Understand what changed in this release\n"
        "4. **Update documentation**: Create or update docs for new features, modified components, "
        "breaking changes\n\n"
        "## Changelog Entries\n\n"
        "Below are the raw changelog entries for each package. "
        "Read them to understand what needs documentation.\n\n"
    )

    # ------------------------------------------------------------
    # 2) 패키지별 changelog 원문
    # ------------------------------------------------------------
    for release in releases:
        prompt += (
            f"### {release.package_name} v{release.version}\n\n"
            "```markdown\n"
            f"{release.body}\n"
            "```\n\n"
        )

    # ------------------------------------------------------------
    # 3) 고정 지침
    # ------------------------------------------------------------
    prompt += (
        "## Instructions\n\n"
        "- For new widgets/hooks, create new `.{flavor}.mdx` files following existing patterns\n"
        "- For modified components, update existing docs with new props/options\n"
        "- For breaking changes, update migration guides if applicable\n"
        "- Match the existing documentation format and style exactly\n"
        "- Only modify documentation files\n"
        "- Don't add placeholder content - only document what actually exists\n"
    )

    if source_reference:
        example_package = packages[0].name if packages else "<package>"
        prompt += (
            "\n## Source Code Reference\n\n"
            f"The {product_name} source code is available at `{source_reference}` for reference.\n"
            "You can read files to understand the API, types, and implementation details.\n"
            f"For example: `{source_reference}/packages/{example_package}/src/widgets/`\n"
        )

    return prompt
