"""
프롬프트 출력 모듈

프롬프트 텍스트와 워크플로우용 packages-info JSON을 파일로 저장합니다.
"""

import json
from pathlib import Path
from typing import List, Sequence, Tuple, Union

from domain.changelog.schema import PackageInfo, ReleaseSection

DEFAULT_PROMPT_FILENAME = "prompt.txt"


def resolve_prompt_path(output: Union[str, Path]) -> Path:
    """.txt로 끝나면 파일 경로, 아니면 디렉터리로 보고 prompt.txt를 붙임"""
    output = str(output)
    if output.endswith(".txt"):
        return Path(output)
    return Path(output) / DEFAULT_PROMPT_FILENAME


def packages_info_path(prompt_path: Path) -> Path:
    """prompt.txt -> prompt-packages.json"""
    return prompt_path.with_name(f"{prompt_path.stem}-packages.json")


def build_packages_info(releases: Sequence[ReleaseSection]) -> List[PackageInfo]:
    return [r.to_package_info() for r in releases]


def write_prompt_outputs(
    prompt: str,
    releases: Sequence[ReleaseSection],
    output: Union[str, Path]
) -> Tuple[Path, Path]:
    """
    프롬프트와 packages-info JSON 저장

    Returns:
        (프롬프트 경로, JSON 경로)
    """
    prompt_path = resolve_prompt_path(output)
    prompt_path.parent.mkdir(parents=True, exist_ok=True)
    prompt_path.write_text(prompt, encoding="utf-8")

    json_path = packages_info_path(prompt_path)
    packages_info = [info.model_dump() for info in build_packages_info(releases)]
    json_path.write_text(json.dumps(packages_info, indent=2), encoding="utf-8")

    return prompt_path, json_path
