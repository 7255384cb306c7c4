"""
프롬프트 모듈

최신 릴리스로부터 문서 업데이트 프롬프트를 만들고 저장합니다.
"""

from .prompt_builder import build_docs_prompt, unique_flavors

from .output_writer import (
    DEFAULT_PROMPT_FILENAME,
    resolve_prompt_path,
    packages_info_path,
    build_packages_info,
    write_prompt_outputs
)

from .prompt_service import DocsPromptService, PromptResult

__all__ = [
    'build_docs_prompt',
    'unique_flavors',
    'DEFAULT_PROMPT_FILENAME',
    'resolve_prompt_path',
    'packages_info_path',
    'build_packages_info',
    'write_prompt_outputs',
    'DocsPromptService',
    'PromptResult',
]
