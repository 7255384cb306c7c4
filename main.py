"""
문서 자동화 CLI

패키지 changelog의 최신 릴리스로 AI 에이전트용 문서 업데이트 프롬프트를 생성합니다.
"""
import argparse
import sys
from typing import List, Optional

from app.config import DEFAULT_MIN_SECTION_LENGTH, parse_min_length
from app.logging_config import get_logger, log_error, setup_logging_from_env
from domain.changelog.changelog_reader import find_repo_root
from domain.prompt.output_writer import write_prompt_outputs
from domain.prompt.prompt_service import DocsPromptService

logger = get_logger("main")

EXAMPLES = """
Examples:
  # Generate prompt and print to stdout
  docs-automation generate-prompt

  # Generate prompt and save to file
  docs-automation generate-prompt --output ./prompt.txt
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-automation",
        description="Documentation Automation",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("generate-prompt", help="Generate a prompt for the AI coding agent")
    p.add_argument("--output", help="Output file path for the prompt (.txt file or directory)")
    p.add_argument("--verbose", action="store_true", help="Show detailed output")
    p.add_argument("--repo-root", help="Monorepo root (default: detected from the current directory)")
    p.add_argument("--min-length", type=parse_min_length,
                   help="Minimum release section length to document "
                        f"(default: $DOCS_MIN_SECTION_LENGTH or {DEFAULT_MIN_SECTION_LENGTH})")

    sub.add_parser("help", help="Show this help message")
    return parser


def generate_prompt(args: argparse.Namespace) -> int:
    """generate-prompt 명령 실행"""
    repo_root = find_repo_root(args.repo_root)
    service = DocsPromptService(repo_root, min_length=args.min_length)
    result = service.generate()

    if not result.has_changes:
        logger.info("No packages with documentation needs detected")
        return 0

    logger.info(f"Found {len(result.releases)} package(s) with changes:")
    for release in result.releases:
        logger.info(f"  - {release.package_name}@{release.version}")

    if args.output:
        prompt_path, json_path = write_prompt_outputs(result.prompt, result.releases, args.output)
        logger.info(f"Prompt written to: {prompt_path}")
        logger.info(f"Packages info written to: {json_path}")
    else:
        print(result.prompt)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """메인 실행 함수"""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv

    # generate-prompt 이외의 명령은 모두 도움말 출력
    if not argv or argv[0] != "generate-prompt":
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    setup_logging_from_env("DEBUG" if args.verbose else None)

    try:
        return generate_prompt(args)
    except Exception as e:
        log_error("Prompt generation failed", e, command=args.command)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
