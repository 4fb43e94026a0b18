"""Main entry point: resolve prompts the way an evaluation run would."""

import argparse
import asyncio
import importlib.metadata
import json
import os
from typing import Any, Dict, List, Optional

import yaml

from config import Config
from prompts import NoPromptsError, read_prompts, read_provider_prompt_map
from utils import get_log_file_path, setup_logger, terminal_ui
from utils.runtime import ensure_runtime_dirs


def load_eval_config(path: str) -> Dict[str, Any]:
    """Load an evaluation config file with ``prompts``/``providers`` keys.

    Raises:
        ValueError: If the file does not contain a mapping
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _providers_from_args(provider_ids: List[str]) -> Any:
    if len(provider_ids) == 1:
        return provider_ids[0]
    return [{"id": provider_id} for provider_id in provider_ids]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve prompt strings, files and globs into the prompts an eval would run"
    )

    try:
        version = importlib.metadata.version("evalprompts")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"evalprompts {version}")

    parser.add_argument(
        "prompts",
        nargs="*",
        help="Prompt text, file paths or glob patterns (e.g. 'prompts/*.txt', 'fn.py:build')",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="YAML eval config to read `prompts` and `providers` from",
    )
    parser.add_argument(
        "--base-path",
        "-b",
        type=str,
        default=None,
        help="Directory relative prompt paths are resolved against "
        "(default: the config file's directory, or the current directory)",
    )
    parser.add_argument(
        "--provider",
        "-p",
        action="append",
        default=[],
        help="Provider id to map prompts to (repeatable, overrides config providers)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print prompts and the provider-prompt map as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging to ~/.evalprompts/logs/",
    )
    return parser


async def run(args: argparse.Namespace) -> int:
    """Resolve prompts for parsed CLI arguments and print them."""
    eval_config: Dict[str, Any] = load_eval_config(args.config) if args.config else {}

    prompt_input = args.prompts or eval_config.get("prompts")
    if not prompt_input:
        raise ValueError(
            "No prompts given. Pass prompt text or paths, or --config with a `prompts` key."
        )

    base_path: Optional[str] = args.base_path
    if base_path is None:
        base_path = os.path.dirname(os.path.abspath(args.config)) if args.config else ""

    if args.provider:
        eval_config["providers"] = _providers_from_args(args.provider)

    prompts = await read_prompts(prompt_input, base_path)
    provider_map = read_provider_prompt_map(eval_config, prompts)

    if args.json:
        payload = {
            "prompts": [prompt.to_dict() for prompt in prompts],
            "providerPromptMap": provider_map,
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    terminal_ui.print_prompts(prompts)
    if provider_map:
        terminal_ui.print_provider_map(provider_map)
    else:
        terminal_ui.print_info("No providers configured, every provider receives all prompts")
    terminal_ui.print_success(f"Resolved {len(prompts)} prompt{'s' if len(prompts) != 1 else ''}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Initialize runtime directories (create logs dir only in verbose mode)
    ensure_runtime_dirs(create_logs=args.verbose)

    if args.verbose:
        setup_logger(log_to_console=True)

    try:
        Config.validate()
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Configuration Error")
        return 1

    try:
        return asyncio.run(run(args))
    except NoPromptsError as e:
        terminal_ui.print_error(str(e), title="No Prompts Found")
        return 1
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        terminal_ui.print_error(str(e), title="Prompt Error")
        return 1
    finally:
        log_file = get_log_file_path()
        if args.verbose and log_file:
            terminal_ui.print_log_location(log_file)


if __name__ == "__main__":
    raise SystemExit(main())
