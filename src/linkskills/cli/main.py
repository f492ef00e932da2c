"""CLI entrypoint for linking skills into an agent's skills directory."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import NoReturn

from linkskills import __version__
from linkskills.config import load_config
from linkskills.constants.agents import AGENT_DISPLAY_NAMES, AGENT_IDS
from linkskills.constants.branding import CLI_DESCRIPTION, CLI_EPILOG_TEMPLATE, PROG_NAME
from linkskills.exceptions import ConfigError, SourceNotFoundError, TargetDirectoryError, UsageError
from linkskills.linker import link_skills, resolve_agent
from linkskills.model import Agent, LinkOutcome
from linkskills.reporting import StdoutReporter, should_use_color


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports problems as ``UsageError`` instead of exiting 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


class _ConsoleProgress:
    """Prints run events through a reporter as they happen."""

    def __init__(self, reporter: StdoutReporter) -> None:
        self._reporter = reporter

    def on_skills_dir_created(self, agent: Agent) -> None:
        print(self._reporter.render_skills_dir_created(agent))

    def on_scan_started(self, source: Path) -> None:
        print(self._reporter.render_scan_started(source))

    def on_outcome(self, outcome: LinkOutcome) -> None:
        print(self._reporter.render_outcome(outcome))


def _agents_epilog() -> str:
    width = max(len(agent_id) for agent_id in AGENT_IDS) + 4
    return "\n".join(f"  {agent_id:<{width}}{AGENT_DISPLAY_NAMES[agent_id]}" for agent_id in AGENT_IDS)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = _UsageParser(
        prog=PROG_NAME,
        description=CLI_DESCRIPTION,
        epilog=CLI_EPILOG_TEMPLATE.format(agents=_agents_epilog(), prog=PROG_NAME),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("agent", nargs="?", metavar="agent_name", help="Agent to link skills into")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        metavar="path_to_skills_repo",
        help="Skills repository path (default: current directory)",
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, default=None, help="YAML file relocating agent skills dirs")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics on stderr")
    return parser


def _usage_failure(parser: argparse.ArgumentParser, message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    print("", file=sys.stderr)
    parser.print_help(sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    raw_args = sys.argv[1:] if argv is None else argv

    try:
        args = parser.parse_args(raw_args)
    except UsageError as exc:
        return _usage_failure(parser, str(exc))

    if args.help or args.agent is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        agent = resolve_agent(args.agent)
    except UsageError as exc:
        return _usage_failure(parser, str(exc))

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if agent.id in config.skills_dirs:
        agent = replace(agent, skills_dir=config.skills_dirs[agent.id])

    color = should_use_color(sys.stdout, requested=False if args.no_color else config.color)
    reporter = StdoutReporter(color=color)
    source: Path = args.path if args.path is not None else Path.cwd()

    print(reporter.render_banner(agent))
    try:
        result = link_skills(agent, source, progress=_ConsoleProgress(reporter))
    except SourceNotFoundError as exc:
        hint = f"{PROG_NAME} {agent.id} /path/to/Skills"
        print(reporter.render_source_missing(str(exc), hint_command=hint), file=sys.stderr)
        return 1
    except TargetDirectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(reporter.render_summary(result))
    return 0
