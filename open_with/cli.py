#!/usr/bin/env python3
"""
Command line interface for open-with.
"""

# Standard Library
import argparse
import io
import logging
import os
from pathlib import Path
import sys

# local repo modules
from .config import AppConfig, ConfigError, apply_user_config, load_user_config
from .desktop_entry import CandidateInfo
from .providers import AppProvider, XdgAppProvider, create_app_provider

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="List applications able to open a file and build their command lines."
	)
	parser.add_argument(
		"path",
		help="File to open.",
	)
	parser.add_argument(
		"-c",
		"--choose",
		dest="choose",
		type=int,
		help="Print the command line for candidate number N (1-based).",
	)
	parser.add_argument(
		"-d",
		"--details",
		dest="details",
		action="store_true",
		help="With --choose, print entry details before the command line.",
	)
	parser.add_argument(
		"-m",
		"--mime",
		dest="mime",
		action="store_true",
		help="Print the MIME type reported for the file.",
	)
	parser.add_argument(
		"--config",
		dest="config_path",
		help="Optional yaml or json config file.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> AppConfig:
	"""
	Build runtime config from args and file.
	"""
	config = AppConfig()
	if args.config_path:
		config.config_path = Path(args.config_path).expanduser()
		apply_user_config(config, load_user_config(config.config_path))
	if args.verbose:
		config.verbose = True
	if args.details:
		config.show_details = True
	return config


#============================================


def build_provider(config: AppConfig) -> AppProvider:
	"""
	Instantiate the provider for the running platform.
	"""
	return create_app_provider(
		environ=config.apply_environ(os.environ),
		locales=config.locales,
	)


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


def _configure_output() -> None:
	# undecodable file names reach stdout as surrogate escapes
	if isinstance(sys.stdout, io.TextIOWrapper):
		sys.stdout.reconfigure(errors="backslashreplace")


#============================================


def print_candidates(candidates: list[CandidateInfo], default_path: str) -> None:
	for index, candidate in enumerate(candidates, start=1):
		marker = _color(" [default]", "32") if candidate.source_path == default_path else ""
		terminal = " (terminal)" if candidate.run_in_terminal else ""
		print(f"{index:3d}. {candidate.name}{terminal}{marker}")


#============================================


def print_details(provider: AppProvider, candidate: CandidateInfo, path: str, command: str) -> None:
	"""
	Print the file, entry and command details for a candidate.
	"""
	rows = [
		("Pathname:", path),
		("MIME type:", provider.get_mime_type(path)),
		("Desktop file:", candidate.source_path),
		("Name =", candidate.name),
		("Terminal =", "true" if candidate.run_in_terminal else "false"),
		("MimeType =", candidate.declared_mimetypes),
		("Launch command:", command),
	]
	if isinstance(provider, XdgAppProvider):
		default_entry = provider.default_entry_file(path)
		rows.insert(2, ("Default entry:", str(default_entry) if default_entry else ""))
	width = max(len(label) for label, _ in rows)
	for label, value in rows:
		print(f"{label.rjust(width)} {value}")


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	_configure_output()
	try:
		config = build_config(args)
	except (ConfigError, OSError, ValueError) as exc:
		print(f"{_color('[ERROR]', '31')} Bad config: {exc}", file=sys.stderr)
		return 2
	if config.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)

	provider = build_provider(config)
	path = os.path.abspath(os.path.expanduser(args.path))
	if args.mime:
		print(provider.get_mime_type(path))

	default_path = ""
	if isinstance(provider, XdgAppProvider):
		ranked = provider.get_ranked_candidates(path)
		candidates = [item.info for item in ranked]
		default_path = next((item.info.source_path for item in ranked if item.is_default), "")
	else:
		candidates = provider.get_app_candidates(path)
	if not candidates:
		print(f"{_color('[ERROR]', '31')} No applications found for {path}", file=sys.stderr)
		return 1
	logging.info("Found %d candidate applications", len(candidates))

	if args.choose is None:
		print_candidates(candidates, default_path)
		return 0
	if not 1 <= args.choose <= len(candidates):
		print(
			f"{_color('[ERROR]', '31')} Choice must be between 1 and {len(candidates)}",
			file=sys.stderr,
		)
		return 2
	candidate = candidates[args.choose - 1]
	command = provider.construct_command_line(candidate, path)
	if config.show_details:
		print_details(provider, candidate, path, command)
	if not command:
		print(
			f"{_color('[ERROR]', '31')} {candidate.name} cannot be launched for this file",
			file=sys.stderr,
		)
		return 1
	if not config.show_details:
		print(command)
	return 0


#============================================


if __name__ == "__main__":
	sys.exit(main())
