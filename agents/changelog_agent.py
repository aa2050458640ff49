#!/usr/bin/env python3
"""Changelog agent: collects contributor log files into CHANGELOG.md.

Contributors add entries to their own JSON file in the logs folder; the agent
groups all entries by version and renders them through the template found in
the same folder.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from configs.config import Config
from utils.changelog_assembler import assemble, group_by_version
from utils.changelog_models import InvalidEntryCollectionError, LogEntry, ONCOMING_VERSION
from utils.file_persistence import read_text, write_text_atomic
from utils.log_store import append_entry, publish_version, read_all_entries
from utils.settings_store import (
	CalogenSettings,
	SettingsError,
	load_settings,
	write_default_settings,
	write_default_template,
)
from utils.template_regions import MissingRegionError
from utils.user_identity import get_username

load_dotenv()

# Set up logging
logger = logging.getLogger(__name__)


class ChangelogAgent:
	"""Agent for recording log entries and generating the changelog."""

	def __init__(self, settings: CalogenSettings, base_dir: Optional[str] = None):
		"""Initialize the changelog agent.

		Args:
			settings: Loaded settings (types, default values, logs folder).
			base_dir: Directory the logs folder path is relative to. Defaults to cwd.
		"""
		self.settings = settings
		self.logs_folder = Path(base_dir or os.getcwd()) / settings.logs_folder_path
		paths = Config.get_paths_config()
		self.template_path = self.logs_folder / paths["template_name"]
		self.output_path = self.logs_folder / paths["output_name"]
		logger.debug(f"Changelog agent initialized for {self.logs_folder}")

	def add_entry(self, entry: LogEntry, username: Optional[str] = None) -> Path:
		"""Append an entry to the contributor's log file and return its path."""
		if entry.type not in self.settings.types:
			logger.warning(f"Type code {entry.type!r} is not one of {sorted(self.settings.types)}")
		return append_entry(self.logs_folder, username or get_username(), entry)

	def render(self) -> str:
		"""Render the changelog from all log files without writing it.

		Raises:
			MissingRegionError: If the template lacks a region
			InvalidEntryCollectionError: If a log file is not an array of entries
		"""
		entries = read_all_entries(self.logs_folder)
		groups = group_by_version(entries)
		template = read_text(self.template_path)
		logger.info(f"Rendering {len(entries)} entries in {len(groups)} version groups")
		return assemble(groups, template, self.settings)

	def generate(self) -> Path:
		changelog = self.render()
		write_text_atomic(self.output_path, changelog)
		logger.info(f"Wrote {self.output_path}")
		return self.output_path

	def publish(self, version: str) -> Path:
		"""Assign ``version`` to all unreleased entries and regenerate."""
		if version == ONCOMING_VERSION:
			raise ValueError(f"{ONCOMING_VERSION!r} is reserved for unreleased entries")
		publish_version(self.logs_folder, version)
		return self.generate()


def _entry_from_args(args) -> LogEntry:
	return LogEntry(
		type=args.type,
		is_breaking_change=args.breaking,
		title=args.title,
		description=args.description or "",
		bug_no=args.bug_no or "",
		bug_link=args.bug_link or "",
	)


def main():
	"""CLI entry point for the changelog agent."""
	import argparse

	parser = argparse.ArgumentParser(
		prog="calogen",
		description="Changelog agent - collect contributor logs into CHANGELOG.md",
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  calogen init
  calogen add --type f --title "Export to CSV" --description "Adds CSV export" --bug-no 42
  calogen generate
  calogen publish -v 1.2.0
		"""
	)
	parser.add_argument("--settings", default=Config.SETTINGS_FILE, help="Path to calogen.json")
	parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
	sub = parser.add_subparsers(dest="command")

	sub.add_parser("init", help="Create calogen.json with default settings")

	add = sub.add_parser("add", aliases=["a"], help="Add a new log entry")
	add.add_argument("--type", required=True, help="Type code, one of the keys of settings.types")
	add.add_argument("--title", required=True)
	add.add_argument("--description", default="")
	add.add_argument("--bug-no", dest="bug_no", default="", help="PBI number")
	add.add_argument("--bug-link", dest="bug_link", default="", help="PBI link")
	add.add_argument("--breaking", action="store_true", help="Mark as a breaking change")
	add.add_argument("--user", required=False, help="Write to this user's log file instead of the current user's")

	sub.add_parser("generate", aliases=["g"], help="Generate the CHANGELOG.md")

	pub = sub.add_parser("publish", aliases=["p"], help="Publish a new version")
	pub.add_argument("-v", "--version", dest="version", nargs="+", required=True, help="Version label (words are joined with spaces)")

	args = parser.parse_args()

	# Set up logging
	log_level = logging.DEBUG if args.verbose else logging.INFO
	logging.basicConfig(
		level=log_level,
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
	)

	if args.command is None:
		parser.print_help()
		sys.exit(0)

	try:
		if args.command == "init":
			settings = write_default_settings(args.settings)
			if Config.WRITE_TEMPLATE_ON_INIT:
				folder = Path(args.settings).parent / settings.logs_folder_path
				write_default_template(folder, Config.TEMPLATE_NAME)
			print(f"{args.settings} file is created with default settings.")
			sys.exit(0)

		settings = load_settings(args.settings)
		agent = ChangelogAgent(settings, base_dir=str(Path(args.settings).parent))

		if args.command in ("add", "a"):
			path = agent.add_entry(_entry_from_args(args), username=args.user)
			print("Log file created.")
			print(path)
		elif args.command in ("generate", "g"):
			agent.generate()
			print("Generated CHANGELOG.md")
		elif args.command in ("publish", "p"):
			version = " ".join(args.version).strip()
			if not version:
				print("Error: Please provide version using -v argument.", file=sys.stderr)
				sys.exit(1)
			agent.publish(version)
			print(f"Published {version} and generated CHANGELOG.md")
		sys.exit(0)

	except SettingsError as e:
		print(f"Error: {e}", file=sys.stderr)
		sys.exit(1)
	except (MissingRegionError, InvalidEntryCollectionError, RuntimeError) as e:
		print(f"Error: {e}", file=sys.stderr)
		sys.exit(1)
	except FileNotFoundError as e:
		print(f"Error: File not found: {e.filename}", file=sys.stderr)
		sys.exit(1)
	except ValueError as e:
		# malformed log file JSON, reserved version label
		print(f"Error: {e}", file=sys.stderr)
		sys.exit(1)


if __name__ == "__main__":
	main()
