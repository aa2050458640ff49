#!/usr/bin/env python3
from __future__ import annotations

import logging
from typing import Dict, Optional

from utils.changelog_models import LogEntry, ONCOMING_VERSION
from utils.placeholders import apply_values
from utils.settings_store import CalogenSettings

logger = logging.getLogger(__name__)


def type_label(entry: LogEntry, settings: CalogenSettings) -> Optional[str]:
	# unknown codes render as an unfilled placeholder, not an error
	label = settings.types.get(entry.type) if entry.type is not None else None
	if label is None:
		logger.debug(f"Unknown type code {entry.type!r} for entry {entry.title!r}")
	return label


def render_log(fragment: str, entry: LogEntry, settings: CalogenSettings) -> str:
	values: Dict[str, Optional[str]] = {
		"type": type_label(entry, settings),
		"title": entry.title,
		"description": entry.description,
		"bugNo": entry.bug_no,
		"bugLink": entry.bug_link,
	}
	return apply_values(fragment, values, settings.default_values)


def render_breaking_change(fragment: str, entry: LogEntry, settings: CalogenSettings) -> str:
	values: Dict[str, Optional[str]] = {
		"title": entry.title,
		"description": entry.description,
	}
	return apply_values(fragment, values, settings.default_values)


def render_header(fragment: str, version: Optional[str], settings: CalogenSettings) -> str:
	"""Render a version header.

	The ``version`` placeholder is only supplied for real release labels; the
	oncoming group relies on ``defaultValues`` (e.g. "Next Release").
	"""
	values = None
	if version and version != ONCOMING_VERSION:
		values = {"version": version}
	return apply_values(fragment, values, settings.default_values)


def render_static(fragment: str, settings: CalogenSettings) -> str:
	return apply_values(fragment, None, settings.default_values)
