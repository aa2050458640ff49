#!/usr/bin/env python3
"""Assemble the changelog document from version groups and a template.

The assembler is pure: it reads nothing from disk and holds no state, so the
same groups, template and settings always produce the same document.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Union

from pydantic import ValidationError

from utils.changelog_models import (
	InvalidEntryCollectionError,
	LogEntry,
	ONCOMING_VERSION,
	VersionGroup,
)
from utils.entry_formatter import render_breaking_change, render_header, render_log, render_static
from utils.settings_store import CalogenSettings
from utils.template_regions import TemplateFragments, extract_fragments

logger = logging.getLogger(__name__)

GroupLike = Union[VersionGroup, Mapping[str, Any]]


def group_by_version(entries: Iterable[LogEntry]) -> List[VersionGroup]:
	"""Group entries by version; entries without one go to the oncoming group.

	The oncoming group is always returned first, even when empty.

	Raises:
		InvalidEntryCollectionError: An entry uses the reserved oncoming label.
	"""
	oncoming: List[LogEntry] = []
	by_version: Dict[str, List[LogEntry]] = {}
	for entry in entries:
		if entry.version == ONCOMING_VERSION:
			raise InvalidEntryCollectionError(
				f"Entry {entry.title!r} uses the reserved version label {ONCOMING_VERSION!r}"
			)
		if entry.version is None:
			oncoming.append(entry)
		else:
			by_version.setdefault(entry.version, []).append(entry)
	groups = [VersionGroup(version=v, logs=logs) for v, logs in by_version.items()]
	return [VersionGroup(version=ONCOMING_VERSION, logs=oncoming)] + groups


def order_version_groups(groups: Sequence[VersionGroup]) -> List[VersionGroup]:
	"""Oncoming first, then labels by case-insensitive order, descending."""
	oncoming = [g for g in groups if g.version == ONCOMING_VERSION]
	released = [g for g in groups if g.version != ONCOMING_VERSION]
	return oncoming + sorted(released, key=lambda g: g.version.upper(), reverse=True)


def _coerce_group(group: GroupLike) -> VersionGroup:
	if isinstance(group, VersionGroup):
		logs = group.logs
		version = group.version
	else:
		logs = group.get("logs")
		version = group.get("version")
	if not isinstance(logs, (list, tuple)):
		raise InvalidEntryCollectionError(
			f"Entries for version {version!r} must be a list, got {type(logs).__name__}"
		)
	if isinstance(group, VersionGroup):
		return group
	# an unlabeled group renders like the oncoming one
	try:
		return VersionGroup.model_validate({"version": version or ONCOMING_VERSION, "logs": list(logs)})
	except ValidationError as e:
		raise InvalidEntryCollectionError(f"Invalid entries for version {version!r}: {e}")


def _render_group(group: VersionGroup, fragments: TemplateFragments, settings: CalogenSettings) -> List[str]:
	blocks: List[str] = [render_header(fragments.header, group.version, settings)]
	breaking = [log for log in group.logs if log.is_breaking_change]
	regular = [log for log in group.logs if not log.is_breaking_change]
	if breaking:
		blocks.append(render_static(fragments.breaking_changes_header, settings))
		blocks.extend(sorted(render_breaking_change(fragments.breaking_changes_log, log, settings) for log in breaking))
	blocks.append(render_static(fragments.log_header, settings))
	blocks.extend(sorted(render_log(fragments.log, log, settings) for log in regular))
	blocks.append(render_static(fragments.footer, settings))
	return blocks


def assemble(version_groups: Iterable[GroupLike], template: str, settings: CalogenSettings) -> str:
	"""Render every version group and concatenate the blocks.

	Args:
		version_groups: Groups in any order; ordered here (oncoming first).
		template: Template text containing all six named regions.
		settings: Type labels and default placeholder values.

	Returns:
		The full changelog document.

	Raises:
		MissingRegionError: A region marker is absent from the template.
		InvalidEntryCollectionError: A group's entries are not a list.
	"""
	fragments = extract_fragments(template)
	groups = order_version_groups([_coerce_group(g) for g in version_groups])
	blocks: List[str] = []
	for group in groups:
		blocks.extend(_render_group(group, fragments, settings))
	logger.debug(f"Assembled {len(groups)} version groups into {len(blocks)} blocks")
	return "".join(blocks)
