#!/usr/bin/env python3
"""Named region lookup for changelog templates.

A region is delimited by ``{{NAME}}`` and ``{{/NAME}}``; the fragment is the
text strictly between the two markers.
"""

from __future__ import annotations

from dataclasses import dataclass


BREAKING_CHANGES_HEADER = "BREAKINGCHANGESHEADER"
BREAKING_CHANGES_LOG = "BREAKINGCHANGESLOG"
HEADER = "HEADER"
LOG_HEADER = "LOGHEADER"
LOG = "LOG"
FOOTER = "FOOTER"

REGION_NAMES = (BREAKING_CHANGES_HEADER, BREAKING_CHANGES_LOG, HEADER, LOG_HEADER, LOG, FOOTER)


class MissingRegionError(Exception):
	def __init__(self, region: str, marker: str) -> None:
		super().__init__(f"Missing template region '{region}': marker {marker} not found")
		self.code = "MISSING_REGION"
		self.region = region


def open_marker(name: str) -> str:
	return "{{" + name + "}}"


def close_marker(name: str) -> str:
	return "{{/" + name + "}}"


def extract_region(template: str, name: str) -> str:
	start_marker = open_marker(name)
	start_idx = template.find(start_marker)
	if start_idx == -1:
		raise MissingRegionError(name, start_marker)
	start = start_idx + len(start_marker)
	end_marker = close_marker(name)
	end = template.find(end_marker, start)
	if end == -1:
		raise MissingRegionError(name, end_marker)
	return template[start:end]


@dataclass(frozen=True)
class TemplateFragments:
	breaking_changes_header: str
	breaking_changes_log: str
	header: str
	log_header: str
	log: str
	footer: str


def extract_fragments(template: str) -> TemplateFragments:
	"""Extract all six regions, failing on the first one missing."""
	return TemplateFragments(
		breaking_changes_header=extract_region(template, BREAKING_CHANGES_HEADER),
		breaking_changes_log=extract_region(template, BREAKING_CHANGES_LOG),
		header=extract_region(template, HEADER),
		log_header=extract_region(template, LOG_HEADER),
		log=extract_region(template, LOG),
		footer=extract_region(template, FOOTER),
	)
