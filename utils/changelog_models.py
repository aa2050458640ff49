#!/usr/bin/env python3
"""Pydantic models for change-log entries and version groups.

Entries are read from contributor log files (JSON arrays) and keep their
camelCase keys on disk; Python code uses the snake_case field names.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Reserved label for entries not yet assigned to a release
ONCOMING_VERSION = "oncoming"


class InvalidEntryCollectionError(Exception):
	def __init__(self, message: str, code: str = "INVALID_ENTRIES") -> None:
		super().__init__(message)
		self.code = code


class LogEntry(BaseModel):
	"""One change-log entry written by a contributor."""

	type: Optional[str] = Field(None, description="Short type code, key into settings.types")
	is_breaking_change: bool = Field(False, alias="isBreakingChange", description="Rendered in the breaking changes section")
	title: Optional[str] = Field(None, description="Entry title")
	description: Optional[str] = Field(None, description="Entry description")
	bug_no: Optional[str] = Field(None, alias="bugNo", description="Work item / bug number")
	bug_link: Optional[str] = Field(None, alias="bugLink", description="Work item / bug link")
	version: Optional[str] = Field(None, description="Release label, back-filled on publish")

	# extra keys survive a read/publish/write cycle
	model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

	@field_validator("is_breaking_change", mode="before")
	@classmethod
	def _falsy_is_not_breaking(cls, value):
		# hand-edited files may carry null or "" here
		if not value:
			return False
		return value

	def to_json_dict(self) -> dict:
		return self.model_dump(by_alias=True, exclude_none=True)


class VersionGroup(BaseModel):
	"""Entries sharing one version label."""

	version: str = Field(..., description="Version label or the oncoming sentinel")
	logs: List[LogEntry] = Field(default_factory=list, description="Entries in input order")

	model_config = ConfigDict(extra="ignore")

	@property
	def is_oncoming(self) -> bool:
		return self.version == ONCOMING_VERSION
