#!/usr/bin/env python3
"""Settings file (calogen.json) model, defaults and loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from utils.file_persistence import read_text, write_json, write_text_atomic

logger = logging.getLogger(__name__)

DEFAULT_LOGS_FOLDER = "./docs/changelogs"

DEFAULT_TEMPLATE = """Only text inside the named regions below is rendered.
Placeholders with no value and no defaultValues entry are kept as written,
e.g. the type placeholder of an entry whose type code is not in settings.types.

{{HEADER}}## {{version}}
{{/HEADER}}
{{BREAKINGCHANGESHEADER}}
### Breaking changes

{{/BREAKINGCHANGESHEADER}}
{{BREAKINGCHANGESLOG}}- **{{title}}** {{description}}
{{/BREAKINGCHANGESLOG}}
{{LOGHEADER}}
### Changes

{{/LOGHEADER}}
{{LOG}}- [{{type}}] **{{title}}** {{description}} ([{{bugNo}}]({{bugLink}}))
{{/LOG}}
{{FOOTER}}
{{/FOOTER}}
"""


class SettingsError(Exception):
	def __init__(self, message: str, code: str = "INVALID") -> None:
		super().__init__(message)
		self.code = code


class CalogenSettings(BaseModel):
	"""Settings read from calogen.json and passed to every rendering call."""

	logs_folder_path: str = Field(DEFAULT_LOGS_FOLDER, alias="logsFolderPath", description="Folder holding contributor log files and the template")
	types: Dict[str, str] = Field(
		default_factory=lambda: {"b": "bug-fix", "f": "feature"},
		description="Type code to human-readable label",
	)
	default_values: Dict[str, str] = Field(
		default_factory=lambda: {"version": "Next Release"},
		alias="defaultValues",
		description="Fallback values applied to every template fragment",
	)

	model_config = ConfigDict(extra="ignore", populate_by_name=True)

	def to_json_dict(self) -> dict:
		return self.model_dump(by_alias=True)


def write_default_settings(path: Union[str, Path]) -> CalogenSettings:
	settings = CalogenSettings()
	write_json(path, settings.to_json_dict())
	logger.info(f"Wrote default settings to {path}")
	return settings


def write_default_template(folder: Union[str, Path], name: str) -> bool:
	"""Write a starter template into ``folder`` unless one already exists."""
	path = Path(folder) / name
	if path.exists():
		logger.debug(f"Template already present at {path}")
		return False
	write_text_atomic(path, DEFAULT_TEMPLATE)
	logger.info(f"Wrote starter template to {path}")
	return True


def load_settings(path: Union[str, Path]) -> CalogenSettings:
	try:
		raw = read_text(path)
	except FileNotFoundError:
		raise SettingsError(f'{path} not found. Please call "calogen init" to create it.', code="MISSING")
	try:
		data = json.loads(raw)
		return CalogenSettings.model_validate(data)
	except json.JSONDecodeError as e:
		raise SettingsError(f"{path} is not valid JSON: {e}")
	except ValidationError as e:
		raise SettingsError(f"{path} has invalid settings: {e}")
