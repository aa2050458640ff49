import os
from typing import Dict, Any

class Config:
	"""Configuration for the changelog agent."""

	# Settings file (types, default placeholder values, logs folder)
	SETTINGS_FILE = os.getenv("CALOGEN_SETTINGS_FILE", "./calogen.json")

	# Files inside the logs folder
	TEMPLATE_NAME = os.getenv("CALOGEN_TEMPLATE_NAME", "template.md")
	OUTPUT_NAME = os.getenv("CALOGEN_OUTPUT_NAME", "../CHANGELOG.md")
	LOG_FILE_SUFFIX = ".json"

	# Writing behavior
	JSON_INDENT = int(os.getenv("CALOGEN_JSON_INDENT", "4"))
	ATOMIC_WRITES = bool(int(os.getenv("CALOGEN_ATOMIC_WRITES", "1")))
	WRITE_TEMPLATE_ON_INIT = bool(int(os.getenv("CALOGEN_WRITE_TEMPLATE_ON_INIT", "1")))

	# Overrides the OS login name used to pick the contributor's log file
	USER_OVERRIDE = os.getenv("CALOGEN_USER", "")

	@classmethod
	def get_paths_config(cls) -> Dict[str, Any]:
		"""Get settings/template/output file names."""
		return {
			"settings_file": cls.SETTINGS_FILE,
			"template_name": cls.TEMPLATE_NAME,
			"output_name": cls.OUTPUT_NAME,
		}
