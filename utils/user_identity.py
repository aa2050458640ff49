#!/usr/bin/env python3
from __future__ import annotations

import getpass
import os
from pathlib import PureWindowsPath

from configs.config import Config


def _username_from_profile() -> str:
	# C:\Users\<name>
	profile = os.getenv("USERPROFILE", "")
	parts = PureWindowsPath(profile).parts
	return parts[2] if len(parts) > 2 else ""


def get_username() -> str:
	"""Return the name used for the contributor's log file."""
	if Config.USER_OVERRIDE:
		return Config.USER_OVERRIDE
	try:
		name = getpass.getuser()
	except (KeyError, OSError):
		name = ""
	name = name or _username_from_profile()
	if not name:
		raise RuntimeError("Could not determine the current username; set CALOGEN_USER")
	return name
