#!/usr/bin/env python3
from __future__ import annotations

from typing import Mapping, Optional


def token(key: str) -> str:
	return "{{" + key + "}}"


def apply_values(
	fragment: str,
	values: Optional[Mapping[str, Optional[str]]],
	default_values: Mapping[str, str],
) -> str:
	"""Replace ``{{key}}`` tokens with explicit values, then with defaults.

	Explicit values are applied first; keys whose value is None are skipped so
	the token stays available for the default pass. The default pass then runs
	over every key of ``default_values``. Replacements are literal and global;
	values are not re-scanned for tokens of their own key.
	"""
	out = fragment
	for key, value in (values or {}).items():
		if value is None:
			continue
		out = out.replace(token(key), value)
	for key, value in default_values.items():
		out = out.replace(token(key), value)
	return out
