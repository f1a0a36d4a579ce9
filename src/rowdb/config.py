"""
Configuration
=============
Global constants for the flat-file format and the settings that can be
overridden from the environment.

Environment variables:
	ROWDB_LOG_LEVEL (str): Logging level name for the ``rowdb`` logger.
	ROWDB_LOG_FILE (str): Optional path that also receives log records.
	ROWDB_EXTENSION (str): Suffix tried when a load path does not exist.
	ROWDB_ENCODING (str): Text encoding for table files (platform default if unset).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


SOFTWARE_NAME = "RowDB"
DEFAULT_EXTENSION = ".odt"

# Flat-file layout
DELIMITER = ","
TABLE_PREFIX = "TABLE:"
COLUMNS_PREFIX = "COLUMNS:"
ROWS_PREFIX = "ROWS:"
DATA_MARKER = "DATA:"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
	log_level: str = DEFAULT_LOG_LEVEL
	log_file: Optional[str] = None
	extension: str = DEFAULT_EXTENSION
	encoding: Optional[str] = None

	@property
	def log_level_value(self) -> int:
		"""Numeric logging level; unknown names fall back to the default."""
		value = logging.getLevelName(self.log_level.upper())
		if isinstance(value, int):
			return value
		return logging.getLevelName(DEFAULT_LOG_LEVEL)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
	"""Build Settings from ``environ`` (``os.environ`` when omitted)."""
	env = os.environ if environ is None else environ
	return Settings(
		log_level=env.get("ROWDB_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
		log_file=env.get("ROWDB_LOG_FILE") or None,
		extension=env.get("ROWDB_EXTENSION") or DEFAULT_EXTENSION,
		encoding=env.get("ROWDB_ENCODING") or None,
	)
