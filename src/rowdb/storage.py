"""
Table file storage.

Reads and writes the .odt flat-file format. Loading falls back to the default
extension when the literal path does not exist; saving goes through a temporary
file in the destination directory so a failed write never leaves a partial file.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional, Tuple

from .config import DEFAULT_EXTENSION
from .errors import FileNotFound, TableIOError
from .table import Table

logger = logging.getLogger(__name__)


def resolve_load_path(path: str, extension: str = DEFAULT_EXTENSION) -> str:
	"""Return ``path`` if it is a file, else ``path + extension`` if that is one."""
	if os.path.isfile(path):
		return path
	fallback = path + extension
	if os.path.isfile(fallback):
		logger.debug(f"'{path}' not found, using '{fallback}'")
		return fallback
	raise FileNotFound(
		f"Cannot open file: {path} (also tried: {fallback})",
		paths=(path, fallback),
	)


def read_table(path: str, extension: str = DEFAULT_EXTENSION,
			   encoding: Optional[str] = None) -> Tuple[Table, str]:
	"""Load a table, returning it together with the path actually read."""
	actual = resolve_load_path(path, extension)
	try:
		with open(actual, "r", encoding=encoding, newline="") as f:
			text = f.read()
	except (OSError, UnicodeDecodeError, LookupError) as e:
		raise TableIOError(f"Cannot read file: {actual} ({e})") from e
	return Table.deserialize(text), actual


def write_table(table: Table, path: str, encoding: Optional[str] = None) -> None:
	"""Serialize ``table`` to ``path``, replacing any existing file."""
	text = table.serialize()
	directory = os.path.dirname(os.path.abspath(path))
	tmp_path = None
	try:
		fd, tmp_path = tempfile.mkstemp(prefix=".rowdb-", suffix=".tmp", dir=directory)
		with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
			f.write(text)
		# mkstemp creates 0600 files; keep the old file's mode or use a regular default
		mode = os.stat(path).st_mode & 0o777 if os.path.exists(path) else 0o644
		os.chmod(tmp_path, mode)
		os.replace(tmp_path, path)
		tmp_path = None
	except (OSError, UnicodeEncodeError, LookupError) as e:
		raise TableIOError(f"Cannot open file for writing: {path} ({e})") from e
	finally:
		if tmp_path is not None and os.path.exists(tmp_path):
			os.remove(tmp_path)
	logger.debug(f"Wrote {len(text)} characters to '{path}'")
