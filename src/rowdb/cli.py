"""
Command shell for RowDB.

Interactive mode (no arguments) reads one command per line; ``-x COMMAND``
runs the given command lines in order and exits. Commands map to handlers
through a lookup table; the registry never sees command tokens.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from . import __version__
from .config import SOFTWARE_NAME, load_settings
from .errors import RowDBError
from .logging_config import setup_logging
from .registry import TableRegistry

logger = logging.getLogger(__name__)

HELP_TEXT = f"""{SOFTWARE_NAME} - Personal Data Table Manager
Usage:
  {SOFTWARE_NAME} [options]
Commands:
  -c, --create <table> [columns...]  Create a new table
  -e, --edit <cellRef> <value>       Edit a cell (e.g., A5 or Name5)
  -v, --view                         View current table
  -s, --select <table>               Select a table
  -l, --load <file>                  Load a table from file
  -sv, --save <file>                 Save current table to file
  -a, --add-row <values...>          Append a row (one value per column)
  --add-column <name>                Add a column to the current table
  --remove-column <name>             Remove a column from the current table
  --list                             List all loaded tables
  help                               Show this help message
  version                            Show version information
  exit, quit                         Leave the shell
Long options also work without dashes (e.g. "view", "list").

Supported Formats:
  .odt - Open Data Table (unencrypted)"""


class UsageError(RowDBError):
	"""Raised when a command is missing required arguments."""
	pass


def _require(args: List[str], count: int, message: str):
	if len(args) < count:
		raise UsageError(message)


class Shell:
	""" Parses command lines and dispatches them against a TableRegistry """

	def __init__(self, registry: Optional[TableRegistry] = None, out: Optional[TextIO] = None):
		self.registry = registry if registry is not None else TableRegistry()
		self.out = out if out is not None else sys.stdout
		self._handlers: Dict[str, Callable[[List[str]], None]] = {}
		for tokens, handler in (
			(("help",), self._help),
			(("version",), self._version),
			(("-c", "--create", "create"), self._create),
			(("-e", "--edit", "edit"), self._edit),
			(("-v", "--view", "view"), self._view),
			(("-s", "--select", "select"), self._select),
			(("-l", "--load", "load"), self._load),
			(("-sv", "--save", "save"), self._save),
			(("-a", "--add-row", "add-row"), self._add_row),
			(("--add-column", "add-column"), self._add_column),
			(("--remove-column", "remove-column"), self._remove_column),
			(("--list", "list"), self._list),
		):
			for token in tokens:
				self._handlers[token] = handler

	def _print(self, text=""):
		print(text, file=self.out)

	@property
	def prompt(self) -> str:
		if self.registry.has_current():
			return f"{SOFTWARE_NAME}/{self.registry.current_name} >> "
		return f"{SOFTWARE_NAME} >> "

	def execute(self, line: str) -> bool:
		"""Run one command line. Returns False if the command failed."""
		args = line.split()
		if not args:
			return True
		command = args[0].lower()
		handler = self._handlers.get(command)
		if handler is None:
			self._print(f"Unknown command: {command}")
			self._print("Type 'help' for available commands.")
			return False
		logger.debug(f"Dispatching {command} {args[1:]}")
		try:
			handler(args[1:])
		except RowDBError as e:
			logger.debug(f"{command} failed: {e!r}")
			self._print(f"Error: {e}")
			return False
		return True

	def run(self, stdin: Optional[TextIO] = None) -> int:
		"""Interactive loop until exit/quit or end of input."""
		stdin = stdin if stdin is not None else sys.stdin
		self._print(f"{SOFTWARE_NAME} {__version__}")
		self._print("Type 'help' for commands or 'exit' to quit.")
		while True:
			self.out.write(self.prompt)
			self.out.flush()
			try:
				line = stdin.readline()
			except KeyboardInterrupt:
				self._print()
				break
			if not line:
				self._print()
				break
			if line.strip().lower() in ("exit", "quit"):
				break
			self.execute(line)
		return 0

	# ------------------------------------------------------------
	# Handlers
	# ------------------------------------------------------------

	def _help(self, args):
		self._print(HELP_TEXT)

	def _version(self, args):
		self._print(f"{SOFTWARE_NAME} version {__version__}")

	def _create(self, args):
		_require(args, 2, "Table name and at least one column required.")
		table = self.registry.create_table(args[0], args[1:])
		self._print(f"Table '{table.name}' created successfully.")

	def _edit(self, args):
		_require(args, 2, "Cell reference and value required.")
		ref = args[0]
		value = " ".join(args[1:])
		self.registry.edit_cell(ref, value)
		self._print(f"Cell {ref} updated to: {value}")

	def _view(self, args):
		self._print(self.registry.view())

	def _select(self, args):
		_require(args, 1, "Table name required.")
		table = self.registry.select_table(args[0])
		self._print(f"Selected table: {table.name}")

	def _load(self, args):
		_require(args, 1, "Filename required.")
		table = self.registry.load_table(args[0])
		self._print(f"Table '{table.name}' loaded successfully.")

	def _save(self, args):
		_require(args, 1, "Filename required.")
		self.registry.save_table(args[0])
		self._print(f"Table saved to '{args[0]}' successfully.")

	def _add_row(self, args):
		self.registry.add_row(args)
		self._print("Row added successfully.")

	def _add_column(self, args):
		_require(args, 1, "Column name required.")
		table = self.registry.add_column(args[0])
		self._print(f"Column '{args[0]}' added to '{table.name}'.")

	def _remove_column(self, args):
		_require(args, 1, "Column name required.")
		table = self.registry.remove_column(args[0])
		self._print(f"Column '{args[0]}' removed from '{table.name}'.")

	def _list(self, args):
		names = self.registry.list_tables()
		if not names:
			self._print("No tables loaded.")
			return
		self._print("Available tables:")
		for name in names:
			self._print(f"  {name}")


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(
		prog=SOFTWARE_NAME.lower(),
		description=f"{SOFTWARE_NAME} - Personal Data Table Manager. Run without arguments for interactive mode.",
	)
	p.add_argument("--version", action="version", version=f"{SOFTWARE_NAME} version {__version__}")
	p.add_argument("-x", "--execute", action="append", default=[], metavar="COMMAND",
				   help="Run a shell command line (repeatable), then exit")
	p.add_argument("--log-level", default=None, help="Logging level (default: $ROWDB_LOG_LEVEL or WARNING)")
	p.add_argument("--log-file", default=None, help="Also write log records to this file")
	p.add_argument("--extension", default=None, help="Suffix tried when a load path is missing (default: .odt)")
	p.add_argument("--encoding", default=None, help="Text encoding for table files (default: platform)")
	return p


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	settings = load_settings()

	level_name = args.log_level or settings.log_level
	level = logging.getLevelName(level_name.upper())
	if not isinstance(level, int):
		level = settings.log_level_value
	setup_logging(level=level, log_file=args.log_file or settings.log_file)

	registry = TableRegistry(
		extension=args.extension or settings.extension,
		encoding=args.encoding or settings.encoding,
	)
	shell = Shell(registry)

	if args.execute:
		ok = True
		for line in args.execute:
			ok = shell.execute(line) and ok
		return 0 if ok else 1
	return shell.run()


if __name__ == "__main__":
	raise SystemExit(main())
