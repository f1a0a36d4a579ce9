"""
Logging Configuration
Sets up the package logger for the shell.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
	"""
	Configures the logger for the 'rowdb' namespace.

	Records go to stderr so they never interleave with table output on stdout.

	Args:
		level: Logging level (e.g. logging.DEBUG, logging.INFO)
		log_file: Optional path to also save logs to a file.
	"""
	logger = logging.getLogger("rowdb")
	logger.setLevel(level)

	# Re-running setup (tests, repeated main() calls) must not duplicate output
	if logger.hasHandlers():
		for handler in list(logger.handlers):
			logger.removeHandler(handler)
			handler.close()

	formatter = logging.Formatter(
		'%(asctime)s - %(name)s - %(levelname)s - %(message)s',
		datefmt='%H:%M:%S'
	)

	console_handler = logging.StreamHandler(sys.stderr)
	console_handler.setLevel(level)
	console_handler.setFormatter(formatter)
	logger.addHandler(console_handler)

	if log_file:
		file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
		file_handler.setLevel(level)
		file_handler.setFormatter(formatter)
		logger.addHandler(file_handler)

	logger.debug("Logging initialized.")
	return logger
