"""cancel-currents-run command-line entry point.

Builds the input mapping from the environment plus any command-line
overrides, configures logging and runs the cancellation flow.

Public API re-exports:
- ``main``: CLI entrypoint callable
- ``build_environ``: environment overlay used by ``main`` and tests
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional

from ...base.logging import get_logger
from ...base.reporting import LoggingReporter
from ...config import input_env_name, is_debug
from ..runner import run
from .cli_parser import build_parser, input_overrides


def build_environ(base: Mapping[str, str], overrides: Mapping[str, str]) -> dict[str, str]:
	"""Return a copy of ``base`` with ``overrides`` applied as ``INPUT_*`` variables."""
	environ = dict(base)
	for name, value in overrides.items():
		environ[input_env_name(name)] = value
	return environ


def main(argv: Optional[list[str]] = None) -> int:
	"""CLI entrypoint.

	Parameters
	----------
	argv: Optional[list[str]]
		Argument vector; when ``None`` uses ``sys.argv[1:]``.

	Returns
	-------
	int
		0 when the run was canceled, 1 otherwise.
	"""
	args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
	environ = build_environ(os.environ, input_overrides(args))
	debug_enabled = args.debug or is_debug(environ)

	logger = get_logger(
		"currents.cancel",
		log_format=args.log_format,
		level=logging.DEBUG if debug_enabled else logging.INFO,
	)
	reporter = LoggingReporter(logger, debug_enabled=debug_enabled)
	run(environ, reporter)
	return reporter.exit_code


if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
