"""CLI parser construction for cancel-currents-run.

This module wires argument shapes only; ``main`` in the package turns the
parsed namespace into an input mapping and runs the flow.
"""

from __future__ import annotations

import argparse

from ...config.defaults import LOG_FORMATS, REQUIRED_INPUTS


def _dest(input_name: str) -> str:
    return input_name.replace("-", "_")


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI parser.

    Each required input has an optional flag of the same name; a flag given on
    the command line overrides the ``INPUT_*`` environment variable.
    """
    p = argparse.ArgumentParser(
        prog="cancel-currents-run",
        description="Cancel a Currents run created by a GitHub Actions workflow run",
    )
    for name in REQUIRED_INPUTS:
        p.add_argument(f"--{name}", dest=_dest(name), default=None)
    p.add_argument(
        "--debug",
        action="store_true",
        help="Emit debug output (defaults to RUNNER_DEBUG=1)",
    )
    p.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Output format (defaults to CURRENTS_LOG_FORMAT, else 'workflow')",
    )
    return p


def input_overrides(args: argparse.Namespace) -> dict[str, str]:
    """Return ``{input name: value}`` for every input flag that was given."""
    overrides = {}
    for name in REQUIRED_INPUTS:
        value = getattr(args, _dest(name), None)
        if value is not None:
            overrides[name] = value
    return overrides


__all__ = ["build_parser", "input_overrides"]
