"""Subcommands dispatched by :mod:`quizdoc.cli`."""
