"""Process-wide defaults for the Push Force Scan adjustment."""

from __future__ import annotations

import copy

from .model import PFSOptions

_DEFAULT_OPTIONS = PFSOptions()


def get_default_options() -> PFSOptions:
    """Return a copy of the options used when ``pfs`` is called without any.

    Mutating the returned object does not change the defaults.
    """

    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: PFSOptions) -> None:
    """Replace the defaults; ``options`` is copied, so later edits to it are ignored."""

    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)
