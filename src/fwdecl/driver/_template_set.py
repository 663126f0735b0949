# Copyright (C) 2026 Linuxfabrik <info@linuxfabrik.ch>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# On Debian systems, the complete text of the GNU General Public License
# version 2 can be found in /usr/share/common-licenses/GPL-2.
#
# SPDX-License-Identifier: GPL-2.0-or-later

"""Templates of one output platform.

Templates are looked up, first match wins, in:

1. ``<datadir>/templates/<platform>/`` when a data directory is given
   (``fwdecl-ipt -D``),
2. ``~/fwdecl/templates/<platform>/`` for per-user overrides,
3. the package's ``resources/templates/<platform>/``.

All template sets with the same search path share one Jinja2
environment.  The environment provides the ``one_line`` filter for
text that ends up in a single-line context such as a ``#`` comment.
"""

from __future__ import annotations

import functools
import importlib.resources
from pathlib import Path

import jinja2


def one_line(text) -> str:
    """Collapse *text* onto a single line, joining its lines with a space."""
    return ' '.join(str(text).splitlines())


def _package_templates_dir() -> Path:
    ref = importlib.resources.files('fwdecl') / 'resources' / 'templates'
    return Path(str(ref))


def template_search_path(platform: str, datadir: str | Path | None = None) -> list[Path]:
    """Return the directories searched for *platform*'s templates, in order."""
    paths = []
    if datadir:
        paths.append(Path(datadir) / 'templates' / platform)
    user_dir = Path.home() / 'fwdecl' / 'templates' / platform
    if user_dir.is_dir():
        paths.append(user_dir)
    paths.append(_package_templates_dir() / platform)
    return paths


@functools.cache
def _environment(search_path: tuple[str, ...]) -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(list(search_path)),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters['one_line'] = one_line
    return env


class TemplateSet:
    """The templates of one platform, e.g. ``iptables``."""

    def __init__(self, platform: str, datadir: str | Path | None = None) -> None:
        self.platform = platform
        self.search_path = template_search_path(platform, datadir)
        self._env = _environment(tuple(str(p) for p in self.search_path))

    def render(self, template_name: str, context: dict) -> str:
        """Render *template_name* with *context*.

        Raises:
            jinja2.TemplateNotFound: no directory of the search path
                holds the template.
        """
        return self._env.get_template(template_name).render(context)
