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

"""RuleFile: the ordered iptables-restore rule set of one address family.

Rules arrive through :meth:`RuleFile.emit` in any order; they are kept
as RuleOptions and only turned into lines by :meth:`RuleFile.render`,
sorted by their ``order`` and title within each table.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import TYPE_CHECKING, Any

from fwdecl.core import Family, is_set
from fwdecl.core.options import RENDER_DEFAULTS, RenderDefaults
from fwdecl.driver import TemplateSet
from fwdecl.platforms.iptables._print_rule import PrintRule
from fwdecl.platforms.iptables._utils import BUILTIN_CHAINS, TABLE_ORDER, RenderError

if TYPE_CHECKING:
    from fwdecl.compiler import BaseCompiler, RuleOptions

logger = logging.getLogger(__name__)


def order_key(order: Any, default: int) -> tuple:
    """Sort key for an order value: integers first, numerically, then strings."""
    if not is_set(order):
        order = default
    text = str(order).strip()
    try:
        return (0, int(text), '')
    except ValueError:
        return (1, 0, text)


@dataclasses.dataclass
class _Entry:
    title: str
    options: RuleOptions
    seq: int


class RuleFile:
    """Collects the rules of one family and renders them."""

    def __init__(self, family: Family, defaults: RenderDefaults = RENDER_DEFAULTS) -> None:
        self.family = family
        self.defaults = defaults
        self.templates = TemplateSet('iptables', defaults.datadir)
        self._entries: list[_Entry] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def emit(self, title: str, options: RuleOptions) -> None:
        with self._lock:
            self._entries.append(_Entry(title, options, len(self._entries)))

    def _table_of(self, options: RuleOptions) -> str:
        return str(options.table) if is_set(options.table) else self.defaults.table

    def render(self, compiler: BaseCompiler | None = None) -> str:
        """Render the rule set in iptables-restore format.

        A rule that cannot be rendered is reported to *compiler* and left
        out; without a compiler the RenderError propagates.
        """
        printer = PrintRule(self.family, self.defaults)
        tables: dict[str, list[tuple[tuple, str, list[str]]]] = {}

        with self._lock:
            entries = list(self._entries)

        for entry in entries:
            try:
                lines = printer.rule_lines(entry.title, entry.options)
            except RenderError as e:
                if compiler is None:
                    raise
                compiler.error(entry.title, f'{self.family.label}: {e}')
                continue
            key = (order_key(entry.options.order, self.defaults.order), entry.title, entry.seq)
            tables.setdefault(self._table_of(entry.options), []).append(
                (key, entry.title, lines)
            )

        names = [t for t in TABLE_ORDER if t in tables]
        names += sorted(t for t in tables if t not in TABLE_ORDER)

        context_tables = []
        for name in names:
            rules = sorted(tables[name], key=lambda r: r[0])
            builtin = BUILTIN_CHAINS.get(name, ())
            used = {
                line.split()[1]
                for _key, _title, lines in rules
                for line in lines
            }
            context_tables.append(
                {
                    'name': name,
                    'builtin_chains': builtin,
                    'custom_chains': sorted(used - set(builtin)),
                    'rules': [{'title': title, 'lines': lines} for _key, title, lines in rules],
                }
            )

        logger.debug(
            '%s: rendering %d rule(s) in %d table(s)',
            self.family.label,
            len(entries),
            len(context_tables),
        )
        return self.templates.render(
            'ruleset.j2',
            {
                'command': self.family.ipt_command,
                'tables': context_tables,
            },
        )
