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

"""IPTables utility functions shared by the rule printer and rule file."""

from __future__ import annotations

import re
from typing import Any

from fwdecl.core import is_set
from fwdecl.driver import one_line

BUILTIN_CHAINS: dict[str, tuple[str, ...]] = {
    'filter': ('INPUT', 'FORWARD', 'OUTPUT'),
    'nat': ('PREROUTING', 'INPUT', 'OUTPUT', 'POSTROUTING'),
    'mangle': ('PREROUTING', 'INPUT', 'FORWARD', 'OUTPUT', 'POSTROUTING'),
    'raw': ('PREROUTING', 'OUTPUT'),
    'security': ('INPUT', 'FORWARD', 'OUTPUT'),
}

TABLE_ORDER = tuple(BUILTIN_CHAINS)


class RenderError(ValueError):
    """A RuleOptions record cannot be expressed as an iptables rule."""


def to_list(value: Any) -> list[str]:
    """Flatten a scalar, comma-separated string or list into stripped tokens."""
    if not is_set(value):
        return []
    items = value if isinstance(value, list | tuple) else [value]
    result = []
    for item in items:
        for part in str(item).split(','):
            part = part.strip()
            if part:
                result.append(part)
    return result


def quote(text: str, max_length: int = 0) -> str:
    """Double-quote *text* for iptables-restore, truncated to *max_length*."""
    text = one_line(text)
    if max_length:
        text = text[:max_length]
    text = text.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{text}"'


def normalize_port(port: str) -> str:
    """Rewrite a ``low-high`` port range to iptables' ``low:high``."""
    return re.sub(r'\s*-\s*', ':', port)
