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

"""RuleDeclaration: the caller-owned description of a single firewall rule.

A declaration is read-only input for the compiler.  Fields that are not
set hold ``None`` (or an empty string/list when coming from a catalog);
use :func:`is_set` at every read site instead of truth tests so that
``0`` and ``False`` stay meaningful values.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Any


class Family(enum.Enum):
    """Address family a rule is emitted for."""

    V4 = 4
    V6 = 6

    @property
    def label(self) -> str:
        return 'IPv4' if self is Family.V4 else 'IPv6'

    @property
    def ipt_command(self) -> str:
        return 'iptables' if self is Family.V4 else 'ip6tables'


def is_set(value: Any) -> bool:
    """Return True if *value* is a concrete value, False for "not set"."""
    if value is None:
        return False
    if isinstance(value, str | list | tuple) and len(value) == 0:
        return False
    return True


@dataclasses.dataclass(frozen=True)
class RuleDeclaration:
    """A declarative firewall rule before address family resolution."""

    title: str
    action: Any = None
    chain: Any = None
    comment: Any = None
    destination: Any = None
    destination_port: Any = None
    incoming_interface: Any = None
    outgoing_interface: Any = None
    log_level: Any = None
    log_prefix: Any = None
    limit: Any = None
    limit_burst: Any = None
    order: Any = None
    priority: Any = None  # deprecated alias of order
    protocol: Any = None
    raw: Any = None
    raw_after: Any = None
    reject_with: Any = None
    source: Any = None
    source_port: Any = None
    state: Any = None
    strict_protocol_checking: bool = True
    table: Any = None
    to_port: Any = None
    version: Any = None
