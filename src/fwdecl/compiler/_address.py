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

"""Address classifier: split an address field into IPv4, IPv6 and invalid tokens.

Classification is purely syntactic.  A token belongs to a family if it
parses as an address of that family, as a network in CIDR notation
(host bits may be set, as iptables accepts them), or as an explicit
``start-end`` range whose two ends belong to the same family.  Nothing
is resolved and nothing is rejected here; tokens that do not parse are
collected in ``other`` and left to the family decision.
"""

from __future__ import annotations

import dataclasses
import ipaddress
from typing import Any

from fwdecl.core import Family, is_set


@dataclasses.dataclass(frozen=True)
class AddressClassification:
    """Tokens of one address field, partitioned by family in input order."""

    v4: tuple[str, ...] = ()
    v6: tuple[str, ...] = ()
    other: tuple[str, ...] = ()

    def for_family(self, family: Family) -> tuple[str, ...]:
        return self.v4 if family is Family.V4 else self.v6


def split_tokens(value: Any) -> list[str]:
    """Flatten an address field into a list of stripped, non-empty tokens.

    *value* may be unset, a single string with comma-separated tokens,
    or a list of such strings.
    """
    if not is_set(value):
        return []
    items = value if isinstance(value, list | tuple) else [value]
    tokens = []
    for item in items:
        if not is_set(item):
            continue
        for part in str(item).split(','):
            part = part.strip()
            if part:
                tokens.append(part)
    return tokens


def is_range(token: str) -> bool:
    return '-' in token and '/' not in token


def token_family(token: str) -> Family | None:
    """Return the family of a single address token, or None if it is invalid."""
    if is_range(token):
        start, _, end = token.partition('-')
        try:
            first = ipaddress.ip_address(start.strip())
            last = ipaddress.ip_address(end.strip())
        except ValueError:
            return None
        if first.version != last.version:
            return None
        version = first.version
    else:
        try:
            version = ipaddress.ip_network(token, strict=False).version
        except ValueError:
            return None
    return Family.V4 if version == 4 else Family.V6


def classify_addresses(value: Any) -> AddressClassification:
    """Partition an address field into ``v4``, ``v6`` and ``other``."""
    v4: list[str] = []
    v6: list[str] = []
    other: list[str] = []
    for token in split_tokens(value):
        family = token_family(token)
        if family is Family.V4:
            v4.append(token)
        elif family is Family.V6:
            v6.append(token)
        else:
            other.append(token)
    return AddressClassification(v4=tuple(v4), v6=tuple(v6), other=tuple(other))
