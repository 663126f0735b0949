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

"""RuleOptions: the family-scoped output record of the compiler.

Both records are always built; which of them is dispatched is decided
by the version router.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from fwdecl.compiler._address import AddressClassification
from fwdecl.core import Family, RuleDeclaration


@dataclasses.dataclass(frozen=True)
class RuleOptions:
    """Fully resolved rule fields for one address family.

    ``source`` and ``destination`` only hold addresses of ``family``;
    an empty tuple means "any".  ``order`` is the effective order after
    the ``priority`` migration.  Other fields are copied unchanged from
    the declaration, unset values included.
    """

    family: Family
    source: tuple[str, ...] = ()
    destination: tuple[str, ...] = ()
    action: Any = None
    chain: Any = None
    comment: Any = None
    destination_port: Any = None
    incoming_interface: Any = None
    outgoing_interface: Any = None
    log_level: Any = None
    log_prefix: Any = None
    limit: Any = None
    limit_burst: Any = None
    order: Any = None
    protocol: Any = None
    raw: Any = None
    raw_after: Any = None
    reject_with: Any = None
    source_port: Any = None
    state: Any = None
    strict_protocol_checking: bool = True
    table: Any = None
    to_port: Any = None
    version: Any = None


# Declaration fields that are not copied verbatim.
_NOT_COPIED = frozenset({'title', 'priority', 'order', 'source', 'destination'})

_COPIED_FIELDS = tuple(
    f.name
    for f in dataclasses.fields(RuleDeclaration)
    if f.name not in _NOT_COPIED
)


def build_rule_options(
    declaration: RuleDeclaration,
    source: AddressClassification,
    destination: AddressClassification,
    order: Any,
) -> dict[Family, RuleOptions]:
    """Build the IPv4 and IPv6 RuleOptions of a declaration.

    Args:
        declaration: The declaration; it is only read.
        source: Classified source addresses.
        destination: Classified destination addresses.
        order: The effective order from :func:`resolve_order`.

    Returns:
        A dict with exactly the keys ``Family.V4`` and ``Family.V6``.
    """
    common = {name: getattr(declaration, name) for name in _COPIED_FIELDS}
    return {
        family: RuleOptions(
            family=family,
            source=source.for_family(family),
            destination=destination.for_family(family),
            order=order,
            **common,
        )
        for family in (Family.V4, Family.V6)
    }
