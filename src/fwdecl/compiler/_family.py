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

"""Family decision: which address families a declaration is emitted for."""

from __future__ import annotations

import dataclasses

from fwdecl.compiler._address import AddressClassification


class AllAddressesInvalidError(ValueError):
    """Every address of a declaration failed to parse.

    No family can be derived, and emitting the rule without its
    addresses would widen it to any source/destination.
    """

    def __init__(self, title: str, tokens: tuple[str, ...]) -> None:
        self.title = title
        self.tokens = tokens
        super().__init__(
            f'no valid IPv4 or IPv6 address given, '
            f'invalid address(es): {", ".join(tokens)}'
        )


@dataclasses.dataclass(frozen=True)
class FamilyDecision:
    """Result of the family decision for one declaration.

    ``skipped`` lists the invalid tokens that were dropped while at least
    one valid address was present.
    """

    emit_v4: bool
    emit_v6: bool
    skipped: tuple[str, ...] = ()


def decide_families(
    title: str,
    source: AddressClassification,
    destination: AddressClassification,
) -> FamilyDecision:
    """Decide from the classified addresses which families to emit.

    Raises:
        AllAddressesInvalidError: addresses were given but none of them
            is a valid IPv4 or IPv6 address.
    """
    v4_count = len(source.v4) + len(destination.v4)
    v6_count = len(source.v6) + len(destination.v6)
    other = source.other + destination.other

    if v4_count and not v6_count:
        return FamilyDecision(emit_v4=True, emit_v6=False, skipped=other)
    if v6_count and not v4_count:
        return FamilyDecision(emit_v4=False, emit_v6=True, skipped=other)
    if not v4_count and not v6_count:
        if other:
            raise AllAddressesInvalidError(title, other)
        # no address restricts the family: interface or protocol only rule
        return FamilyDecision(emit_v4=True, emit_v6=True)
    return FamilyDecision(emit_v4=True, emit_v6=True, skipped=other)
