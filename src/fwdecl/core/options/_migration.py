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

"""Legacy parameter migration for backward compatibility.

``priority`` is the old name of ``order``.  Declarations written for
older releases still use it; the value is carried over to ``order``
when ``order`` itself is not set, and a deprecation notice is returned
so the caller can report it against the rule.
"""

from typing import Any

from fwdecl.core._declaration import is_set
from fwdecl.core.options._keys import RuleOption

# Map legacy keys to canonical keys.
# Format: {'legacy_key': CanonicalKey}
LEGACY_KEY_MAP: dict[str, str] = {
    RuleOption.PRIORITY: RuleOption.ORDER,
}


def resolve_order(order: Any, priority: Any) -> tuple[Any, str | None]:
    """Return the effective order and an optional deprecation notice.

    Args:
        order: The current ``order`` value, or an unset value.
        priority: The deprecated ``priority`` value, or an unset value.

    Returns:
        ``(effective_order, notice)``.  *notice* is None unless
        *priority* supplied the value.  An unset *order* with an unset
        *priority* stays unset.
    """
    if not is_set(order) and is_set(priority):
        notice = (
            f"parameter '{RuleOption.PRIORITY}' is deprecated, "
            f"use '{RuleOption.ORDER}' instead"
        )
        return priority, notice
    return order, None


def get_canonical_key(key: str) -> str:
    """Get the canonical key for a possibly-legacy key."""
    return LEGACY_KEY_MAP.get(key, key)
