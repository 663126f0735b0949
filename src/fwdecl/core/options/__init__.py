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

"""Typed option keys, legacy migration and render defaults.

Usage::

    from fwdecl.core.options import RuleOption, resolve_order

    order, notice = resolve_order(decl.order, decl.priority)
"""

from fwdecl.core.options._keys import RuleOption
from fwdecl.core.options._migration import (
    LEGACY_KEY_MAP,
    get_canonical_key,
    resolve_order,
)
from fwdecl.core.options._schemas import RENDER_DEFAULTS, RenderDefaults

__all__ = [
    'LEGACY_KEY_MAP',
    'RENDER_DEFAULTS',
    'RenderDefaults',
    'RuleOption',
    'get_canonical_key',
    'resolve_order',
]
