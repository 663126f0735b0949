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

"""Typed defaults applied when rendering rule options.

The compiler never fills in defaults: an unset field stays unset in
RuleOptions.  Only the iptables renderer and the rule file consult
these values, so a field that was not declared is either omitted from
the generated line or replaced by the tool's own default here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderDefaults:
    """Default values for rendering a rule into iptables-restore format."""

    table: str = 'filter'
    chain: str = 'INPUT'
    action: str = 'ACCEPT'

    # Placement of rules without an explicit order
    order: int = 500

    # Kernel limits for xt_comment and the LOG target
    comment_max_length: int = 256
    log_prefix_max_length: int = 29

    # Data directory searched for templates/<platform>/ before the
    # per-user and packaged templates
    datadir: str = ''


RENDER_DEFAULTS = RenderDefaults()
