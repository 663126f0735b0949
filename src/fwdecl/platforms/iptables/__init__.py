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

"""IPTables platform: rule printer, rule file and driver."""

from fwdecl.platforms.iptables._compiler_driver import CompilerDriver_ipt
from fwdecl.platforms.iptables._print_rule import PrintRule
from fwdecl.platforms.iptables._protocols import KNOWN_PROTOCOLS, protocol_name
from fwdecl.platforms.iptables._rule_file import RuleFile, order_key
from fwdecl.platforms.iptables._utils import RenderError

__all__ = [
    'KNOWN_PROTOCOLS',
    'CompilerDriver_ipt',
    'PrintRule',
    'RenderError',
    'RuleFile',
    'order_key',
    'protocol_name',
]
