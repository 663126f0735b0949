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

"""Protocol name validation for ``-p``.

With strict protocol checking only well-known protocol names are
accepted.  Without it, protocol numbers and any name the operating
system's protocol table knows (``/etc/protocols``) pass as well.
"""

from __future__ import annotations

import socket
from typing import Any

from fwdecl.core import Family
from fwdecl.platforms.iptables._utils import RenderError

KNOWN_PROTOCOLS = frozenset(
    {
        'all',
        'ah',
        'esp',
        'icmp',
        'icmpv6',
        'ipv6-icmp',
        'mh',
        'sctp',
        'tcp',
        'udp',
        'udplite',
    }
)

ICMP_PROTOCOLS = frozenset({'icmp', 'icmpv6', 'ipv6-icmp'})

# Names ip6tables accepts but iptables does not.
IPV6_ONLY_PROTOCOLS = frozenset({'icmpv6', 'ipv6-icmp', 'mh'})

# Protocols that support --sport/--dport and multiport.
PORT_PROTOCOLS = frozenset({'tcp', 'udp', 'udplite', 'sctp'})


def _known_to_os(name: str) -> bool:
    try:
        socket.getprotobyname(name)
    except OSError:
        return False
    return True


def protocol_name(protocol: Any, family: Family, strict: bool = True) -> str:
    """Return the ``-p`` argument for *protocol* in *family*.

    Plain ``icmp`` is spelled per family, so a dual-stack ``icmp`` rule
    renders as ``icmp`` for iptables and ``ipv6-icmp`` for ip6tables.
    IPv6-only names such as ``ipv6-icmp`` or ``mh`` are refused for
    iptables.

    Raises:
        RenderError: the protocol is not acceptable for *family* under
            the given checking mode.
    """
    name = str(protocol).strip().lower()
    if family is Family.V4 and name in IPV6_ONLY_PROTOCOLS:
        raise RenderError(f'protocol {protocol!r} is only valid for IPv6')
    if name in ICMP_PROTOCOLS:
        return 'icmp' if family is Family.V4 else 'ipv6-icmp'
    if name in KNOWN_PROTOCOLS:
        return name
    if strict:
        raise RenderError(
            f'unknown protocol {protocol!r} '
            f'(set strict_protocol_checking to false to allow it)'
        )
    if name.isdigit():
        if 0 <= int(name) <= 255:
            return name
        raise RenderError(f'protocol number {name} out of range 0-255')
    if _known_to_os(name):
        return name
    raise RenderError(f'unknown protocol {protocol!r}')
