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

"""PrintRule: iptables-restore rule lines from RuleOptions.

Generates ``-A CHAIN ...`` lines as accepted by iptables-restore and
ip6tables-restore.  Unset fields are left out of the line or replaced
by :class:`RenderDefaults`.
"""

from __future__ import annotations

from fwdecl.compiler import RuleOptions, split_tokens
from fwdecl.compiler._address import is_range
from fwdecl.core import Family, is_set
from fwdecl.core.options import RENDER_DEFAULTS, RenderDefaults
from fwdecl.platforms.iptables._protocols import PORT_PROTOCOLS, protocol_name
from fwdecl.platforms.iptables._utils import RenderError, normalize_port, quote, to_list

# ip6tables spells the ICMP reject types differently.
_REJECT_WITH_V6 = {
    'icmp-net-unreachable': 'icmp6-no-route',
    'icmp-host-unreachable': 'icmp6-addr-unreachable',
    'icmp-port-unreachable': 'icmp6-port-unreachable',
    'icmp-proto-unreachable': 'icmp6-port-unreachable',
    'icmp-net-prohibited': 'icmp6-adm-prohibited',
    'icmp-host-prohibited': 'icmp6-adm-prohibited',
    'icmp-admin-prohibited': 'icmp6-adm-prohibited',
}

_TO_PORT_TARGETS = frozenset({'REDIRECT', 'MASQUERADE'})


class PrintRule:
    """Renders RuleOptions of one family into iptables-restore lines."""

    def __init__(self, family: Family, defaults: RenderDefaults = RENDER_DEFAULTS) -> None:
        self.family = family
        self.defaults = defaults

    def rule_lines(self, title: str, options: RuleOptions) -> list[str]:
        """Return the lines for one rule.

        A rule with several address ranges needs one line per
        source/destination combination; plain addresses and networks
        share a single ``-s``/``-d``.

        Raises:
            RenderError: the options cannot be expressed for iptables.
        """
        if options.family is not self.family:
            msg = f'{options.family.label} options given to {self.family.label} printer'
            raise RenderError(msg)

        protocol = self._print_protocol(options)
        matches = ' '.join(
            p
            for p in (
                self._print_ports(options, protocol),
                self._print_state(options),
                self._print_limit(options),
                self._print_comment(title, options),
                str(options.raw).strip() if is_set(options.raw) else '',
            )
            if p
        )
        head = self._print_chain_and_interfaces(options)
        head_proto = f'-p {protocol}' if protocol else ''
        target = self._print_target(options)

        lines = []
        for src in self._address_specs(options.source, 'src'):
            for dst in self._address_specs(options.destination, 'dst'):
                parts = (head, src, dst, head_proto, matches, target)
                lines.append(' '.join(p for p in parts if p))
        return lines

    # -- Matches --

    def _print_chain_and_interfaces(self, options: RuleOptions) -> str:
        chain = options.chain if is_set(options.chain) else self.defaults.chain
        res = f'-A {chain}'
        if is_set(options.incoming_interface):
            res += f' -i {options.incoming_interface}'
        if is_set(options.outgoing_interface):
            res += f' -o {options.outgoing_interface}'
        return res

    def _print_protocol(self, options: RuleOptions) -> str:
        if not is_set(options.protocol):
            return ''
        # Unset means the default, and the default is strict.
        strict = options.strict_protocol_checking
        if not is_set(strict):
            strict = True
        return protocol_name(options.protocol, self.family, strict=bool(strict))

    @staticmethod
    def _address_specs(addresses, slot: str) -> list[str]:
        """Return one match string per line, ``['']`` for "any"."""
        flag = '-s' if slot == 'src' else '-d'
        plain = []
        specs = []
        for token in split_tokens(list(addresses)):
            if is_range(token):
                start, _, end = token.partition('-')
                specs.append(f'-m iprange --{slot}-range {start.strip()}-{end.strip()}')
            else:
                plain.append(token)
        if plain:
            specs.insert(0, f'{flag} {",".join(plain)}')
        return specs or ['']

    def _print_ports(self, options: RuleOptions, protocol: str) -> str:
        sports = [normalize_port(p) for p in to_list(options.source_port)]
        dports = [normalize_port(p) for p in to_list(options.destination_port)]
        if not sports and not dports:
            return ''
        if protocol not in PORT_PROTOCOLS:
            raise RenderError(
                f'ports require protocol {", ".join(sorted(PORT_PROTOCOLS))}, '
                f'got {options.protocol!r}'
            )
        parts = []
        if len(sports) == 1:
            parts.append(f'--sport {sports[0]}')
        elif sports:
            parts.append(f'-m multiport --sports {",".join(sports)}')
        if len(dports) == 1:
            parts.append(f'--dport {dports[0]}')
        elif dports:
            parts.append(f'-m multiport --dports {",".join(dports)}')
        return ' '.join(parts)

    @staticmethod
    def _print_state(options: RuleOptions) -> str:
        states = [s.upper() for s in to_list(options.state)]
        if not states:
            return ''
        return f'-m conntrack --ctstate {",".join(states)}'

    @staticmethod
    def _print_limit(options: RuleOptions) -> str:
        has_limit = is_set(options.limit)
        has_burst = is_set(options.limit_burst)
        if not has_limit and not has_burst:
            return ''
        res = '-m limit'
        if has_limit:
            res += f' --limit {options.limit}'
        if has_burst:
            try:
                burst = int(options.limit_burst)
            except (TypeError, ValueError):
                burst = 0
            if burst <= 0:
                raise RenderError(
                    f'limit_burst must be a positive integer, got {options.limit_burst!r}'
                )
            res += f' --limit-burst {burst}'
        return res

    def _print_comment(self, title: str, options: RuleOptions) -> str:
        text = options.comment if is_set(options.comment) else title
        if not is_set(text):
            return ''
        return f'-m comment --comment {quote(text, self.defaults.comment_max_length)}'

    # -- Target --

    def _print_target(self, options: RuleOptions) -> str:
        action = options.action if is_set(options.action) else self.defaults.action
        action = str(action).upper()
        parts = [f'-j {action}']

        if action == 'REJECT' and is_set(options.reject_with):
            parts.append(f'--reject-with {self._reject_with(options.reject_with)}')
        if action == 'LOG':
            if is_set(options.log_level):
                parts.append(f'--log-level {options.log_level}')
            if is_set(options.log_prefix):
                prefix = quote(options.log_prefix, self.defaults.log_prefix_max_length)
                parts.append(f'--log-prefix {prefix}')
        if action in _TO_PORT_TARGETS and is_set(options.to_port):
            parts.append(f'--to-ports {options.to_port}')
        if is_set(options.raw_after):
            parts.append(str(options.raw_after).strip())
        return ' '.join(parts)

    def _reject_with(self, value) -> str:
        reject_with = str(value).strip()
        if self.family is Family.V6:
            return _REJECT_WITH_V6.get(reject_with, reject_with)
        return reject_with
