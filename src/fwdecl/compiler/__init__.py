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

"""Compiler: from rule declarations to per-family rule options."""

from ._address import AddressClassification, classify_addresses, split_tokens, token_family
from ._base import BaseCompiler, CompilerStatus
from ._compiler import CompileResult, RuleCompiler
from ._family import AllAddressesInvalidError, FamilyDecision, decide_families
from ._router import (
    FamilyRegistry,
    IPVersion,
    RuleCollector,
    RuleEmitter,
    parse_version,
    route,
    select_families,
)
from ._rule_options import RuleOptions, build_rule_options

__all__ = [
    'AddressClassification',
    'AllAddressesInvalidError',
    'BaseCompiler',
    'CompileResult',
    'CompilerStatus',
    'FamilyDecision',
    'FamilyRegistry',
    'IPVersion',
    'RuleCollector',
    'RuleCompiler',
    'RuleEmitter',
    'RuleOptions',
    'build_rule_options',
    'classify_addresses',
    'decide_families',
    'parse_version',
    'route',
    'select_families',
    'split_tokens',
    'token_family',
]
