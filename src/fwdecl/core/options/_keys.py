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

"""Canonical rule option key definitions using StrEnum.

These are the keys accepted in a rule body of a declaration catalog.
Using StrEnum keeps the YAML reader, the compiler and the tests on a
single spelling of every key; a typo raises AttributeError at import
time instead of silently creating an unknown option.

Example:
    from fwdecl.core.options import RuleOption

    body[RuleOption.DESTINATION_PORT] = 22
"""

from enum import StrEnum


class RuleOption(StrEnum):
    """Keys of a rule declaration body."""

    # Verdict and placement
    ACTION = 'action'
    CHAIN = 'chain'
    TABLE = 'table'
    ORDER = 'order'
    PRIORITY = 'priority'  # deprecated, use ORDER

    # Matching
    SOURCE = 'source'
    DESTINATION = 'destination'
    SOURCE_PORT = 'source_port'
    DESTINATION_PORT = 'destination_port'
    INCOMING_INTERFACE = 'incoming_interface'
    OUTGOING_INTERFACE = 'outgoing_interface'
    PROTOCOL = 'protocol'
    STATE = 'state'
    STRICT_PROTOCOL_CHECKING = 'strict_protocol_checking'

    # Rate limiting
    LIMIT = 'limit'
    LIMIT_BURST = 'limit_burst'

    # Logging
    LOG_LEVEL = 'log_level'
    LOG_PREFIX = 'log_prefix'

    # Target options
    REJECT_WITH = 'reject_with'
    TO_PORT = 'to_port'

    # Free-form
    COMMENT = 'comment'
    RAW = 'raw'
    RAW_AFTER = 'raw_after'

    # Address family override
    VERSION = 'version'
