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

"""CLI entry point for the iptables rule declaration compiler."""

import argparse
import dataclasses
import logging
import sys
import time

import fwdecl
from fwdecl.core import DeclarationError, Family
from fwdecl.core.options import RENDER_DEFAULTS
from fwdecl.platforms.iptables import CompilerDriver_ipt

__author__ = 'Linuxfabrik GmbH, Zurich/Switzerland'

DESCRIPTION = """Compiles a catalog of declarative firewall rules into iptables-restore
and ip6tables-restore rule sets. Each rule is emitted for the address families
its source and destination addresses belong to."""

LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='fwdecl-ipt',
        description=DESCRIPTION,
    )

    parser.add_argument(
        '-f',
        '--file',
        required=True,
        dest='FILE',
        help='path to the YAML rule declaration catalog',
    )

    parser.add_argument(
        '-D',
        '--datadir',
        default='',
        dest='DATADIR',
        help='data directory (templates/iptables/ruleset.j2 overrides the packaged template)',
    )

    parser.add_argument(
        '-s',
        '--single-rule',
        default='',
        dest='SINGLE_RULE',
        help='compile a single rule by title',
    )

    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        dest='VERBOSE',
        help='verbose output (repeat for higher verbosity)',
    )

    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s: v{fwdecl.__version__} by {__author__}',
    )

    parser.add_argument(
        '--xt',
        action='store_true',
        dest='TEST_MODE',
        help='test mode (rule errors do not change the exit code)',
    )

    ip_version = parser.add_mutually_exclusive_group()
    ip_version.add_argument(
        '-4',
        '--ipv4',
        action='store_true',
        dest='IPV4',
        help='print IPv4 rules only',
    )
    ip_version.add_argument(
        '-6',
        '--ipv6',
        action='store_true',
        dest='IPV6',
        help='print IPv6 rules only',
    )

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVELS[min(args.VERBOSE, len(LOG_LEVELS) - 1)],
        format='%(levelname)s: %(message)s',
        stream=sys.stderr,
    )
    t_start = time.monotonic()

    print(f'Loading rule declarations from {args.FILE} ...', file=sys.stderr)

    driver = CompilerDriver_ipt(dataclasses.replace(RENDER_DEFAULTS, datadir=args.DATADIR))
    try:
        declarations = driver.load(args.FILE)
    except (OSError, DeclarationError) as e:
        print(f'Error: failed to load {args.FILE}: {e}', file=sys.stderr)
        return 1

    if args.IPV4:
        driver.ipv6_run = False
    elif args.IPV6:
        driver.ipv4_run = False
    driver.single_rule = args.SINGLE_RULE
    driver.test_mode = args.TEST_MODE

    print('Compiling ...', file=sys.stderr)
    output = driver.run(declarations)

    for family in Family:
        if family in output:
            sys.stdout.write(output[family])

    elapsed = time.monotonic() - t_start
    print(
        f'Compiled {len(driver.results)} rule(s) with {len(driver.all_errors)} error(s) '
        f'and {len(driver.all_warnings)} warning(s) in {elapsed:.2f}s',
        file=sys.stderr,
    )

    if driver.failed and not driver.test_mode:
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
