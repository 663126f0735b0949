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

import pathlib
import re

from setuptools import find_namespace_packages, setup

_here = pathlib.Path(__file__).parent
_version = re.search(
    r"^__version__ = '([^']+)'",
    (_here / 'src' / 'fwdecl' / '__init__.py').read_text(encoding='utf-8'),
    re.MULTILINE,
).group(1)

setup(
    name='fwdecl',
    version=_version,
    author='Linuxfabrik GmbH, Zurich/Switzerland',
    author_email='info@linuxfabrik.ch',
    description='Compile declarative firewall rules into iptables and ip6tables rule sets',
    license='GPL-2.0-or-later',
    package_dir={'': 'src'},
    packages=find_namespace_packages(where='src', include=['fwdecl*']),
    package_data={'fwdecl': ['resources/templates/*/*.j2']},
    include_package_data=True,
    python_requires='>=3.11',
    install_requires=[
        'Jinja2>=3.1',
        'PyYAML>=6.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'fwdecl-ipt=fwdecl.cli.fwdecl_ipt:main',
        ],
    },
)
