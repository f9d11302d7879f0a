# Wildland Project
#
# Copyright (C) 2021 Golem Foundation
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""
Click integration: accepting write modes as command line options.
"""

import click
from click.shell_completion import CompletionItem

from .exc import UnrecognizedAlias
from .write_mode import WriteMode


class WriteModeParamType(click.ParamType):
    """
    Click parameter type converting an alias (e.g. ``create``, ``W``) into a
    :class:`WriteMode`.
    """

    name = 'write_mode'

    def __init__(self, append: bool = False):
        self.append = append

    def convert(self, value, param, ctx):
        if isinstance(value, WriteMode):
            return value
        try:
            return WriteMode.parse(value, append=self.append)
        except UnrecognizedAlias as e:
            self.fail(str(e), param, ctx)

    def shell_complete(self, ctx, param, incomplete):
        return [CompletionItem(str(mode)) for mode in WriteMode.modes(self.append)
                if str(mode).lower().startswith(incomplete.lower())]

    def __repr__(self):
        return f'WriteModeParamType(append={self.append})'


def write_mode_option(*param_decls, append: bool = False, **kwargs):
    """
    Decorator adding a write mode option (``--write-mode`` by default) to a
    command. Defaults to :meth:`WriteMode.default`.
    """
    if not param_decls:
        param_decls = ('--write-mode',)

    accepted = ', '.join('/'.join(mode.aliases) for mode in WriteMode.modes(append))
    kwargs.setdefault('default', str(WriteMode.default()))
    kwargs.setdefault('show_default', True)
    kwargs.setdefault('help', f'How to open files for writing: {accepted}')
    return click.option(*param_decls, type=WriteModeParamType(append), **kwargs)
