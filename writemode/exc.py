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

'''
Common exceptions
'''

from typing import Iterable, Optional


class WriteModeError(Exception):
    '''Common exception thrown by various part of the code

    There are some subclasses in particular modules
    '''


class ParseError(WriteModeError, ValueError):
    '''A write mode could not be parsed from text'''


class UnrecognizedAlias(ParseError):
    '''
    The text does not match any alias in the active alias table.
    '''

    def __init__(self, text, known: Optional[Iterable[str]] = None):
        super().__init__(text)
        self.text = text
        self.known = list(known) if known is not None else []

    def __str__(self):
        message = f'unrecognized write mode: {self.text!r}'
        if self.known:
            message += f' (expected one of: {", ".join(self.known)})'
        return message
