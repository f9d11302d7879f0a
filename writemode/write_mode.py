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
Write modes: symbolic strategies for opening a file for writing.

Each :class:`WriteMode` resolves to an :class:`OpenConfiguration`, i.e. the
set of flags passed to ``open(2)``. Modes can be parsed from a number of
case-insensitive aliases, so they can be given in configuration files or on
the command line::

    >>> WriteMode.parse('update')
    <WriteMode.UPDATE_EXISTING: 'UpdateExisting'>

The append-oriented modes are optional: unless ``append=True`` is passed,
their aliases are not recognized by :meth:`WriteMode.parse`.
"""

import enum
import os
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple, BinaryIO, Union

from .exc import UnrecognizedAlias
from .fs_utils import flags_to_mode
from .log import get_logger

__all__ = ['WriteMode', 'OpenConfiguration', 'APPEND_MODES']

logger = get_logger('write-mode')

PathType = Union[str, bytes, os.PathLike]


@dataclass(frozen=True)
class OpenConfiguration:
    """
    Options for the platform open call. Reading is never requested and writing
    always is.
    """

    create_new: bool
    create: bool
    append: bool
    read: bool = False
    write: bool = True

    @property
    def flags(self) -> int:
        """
        Flags for :func:`os.open`. ``O_TRUNC`` is never included, existing
        files are overwritten in place.
        """
        if self.read and self.write:
            flags = os.O_RDWR
        elif self.write:
            flags = os.O_WRONLY
        else:
            flags = os.O_RDONLY

        if self.create_new:
            flags |= os.O_CREAT | os.O_EXCL
        elif self.create:
            flags |= os.O_CREAT

        if self.append:
            flags |= os.O_APPEND

        # Windows only
        flags |= getattr(os, 'O_BINARY', 0)
        return flags

    def open(self, path: PathType, mode: int = 0o666) -> BinaryIO:
        """
        Open the file at *path*. *mode* is only used when the file gets created.

        Errors of the underlying call (:class:`FileExistsError`,
        :class:`FileNotFoundError`, :class:`PermissionError`...) are propagated
        as they are.
        """
        flags = self.flags
        fd = os.open(path, flags, mode)
        try:
            return os.fdopen(fd, flags_to_mode(flags))
        except Exception:
            os.close(fd)
            raise


class WriteMode(enum.Enum):
    """
    Strategy for opening a file in write mode.

    - ``CREATE_NEW``: create a new file, fail if it already exists.
    - ``UPDATE_EXISTING``: open an existing file, fail if it does not exist.
    - ``CLASSIC_WRITE``: open a file for writing, creating it if needed.
    - ``CLASSIC_APPEND``: like ``CLASSIC_WRITE``, but append to the file.
    - ``APPEND_TO_EXISTING``: like ``UPDATE_EXISTING``, but append to the file.
    """

    CREATE_NEW = 'CreateNew'
    UPDATE_EXISTING = 'UpdateExisting'
    CLASSIC_WRITE = 'ClassicWrite'
    CLASSIC_APPEND = 'ClassicAppend'
    APPEND_TO_EXISTING = 'AppendToExisting'

    def __str__(self):
        return self.value

    @property
    def display_name(self) -> str:
        """Canonical (long form) name."""
        return self.value

    @property
    def aliases(self) -> Tuple[str, ...]:
        """Names accepted by :meth:`parse`, long form first."""
        return _ALIASES[self]

    @property
    def requires_append(self) -> bool:
        """Whether the mode is only parseable with append modes enabled."""
        return self in APPEND_MODES

    @classmethod
    def default(cls) -> 'WriteMode':
        """Mode used when none is given."""
        return cls.CREATE_NEW

    @classmethod
    def modes(cls, append: bool = False) -> List['WriteMode']:
        """
        List modes available with or without the append modes.
        """
        return [mode for mode in cls if append or not mode.requires_append]

    @classmethod
    def parse(cls, text: str, append: bool = False) -> 'WriteMode':
        """
        Parse a write mode from one of its aliases, ignoring case.

        :param text: alias, e.g. ``'CreateNew'``, ``'create'`` or ``'c'``
        :param append: recognize aliases of the append modes too
        :raises UnrecognizedAlias: if no alias matches
        """
        table = _ALIAS_TABLE_APPEND if append else _ALIAS_TABLE
        if isinstance(text, str):
            mode = table.get(text.lower())
            if mode is not None:
                return mode
        raise UnrecognizedAlias(text, [str(mode) for mode in cls.modes(append)])

    def to_open_configuration(self) -> OpenConfiguration:
        """Options for the platform open call."""
        return _OPEN_CONFIGURATIONS[self]

    def open_flags(self) -> int:
        """
        Flags for :func:`os.open` matching this mode.
        """
        return self.to_open_configuration().flags

    def open(self, path: PathType, mode: int = 0o666) -> BinaryIO:
        """
        Open the file at *path* for writing, according to this write mode.
        See :meth:`OpenConfiguration.open`.
        """
        logger.debug('opening %s (%s)', path, self)
        return self.to_open_configuration().open(path, mode)


APPEND_MODES = frozenset([WriteMode.CLASSIC_APPEND, WriteMode.APPEND_TO_EXISTING])

_ALIASES: Dict[WriteMode, Tuple[str, ...]] = {
    WriteMode.CREATE_NEW: ('CreateNew', 'Create', 'C'),
    WriteMode.UPDATE_EXISTING: ('UpdateExisting', 'Update', 'U'),
    WriteMode.CLASSIC_WRITE: ('ClassicWrite', 'Write', 'W'),
    WriteMode.CLASSIC_APPEND: ('ClassicAppend', 'Append', 'A'),
    WriteMode.APPEND_TO_EXISTING: ('AppendToExisting', 'Extend', 'E'),
}

_OPEN_CONFIGURATIONS: Dict[WriteMode, OpenConfiguration] = {
    WriteMode.CREATE_NEW: OpenConfiguration(create_new=True, create=True, append=False),
    WriteMode.UPDATE_EXISTING: OpenConfiguration(create_new=False, create=False, append=False),
    WriteMode.CLASSIC_WRITE: OpenConfiguration(create_new=False, create=True, append=False),
    WriteMode.CLASSIC_APPEND: OpenConfiguration(create_new=False, create=True, append=True),
    WriteMode.APPEND_TO_EXISTING: OpenConfiguration(create_new=False, create=False, append=True),
}


def _alias_table(modes: Iterable[WriteMode]) -> Dict[str, WriteMode]:
    return {alias.lower(): mode for mode in modes for alias in _ALIASES[mode]}


_ALIAS_TABLE = _alias_table(WriteMode.modes(append=False))
_ALIAS_TABLE_APPEND = _alias_table(WriteMode.modes(append=True))
