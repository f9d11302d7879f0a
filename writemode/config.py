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
Configuration file handling.
"""

from pathlib import Path
from typing import Dict, Any
import os

import yaml
from yaml.composer import ComposerError
from yaml.constructor import ConstructorError

from .exc import WriteModeError
from .log import get_logger
from .schema import Schema
from .write_mode import WriteMode

logger = get_logger('config')


class _FrozenAnchors(dict):
    def __setitem__(self, key, value):
        raise ComposerError(problem=f'anchor {key!r} not allowed in configuration')


class StrictLoader(yaml.SafeLoader):
    """
    YAML loader refusing duplicate keys and anchors.
    """

    def __init__(self, stream):
        super().__init__(stream)
        self.anchors = _FrozenAnchors()

    def construct_mapping(self, node, deep=False):
        seen = []
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if key in seen:
                raise ConstructorError(problem=f'duplicate key {key!r}',
                                       problem_mark=key_node.start_mark)
            seen.append(key)
        return super().construct_mapping(node, deep)


class Config:
    """
    Write mode configuration, by default loaded from ~/.config/writemode/config.yaml.

    Consists of three layers:
    - default_fields (set here)
    - file_fields (loaded from file)
    - override_fields (provided by the application, e.g. from command line)
    """

    schema = Schema({
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "append": {
                "type": "boolean",
                "description": "Recognize the append write modes"
            },
            "write-mode": {
                "type": "string",
                "description": "Name or alias of the default write mode"
            },
        }
    })
    filename = 'config.yaml'

    def __init__(self,
                 base_dir,
                 path: Path,
                 default_fields: Dict[str, Any],
                 file_fields: Dict[str, Any]):
        self.base_dir = base_dir
        self.path = path
        self.default_fields = default_fields
        self.file_fields = file_fields
        self.override_fields: Dict[str, Any] = {}

    def get(self, name: str, use_override=True):
        """
        Get a configuration value for given name. The name has to be known,
        i.e. exist in defaults.
        """

        assert name in self.default_fields, f'unknown config name: {name}'

        if use_override:
            if name in self.override_fields:
                return self.override_fields[name]
        if name in self.file_fields:
            return self.file_fields[name]
        return self.default_fields[name]

    def override(self, override_fields: Dict = None):
        """
        Override configuration, e.g. based on command line arguments.
        """
        if override_fields:
            for name, val in override_fields.items():
                assert name in self.default_fields, f'unknown config name: {name}'
                self.override_fields[name] = _to_field(val)

    @property
    def write_mode(self) -> WriteMode:
        """
        The configured default write mode.
        """
        return WriteMode.parse(self.get('write-mode'), append=self.get('append'))

    def update_and_save(self, values: Dict[str, Any]):
        """
        Set new values and save to a file. Nothing is changed if the resulting
        configuration would not load back.
        """

        file_fields = dict(self.file_fields)
        file_fields.update({name: _to_field(val) for name, val in values.items()})
        self.validate_fields(file_fields)

        self.file_fields = file_fields
        os.makedirs(self.base_dir, exist_ok=True)
        with open(self.path, 'w') as f:
            yaml.safe_dump(self.file_fields, f, sort_keys=False)

    def validate_fields(self, file_fields: Dict[str, Any]):
        """
        Check the file layer against the schema, and check that its write mode
        is recognized given its append setting.
        """

        try:
            self.schema.validate(file_fields)
            fields = {**self.default_fields, **file_fields}
            WriteMode.parse(fields['write-mode'], append=fields['append'])
        except WriteModeError as e:
            raise WriteModeError(f'Error validating configuration file: {e}') from e

    @classmethod
    def load(cls, base_dir=None):
        """
        Load a configuration file from base directory, if it exists; use
        defaults if not.
        """

        if base_dir is None:
            xdg_home = os.getenv('XDG_CONFIG_HOME')
            if xdg_home:
                base_dir = Path(xdg_home) / 'writemode'
            else:
                home_dir_s = os.getenv('HOME')
                if not home_dir_s:
                    raise WriteModeError(
                        'Cannot locate configuration: neither XDG_CONFIG_HOME nor HOME is set')
                base_dir = Path(home_dir_s) / '.config/writemode'
        else:
            base_dir = Path(base_dir)

        path = base_dir / cls.filename
        if os.path.exists(path):
            logger.debug('loading configuration from %s', path)
            with open(path, 'r') as f:
                try:
                    file_fields = yaml.load(f, Loader=StrictLoader)
                except yaml.YAMLError as e:
                    raise WriteModeError(
                        f'Error parsing configuration file: {e}') from e
                if not file_fields:
                    file_fields = {}
        else:
            file_fields = {}

        config = cls(base_dir, path, cls.get_default_fields(), file_fields)
        config.validate_fields(file_fields)
        return config

    @classmethod
    def get_default_fields(cls) -> dict:
        """
        Compute the default values for all the unspecified fields.
        """

        return {
            'append': False,
            'write-mode': str(WriteMode.default()),
        }


def _to_field(value):
    # write modes are stored by their display name
    if isinstance(value, WriteMode):
        return str(value)
    return value
