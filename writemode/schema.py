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
JSON schema validation.
"""

from typing import Union

import jsonschema

from .exc import WriteModeError


class SchemaError(WriteModeError):
    """
    Data does not match a schema. Holds all the validation errors.
    """

    def __init__(self, errors):
        super().__init__()
        self.errors = errors

    def __str__(self):
        messages = []
        for error in self.errors:
            prefix = ''
            if error.absolute_path:
                prefix = '.'.join(map(str, error.absolute_path)) + ': '
            messages.append('{}{}'.format(prefix, error.message))
            messages.append('Expected {}'.format(readable_schema(error.schema)))
        return '\n'.join(messages)


def readable_schema(schema: Union[dict, bool]) -> str:
    """
    Short human readable description of a (sub)schema.
    """
    if not isinstance(schema, dict):
        return 'nothing' if schema is False else 'anything'
    description = schema.get('description', '')
    if 'type' in schema:
        if description:
            return f"{schema['type']} ({description})"
        return schema['type']
    if 'properties' in schema:
        return 'one of the fields: ' + ', '.join(schema['properties'])
    return description


class Schema:
    # pylint: disable=missing-docstring

    def __init__(self, schema: dict):
        self.schema = schema
        jsonschema.Draft6Validator.check_schema(self.schema)
        self.validator = jsonschema.Draft6Validator(self.schema)

    def validate(self, data):
        errors = list(self.validator.iter_errors(data))
        if errors:
            raise SchemaError(errors)
