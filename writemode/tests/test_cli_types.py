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

# pylint: disable=missing-docstring,redefined-outer-name

import click
from click.testing import CliRunner
import pytest

from ..cli_types import WriteModeParamType, write_mode_option
from ..write_mode import WriteMode


def make_command(**kwargs):
    @click.command()
    @write_mode_option(**kwargs)
    def command(write_mode):
        assert isinstance(write_mode, WriteMode)
        click.echo(write_mode.display_name)

    return command


@pytest.fixture
def runner():
    return CliRunner()


def test_option_default(runner):
    result = runner.invoke(make_command(), [])
    assert result.exit_code == 0, result.output
    assert result.output == 'CreateNew\n'


@pytest.mark.parametrize('alias,expected', [
    ('u', 'UpdateExisting'),
    ('WRITE', 'ClassicWrite'),
    ('createnew', 'CreateNew'),
])
def test_option_alias(runner, alias, expected):
    result = runner.invoke(make_command(), ['--write-mode', alias])
    assert result.exit_code == 0, result.output
    assert result.output == f'{expected}\n'


def test_option_unrecognized(runner):
    result = runner.invoke(make_command(), ['--write-mode', 'append'])
    assert result.exit_code == 2
    assert "unrecognized write mode: 'append'" in result.output


def test_option_append(runner):
    result = runner.invoke(make_command(append=True), ['--write-mode', 'E'])
    assert result.exit_code == 0, result.output
    assert result.output == 'AppendToExisting\n'


def test_option_help(runner):
    result = runner.invoke(make_command(), ['--help'])
    assert result.exit_code == 0
    assert 'CreateNew/Create/C' in result.output
    assert 'ClassicAppend' not in result.output

    result = runner.invoke(make_command(append=True), ['--help'])
    assert 'AppendToExisting/Extend/E' in result.output


def test_convert_write_mode():
    param_type = WriteModeParamType()
    assert param_type.convert(WriteMode.CLASSIC_APPEND, None, None) is WriteMode.CLASSIC_APPEND


def test_shell_complete():
    items = WriteModeParamType(append=True).shell_complete(None, None, 'c')
    assert [item.value for item in items] == ['CreateNew', 'ClassicWrite', 'ClassicAppend']

    items = WriteModeParamType().shell_complete(None, None, '')
    assert [item.value for item in items] == ['CreateNew', 'UpdateExisting', 'ClassicWrite']
