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

from pathlib import Path

import pytest


@pytest.fixture
def target(tmpdir) -> Path:
    """
    Path to a not yet existing file in an empty directory.
    """
    return Path(tmpdir) / 'target'


@pytest.fixture
def base_dir(tmpdir) -> Path:
    base_dir = Path(tmpdir) / 'config'
    base_dir.mkdir()
    return base_dir
