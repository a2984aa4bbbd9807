# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Shared pytest fixtures."""

import io
import logging

import pytest
from rich.console import Console

from roster.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point the global config directory at a temp dir and ignore .env/env vars."""
    config_dir = tmp_path / ".roster"
    monkeypatch.setattr("roster.config.settings.GLOBAL_ROSTER_DIR", config_dir)
    monkeypatch.chdir(tmp_path)
    for var in ("ROSTER_LOG_LEVEL", "ROSTER_LOG_FILE", "ROSTER_STRICT_ADD_PARSING", "ROSTER_SHOW_DIRECTORY_DUMP"):
        monkeypatch.delenv(var, raising=False)
    return config_dir


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any root logging configuration done by CLI tests."""
    root = logging.getLogger()
    original_handlers = root.handlers.copy()
    original_level = root.level

    yield

    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    """Rich console writing plain text into ``output``."""
    return Console(file=output, width=120, color_system=None)


@pytest.fixture
def settings():
    return Settings()
