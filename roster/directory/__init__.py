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

"""Employee directory: the name to department store and its add grammar."""

from roster.directory.parser import (
    ADD_COMMAND_EXAMPLE,
    AddCommand,
    parse_add_command,
    scan_add_command,
)
from roster.directory.store import DirectoryStore

__all__ = [
    "ADD_COMMAND_EXAMPLE",
    "AddCommand",
    "DirectoryStore",
    "parse_add_command",
    "scan_add_command",
]
