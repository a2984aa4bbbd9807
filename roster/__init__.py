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

"""
Roster - small interactive console exercises over in-memory data.

The centerpiece is an employee directory driven by a numbered menu:

    from roster.directory import DirectoryStore

    store = DirectoryStore()
    store.add("Add Sally to Engineering")
    store.list_all()  # ["Sally"]

Alongside it live a median/mode calculator, a Pig Latin converter and a
rectangle area demo under ``roster.exercises``.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
