"""Filter type alias.

Filter function: takes FileEntry, returns True to include.
"""

from collections.abc import Callable
from typing import TypeAlias

from naechste.domain.model.file_entry import FileEntry

Filter: TypeAlias = Callable[[FileEntry], bool]
