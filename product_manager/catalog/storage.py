"""
==============================================================================
Backing Store Module
==============================================================================

Whole-file JSON persistence for the product catalog.

The catalog only talks to its store through ``read()`` and ``write()``, so
any object offering those two methods can stand in for the file (tests use
an in-memory store).

File Format:
-----------
[
  {"id": 1, "name": "Widget", "category": "Hardware", "price": 9.99, "available": true}
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union


# Module logger
logger = logging.getLogger(__name__)


class JsonFileStore:
    """
    Backing store over a single pretty-printed JSON file.

    Errors are not handled here; the catalog decides how read and write
    failures are reported.

    Example:
        >>> store = JsonFileStore(Path("products.json"))
        >>> store.write([{"id": 1, "name": "A", "category": "X", "price": 5, "available": True}])
        >>> store.read()[0]["name"]
        'A'
    """

    def __init__(self, path: Union[str, Path], indent: int = 2) -> None:
        """
        Initialize the store.

        Args:
            path: Location of the products JSON file
            indent: Indentation for pretty printing
        """
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def read(self) -> Any:
        """
        Read and decode the whole file.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            json.JSONDecodeError: If the content is not valid JSON
        """
        with self._path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def write(self, data: Any) -> None:
        """
        Replace the whole file with ``data`` encoded as JSON.

        Raises:
            OSError: If the file cannot be written
            TypeError: If ``data`` is not JSON serializable
        """
        content = json.dumps(data, indent=self._indent, ensure_ascii=False)
        self._path.write_text(content + "\n", encoding="utf-8")
        logger.debug(f"Wrote {self._path}")

    def __repr__(self) -> str:
        return f"JsonFileStore(path={str(self._path)!r})"
