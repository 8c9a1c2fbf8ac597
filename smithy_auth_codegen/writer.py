#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import re
import sys
from collections.abc import Iterator
from contextlib import contextmanager

_INDENT = "    "
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_snake_case(name: str) -> str:
    """Convert a shape name such as ``GetCityImage`` to ``get_city_image``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


class PythonWriter:
    """Accumulates the source of a single generated Python module.

    Imports are collected separately from the body so they can be rendered sorted
    at the top of the module.
    """

    def __init__(self, header: str | None = None) -> None:
        self._header = header
        self._imports: dict[str, set[str]] = {}
        self._lines: list[str] = []
        self._level = 0

    def add_import(self, module: str, name: str) -> None:
        self._imports.setdefault(module, set()).add(name)

    def write(self, line: str = "") -> None:
        """Write a line at the current indentation level."""
        self._lines.append(f"{_INDENT * self._level}{line}" if line else "")

    def write_docstring(self, docstring: str) -> None:
        self.write(f'"""{docstring}"""')

    @contextmanager
    def indent(self) -> Iterator[None]:
        self._level += 1
        try:
            yield
        finally:
            self._level -= 1

    @contextmanager
    def open_block(self, opening: str, closing: str | None = None) -> Iterator[None]:
        """Write an opening line, then indent everything written within the block.

        If nothing is written within a block opened with a colon, ``pass`` is
        written so the result is still valid Python.
        """
        self.write(opening)
        start = len(self._lines)
        with self.indent():
            yield
            if len(self._lines) == start and opening.endswith(":"):
                self.write("pass")
        if closing is not None:
            self.write(closing)

    def _render_imports(self) -> list[str]:
        stdlib: list[str] = []
        other: list[str] = []
        for module in sorted(self._imports):
            names = ", ".join(sorted(self._imports[module]))
            group = stdlib if module.split(".")[0] in sys.stdlib_module_names else other
            group.append(f"from {module} import {names}")
        if stdlib and other:
            return stdlib + [""] + other
        return stdlib + other

    def __str__(self) -> str:
        parts: list[str] = []
        if self._header:
            parts.append(self._header)
        if self._imports:
            parts.append("\n".join(self._render_imports()))
        body = "\n".join(self._lines).strip("\n")
        if body:
            parts.append(body)
        return "\n\n\n".join(parts) + "\n"
