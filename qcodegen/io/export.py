"""Write rendered programs out as source files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from qcodegen.circuit import Program
from qcodegen.logging import get_logger

if TYPE_CHECKING:
    from qcodegen.dialects.base import Dialect

logger = get_logger(__name__)


def export_program(program: Program, dialect: Union["Dialect", str]) -> str:
    """Return the source text of ``program`` in ``dialect``."""
    return program.render(dialect)


def dump_program(program: Program, path: str, dialect: Union["Dialect", str]) -> None:
    """
    Render ``program`` and write it to ``path`` as UTF-8.

    The program is rendered before the file is opened, so a rendering error
    leaves any existing file untouched.
    """
    source = program.render(dialect)
    with open(path, "w", encoding="utf-8") as f:
        f.write(source)
    logger.debug("Wrote %d operations to %s", len(program), path)


__all__ = ["export_program", "dump_program"]
