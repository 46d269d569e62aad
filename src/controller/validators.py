"""Validation of a Directory before it is committed."""

from __future__ import annotations

from dataclasses import dataclass

from model import Directory


@dataclass(frozen=True)
class ValidationError:
    """One problem that blocks a commit."""

    message: str
    field: str  # "name", "sources" or "excludes"
    index: int | None = None  # Position within a repeated field

    def __str__(self) -> str:
        return self.message


def verify(directory: Directory) -> list[ValidationError]:
    """Check a directory and return every blocking error, in display order.

    An empty list means the directory can be committed. The directory is
    only read.

    Args:
        directory: Draft to check

    Returns:
        List of ValidationError, first one is the message shown to the user
    """
    errors = []
    if not directory.name.strip():
        errors.append(ValidationError("Name should not be empty", "name"))
    for i, source in enumerate(directory.sources):
        if not source.strip():
            errors.append(ValidationError(f"Source {i + 1} should have a path", "sources", i))
    for i, exclude in enumerate(directory.excludes):
        if not exclude.strip():
            errors.append(ValidationError(f"Exclude {i + 1} should not be empty", "excludes", i))
    return errors


def find_duplicates(directory: Directory) -> list[str]:
    """Return warnings for repeated sources and excludes.

    Duplicates never block a commit; blank entries are left to verify().
    """
    warnings = []
    for label, values in (("source", directory.sources), ("exclude", directory.excludes)):
        seen = set()
        for value in values:
            stripped = value.strip()
            if not stripped:
                continue
            if stripped in seen:
                warning = f"Duplicate {label}: {stripped}"
                if warning not in warnings:
                    warnings.append(warning)
            seen.add(stripped)
    return warnings
