"""Directory model: one backup job definition."""

from dataclasses import dataclass, field


@dataclass
class Directory:
    """A named set of source folders with exclude patterns."""

    name: str = ""
    sources: list[str] = field(default_factory=list)  # Folders to back up
    excludes: list[str] = field(default_factory=list)  # Glob patterns passed to tar --exclude

    def clone(self) -> "Directory":
        """Return an independent copy (no shared lists)."""
        return Directory(
            name=self.name,
            sources=list(self.sources),
            excludes=list(self.excludes),
        )
