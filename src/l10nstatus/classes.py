from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_INCLUDES = ["**/*.properties"]


@dataclass(frozen=True)
class ResourceEntry:
    path: str
    location: Path
    group: str

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.group, str(self.location))

    def __lt__(self, other: "ResourceEntry") -> bool:
        return self.sort_key < other.sort_key


@dataclass
class BundleFamily:
    base: ResourceEntry
    # None marks a watched locale whose file does not exist
    variants: dict[str, Path | None] = field(default_factory=dict)


@dataclass(frozen=True)
class LocaleDelta:
    missing: frozenset[str]
    additional: frozenset[str]
    non_translated: frozenset[str]
    base_size: int
    values: dict[str, str] = field(default_factory=dict, compare=False)

    @property
    def translated_count(self) -> int:
        return self.base_size - len(self.missing) - len(self.non_translated)

    @property
    def is_ok(self) -> bool:
        return not (self.missing or self.additional or self.non_translated)


@dataclass
class ResourceDirectory:
    directory: str
    includes: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDES))
    excludes: list[str] = field(default_factory=list)


@dataclass
class Project:
    name: str
    resources: list[ResourceDirectory] = field(default_factory=list)


@dataclass
class LocaleResult:
    """Outcome of one (family, locale) comparison."""

    langid: str
    delta: LocaleDelta | None = None
    error: str | None = None

    @property
    def file_missing(self) -> bool:
        return self.delta is None and self.error is None


@dataclass
class FamilyRow:
    entry: ResourceEntry
    key_count: int
    results: list[LocaleResult]
    error: str | None = None


@dataclass
class ProjectHeader:
    name: str
