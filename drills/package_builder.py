"""Software package descriptions and a fluent builder for them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional


class Language(enum.Enum):
    """The implementation language of a package."""

    RUST = "Rust"
    JAVA = "Java"
    PERL = "Perl"


@dataclass(frozen=True)
class Dependency:
    """A dependency on a package at a version expression."""

    name: str
    version_expression: str


@dataclass
class Package:
    """A representation of a software package."""

    name: str
    version: str = "0.1"
    authors: list[str] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    language: Optional[Language] = None

    def as_dependency(self) -> Dependency:
        """Return this package as a dependency for building other packages."""
        return Dependency(self.name, self.version)


class PackageBuilder:
    """Builds a Package step by step; call build() to get the result."""

    def __init__(self, name: str) -> None:
        self._package = Package(name)

    def version(self, version: str) -> PackageBuilder:
        """Set the package version."""
        self._package.version = version
        return self

    def authors(self, authors: list[str]) -> PackageBuilder:
        """Set the package authors."""
        self._package.authors = list(authors)
        return self

    def dependency(self, dependency: Dependency) -> PackageBuilder:
        """Add a further dependency."""
        self._package.dependencies.append(dependency)
        return self

    def language(self, language: Language) -> PackageBuilder:
        """Set the language; it is None unless set."""
        self._package.language = language
        return self

    def build(self) -> Package:
        """Return the package built so far."""
        return replace(
            self._package,
            authors=list(self._package.authors),
            dependencies=list(self._package.dependencies),
        )