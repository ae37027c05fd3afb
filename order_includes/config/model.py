from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..imports.classifier import (
    DEFAULT_PLATFORM_PREFIXES,
    DEFAULT_THIRD_PARTY_PREFIXES,
    GoImportClassifier,
)

SCHEMA_VERSION = 1
DEFAULT_EXTENSIONS = [".go"]


class OrderConfig(BaseModel):
    """
    Contents of .order-includes.yaml.

    Defaults reproduce the built-in behaviour, so an absent file
    and an empty file are equivalent.
    """
    model_config = ConfigDict(extra="forbid")

    schema_version: int = SCHEMA_VERSION
    third_party_prefixes: List[str] = Field(default_factory=lambda: list(DEFAULT_THIRD_PARTY_PREFIXES))
    platform_prefixes: List[str] = Field(default_factory=lambda: list(DEFAULT_PLATFORM_PREFIXES))
    # Exact, case-sensitive suffixes
    extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    # gitwildmatch patterns relative to the directory being processed
    exclude: List[str] = Field(default_factory=list)
    respect_gitignore: bool = False

    def build_classifier(self) -> GoImportClassifier:
        return GoImportClassifier(
            third_party_prefixes=self.third_party_prefixes,
            platform_prefixes=self.platform_prefixes,
        )


__all__ = ["OrderConfig", "SCHEMA_VERSION", "DEFAULT_EXTENSIONS"]
