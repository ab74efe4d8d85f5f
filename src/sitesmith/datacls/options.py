"""
sitesmith Build Options

Resolved, immutable build flags. Resolution merges caller overrides onto
the fixed defaults and never fails: unknown keys are kept unvalidated so
steps can read their own private flags.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .. import constants


@dataclass(frozen=True)
class BuildOptions:
    drafts: bool = False
    dry_run: bool = False
    page: str = ""
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def resolve(cls, overrides: Optional[Mapping[str, Any]] = None) -> "BuildOptions":
        merged = {**constants.DEFAULT_BUILD_OPTIONS, **(overrides or {})}
        return cls(
            drafts=merged.pop("drafts"),
            dry_run=merged.pop("dry-run"),
            page=merged.pop("page"),
            extra=MappingProxyType(merged),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Read an option by its override key (`drafts`, `dry-run`, `page` or a step flag)."""
        return self.as_dict().get(key, default)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "drafts": self.drafts,
            "dry-run": self.dry_run,
            "page": self.page,
            **self.extra,
        }
