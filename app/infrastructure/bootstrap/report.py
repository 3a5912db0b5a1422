"""Bootstrap outcomes: one tagged result per ensure-step, aggregated in a report."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.domain.enums import ResourceKind, ResourceStatus


@dataclass(frozen=True)
class ResourceOutcome:
    """Result of ensuring one resource."""

    kind: ResourceKind
    name: str
    status: ResourceStatus
    identifier: str | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is not ResourceStatus.FAILED

    @classmethod
    def failure(cls, kind: ResourceKind, name: str, error: str) -> "ResourceOutcome":
        return cls(kind=kind, name=name, status=ResourceStatus.FAILED, error=error)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "name": self.name,
            "status": self.status.value,
            "identifier": self.identifier,
        }
        if self.error:
            data["error"] = self.error
        if self.details:
            data["details"] = self.details
        return data


@dataclass(frozen=True)
class BootstrapReport:
    """Per-resource outcomes of one bootstrap run, in execution order.

    The caller decides readiness from it; the bootstrap itself never fails.
    """

    outcomes: tuple[ResourceOutcome, ...] = ()

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failed(self) -> list[ResourceOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def created(self) -> list[ResourceOutcome]:
        return [o for o in self.outcomes if o.status is ResourceStatus.CREATED]

    def get(self, kind: ResourceKind) -> ResourceOutcome | None:
        for outcome in self.outcomes:
            if outcome.kind is kind:
                return outcome
        return None

    def identifier(self, kind: ResourceKind) -> str | None:
        """Identifier produced by a successful step, else None."""
        outcome = self.get(kind)
        if outcome is None or not outcome.ok:
            return None
        return outcome.identifier

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "resources": [o.to_dict() for o in self.outcomes],
        }
