from __future__ import annotations

from typing import Protocol

from opportunity.domain.opportunity import SeekerDomain


class SeekerDirectoryPort(Protocol):
    def list_all(self) -> list[SeekerDomain]: ...
