from __future__ import annotations

from typing import Protocol

from opportunity.domain.events import OpportunityPublished


class OpportunityEventPublisherPort(Protocol):
    def opportunity_published(self, event: OpportunityPublished) -> None: ...
