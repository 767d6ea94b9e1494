from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol

from adspot_admin.domain.adspot.models import AdSpot


class AdSpotRepository(Protocol):
    def list(self) -> List[AdSpot]: ...

    def get(self, adspot_id: str) -> Optional[AdSpot]: ...

    def append(self, adspot: AdSpot) -> AdSpot: ...

    def update_status(
        self,
        adspot_id: str,
        status: str,
        deactivated_at: Optional[datetime] = None,
        cause: Optional[str] = None,
    ) -> Optional[AdSpot]: ...
