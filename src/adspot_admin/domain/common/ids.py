from __future__ import annotations

import uuid
from typing import NewType

AdSpotId = NewType("AdSpotId", str)


def new_adspot_id() -> AdSpotId:
    return AdSpotId(uuid.uuid4().hex)
