from __future__ import annotations

from datetime import timedelta

# Stored status flags
ACTIVE = "active"
INACTIVE = "inactive"
STATUSES = (ACTIVE, INACTIVE)

# Placements, in reporting order
HOME_SCREEN = "home_screen"
RIDE_SUMMARY = "ride_summary"
MAP_VIEW = "map_view"
PLACEMENTS = (HOME_SCREEN, RIDE_SUMMARY, MAP_VIEW)

# Inactive reasons
EXPIRED_BY_TTL = "expired_by_ttl"
DEACTIVATED_BY_USER = "deactivated_by_user"
INACTIVE_REASONS = (EXPIRED_BY_TTL, DEACTIVATED_BY_USER)

# A deactivation stamped this close to (and not before) the expiry instant
# is read as the TTL lapsing rather than an operator action.
COINCIDENCE_WINDOW = timedelta(minutes=1)

MAX_TTL_MINUTES = 525600
