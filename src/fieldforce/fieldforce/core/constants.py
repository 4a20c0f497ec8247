"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "truthface_db"

DEFAULT_MAP_CENTER = (12.9716, 77.5946)
DEFAULT_MAP_ZOOM = 13

GEO_TIMEOUT_MS = 10_000
GEO_MAXIMUM_AGE_MS = 0
LOCATION_POLL_SECONDS = 60

DEFAULT_HISTORY_LIMIT = 15
DEFAULT_PROOF_NOTE = "Task completed"
PROOF_PHOTO_PLACEHOLDER = "https://via.placeholder.com/300?text=Proof+Photo"
