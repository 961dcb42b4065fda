from __future__ import annotations

DEFAULT_API_VERSION = 4
GOOD_RESPONSE_RANGE = range(200, 299)
NO_CONTENT_STATUS = 204
UNAUTHORIZED_STATUSES = (401, 403)
