# SPDX-License-Identifier: MIT

from typing import Any, Literal

StatusCode = Literal["pending", "in-progress", "in-review", "done", "cancelled"]

STATUS_CODES: tuple[StatusCode, ...] = (
    "pending",
    "in-progress",
    "in-review",
    "done",
    "cancelled",
)

DEFAULT_STATUS: StatusCode = "pending"

# Labels used by the dashboard's task table
BACKEND_STATUS_LABELS: dict[str, StatusCode] = {
    "pendiente": "pending",
    "en proceso": "in-progress",
    "revisión": "in-review",
    "revision": "in-review",
    "completada": "done",
    "terminada": "done",
    "cancelada": "cancelled",
}


def normalize_status(raw_status: Any) -> str:
    """
    Map a stored status label onto the closed set of status codes.

    Missing statuses count as pending. Labels outside the known set are
    returned lowercased and untouched so they fall back to the neutral marker
    at display time instead of being silently reclassified.
    """
    if raw_status is None or str(raw_status).strip() == "":
        return DEFAULT_STATUS
    key = str(raw_status).strip().lower()
    if key in STATUS_CODES:
        return key
    dashed = key.replace("_", "-").replace(" ", "-")
    if dashed in STATUS_CODES:
        return dashed
    return BACKEND_STATUS_LABELS.get(key, key)
