from __future__ import annotations

from typing import Dict

# Field keys with fixed built-in rendering when no scope is given.
INDEX_KEY = "index"
ACTION_KEY = "action"

ALIGN_LEFT = "left"
ALIGN_CENTER = "center"

# Extra property names consumed by the decorator chain.
DEFAULT_PROPERTY = "default"
REQUIRED_HEADER_PROPERTY = "requiredHeader"
ELLIPSES_PROPERTY = "ellipses"
FORMAT_PROPERTY = "format"

REQUIRED_HEADER_CLASS = "requiredHeader"

ELLIPSIS_STYLE: Dict[str, str] = {
    "overflow": "hidden",
    "whiteSpace": "nowrap",
    "textOverflow": "ellipsis",
}

TRUNCATE_LENGTH = 10
TRUNCATE_SUFFIX = "..."

# moment's default output pattern
DEFAULT_DATE_PATTERN = "YYYY-MM-DDTHH:mm:ssZ"

ERROR_PREFIX = "[T: ExtraProperty]"
