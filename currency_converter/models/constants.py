"""Validation constants shared by the request models."""

import re

CURRENCY_CODE_LENGTH = 3
CURRENCY_CODE_RE = re.compile(r"[A-Za-z]{3}")
