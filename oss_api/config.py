"""
Runtime settings for the insights API.

Everything is read from the environment once at import time, with defaults
that match the demo fixtures. The reference date anchors every "days elapsed"
calculation so the fixture numbers don't drift as the calendar moves.
"""

import os
from datetime import date

# Day the fixture universe was captured. Elapsed-day math is measured from here.
REFERENCE_DATE = date.fromisoformat(os.getenv("OSS_REFERENCE_DATE", "2026-02-04"))

# National processing target for a full application, in days.
SLA_TARGET_DAYS = int(os.getenv("OSS_SLA_TARGET_DAYS", "45"))

# Cases older than this are escalated to the admin desk.
ESCALATION_THRESHOLD_DAYS = int(os.getenv("OSS_ESCALATION_DAYS", "60"))

# Open cases one officer can carry before counting as overloaded.
OFFICER_CAPACITY = int(os.getenv("OSS_OFFICER_CAPACITY", "15"))

LOG_LEVEL = os.getenv("OSS_LOG_LEVEL", "INFO")
