
from __future__ import annotations
NS_PER_MS = 1_000_000
MS_PER_SECOND = 1_000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
MS_PER_MINUTE = MS_PER_SECOND * SECONDS_PER_MINUTE
MS_PER_HOUR = MS_PER_MINUTE * MINUTES_PER_HOUR
MS_PER_DAY = MS_PER_HOUR * HOURS_PER_DAY
