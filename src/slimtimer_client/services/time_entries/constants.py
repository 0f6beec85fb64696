"""Constants for the time entries resource."""

TIME_ENTRIES_PATH = "time_entries"

# Root element of time entry request bodies
TIME_ENTRY_ROOT = "time_entry"

RECORD_NAME = "time entry"

# Wire name of TimeEntry.duration
WIRE_DURATION = "duration_in_seconds"
