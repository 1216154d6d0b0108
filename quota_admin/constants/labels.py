# labels.py

UNKNOWN_LABEL = 'unknown'
UTC_MARKER = 'UTC'
VERSION_PREFIX = 'v'
USER_PREFIX = ' by '
USER_SUFFIX = ' at '

# CSS classes of the config row
ROW_CLASS = 'config'
SELECTED_CLASS = 'selected'
