import re

# Presence check only, a colon with something on either side
MAP_SHAPE = re.compile(r'.+:.+')

INTEGER = re.compile(r'[-+]?[0-9]+')

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
