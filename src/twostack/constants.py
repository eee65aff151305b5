from enum import Enum
from typing import Set

EPSILON = "E"
BOTTOM = "#"

FIELD_SEPARATOR = ","
SEQUENCE_SEPARATOR = ";"
KEY_SEPARATOR = "="

RESERVED_SYMBOLS: Set[str] = {EPSILON, BOTTOM}
RESERVED_CHARACTERS: Set[str] = {FIELD_SEPARATOR, SEQUENCE_SEPARATOR, KEY_SEPARATOR}

TRANSITION_FIELD_COUNT = 7
MACHINE_FILE_SUFFIX = ".txt"


class Verdict(Enum):
    RUNNING = "running"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
