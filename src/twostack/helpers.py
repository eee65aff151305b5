import re
from typing import List

from twostack.constants import EPSILON, FIELD_SEPARATOR, SEQUENCE_SEPARATOR

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def split_fields(text: str) -> List[str]:
    return [field.strip() for field in text.split(FIELD_SEPARATOR)]


def is_integer(token: str) -> bool:
    return _INTEGER_PATTERN.fullmatch(token.strip()) is not None


def parse_integer(token: str) -> int:
    if not is_integer(token):
        raise ValueError(f"'{token}' is not an integer")
    return int(token.strip())


def split_sequence(spec: str) -> List[str]:
    if spec == EPSILON:
        return []
    return spec.split(SEQUENCE_SEPARATOR)
