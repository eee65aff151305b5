from pathlib import Path
from typing import Dict, List

from twostack.constants import FIELD_SEPARATOR, KEY_SEPARATOR, MACHINE_FILE_SUFFIX
from twostack.error import FormatError, MachineFileError
from twostack.models import Configuration
from twostack.validator import ConfigurationValidator

KEY_ALPHABET = "inputAlphabet"
KEY_STATES = "states"
KEY_START = "startState"
KEY_ENDS = "endStates"
KEY_TRANSITION = "transition"

REQUIRED_KEYS = (KEY_ALPHABET, KEY_STATES, KEY_START, KEY_ENDS)


def decode(
    text: str, validator: ConfigurationValidator | None = None
) -> Configuration:
    values: Dict[str, str] = {}
    transitions: List[str] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        if KEY_SEPARATOR not in line:
            continue
        key, value = (part.strip() for part in line.split(KEY_SEPARATOR, 1))
        if key == KEY_TRANSITION:
            transitions.append(value)
        elif key in REQUIRED_KEYS:
            values[key] = value
        else:
            raise FormatError(f"Unexpected key in the file: {key}", line_number)

    missing = [key for key in REQUIRED_KEYS if key not in values]
    if missing:
        raise FormatError(f"Missing key(s): {', '.join(missing)}")

    validator = validator or ConfigurationValidator()
    return validator.build(
        alphabet=values[KEY_ALPHABET],
        states=values[KEY_STATES],
        start=values[KEY_START],
        ends=values[KEY_ENDS],
        transitions=transitions,
    )


def encode(configuration: Configuration) -> str:
    lines = [
        f"{KEY_ALPHABET}={FIELD_SEPARATOR.join(configuration.alphabet)}",
        f"{KEY_STATES}={FIELD_SEPARATOR.join(str(s) for s in configuration.states)}",
        f"{KEY_START}={configuration.start}",
        f"{KEY_ENDS}={FIELD_SEPARATOR.join(str(s) for s in configuration.ends)}",
    ]
    lines.extend(
        f"{KEY_TRANSITION}={transition}" for transition in configuration.transitions
    )
    return "\n".join(lines) + "\n"


def with_machine_suffix(name: str) -> str:
    if not name.endswith(MACHINE_FILE_SUFFIX):
        name += MACHINE_FILE_SUFFIX
    return name


def load_machine(
    path: Path, validator: ConfigurationValidator | None = None
) -> Configuration:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MachineFileError(path, str(e)) from e
    return decode(text, validator)


def save_machine(
    configuration: Configuration, name: str, directory: Path = Path(".")
) -> Path:
    path = Path(directory) / with_machine_suffix(name)
    try:
        path.write_text(encode(configuration), encoding="utf-8")
    except OSError as e:
        raise MachineFileError(path, str(e)) from e
    return path


def list_machine_files(directory: Path = Path(".")) -> List[Path]:
    try:
        return sorted(
            p for p in Path(directory).glob(f"*{MACHINE_FILE_SUFFIX}") if p.is_file()
        )
    except OSError as e:
        raise MachineFileError(directory, str(e)) from e
