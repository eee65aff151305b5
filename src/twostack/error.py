from pathlib import Path
from typing import Sequence


class ConfigurationError(Exception):
    def __init__(self, errors: Sequence[str] | str) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors: list[str] = list(errors)
        super().__init__("Invalid configuration: " + "; ".join(self.errors))


class FormatError(Exception):
    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(
            "Malformed machine description"
            + (f" (line {line_number})" if line_number is not None else "")
            + f": {message}"
        )
        self.message = message
        self.line_number = line_number


class InputError(Exception):
    def __init__(self, invalid_characters: Sequence[str]) -> None:
        super().__init__(
            "Invalid input characters: [" + ", ".join(invalid_characters) + "]"
        )
        self.invalid_characters = list(invalid_characters)


class StackOperationError(Exception):
    def __init__(self, pop_spec: str, message: str | None = None) -> None:
        super().__init__(
            f"Word failed - transition[{pop_spec}]=E"
            + (f": {message}" if message else "")
        )
        self.pop_spec = pop_spec


class StepLimitExceededError(Exception):
    def __init__(self, max_steps: int, word: str) -> None:
        super().__init__(
            f"Simulation of word '{word}' exceeded the step budget of {max_steps}."
        )
        self.max_steps = max_steps
        self.word = word


class MachineFileError(Exception):
    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Cannot access machine file '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason
