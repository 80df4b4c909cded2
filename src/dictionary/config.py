"""Configuration parser for the dictionary."""

from pathlib import Path
from typing import Optional, Union

from src.custom_data_structures.Trie.Trie import DEFAULT_SUGGESTIONS_LIMIT

DEFAULT_LOG_FILE = Path(__file__).parent.parent.parent / "logs/dictionary.log"


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigNotFoundError(Exception):
    """Raised when any of the required configuration settings
    is not provided.
    """


class ConfigValueError(Exception):
    """Raised when a configuration setting has an unusable value."""


class DictionaryConfig:
    """A class to save dictionary configuration settings."""

    def __init__(
        self,
        word_list_path: Path,
        max_suggestions: int = DEFAULT_SUGGESTIONS_LIMIT,
        log_details: bool = False,
        log_file: Path = DEFAULT_LOG_FILE,
    ) -> None:
        """Initialize the dictionary configuration.

        Args:
            word_list_path (Path): The path to the newline-delimited
            word list that fills the trie.
            max_suggestions (int): How many completions a query returns.
            log_details (bool): Whether every query should be logged.
            log_file (Path): Where log records are written.

        """
        self.word_list_path = word_list_path
        self.max_suggestions = max_suggestions
        self.log_details = log_details
        self.log_file = log_file

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Dictionary configuration settings:
                Word list path: {self.word_list_path}
                Max suggestions: {self.max_suggestions}
                Log details: {"YES" if self.log_details else "NO"}
                Log file: {self.log_file}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def parse_positive_int(key: str, val: str) -> int:
    """Parse a strictly positive integer setting.

    Args:
        key (str): The key to parse the integer for.
        val (str): The value to be parsed.

    Raises:
        ConfigValueError: If the value is not a positive integer.

    Returns:
        int: The parsed value.

    """
    try:
        number = int(val.strip())
    except ValueError as e:
        raise ConfigValueError(
            f"Invalid integer value for key '{key}' in the configuration "
            f"file: '{val}'.",
        ) from e

    if number <= 0:
        raise ConfigValueError(
            f"The value of '{key}' must be a positive integer, got {number}.",
        )
    return number


def load_config_file(
    config_file_path: Path,
    word_list_override: Optional[Union[str, Path]] = None,
) -> DictionaryConfig:
    """Load and parse the configuration file.

    The word list itself is not checked here, a missing word list is
    reported when the dictionary is loaded.

    Args:
        config_file_path (Path): Path to the config file.
        word_list_override (Optional[Union[str, Path]]): A word list path
        that takes precedence over the `wordlist` key.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        ConfigBoolParsingError: If a boolean setting can't be parsed.
        ConfigValueError: If a numeric setting is invalid.
        FileNotFoundError: If the config file does not exist.

    Returns:
        DictionaryConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    word_list_path: Optional[Path] = None
    max_suggestions = DEFAULT_SUGGESTIONS_LIMIT
    log_details = False
    log_file = DEFAULT_LOG_FILE

    # Open and read the configuration file line by line
    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "wordlist":
                word_list_path = Path(value)
            elif key == "max_suggestions":
                max_suggestions = parse_positive_int("max_suggestions", value)
            elif key == "log_details":
                log_details = parse_bool("log_details", value)
            elif key == "log_file":
                log_file = Path(value)

    if word_list_override is not None:
        word_list_path = Path(word_list_override)

    if word_list_path is None:
        raise ConfigNotFoundError(
            "Missing required configuration: 'wordlist'. "
            "Please ensure the config file includes a valid line for "
            "'wordlist'.",
        )

    return DictionaryConfig(
        word_list_path,
        max_suggestions=max_suggestions,
        log_details=log_details,
        log_file=log_file,
    )
