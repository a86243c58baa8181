import sys
from typing import Optional, TextIO


DEFAULT_SECRET = "This message is private and can only be read from inside the class."


class SecretMessage:
    """Keeps its text private; the only way out is print_message()."""

    def __init__(self, message: str = DEFAULT_SECRET):
        self.__message = message

    def print_message(self, stream: Optional[TextIO] = None) -> None:
        print(self.__message, file=stream or sys.stdout)
