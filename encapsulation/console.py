import sys
from typing import Optional, TextIO


def console_can_encode(text: str, stream: Optional[TextIO] = None) -> bool:
    stream = stream or sys.stdout
    enc = getattr(stream, "encoding", None)
    if not enc:
        # in-memory streams (StringIO) take any str
        return True
    try:
        text.encode(enc)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def degree_symbol(stream: Optional[TextIO] = None) -> str:
    return "°C" if console_can_encode("°", stream) else "deg C"
