"""
Main entry point for the encapsulation demo.
"""

import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from .config import load_config
from .console import degree_symbol
from .core.people import Student
from .core.messages import SecretMessage
from .core.temperature import Temperature
from .logging import configure_logging


logger = logging.getLogger(__name__)


def run_driver(config: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None) -> None:
    """Print the state of the demo objects."""
    settings = load_config(config)
    out = stream or sys.stdout

    print("Public Access Modifier\n", file=out)

    student = Student(settings.student_name, settings.student_id, settings.student_gpa)
    print(student.describe(), file=out)

    message = SecretMessage()
    message.print_message(out)

    temp = Temperature()
    temp.set_celsius(settings.celsius)
    print(f"Temperature: {temp.get_celsius()} {degree_symbol(out)}", file=out)

    logger.debug("Driver finished for %r", student)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Arguments are accepted but not interpreted."""
    settings = load_config()
    configure_logging(settings.log_level)
    run_driver(settings.model_dump())
    return 0
