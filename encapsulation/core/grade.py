"""
Grade value object with validated mutators.
"""

import logging
from typing import Any, Dict, Optional

from .exceptions import ValidationError


logger = logging.getLogger(__name__)

STUDENT_NAME_MESSAGE = "You must insert valid student name!"
NUMERIC_GRADE_MESSAGE = "ENTER RIGHT FORMAT!!!"
COURSE_CODE_MESSAGE = "ENTER THE RIGHT CODE BEACH!!!!!"

MIN_GRADE = 0
MAX_GRADE = 100


class Grade:
    """A student's numeric grade for one course.

    The constructor stores its arguments verbatim. Only the ``set_*``
    mutators and :meth:`create` run the validation helpers.
    """

    def __init__(self, student_name: Optional[str], numeric_grade: int, course_code: Optional[str]):
        self._student_name = student_name
        self._numeric_grade = numeric_grade
        self._course_code = course_code

    @classmethod
    def create(cls, student_name: Optional[str], numeric_grade: int, course_code: Optional[str]) -> "Grade":
        """Build a grade, raising ValidationError on the first rejected field."""
        return cls(
            cls._validate_student_name(student_name),
            cls._validate_numeric_grade(numeric_grade),
            cls._validate_course_code(course_code),
        )

    @property
    def student_name(self) -> Optional[str]:
        return self._student_name

    @property
    def numeric_grade(self) -> int:
        return self._numeric_grade

    @property
    def course_code(self) -> Optional[str]:
        return self._course_code

    def get_student_name(self) -> Optional[str]:
        return self._student_name

    def get_numeric_grade(self) -> int:
        return self._numeric_grade

    def get_course_code(self) -> Optional[str]:
        return self._course_code

    def set_student_name(self, student_name: Optional[str]) -> bool:
        """Set the student name. Returns False and keeps the old name if rejected."""
        try:
            self._student_name = self._validate_student_name(student_name)
        except ValidationError as e:
            logger.warning(e.message)
            return False
        return True

    def set_numeric_grade(self, numeric_grade: int) -> bool:
        """Set the numeric grade. Returns False and keeps the old grade if rejected."""
        try:
            self._numeric_grade = self._validate_numeric_grade(numeric_grade)
        except ValidationError as e:
            logger.warning(e.message)
            return False
        return True

    def set_course_code(self, course_code: Optional[str]) -> bool:
        """Set the course code. Returns False and keeps the old code if rejected."""
        try:
            self._course_code = self._validate_course_code(course_code)
        except ValidationError as e:
            logger.warning(e.message)
            return False
        return True

    def is_valid(self) -> bool:
        """Check whether every current field would pass validation."""
        try:
            self._validate_student_name(self._student_name)
            self._validate_numeric_grade(self._numeric_grade)
            self._validate_course_code(self._course_code)
        except ValidationError:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert grade to dictionary."""
        return {
            'student_name': self._student_name,
            'numeric_grade': self._numeric_grade,
            'course_code': self._course_code,
        }

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(student_name={self._student_name!r}, "
                f"numeric_grade={self._numeric_grade!r}, course_code={self._course_code!r})")

    # Validation helpers

    @staticmethod
    def _validate_student_name(name: Optional[str]) -> str:
        if not isinstance(name, str) or len(name) == 0:
            raise ValidationError(STUDENT_NAME_MESSAGE, error_code="invalid_student_name",
                                  details={'field': 'student_name', 'value': name})
        return name

    @staticmethod
    def _validate_numeric_grade(grade: int) -> int:
        if (not isinstance(grade, int) or isinstance(grade, bool)
                or grade < MIN_GRADE or grade > MAX_GRADE):
            raise ValidationError(NUMERIC_GRADE_MESSAGE, error_code="invalid_numeric_grade",
                                  details={'field': 'numeric_grade', 'value': grade})
        return grade

    @staticmethod
    def _validate_course_code(code: Optional[str]) -> str:
        # stored untrimmed, only the emptiness check ignores whitespace
        if not isinstance(code, str) or not code.strip():
            raise ValidationError(COURSE_CODE_MESSAGE, error_code="invalid_course_code",
                                  details={'field': 'course_code', 'value': code})
        return code
