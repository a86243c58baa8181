from typing import Any, Dict


class Student:
    """Student with read-only identity and GPA."""

    def __init__(self, name: str, student_id: int, gpa: float):
        self._name = name
        self._student_id = student_id
        self._gpa = gpa

    @property
    def name(self) -> str:
        return self._name

    @property
    def student_id(self) -> int:
        return self._student_id

    @property
    def gpa(self) -> float:
        return self._gpa

    def describe(self) -> str:
        return (f"Here is {self._name}, and his gpa is {self._gpa} "
                f"and you can find him by student number of {self._student_id}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self._name,
            'student_id': self._student_id,
            'gpa': self._gpa,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, student_id={self._student_id})"
