"""Text files that hold the registered students and teachers, one per line."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from .models import BirthDate, Student, Teacher

STUDENT_MARKER = "ALUNO->"
TEACHER_MARKER = "PROFESSOR->"
STUDENTS_FILE = "alunos.txt"
TEACHERS_FILE = "professores.txt"

_NAME = "Nome: "
_BIRTH = " - Data de nascimento: "
_CPF = " - CPF: "
_ENROLLMENT = " - Matrícula: "
_TITLE = " - Título: "
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _describe(person, marker: str) -> str:
    return (
        f"{marker} {_NAME}{person.name}{_BIRTH}{person.birth_date}"
        f"{_CPF}{person.cpf}"
    )


def format_student(student: Student) -> str:
    """Render a student as one line of the students file, without newline."""
    return f"{_describe(student, STUDENT_MARKER)}{_ENROLLMENT}{student.enrollment}"


def format_teacher(teacher: Teacher) -> str:
    """Render a teacher as one line of the teachers file, without newline."""
    return f"{_describe(teacher, TEACHER_MARKER)}{_TITLE}{teacher.title}"


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _parse_common(line: str, tail_separator: str) -> tuple[str, BirthDate, str, str]:
    """Split a record line into name, birth date, CPF and the trailing field."""
    try:
        name_start = line.index(_NAME) + len(_NAME)
        birth_at = line.index(_BIRTH)
        name = line[name_start:birth_at]

        day_start = birth_at + len(_BIRTH)
        slash1 = line.index("/", day_start)
        day = _leading_int(line[day_start:slash1])

        month_start = slash1 + 1
        slash2 = line.index("/", month_start)
        month = _leading_int(line[month_start:slash2])

        year_start = slash2 + 1
        cpf_at = line.index(_CPF, year_start)
        year = _leading_int(line[year_start:cpf_at])

        cpf_start = cpf_at + len(_CPF)
        tail_at = line.index(tail_separator, cpf_start)
        cpf = line[cpf_start:tail_at]
        tail = line[tail_at + len(tail_separator):]
    except ValueError as exc:
        raise ValueError(f"malformed record line: {line!r}") from exc
    return name, BirthDate(day, month, year), cpf, tail


def parse_student(line: str) -> Student | None:
    """Read a student from a line; None when the line is not a student record."""
    if STUDENT_MARKER not in line:
        return None
    name, birth_date, cpf, enrollment = _parse_common(line, _ENROLLMENT)
    return Student(name=name, cpf=cpf, birth_date=birth_date, enrollment=enrollment)


def parse_teacher(line: str) -> Teacher | None:
    """Read a teacher from a line; None when the line is not a teacher record."""
    if TEACHER_MARKER not in line:
        return None
    name, birth_date, cpf, title = _parse_common(line, _TITLE)
    return Teacher(name=name, cpf=cpf, birth_date=birth_date, title=title)


class RecordStore:
    """The students and teachers files kept in one directory."""

    def __init__(self, directory: str | Path = ".") -> None:
        self.directory = Path(directory)
        self.students_path = self.directory / STUDENTS_FILE
        self.teachers_path = self.directory / TEACHERS_FILE

    @staticmethod
    def _read_lines(path: Path) -> list[str]:
        with path.open(encoding="utf-8") as handle:
            return [line.rstrip("\n") for line in handle]

    @staticmethod
    def _write(path: Path, lines: Iterable[str], mode: str) -> None:
        with path.open(mode, encoding="utf-8", newline="\n") as handle:
            for line in lines:
                handle.write(line + "\n")

    def read_student_lines(self) -> list[str]:
        """Lines of the students file; FileNotFoundError when it is missing."""
        return self._read_lines(self.students_path)

    def read_teacher_lines(self) -> list[str]:
        """Lines of the teachers file; FileNotFoundError when it is missing."""
        return self._read_lines(self.teachers_path)

    def load_students(self) -> list[Student]:
        """Students recorded in the file; empty when the file does not exist."""
        try:
            lines = self.read_student_lines()
        except FileNotFoundError:
            return []
        return [s for s in map(parse_student, lines) if s is not None]

    def load_teachers(self) -> list[Teacher]:
        """Teachers recorded in the file; empty when the file does not exist."""
        try:
            lines = self.read_teacher_lines()
        except FileNotFoundError:
            return []
        return [t for t in map(parse_teacher, lines) if t is not None]

    def append_student(self, student: Student) -> None:
        self._write(self.students_path, [format_student(student)], "a")

    def append_teacher(self, teacher: Teacher) -> None:
        self._write(self.teachers_path, [format_teacher(teacher)], "a")

    def save_students(self, students: Iterable[Student]) -> None:
        """Replace the students file with the given students."""
        self._write(self.students_path, map(format_student, students), "w")

    def save_teachers(self, teachers: Iterable[Teacher]) -> None:
        """Replace the teachers file with the given teachers."""
        self._write(self.teachers_path, map(format_teacher, teachers), "w")

    def clear_students(self) -> None:
        self._write(self.students_path, [], "w")

    def clear_teachers(self) -> None:
        self._write(self.teachers_path, [], "w")