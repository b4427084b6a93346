"""In-memory registry of students and teachers, kept in step with the record files."""

from __future__ import annotations

from .models import Person, Student, Teacher
from .storage import RecordStore


class DuplicateCpfError(ValueError):
    """Raised when a CPF is already registered."""

    def __init__(self, cpf: str) -> None:
        super().__init__(f"CPF já registrado: {cpf}")
        self.cpf = cpf


class DuplicateEnrollmentError(ValueError):
    """Raised when an enrollment number is already registered."""

    def __init__(self, enrollment: str) -> None:
        super().__init__(f"Esse número de matrícula já está cadastrado: {enrollment}")
        self.enrollment = enrollment


class PersonNotFoundError(LookupError):
    """Raised when nobody with the given CPF is registered."""

    def __init__(self, cpf: str) -> None:
        super().__init__(f"Não existe ninguém com esse CPF: {cpf}")
        self.cpf = cpf


def _check_month(month: int) -> None:
    if month < 1 or month > 12:
        raise ValueError("Mês inválido[1 a 12]")


class Registry:
    """Students and teachers, with every change written to the record store."""

    def __init__(self, store: RecordStore | None = None) -> None:
        self.store = store if store is not None else RecordStore()
        self._students: list[Student] = []
        self._teachers: list[Teacher] = []

    @property
    def students(self) -> list[Student]:
        return list(self._students)

    @property
    def teachers(self) -> list[Teacher]:
        return list(self._teachers)

    def load(self) -> None:
        """Replace the registry's contents with what the record files hold."""
        self._students = self.store.load_students()
        self._teachers = self.store.load_teachers()

    def people(self) -> list[Person]:
        """Everyone registered: students first, then teachers."""
        return [*self._students, *self._teachers]

    def cpf_taken(self, cpf: str) -> bool:
        return any(person.cpf == cpf for person in self.people())

    def enrollment_taken(self, enrollment: str) -> bool:
        return any(student.enrollment == enrollment for student in self._students)

    def add_student(self, student: Student) -> None:
        """Register a student and append it to the students file."""
        if self.cpf_taken(student.cpf):
            raise DuplicateCpfError(student.cpf)
        if self.enrollment_taken(student.enrollment):
            raise DuplicateEnrollmentError(student.enrollment)
        self._students.append(student)
        self.store.append_student(student)

    def add_teacher(self, teacher: Teacher) -> None:
        """Register a teacher and append it to the teachers file."""
        if self.cpf_taken(teacher.cpf):
            raise DuplicateCpfError(teacher.cpf)
        self._teachers.append(teacher)
        self.store.append_teacher(teacher)

    def teachers_named(self, name: str) -> list[Teacher]:
        return [teacher for teacher in self._teachers if teacher.name == name]

    def students_named(self, name: str) -> list[Student]:
        return [student for student in self._students if student.name == name]

    def teacher_by_cpf(self, cpf: str) -> Teacher:
        """The first teacher with this CPF; PersonNotFoundError if none."""
        for teacher in self._teachers:
            if teacher.cpf == cpf:
                return teacher
        raise PersonNotFoundError(cpf)

    def student_by_cpf(self, cpf: str) -> Student:
        """The first student with this CPF; PersonNotFoundError if none."""
        for student in self._students:
            if student.cpf == cpf:
                return student
        raise PersonNotFoundError(cpf)

    def remove_teacher(self, cpf: str) -> Teacher:
        """Remove the teacher with this CPF, rewrite the file, return the teacher."""
        teacher = self.teacher_by_cpf(cpf)
        self._teachers.remove(teacher)
        self.store.save_teachers(self._teachers)
        return teacher

    def remove_student(self, cpf: str) -> Student:
        """Remove the student with this CPF, rewrite the file, return the student."""
        student = self.student_by_cpf(cpf)
        self._students.remove(student)
        self.store.save_students(self._students)
        return student

    def clear_teachers(self) -> None:
        self.store.clear_teachers()
        self._teachers.clear()

    def clear_students(self) -> None:
        self.store.clear_students()
        self._students.clear()

    def teacher_birthdays(self, month: int) -> list[Teacher]:
        """Teachers born in the given month (1 to 12)."""
        _check_month(month)
        return [teacher for teacher in self._teachers if teacher.month == month]

    def student_birthdays(self, month: int) -> list[Student]:
        """Students born in the given month (1 to 12)."""
        _check_month(month)
        return [student for student in self._students if student.month == month]