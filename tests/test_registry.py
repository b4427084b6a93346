import pytest

from cadastro_escolar.models import BirthDate, Student, Teacher, Title
from cadastro_escolar.registry import (
    DuplicateCpfError,
    DuplicateEnrollmentError,
    PersonNotFoundError,
    Registry,
)
from cadastro_escolar.storage import RecordStore


def _student(name="Ana", cpf="111.111.111-11", month=3, enrollment="A1"):
    return Student(
        name=name, cpf=cpf, birth_date=BirthDate(10, month, 2000), enrollment=enrollment
    )


def _teacher(name="Beto", cpf="222.222.222-22", month=7, title=Title.MASTER):
    return Teacher(name=name, cpf=cpf, birth_date=BirthDate(5, month, 1980), title=title)


@pytest.fixture
def store(tmp_path):
    return RecordStore(tmp_path)


@pytest.fixture
def registry(store):
    reg = Registry(store)
    reg.load()
    return reg


def test_load_from_missing_files_is_empty(registry):
    assert registry.people() == []


def test_add_student_persists_and_reloads(store, registry):
    student = _student()
    registry.add_student(student)
    fresh = Registry(store)
    fresh.load()
    assert fresh.students == [student]


def test_add_teacher_persists_and_reloads(store, registry):
    teacher = _teacher()
    registry.add_teacher(teacher)
    fresh = Registry(store)
    fresh.load()
    assert fresh.teachers == [teacher]
    assert fresh.teachers[0].title == "Mestre"


def test_people_lists_students_then_teachers(registry):
    teacher = _teacher()
    student = _student()
    registry.add_teacher(teacher)
    registry.add_student(student)
    assert registry.people() == [student, teacher]


def test_duplicate_cpf_across_kinds_rejected(registry):
    registry.add_student(_student(cpf="333.333.333-33"))
    with pytest.raises(DuplicateCpfError):
        registry.add_teacher(_teacher(cpf="333.333.333-33"))
    assert registry.teachers == []


def test_duplicate_enrollment_rejected(registry):
    registry.add_student(_student(cpf="111.111.111-11", enrollment="X9"))
    with pytest.raises(DuplicateEnrollmentError):
        registry.add_student(_student(cpf="444.444.444-44", enrollment="X9"))
    assert len(registry.students) == 1


def test_taken_checks(registry):
    registry.add_student(_student(enrollment="E7"))
    assert registry.cpf_taken("111.111.111-11")
    assert not registry.cpf_taken("999.999.999-99")
    assert registry.enrollment_taken("E7")
    assert not registry.enrollment_taken("E8")


def test_search_by_name_returns_all_matches(registry):
    first = _student(name="Caio", cpf="111.111.111-11", enrollment="1")
    second = _student(name="Caio", cpf="555.555.555-55", enrollment="2")
    registry.add_student(first)
    registry.add_student(second)
    registry.add_teacher(_teacher(name="Caio"))
    assert registry.students_named("Caio") == [first, second]
    assert len(registry.teachers_named("Caio")) == 1
    assert registry.students_named("caio") == []


def test_lookup_by_cpf(registry):
    teacher = _teacher()
    registry.add_teacher(teacher)
    assert registry.teacher_by_cpf(teacher.cpf) == teacher
    with pytest.raises(PersonNotFoundError):
        registry.student_by_cpf(teacher.cpf)


def test_remove_teacher_rewrites_file(store, registry):
    kept = _teacher(name="Kept", cpf="666.666.666-66")
    gone = _teacher(name="Gone", cpf="777.777.777-77")
    registry.add_teacher(gone)
    registry.add_teacher(kept)
    assert registry.remove_teacher(gone.cpf) == gone
    assert registry.teachers == [kept]
    assert store.load_teachers() == [kept]


def test_remove_student_rewrites_file(store, registry):
    student = _student()
    registry.add_student(student)
    registry.remove_student(student.cpf)
    assert registry.students == []
    assert store.read_student_lines() == []


def test_remove_unknown_raises(registry):
    with pytest.raises(PersonNotFoundError):
        registry.remove_teacher("000.000.000-00")
    with pytest.raises(PersonNotFoundError):
        registry.remove_student("000.000.000-00")


def test_removed_cpf_can_be_reused(registry):
    student = _student()
    registry.add_student(student)
    registry.remove_student(student.cpf)
    assert not registry.cpf_taken(student.cpf)


def test_clear_teachers_leaves_students(store, registry):
    registry.add_teacher(_teacher())
    registry.add_student(_student())
    registry.clear_teachers()
    assert registry.teachers == []
    assert store.read_teacher_lines() == []
    assert len(registry.students) == 1


def test_clear_students(store, registry):
    registry.add_student(_student())
    registry.clear_students()
    assert registry.students == []
    assert store.load_students() == []


def test_birthdays_filter_by_month(registry):
    march = _student(cpf="111.111.111-11", month=3, enrollment="1")
    may = _student(cpf="888.888.888-88", month=5, enrollment="2")
    registry.add_student(march)
    registry.add_student(may)
    registry.add_teacher(_teacher(month=7))
    assert registry.student_birthdays(3) == [march]
    assert registry.teacher_birthdays(3) == []
    assert len(registry.teacher_birthdays(7)) == 1


@pytest.mark.parametrize("month", [0, 13])
def test_birthdays_reject_invalid_month(registry, month):
    with pytest.raises(ValueError):
        registry.student_birthdays(month)
    with pytest.raises(ValueError):
        registry.teacher_birthdays(month)