# cadastro-escolar

A small interactive console program for keeping a register of a school's
people: teachers (*professores*) and students (*alunos*). Every person has a
name, a birth date and a CPF. Teachers also carry an academic title
(Especialista, Mestre or Doutor), and students carry an enrollment number
(*matrícula*).

The program speaks Portuguese. It keeps its records in two UTF-8 text files,
`professores.txt` and `alunos.txt`, with one person per line. The files are
read when the program starts. A new record is appended to its file. When a
record is deleted, its file is rewritten. So the register survives between
sessions.

## Installation

```
pip install .
```

Python 3.10 or later is required. There are no dependencies outside the
standard library.

## Usage

```
cadastro-escolar [--dir DIRECTORY]
```

`--dir` names the directory that holds `alunos.txt` and `professores.txt`.
It defaults to the current directory. A missing file counts as an empty
register.

The main menu accepts these choices:

- **0** – leave the program. The program also ends when the input runs out.
- **1** – register a teacher or a student.
- **2** – list the teachers or the students. The lines are shown as they stand
  in the file, followed by a total.
- **3** – search teachers or students by exact name.
- **4** – search a teacher or a student by CPF.
- **5** – delete a teacher or a student by CPF. Enter `0` to go back. The
  program asks for confirmation, and `S` or `s` confirms.
- **6** – delete all teachers or all students.
- **7** – birthdays of a month:
  - 7.1 sets the month.
  - 7.2 lists the teachers born in that month.
  - 7.3 lists the students born in that month.

  If no month has been set yet, 7.2 and 7.3 ask for one. Option 7 is accepted
  although the printed main menu stops at 6.

In every sub-menu, `0` returns to the main menu.

### What is checked on entry

- **CPF.** It must be written as `xxx.xxx.xxx-xx`: 14 characters, with the dots
  and the dash in place. It must not belong to anyone already registered.
  Only the shape is checked. The check digits are not verified.
- **Birth date.** It is typed as `dd/mm/yyyy`. The month must lie between 1
  and 12. The year must be after 1900 and not later than the current year.
  The day must exist in that month, leap years included.
- **Enrollment number.** It must not be in use by another student.
- **Menu choices.** They must be numbers within the range the menu offers.

When an entry is rejected, the program says why and asks again.

### Record format

Each line in the files looks like this:

```
PROFESSOR-> Nome: <name> - Data de nascimento: <d>/<m>/<yyyy> - CPF: <cpf> - Título: <title>
ALUNO-> Nome: <name> - Data de nascimento: <d>/<m>/<yyyy> - CPF: <cpf> - Matrícula: <number>
```

When the register is loaded, lines without the `PROFESSOR->` or `ALUNO->`
marker are ignored. A marked line that does not follow this layout raises
`ValueError`.

## Using it from Python

The pieces behind the console can also be used on their own:

- **`cadastro_escolar.models`**
  - `BirthDate`, `Person`, `Student` and `Teacher` are dataclasses.
  - `Title` is an enum of the three academic titles.
    `Title.from_choice(n)` maps the menu numbers 1–3 to a title.
- **`cadastro_escolar.validation`**
  - `is_leap_year` applies the leap-year rule.
  - `date_errors` returns the list of problems found with a date.
  - `validate_date` returns a `BirthDate` or raises `InvalidDateError`.
  - `is_valid_cpf_format` checks the shape of a CPF.
  - `parse_birth_date` reads `d/m/y` text.
- **`cadastro_escolar.storage`**
  - `format_student`, `format_teacher`, `parse_student` and `parse_teacher`
    convert between records and lines.
  - `RecordStore(directory)` reads, appends, saves and clears the two files.
- **`cadastro_escolar.registry`**
  - `Registry(store)` holds the students and teachers in memory and writes
    every change to the store. It raises `DuplicateCpfError`,
    `DuplicateEnrollmentError` and `PersonNotFoundError`.
  - It offers name, CPF and birthday-month lookups.
- **`cadastro_escolar.prompts`**
  - `Prompter(stdin, stdout)` asks each question until the answer is valid.
- **`cadastro_escolar.cli`**
  - `Console` runs the menus.
  - `main(argv=None)` is the command's entry point.

```python
from cadastro_escolar.models import BirthDate, Student
from cadastro_escolar.registry import Registry
from cadastro_escolar.storage import RecordStore

registry = Registry(RecordStore("dados"))
registry.load()
registry.add_student(
    Student(name="Ana", cpf="000.000.000-00",
            birth_date=BirthDate(1, 2, 2000), enrollment="42")
)
```

## Running the tests

```
pip install .[test]
pytest
```