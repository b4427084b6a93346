"""Menu-driven terminal program for registering students and teachers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from .models import Student, Teacher
from .prompts import Prompter
from .registry import Registry
from .storage import RecordStore, format_student, format_teacher

MAIN_MENU = (
    "\n\n0 - Sair do programa"
    "\n1 - Cadastrar uma pessoa"
    "\n2 - Listar todas as pessoas cadastradas"
    "\n3 - Pesquisar por nome"
    "\n4 - Pesquisar por CPF"
    "\n5 - Excluir pessoa"
    "\n6 - Apagar todas as pessoas cadastradas"
)
WELCOME = "\n\nBem-vindo, siga as instruções: "
FAREWELL = "\n\nObrigado por usar o programa, volte quando precisar!"

REGISTER_MENU = (
    "\n\n1.0 – Voltar ao menu anterior[0]"
    "\n1.1 - Cadastrar Professor[1]"
    "\n1.2 - Cadastrar Aluno[2]"
)
LIST_MENU = (
    "\n\n2.0 – Voltar ao menu anterior[0]"
    "\n2.1 - Listar Professores[1]"
    "\n2.2 - Listar Alunos[2]"
)
NAME_MENU = (
    "\n\n3.0 – Voltar ao menu anterior[0]"
    "\n3.1 - Pesquisar Professores por nome[1]"
    "\n3.2 - Pesquisar Alunos por nome[2]"
)
CPF_MENU = (
    "\n\n4.0 – Voltar ao menu anterior[0]"
    "\n4.1 - Pesquisar Professores por CPF[1]"
    "\n4.2 - Pesquisar Alunos por CPF[2]"
)
DELETE_MENU = (
    "\n\n5.0 – Voltar ao menu anterior[0]"
    "\n5.1 - Excluir professor pelo CPF[1]"
    "\n5.2 - Excluir aluno pelo CPF[2]"
)
CLEAR_MENU = (
    "\n\n6.0 – Voltar ao menu anterior[0]"
    "\n6.1 - Excluir todos os professores[1]"
    "\n6.2 - Excluir todos os alunos[2]"
)
BIRTHDAY_MENU = (
    "\n\n7.0 – Voltar ao menu anterior[0]"
    "\n7.1 - Informar o mês a ser pesquisado[1]"
    "\n7.2 - Listar os Professores aniversariantes do mês[2]"
    "\n7.3 - Listar os Alunos aniversariantes do mês[3]"
)

NAME_PROMPT = "\n\nDigite seu nome: "
REGISTERED = "\nPessoa cadastrada com sucesso!"
NO_SUCH_NAME = "\nNão existe ninguém com esse nome"
NO_SUCH_CPF = "\nNão existe ninguém com esse CPF, verifique se digitou corretamente"
NO_SUCH_CPF_DELETE = "Não existe ninguém com esse CPF, confira se digitou certo"


def _describe_teacher(teacher: Teacher) -> str:
    return (
        f"Nome: {teacher.name} - Data de nascimento: {teacher.birth_date}"
        f" - CPF: {teacher.cpf} - Título: {teacher.title}\n"
    )


def _describe_student(student: Student) -> str:
    return (
        f"Nome: {student.name} - Data de nascimento: {student.birth_date}"
        f" - CPF: {student.cpf} - Matrícula: {student.enrollment}\n"
    )


class Console:
    """The interactive main menu and its sub-menus."""

    def __init__(
        self,
        registry: Registry | None = None,
        prompter: Prompter | None = None,
        stdout: TextIO | None = None,
        current_year: int | None = None,
    ) -> None:
        self.registry = registry if registry is not None else Registry()
        self.prompter = prompter if prompter is not None else Prompter()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.current_year = current_year
        self.month: int | None = None
        self._actions: dict[int, Callable[[], None]] = {
            1: self._register,
            2: self._list,
            3: self._search_by_name,
            4: self._search_by_cpf,
            5: self._delete,
            6: self._clear,
            7: self._birthdays,
        }

    def _say(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _submenu(self, menu: str, handlers: dict[int, Callable[[], None]]) -> None:
        self._say(menu)
        choice = self.prompter.choose(0, len(handlers))
        handler = handlers.get(choice)
        if handler is not None:
            handler()

    def _read_token(self, prompt: str) -> str:
        """Read the first whitespace-separated word, skipping blank lines."""
        line = self.prompter.read_line(prompt)
        while not line.split():
            line = self.prompter.read_line()
        return line.split()[0]

    def run(self) -> None:
        """Show the main menu until the user picks 0 or the input ends."""
        try:
            self._say(MAIN_MENU)
            choice = self.prompter.choose(0, 7)
            self._say(WELCOME)
            while choice != 0:
                self._actions[choice]()
                self._say(MAIN_MENU)
                choice = self.prompter.choose(0, 7)
        except EOFError:
            pass
        self._say(FAREWELL)

    # Option 1: registration

    def _register(self) -> None:
        self._submenu(
            REGISTER_MENU, {1: self._register_teacher, 2: self._register_student}
        )

    def _report_totals(self) -> None:
        self._say(REGISTERED)
        self._say(f"\nTotal de pessoas: {len(self.registry.people())}")
        self._say(f"\nTotal de professores: {len(self.registry.teachers)}")
        self._say(f"\nTotal de alunos: {len(self.registry.students)}")

    def _register_teacher(self) -> None:
        name = self.prompter.read_line(NAME_PROMPT)
        cpf = self.prompter.ask_cpf(self.registry.cpf_taken)
        birth_date = self.prompter.ask_birth_date(self.current_year)
        title = self.prompter.ask_title()
        self.registry.add_teacher(
            Teacher(name=name, cpf=cpf, birth_date=birth_date, title=title)
        )
        self._report_totals()

    def _register_student(self) -> None:
        name = self.prompter.read_line(NAME_PROMPT)
        cpf = self.prompter.ask_cpf(self.registry.cpf_taken)
        birth_date = self.prompter.ask_birth_date(self.current_year)
        enrollment = self.prompter.ask_enrollment(self.registry.enrollment_taken)
        self.registry.add_student(
            Student(name=name, cpf=cpf, birth_date=birth_date, enrollment=enrollment)
        )
        self._report_totals()

    # Option 2: listing

    def _list(self) -> None:
        self._submenu(LIST_MENU, {1: self._list_teachers, 2: self._list_students})

    def _list_teachers(self) -> None:
        try:
            lines = self.registry.store.read_teacher_lines()
        except FileNotFoundError:
            self._say("Arquivo de professores não encontrado. Nenhum dado carregado.\n")
            return
        count = len(self.registry.teachers)
        if not count:
            self._say("\nNão há nenhum professor cadastrado")
            return
        self._say("\n\nLista de professores cadastrados: ")
        for line in lines:
            self._say(f"\n{line}")
        self._say(f"\nTotal de professores: {count}")

    def _list_students(self) -> None:
        try:
            lines = self.registry.store.read_student_lines()
        except FileNotFoundError:
            self._say("Arquivo de alunos não encontrado. Nenhum dado carregado.\n")
            return
        count = len(self.registry.students)
        if not count:
            self._say("\nNão há nenhum aluno cadastrado")
            return
        self._say("\n\nLista de alunos cadastrados: ")
        for line in lines:
            self._say(f"\n{line}")
        self._say(f"\nTotal de alunos: {count}")

    # Option 3: search by name

    def _search_by_name(self) -> None:
        self._submenu(
            NAME_MENU, {1: self._teacher_by_name, 2: self._student_by_name}
        )

    def _teacher_by_name(self) -> None:
        self._say("\n\nPesquisar professor por nome")
        name = self.prompter.read_line(
            "\nDigite o nome do professor que deseja procurar: "
        )
        found = self.registry.teachers_named(name)
        for teacher in found:
            self._say(_describe_teacher(teacher))
        if not found:
            self._say(NO_SUCH_NAME)

    def _student_by_name(self) -> None:
        self._say("\n\nPesquisar aluno por nome")
        name = self.prompter.read_line("\nDigite o nome do aluno que deseja procurar: ")
        found = self.registry.students_named(name)
        for student in found:
            self._say(_describe_student(student))
        if not found:
            self._say(NO_SUCH_NAME)

    # Option 4: search by CPF

    def _search_by_cpf(self) -> None:
        self._submenu(CPF_MENU, {1: self._teacher_by_cpf, 2: self._student_by_cpf})

    def _teacher_by_cpf(self) -> None:
        self._say("\n\nPesquisar professor por CPF")
        cpf = self.prompter.read_line("\nDigite o CPF que deseja procurar: ")
        try:
            self._say(_describe_teacher(self.registry.teacher_by_cpf(cpf)))
        except LookupError:
            self._say(NO_SUCH_CPF)

    def _student_by_cpf(self) -> None:
        self._say("\n\nPesquisar aluno por CPF")
        cpf = self.prompter.read_line("\nDigite o CPF que deseja procurar: ")
        try:
            self._say(_describe_student(self.registry.student_by_cpf(cpf)))
        except LookupError:
            self._say(NO_SUCH_CPF)

    # Option 5: deletion

    def _delete(self) -> None:
        self._submenu(DELETE_MENU, {1: self._delete_teacher, 2: self._delete_student})

    def _confirm_delete(
        self,
        kind: str,
        exists: Callable[[str], object],
        remove: Callable[[str], object],
        done: str,
    ) -> None:
        self._say(f"\n\nExcluir um {kind}")
        cpf = self._read_token(
            f"\nDigite o CPF do {kind} que deseja excluir[0 para sair]: "
        )
        if cpf == "0":
            return
        try:
            exists(cpf)
        except LookupError:
            self._say(NO_SUCH_CPF_DELETE)
            return
        answer = self._read_token(f"Tem certeza que deseja excluir {cpf} ?[S/N]")
        if answer in ("S", "s"):
            remove(cpf)
            self._say(done)

    def _delete_teacher(self) -> None:
        self._confirm_delete(
            "professor",
            self.registry.teacher_by_cpf,
            self.registry.remove_teacher,
            "\nProfessor excluído com sucesso!",
        )

    def _delete_student(self) -> None:
        self._confirm_delete(
            "aluno",
            self.registry.student_by_cpf,
            self.registry.remove_student,
            "\nAluno excluído com sucesso!",
        )

    # Option 6: clearing

    def _clear(self) -> None:
        self._submenu(CLEAR_MENU, {1: self._clear_teachers, 2: self._clear_students})

    def _clear_teachers(self) -> None:
        self.registry.clear_teachers()
        self._say("\n\nTodos os professores foram apagados com sucesso")

    def _clear_students(self) -> None:
        self.registry.clear_students()
        self._say("\n\nTodos os alunos foram apagados com sucesso")

    # Option 7: birthdays

    def _birthdays(self) -> None:
        self._submenu(
            BIRTHDAY_MENU,
            {
                1: self._ask_month,
                2: self._teacher_birthdays,
                3: self._student_birthdays,
            },
        )

    def _ask_month(self) -> None:
        self.month = self.prompter.ask_month()

    def _chosen_month(self) -> int:
        if self.month is None:
            self._ask_month()
        return self.month

    def _teacher_birthdays(self) -> None:
        month = self._chosen_month()
        if not self.registry.teachers:
            self._say("\nNão existe nenhum professor cadastrado")
        found = self.registry.teacher_birthdays(month)
        for teacher in found:
            self._say(f"\n{format_teacher(teacher)}")
        if found:
            self._say(f"\nTotal de professores aniversariantes do mês: {len(found)}")
        else:
            self._say("\nNão existe nenhum professor aniversariante nesse mês")

    def _student_birthdays(self) -> None:
        month = self._chosen_month()
        if not self.registry.students:
            self._say("\nNão existe nenhum aluno cadastrado")
        found = self.registry.student_birthdays(month)
        for student in found:
            self._say(f"\n{format_student(student)}")
        if found:
            self._say(f"\nTotal de alunos aniversariantes do mês: {len(found)}")
        else:
            self._say("\nNão existe nenhum aluno aniversariante nesse mês")


def main(argv: list[str] | None = None) -> int:
    """Load the record files and run the interactive menu."""
    parser = argparse.ArgumentParser(
        description="Cadastro de alunos e professores."
    )
    parser.add_argument(
        "--dir",
        default=".",
        help="directory holding alunos.txt and professores.txt",
    )
    args = parser.parse_args(argv)
    registry = Registry(RecordStore(args.dir))
    registry.load()
    Console(registry, Prompter(), sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())