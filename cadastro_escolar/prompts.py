"""Interactive questions asked at the terminal, each repeated until the answer is valid."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from .models import BirthDate, Title
from .validation import date_errors, is_valid_cpf_format, parse_birth_date

CHOICE_PROMPT = "\n\nDigite o que deseja: "
CPF_PROMPT = "\nDigite seu cpf[xxx.xxx.xxx-xx]: "
BIRTH_DATE_PROMPT = "\nDigite sua data de nascimento[xx/xx/xxxx]: "
ENROLLMENT_PROMPT = "\nDigite seu número de matrícula: "
MONTH_PROMPT = "\nDigite o mês que deseja: "
TITLE_HEADER = "\nEscolhendo o título do professor:"
TITLE_MENU = "\n1 para: Especialista\n2 para: Mestre\n3 para: Doutor\nDigite: "

BAD_CPF_FORMAT = "\nFormato de CPF inválido\a"
CPF_TAKEN = "\nCPF já registrado\a"
ENROLLMENT_TAKEN = "\nEsse número de matrícula já está cadastrado"
BAD_MONTH = "\nMês inválido[1 a 12]\a"
BAD_TITLE = "\nSomente números de 1 a 3\a"
BAD_DATE_FORMAT = "\nData inválida\a"


def _to_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class Prompter:
    """Asks questions on one output stream and reads the answers from one input stream."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _say(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show the prompt and return one line of input without its newline.

        Raises EOFError when the input is exhausted.
        """
        self._say(prompt)
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def _ask_int(self, prompt: str, low: int, high: int, complaint: str) -> int:
        while True:
            value = _to_int(self.read_line(prompt))
            if value is not None and low <= value <= high:
                return value
            self._say(complaint)

    def choose(self, low: int, high: int) -> int:
        """Ask for a menu option between low and high, inclusive."""
        return self._ask_int(
            CHOICE_PROMPT, low, high, f"Somente números de {low} a {high}\a"
        )

    def ask_cpf(self, is_taken: Callable[[str], bool]) -> str:
        """Ask for a CPF shaped xxx.xxx.xxx-xx that is not yet registered."""
        while True:
            cpf = self.read_line(CPF_PROMPT)
            if not is_valid_cpf_format(cpf):
                self._say(BAD_CPF_FORMAT)
            elif is_taken(cpf):
                self._say(CPF_TAKEN)
            else:
                return cpf

    def ask_birth_date(self, current_year: int | None = None) -> BirthDate:
        """Ask for a birth date as dd/mm/yyyy until a valid one is given."""
        while True:
            text = self.read_line(BIRTH_DATE_PROMPT)
            try:
                day, month, year = parse_birth_date(text)
            except ValueError:
                self._say(BAD_DATE_FORMAT)
                continue
            errors = date_errors(day, month, year, current_year)
            if not errors:
                return BirthDate(day, month, year)
            for error in errors:
                self._say(f"\n{error}\a")

    def ask_title(self) -> Title:
        """Ask for a teacher's academic title by its number."""
        self._say(TITLE_HEADER)
        choice = self._ask_int(TITLE_MENU, 1, 3, BAD_TITLE)
        return Title.from_choice(choice)

    def ask_enrollment(self, is_taken: Callable[[str], bool]) -> str:
        """Ask for an enrollment number that is not yet registered."""
        while True:
            enrollment = self.read_line(ENROLLMENT_PROMPT)
            if not is_taken(enrollment):
                return enrollment
            self._say(ENROLLMENT_TAKEN)

    def ask_month(self) -> int:
        """Ask for a month from 1 to 12."""
        return self._ask_int(MONTH_PROMPT, 1, 12, BAD_MONTH)