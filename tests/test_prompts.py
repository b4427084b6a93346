import io

import pytest

from cadastro_escolar.models import BirthDate, Title
from cadastro_escolar.prompts import Prompter


def make(text):
    out = io.StringIO()
    return Prompter(io.StringIO(text), out), out


def test_read_line_strips_newline_and_writes_prompt():
    prompter, out = make("Maria Silva\n")
    assert prompter.read_line("Nome: ") == "Maria Silva"
    assert out.getvalue() == "Nome: "


def test_read_line_raises_at_end_of_input():
    prompter, _ = make("")
    with pytest.raises(EOFError):
        prompter.read_line()


def test_choose_retries_until_in_range():
    prompter, out = make("9\nabc\n2\n")
    assert prompter.choose(0, 2) == 2
    assert out.getvalue().count("Somente números de 0 a 2") == 2


def test_choose_accepts_bounds():
    prompter, _ = make("0\n")
    assert prompter.choose(0, 7) == 0
    prompter, _ = make("7\n")
    assert prompter.choose(0, 7) == 7


def test_choose_runs_out_of_input():
    prompter, _ = make("8\n")
    with pytest.raises(EOFError):
        prompter.choose(0, 7)


def test_ask_cpf_rejects_bad_format_and_taken():
    taken = {"111.222.333-44"}
    prompter, out = make("12345678901\n111.222.333-44\n555.666.777-88\n")
    assert prompter.ask_cpf(taken.__contains__) == "555.666.777-88"
    text = out.getvalue()
    assert "Formato de CPF inválido" in text
    assert "CPF já registrado" in text


def test_ask_birth_date_valid():
    prompter, _ = make("15/3/1990\n")
    assert prompter.ask_birth_date(current_year=2024) == BirthDate(15, 3, 1990)


def test_ask_birth_date_retries_on_errors():
    prompter, out = make("30/2/2000\n1/13/1800\nxx\n29/2/2000\n")
    assert prompter.ask_birth_date(current_year=2024) == BirthDate(29, 2, 2000)
    text = out.getvalue()
    assert "Dia inválido" in text
    assert "Mês inválido" in text
    assert "Ano inválido" in text


def test_ask_birth_date_respects_current_year():
    prompter, out = make("1/1/2030\n1/1/2020\n")
    assert prompter.ask_birth_date(current_year=2025) == BirthDate(1, 1, 2020)
    assert "Ano inválido" in out.getvalue()


@pytest.mark.parametrize(
    "answer, title",
    [("1", Title.SPECIALIST), ("2", Title.MASTER), ("3", Title.DOCTOR)],
)
def test_ask_title(answer, title):
    prompter, _ = make(answer + "\n")
    assert prompter.ask_title() is title


def test_ask_title_retries():
    prompter, out = make("0\n4\n2\n")
    assert prompter.ask_title().value == "Mestre"
    assert out.getvalue().count("Somente números de 1 a 3") == 2


def test_ask_enrollment_rejects_taken():
    taken = {"2023001"}
    prompter, out = make("2023001\n2023002\n")
    assert prompter.ask_enrollment(taken.__contains__) == "2023002"
    assert "Esse número de matrícula já está cadastrado" in out.getvalue()


def test_ask_month_retries_until_valid():
    prompter, out = make("0\n13\n12\n")
    assert prompter.ask_month() == 12
    assert out.getvalue().count("Mês inválido[1 a 12]") == 2