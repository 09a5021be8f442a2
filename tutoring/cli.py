"""Interactive console for managing pupils and teachers."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, TextIO

from tutoring.client import Client
from tutoring.client_type import ClientType, PrimarySchool, SecondarySchool, Student
from tutoring.manager import RepositoriesManager
from tutoring.teacher import Teacher

_INTRO = (
    "\nWitaj w aplikacji do zarzadzania i ustalania korepetycji."
    "\nO to dostepne opcje. Po kazdym dzialaniu zostanie wyswietlona odpowiednia "
    "informacja potwierdzajaca poprawnosc wykonanej operacji.\n"
    "1 - Wyswietl informacje o danych w repozytoriach.\n"
    "2 - Utworz i dodaj do repozytorium nowego ucznia.\n"
    "3 - Utworz i dodaj do repozytorium nowego nauczyciela.\n"
    "100 - Zamknij program.\n"
)

_QUIT = 100

_SCHOOL_TYPES: dict[int, type[ClientType]] = {
    1: PrimarySchool,
    2: SecondarySchool,
    3: Student,
}


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_word(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError("unexpected end of input")
    return token


def _read_int(tokens: Iterator[str]) -> int:
    token = _read_word(tokens)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected an integer, got {token!r}") from None


def _show_repositories(manager: RepositoriesManager, out: TextIO) -> None:
    out.write(f"Obecna liczba uczniow w repozytorium wynosi: {len(manager.client_repository)}")
    out.write(f"\nDane na temat uczniów:{manager.client_repository.report()}")
    out.write(
        f"Obecna liczba nauczycieli w repozytorium wynosi: {len(manager.teacher_repository)}"
    )
    out.write(f"\nDane na temat nauczycieli:{manager.teacher_repository.report()}")


def _add_client(manager: RepositoriesManager, tokens: Iterator[str], out: TextIO) -> None:
    out.write("Wprowadz dane nowego ucznia. Na poczatek imie:")
    first_name = _read_word(tokens)
    out.write("ID klienta:")
    client_id = _read_int(tokens)
    out.write("Klasa do której chodzi:")
    school_class = _read_int(tokens)
    if not 1 <= school_class <= 8:
        raise ValueError("Niepoprawidlowa klasa")
    out.write(
        "1 - podstawowka\n2 - szkola srednia \n3 - studia\n"
        "Wybierz rodzaj szkoly sposrod powyzszych:"
    )
    school_type = _SCHOOL_TYPES.get(_read_int(tokens))
    if school_type is None:
        raise ValueError("Niepoprawny rodzaj szkoły")
    manager.client_repository.add(Client(first_name, client_id, school_class, school_type()))
    out.write(
        "\nLiczba uczniów w repozytorium po dodaniu nowego ucznia wynosi: "
        f"{len(manager.client_repository)}\n"
    )


def _add_teacher(manager: RepositoriesManager, tokens: Iterator[str], out: TextIO) -> None:
    out.write("Wprowadz dane nowego nauczyciela. Na poczatek imie:")
    first_name = _read_word(tokens)
    out.write("ID nauczyciela:")
    teacher_id = _read_int(tokens)
    out.write("Cena bazowa za 1 godzine zajec:")
    base_price = _read_int(tokens)
    manager.teacher_repository.add(Teacher(first_name, teacher_id, base_price))
    out.write(
        "\nLiczba nauczycieli w repozytorium po dodaniu nowego nauczyciela wynosi: "
        f"{len(manager.teacher_repository)}\n"
    )


def run_session(manager: RepositoriesManager, stdin: Iterable[str], stdout: TextIO) -> None:
    """Read commands from stdin until the quit command, writing prompts to stdout.

    Raises ValueError on an unknown command or invalid data and EOFError
    when the input ends before the quit command.
    """
    tokens = _tokens(stdin)
    stdout.write(_INTRO)
    choice = 0
    while choice != _QUIT:
        stdout.write("\nCo chcesz zrobic teraz?\n")
        choice = _read_int(tokens)
        if choice == 1:
            _show_repositories(manager, stdout)
        elif choice == 2:
            _add_client(manager, tokens, stdout)
        elif choice == 3:
            _add_teacher(manager, tokens, stdout)
        elif choice != _QUIT:
            raise ValueError("Niepoprawny wybor dzialania")
    stdout.write("Zakonczono dzialanie programu")


def main(argv: list[str] | None = None) -> int:
    """Run an interactive session on standard input and output."""
    del argv
    try:
        run_session(RepositoriesManager(), sys.stdin, sys.stdout)
    except (ValueError, EOFError) as error:
        print(f"\n{error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())