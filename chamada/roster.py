"""An interactive class roster: add students, remove them and call the roll."""

from __future__ import annotations

import re
import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TextIO

NAME_SIZE = 50
RULE = "_____________________"

MENU = (
    "\n----- MENU -----\n"
    "[1] -> Adicionar aluno\n"
    "[2] -> Retirar matricula\n"
    "[3] -> Imprimir\n"
    "[4] -> Sair\n"
    f"{RULE}\n"
    "Escolha: "
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class StudentNotFound(KeyError):
    """Raised when no student has the requested registration."""

    def __init__(self, registration: int) -> None:
        super().__init__(registration)
        self.registration = registration

    def __str__(self) -> str:
        return f"Matricula: {self.registration} nao encontrada."


@dataclass(frozen=True)
class Student:
    """A student's name and registration number."""

    name: str
    registration: int


class Roster:
    """Students in roll-call order; new students go to the front."""

    def __init__(self) -> None:
        self._students: deque[Student] = deque()

    def add_front(self, student: Student) -> None:
        """Put a student at the front of the roster."""
        self._students.appendleft(student)

    def find(self, registration: int) -> Student | None:
        """Return the first student with this registration, or None."""
        return next(
            (s for s in self._students if s.registration == registration), None
        )

    def remove(self, registration: int) -> Student:
        """Remove and return the first student with this registration."""
        student = self.find(registration)
        if student is None:
            raise StudentNotFound(registration)
        self._students.remove(student)
        return student

    def __contains__(self, registration: object) -> bool:
        return any(s.registration == registration for s in self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def clear(self) -> None:
        """Remove every student."""
        self._students.clear()

    def render(self) -> str:
        """Return the roll call as printed by the menu."""
        if not self._students:
            return "Chamada sem alunos\n"
        lines = ["\n -- CHAMADA --\n"]
        lines.extend(
            f"Aluno: {s.name} | Matricula: {s.registration}\n" for s in self._students
        )
        lines.append(f"{RULE}\n")
        return "".join(lines)


def is_valid_name(name: str) -> bool:
    """Return True when the name holds only ASCII letters and spaces."""
    return all((ch.isascii() and ch.isalpha()) or ch == " " for ch in name)


def read_int(
    stdin: TextIO,
    stdout: TextIO,
    prompt: str | None = None,
    retry_message: str = "",
) -> int:
    """Read lines until one starts with an integer, and return it.

    Blank lines are skipped; any other line without a leading integer
    writes ``retry_message`` and is discarded. Raises EOFError at end of input.
    """
    if prompt:
        stdout.write(prompt)
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError("end of input while reading an integer")
        if not line.strip():
            continue
        match = _LEADING_INT.match(line)
        if match:
            return int(match.group(1))
        stdout.write(retry_message)


def _read_name(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError("end of input while reading a name")
    return line[: NAME_SIZE - 1].split("\n", 1)[0]


def read_student(
    stdin: TextIO, stdout: TextIO, roster: Roster | None = None
) -> Student:
    """Ask for a student's name and registration.

    The name is asked until it holds only letters and spaces, then asked
    once more and that second answer is kept. When a roster is given,
    registrations already in it are refused.
    """
    while True:
        stdout.write("Nome do aluno: \n")
        name = _read_name(stdin)
        if is_valid_name(name):
            break
        stdout.write("Ninguem no mundo tem um numero no nome!!!\n")

    stdout.write("Nome do aluno: \n")
    name = _read_name(stdin)

    while True:
        registration = read_int(
            stdin, stdout, "Digite a matricula: \n", "Matricula deve ter um numero: "
        )
        if roster is None or registration not in roster:
            break
        stdout.write("Matricula ja adicionada. Tente outra:\n")

    return Student(name=name, registration=registration)


def main(argv: list[str] | None = None) -> int:
    """Run the roster menu on standard input and output."""
    stdin, stdout = sys.stdin, sys.stdout
    roster = Roster()
    try:
        while True:
            choice = read_int(stdin, stdout, MENU, "Entrada invalida. 1-4: ")
            if choice == 1:
                student = read_student(stdin, stdout)
                roster.add_front(student)
                stdout.write(
                    f"\nDados cadastrados:\nNome: {student.name}\n"
                    f"Matricula: {student.registration}\n"
                )
            elif choice == 2:
                registration = read_int(
                    stdin,
                    stdout,
                    "Digite a matricula a ser removida: ",
                    "Matricula deve ter um numero: ",
                )
                try:
                    roster.remove(registration)
                except StudentNotFound as exc:
                    stdout.write(f"{exc}\n")
                else:
                    stdout.write("Aluno removido.\n")
            elif choice == 3:
                stdout.write(roster.render())
            elif choice == 4:
                stdout.write("Tchau...\n")
                break
            else:
                stdout.write("Ainda nao temos essa opca4o.")
    except EOFError:
        pass
    roster.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())