"""A class roster with grades: students who fail are moved to a queue."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from chamada.queue import BORDER, StudentQueue
from chamada.roster import (
    NAME_SIZE,
    Roster,
    Student,
    StudentNotFound,
    is_valid_name,
    read_int,
)

PASSING_AVERAGE = 5.0
GRADE_COUNT = 3

MENU = (
    "\n----- MENU -----\n"
    "[1] -> Adicionar aluno\n"
    "[2] -> Lancar notas\n"
    "[3] -> Imprimir Turma/Reprovados\n"
    "[4] -> Sair\n"
    "_____________________\n"
    "Escolha: "
)


def weighted_average(first: float, second: float, third: float) -> float:
    """Return the average of three grades weighted 2, 3 and 5."""
    return (first * 2 + second * 3 + third * 5) / 10


class Gradebook:
    """A roster of enrolled students and a queue of those who failed."""

    def __init__(self) -> None:
        self.roster = Roster()
        self.failed = StudentQueue()

    def enroll(self, student: Student) -> None:
        """Put a student at the front of the roster.

        Raises ValueError when the registration is already enrolled.
        """
        if student.registration in self.roster:
            raise ValueError(
                f"registration {student.registration} is already enrolled"
            )
        self.roster.add_front(student)

    def record_grades(self, registration: int, grades: Iterable[float]) -> float:
        """Record three grades for a student and return the weighted average.

        A student whose average is below the passing mark is taken off the
        roster and queued among the failed students. Raises StudentNotFound
        for an unknown registration and ValueError unless exactly three
        grades are given.
        """
        values = [float(g) for g in grades]
        if len(values) != GRADE_COUNT:
            raise ValueError(f"expected {GRADE_COUNT} grades, got {len(values)}")
        if self.roster.find(registration) is None:
            raise StudentNotFound(registration)
        average = weighted_average(*values)
        if average < PASSING_AVERAGE:
            student = self.roster.remove(registration)
            self.failed.push(student.registration, student.name)
        return average

    def render(self) -> str:
        """Return the roll call followed by the list of failed students."""
        return self._render_roster() + self._render_failed()

    def _render_roster(self) -> str:
        if len(self.roster) == 0:
            return f"{BORDER}\nChamada sem alunos\n{BORDER}\n"
        lines = [f"{BORDER}\n", "\n -- CHAMADA --\n"]
        lines.extend(
            f"Aluno: {s.name} | Matricula: {s.registration}\n" for s in self.roster
        )
        return "".join(lines)

    def _render_failed(self) -> str:
        if len(self.failed) == 0:
            return "Nao ha alunos reprovados\n"
        lines = [f"{BORDER}\n", "Reprovados:\n"]
        for student in self.failed:
            lines.append(f"{BORDER}\n")
            lines.append(f"Nome: {student.name}\n")
            lines.append(f"Matricula: {student.registration}\n")
            lines.append(f"{BORDER}\n")
        return "".join(lines)


def _read_name(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError("end of input while reading a name")
    return line[: NAME_SIZE - 1].split("\n", 1)[0]


def _read_new_student(stdin: TextIO, stdout: TextIO, roster: Roster) -> Student:
    while True:
        stdout.write("Nome do aluno: \n")
        name = _read_name(stdin)
        if is_valid_name(name):
            break
        stdout.write("Ninguem no mundo tem um numero no nome!!!\n")

    while True:
        registration = read_int(
            stdin, stdout, "Digite a matricula: \n", "Matricula deve ter um numero: "
        )
        if registration not in roster:
            break
        stdout.write("Matricula ja adicionada. Tente outra:\n")

    return Student(name=name, registration=registration)


def _read_grades(stdin: TextIO) -> list[float]:
    grades: list[float] = []
    while len(grades) < GRADE_COUNT:
        line = stdin.readline()
        if not line:
            raise EOFError("end of input while reading grades")
        for token in line.split():
            try:
                grades.append(float(token))
            except ValueError:
                continue
            if len(grades) == GRADE_COUNT:
                break
    return grades


def _enter_grades(stdin: TextIO, stdout: TextIO, book: Gradebook) -> None:
    registration = read_int(stdin, stdout, "Digite a matricula:\n", "")
    student = book.roster.find(registration)
    if student is None:
        stdout.write(f"{StudentNotFound(registration)}\n")
        return
    stdout.write(f"Aluno: {student.name}\n")

    stdout.write("Digite as notas:\n")
    grades = _read_grades(stdin)
    average = book.record_grades(registration, grades)
    if average < PASSING_AVERAGE:
        stdout.write("ALuno nao aprovado.\n")
        stdout.write("Aluno removido.\n")


def main(argv: list[str] | None = None) -> int:
    """Run the gradebook menu on standard input and output."""
    stdin, stdout = sys.stdin, sys.stdout
    book = Gradebook()
    try:
        while True:
            choice = read_int(stdin, stdout, MENU, "Entrada invalida. 1-4: ")
            if choice == 1:
                student = _read_new_student(stdin, stdout, book.roster)
                book.enroll(student)
                stdout.write(
                    f"\nDados cadastrados:\nNome: {student.name}\n"
                    f"Matricula: {student.registration}\n"
                )
            elif choice == 2:
                _enter_grades(stdin, stdout, book)
            elif choice == 3:
                stdout.write(book.render())
            elif choice == 4:
                stdout.write("Tchau...\n")
                break
            else:
                stdout.write("Aina nao temos essa opca4o.")
    except EOFError:
        pass
    book.roster.clear()
    book.failed.clear()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())