"""A first-in, first-out queue of students, printed as a bordered listing."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

BORDER = "***************************"
EMPTY_MESSAGE = "Nao ha alunos cadastrados"


@dataclass(frozen=True)
class QueuedStudent:
    """A student waiting in the queue."""

    name: str
    registration: int


class StudentQueue:
    """Students kept in the order they were pushed."""

    def __init__(self) -> None:
        self._students: deque[QueuedStudent] = deque()

    def push(self, registration: int, name: str) -> QueuedStudent:
        """Append a student at the back of the queue and return it."""
        student = QueuedStudent(name=name, registration=registration)
        self._students.append(student)
        return student

    def clear(self) -> None:
        """Remove every student from the queue."""
        self._students.clear()

    def __iter__(self) -> Iterator[QueuedStudent]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def render(self) -> str:
        """Return the listing of the queue, front first."""
        if not self._students:
            return EMPTY_MESSAGE
        parts = [f"{BORDER}\n"]
        for student in self._students:
            parts.append(f"Nome: {student.name}\n")
            parts.append(f"Matricula: {student.registration}\n")
            parts.append(f"{BORDER}\n")
        return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Fill a queue with sample students, print it, empty it and print it again."""
    queue = StudentQueue()
    queue.push(330125447, "Eliakim Silva")
    queue.push(322122443, "fulano da Silva")
    queue.push(330123476, "sei nao Silva")
    queue.push(330535447, "Sei la Silva")

    sys.stdout.write(queue.render())
    queue.clear()
    sys.stdout.write(queue.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())