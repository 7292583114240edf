# chamada

A small console program for keeping a class roster ("chamada"). It lets you
enrol students, remove them by registration number, record three grades and
list the students who failed. Prompts and messages are in Portuguese.

## Installation

```
pip install .
```

## Commands

### `chamada`

Opens the roster menu (`chamada.roster.main`):

1. Add a student. The name is asked until it holds only ASCII letters and
   spaces; the name is then asked once more and that second answer is the one
   kept. The registration number is read next. The new student goes to the
   front of the roster.
2. Remove a student by registration number. An unknown number is reported.
3. Print the roll call.
4. Quit.

The menu also ends at end of input.

### `chamada-notas`

Opens the gradebook menu (`chamada.grades.main`):

1. Add a student. The name must hold only letters and spaces, and the
   registration number must not already be in the class; otherwise it is
   asked again.
2. Record grades: enter a registration number, then three grades. A student
   whose weighted average is below 5 is taken out of the class and added to
   the failed list.
3. Print the class followed by the list of failed students.
4. Quit.

### `chamada-fila`

Runs `chamada.queue.main`: it queues a fixed set of sample students, prints
them, empties the queue and prints it again.

## Grading

The average weights the three grades 2, 3 and 5:

```
average = (first * 2 + second * 3 + third * 5) / 10
```

## Library use

```python
from chamada.roster import Roster, Student, StudentNotFound
from chamada.grades import Gradebook, weighted_average
from chamada.queue import StudentQueue

roster = Roster()
roster.add_front(Student("Ana Souza", 1001))
print(roster.render())
try:
    roster.remove(2002)
except StudentNotFound as exc:
    print(exc)

book = Gradebook()
book.enroll(Student("Ana Souza", 1001))
book.record_grades(1001, (4.0, 4.0, 4.0))  # below 5: moved to book.failed
print(book.render())
print(weighted_average(10, 10, 10))         # 10.0

queue = StudentQueue()
queue.push(1001, "Ana Souza")
print(queue.render())
```

- `Roster` keeps students newest first and supports `find`, `remove`, `in`
  (by registration), iteration, `len`, `clear` and `render`.
- `Gradebook.enroll` raises `ValueError` for a registration already enrolled;
  `Gradebook.record_grades` raises `StudentNotFound` for an unknown
  registration and `ValueError` unless exactly three grades are given.
- `StudentQueue` keeps students first in, first out.
- `chamada.roster` also offers `is_valid_name`, `read_int` and `read_student`
  for reading input from any text streams.

## What it does not do

Everything lives in memory for one run of a menu: nothing is saved to or
loaded from a file, and the grades themselves are not kept, only whether a
student failed.

## Running the tests

```
pip install .[test]
pytest
```