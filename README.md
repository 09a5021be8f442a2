# tutoring

A small library and console program for organising private tutoring: pupils
(clients), teachers and the lessons between them, with prices worked out from
the teacher's hourly rate, the pupil's school and the kind of lesson.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The console program

```
tutoring
```

The program (`tutoring.cli.main`) starts with one sample pupil, teacher and
lesson, prints a menu in Polish and reads whitespace-separated input from
standard input:

- `1` shows how many pupils and teachers are stored, with their details
- `2` adds a new pupil; it asks for a first name, an id, a school class
  (1 to 8) and a school type (1 primary school, 2 secondary school,
  3 university)
- `3` adds a new teacher; it asks for a first name, an id and a base price per
  hour. The teacher is built as `Teacher(first_name, id, price)`, so the
  entered id becomes the base price and the entered price the teacher id.
- `100` ends the session

An unknown choice, a school class outside 1 to 8, an unknown school type, a
number that is not an integer, or input that ends before `100` stops the
program: the message is printed to standard error and the exit status is 1.

The same loop is available as `tutoring.cli.run_session(manager, stdin, stdout)`,
which reads from any iterable of lines and writes to any text stream; it raises
`ValueError` or `EOFError` instead of exiting.

## Using the library

```python
from datetime import datetime

from tutoring.client import Client
from tutoring.client_type import PrimarySchool
from tutoring.lesson import AmountOfMembers, GroupCourse, Individual
from tutoring.manager import RepositoriesManager
from tutoring.teacher import Teacher

pupil = Client("Jan", 1, 6, PrimarySchool())
teacher = Teacher("Artur", 80, 1)
begin = datetime(2024, 6, 26, 14, 20)

lesson = Individual(1, begin, 1, "Math", pupil, teacher, False, False)
lesson.lesson_price     # 60.0: primary school pupils pay 75%

group = GroupCourse(2, begin, 1, "Math", pupil, teacher, AmountOfMembers.TWO)
group.lesson_price      # 48.0: a group of two pays 80%

manager = RepositoriesManager()
manager.client_repository.add(pupil)
len(manager.client_repository)    # 2, next to the sample pupil
manager.client_repository.find_by(lambda c: c.first_name == "Jan")
```

### Modules

- `tutoring.client_type`: `ClientType` and its kinds `PrimarySchool`,
  `SecondarySchool` and `Student`, each with `apply_discount(price)` and
  `describe()`.
- `tutoring.client`: `Client`, with a first name, id, school class, type, an
  `extension_level` flag and a list of planned lessons (`add_lesson`,
  `remove_planned_lesson`, `planned_lessons`).
- `tutoring.teacher`: `Teacher`, with a first name, an hourly `base_price`, an
  id and planned lessons.
- `tutoring.lesson`: `Lesson`, `Individual`, `GroupCourse`, `AmountOfMembers`
  and `format_time`, which formats a moment as `2024-Jun-26 14:20:00`.
- `tutoring.repositories`: `Repository` and `ClientRepository`,
  `TeacherRepository`, `LessonRepository`, with `get(index)` (None when out of
  range), `add`, `remove` (both ignore None), `report()`, `find_by(predicate)`,
  `find_all()`, `len()` and iteration.
- `tutoring.manager`: `RepositoriesManager`, holding `client_repository`,
  `teacher_repository` and `lesson_repository`, filled with sample data.

Setters ignore values they do not accept: an empty first name or subject, a
base price that is not positive, a duration under half an hour, or a new start
time not more than an hour after the current one.

### Pricing

A lesson starts at the teacher's base price times its duration in hours. Then:

- the school type applies: primary school 75%, secondary school 100%,
  university 150%;
- extended-level pupils pay 125%;
- individual lessons at the pupil's home cost 110%, and a first lesson
  costs half;
- group courses of two, three and four members cost 80%, 70% and 60%.

## What it does not do

Everything is kept in memory only; nothing is saved between runs. The console
program cannot create, list or remove lessons, nor remove pupils or teachers;
that is done through the library.