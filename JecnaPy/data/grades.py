from datetime import date
from enum import Enum

from .common import Name

#: Grade characters, indexed by the value they stand for
VALUE_CHARS = ('N', '1', '2', '3', '4', '5')


class Grade:
    """
    A single grade from the grades table.

    :param value: Value of the grade, ``0`` standing for N (not graded)
    :param small: Whether the grade has the smaller weight
    :param subject: Name of the subject the grade belongs to
    :param teacher: The teacher who gave the grade
    :param description: What the grade was given for
    :param receive_date: Day the grade was given
    """

    def __init__(self, value: int, small: bool, subject: Name = None, teacher: str = None,
                 description: str = None, receive_date: date = None):
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 5:
            raise ValueError(f"Grade value must be between 0 and 5. (got {value!r})")
        self.value = value
        self.small = small
        self.subject = subject
        self.teacher = teacher
        self.description = description
        self.receive_date = receive_date

    @staticmethod
    def from_value_char(value_char: str, small: bool, subject: Name = None, teacher: str = None,
                        description: str = None, receive_date: date = None) -> 'Grade':
        """
        Builds a grade out of its value's character, ``N`` or ``0`` to ``5``.
        """
        return Grade(value_char_to_value(value_char), small, subject, teacher, description, receive_date)

    @property
    def value_char(self) -> str:
        """
        The character representing this grade's value, ``N`` for ``0``.
        """
        return VALUE_CHARS[self.value]

    def __key(self):
        return self.value, self.small, self.subject, self.teacher, self.description, self.receive_date

    def __hash__(self):
        return hash(self.__key())

    def __eq__(self, other):
        if isinstance(other, Grade):
            return self.__key() == other.__key()
        return NotImplemented

    def __str__(self):
        return self.value_char + ('' if self.small else '!')

    def __repr__(self):
        return (f'Grade({self.value}, small={self.small}, subject={self.subject!r}, teacher={self.teacher!r}, '
                f'description={self.description!r}, receive_date={self.receive_date!r})')


def value_char_to_value(value_char: str) -> int:
    if value_char == 'N':
        return 0
    if value_char not in ('0', '1', '2', '3', '4', '5'):
        raise ValueError(f"Unknown grade character {value_char!r}")
    return int(value_char)


class FinalGrade:
    """
    The grade a subject gets at the end of a school year half.
    """

    def __init__(self, value: int, subject: Name):
        self.value = value
        self.subject = subject

    def __hash__(self):
        return hash((self.value, self.subject))

    def __eq__(self, other):
        if isinstance(other, FinalGrade):
            return self.value == other.value and self.subject == other.subject
        return NotImplemented

    def __str__(self):
        return f'{self.subject}: {self.value}'

    def __repr__(self):
        return f'FinalGrade({self.value}, {self.subject!r})'


class Behaviour:
    """
    The behaviour row of the grades table. Holds commendations and reprimands instead of grades.
    """
    #: Name of the table row holding the behaviour
    SUBJECT_NAME = 'Chování'

    class NotificationType(Enum):
        GOOD = 1
        BAD = 2

        def __str__(self):
            return str(self.name)

    class Notification:
        def __init__(self, notification_type: 'Behaviour.NotificationType', message: str):
            self.type = notification_type
            self.message = message

        def __hash__(self):
            return hash((self.type, self.message))

        def __eq__(self, other):
            if isinstance(other, Behaviour.Notification):
                return self.type == other.type and self.message == other.message
            return NotImplemented

        def __str__(self):
            return f'{self.type}: {self.message}'

        def __repr__(self):
            return f'Notification({self.type}, {self.message!r})'

    def __init__(self, notifications, final_grade: FinalGrade):
        self.notifications = tuple(notifications)
        self.final_grade = final_grade

    def __hash__(self):
        return hash((self.notifications, self.final_grade))

    def __eq__(self, other):
        if isinstance(other, Behaviour):
            return self.notifications == other.notifications and self.final_grade == other.final_grade
        return NotImplemented

    def __repr__(self):
        return f'Behaviour({list(self.notifications)!r}, {self.final_grade!r})'


class Subject:
    """
    A subject row of the grades table.

    :param name: Name of the subject
    :param grades: The subject's :py:class:`Subject.Grades`
    :param final_grade: The subject's :py:class:`FinalGrade`, if it was already given
    """

    class Grades:
        """
        Grades of a subject, grouped by the subject part they were given in.
        The ``None`` group holds the grades not belonging to any part.
        Both groups and grades within them keep the order they appeared in.
        """

        def __init__(self, groups: dict):
            self.__groups = {part: tuple(grades) for part, grades in groups.items()}

        @staticmethod
        def builder() -> 'Subject.Grades.Builder':
            return Subject.Grades.Builder()

        @property
        def subject_parts(self):
            return list(self.__groups.keys())

        @property
        def count(self) -> int:
            """
            Total amount of grades, across all the subject parts.
            """
            return sum(len(grades) for grades in self.__groups.values())

        def all(self):
            for grades in self.__groups.values():
                yield from grades

        def items(self):
            return self.__groups.items()

        def get(self, subject_part, default=None):
            return self.__groups.get(subject_part, default)

        def __getitem__(self, subject_part):
            return self.__groups[subject_part]

        def __contains__(self, subject_part):
            return subject_part in self.__groups

        def __iter__(self):
            return iter(self.__groups)

        def __len__(self):
            return len(self.__groups)

        def __eq__(self, other):
            if isinstance(other, Subject.Grades):
                return list(self.__groups.items()) == list(other.__groups.items())
            return NotImplemented

        def __hash__(self):
            return hash(tuple(self.__groups.items()))

        def __repr__(self):
            return f'Grades({self.__groups!r})'

        class Builder:
            def __init__(self):
                self.__groups = {}

            def add_grade(self, subject_part, grade: Grade) -> 'Subject.Grades.Builder':
                """
                Appends a grade to a subject part, creating it if not seen before.

                :param subject_part: Subject part label, ``None`` for grades without any
                :param grade: The grade to add
                :return: This builder
                """
                self.__groups.setdefault(subject_part, []).append(grade)
                return self

            def build(self) -> 'Subject.Grades':
                return Subject.Grades(self.__groups)

    def __init__(self, name: Name, grades: 'Subject.Grades' = None, final_grade: FinalGrade = None):
        self.name = name
        self.grades = grades if grades is not None else Subject.Grades({})
        self.final_grade = final_grade

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        if isinstance(other, Subject):
            return (self.name == other.name and self.name.short == other.name.short
                    and self.grades == other.grades and self.final_grade == other.final_grade)
        return NotImplemented

    def __str__(self):
        return f'{self.name} ({self.grades.count} grades)'

    def __repr__(self):
        return f'Subject({self.name!r}, {self.grades!r}, {self.final_grade!r})'


class GradesPage:
    """
    The whole grades table: every subject and the behaviour.
    Instances are made through :py:meth:`GradesPage.builder`.
    """

    def __init__(self, subjects_by_name: dict, behaviour: Behaviour):
        self.__subjects = dict(subjects_by_name)
        self.behaviour = behaviour

    @staticmethod
    def builder() -> 'GradesPage.Builder':
        return GradesPage.Builder()

    @property
    def subjects(self):
        return list(self.__subjects.values())

    @property
    def subject_names(self):
        return list(self.__subjects.keys())

    def get_subject_by_name(self, name):
        """
        :param name: A :py:class:`Name` or the subject's full name
        :return: The matching :py:class:`Subject`, ``None`` when there is no such subject
        """
        return self.__subjects.get(Name.of(name))

    def as_dict(self) -> dict:
        return dict(self.__subjects)

    def __getitem__(self, name):
        return self.get_subject_by_name(name)

    def __iter__(self):
        return iter(self.__subjects.values())

    def __len__(self):
        return len(self.__subjects)

    def __eq__(self, other):
        if isinstance(other, GradesPage):
            return self.__subjects == other.__subjects and self.behaviour == other.behaviour
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f'GradesPage({self.subjects!r}, {self.behaviour!r})'

    class Builder:
        def __init__(self):
            self.__subjects = {}
            self.__behaviour = None

        def add_subject(self, subject: Subject) -> 'GradesPage.Builder':
            """
            Adds a subject, replacing any other one going by the same name.
            """
            self.__subjects[subject.name] = subject
            return self

        def set_behaviour(self, behaviour: Behaviour) -> 'GradesPage.Builder':
            """
            Sets the behaviour. A page has exactly one, so it can only be set once.
            """
            if self.__behaviour is not None:
                raise RuntimeError("Behaviour has already been set.")
            self.__behaviour = behaviour
            return self

        def build(self) -> 'GradesPage':
            if self.__behaviour is None:
                raise RuntimeError("Behaviour has not been set.")
            return GradesPage(self.__subjects, self.__behaviour)
