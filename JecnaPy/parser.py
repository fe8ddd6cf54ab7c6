import logging
import re
from datetime import datetime

from bs4 import BeautifulSoup, Tag

from .data import Name, Grade, FinalGrade, Behaviour, Subject, GradesPage

log = logging.getLogger(__name__)


class ParseError(Exception):
    """
    The page does not have the layout the parser understands.
    The exception which triggered it is kept as ``cause``.
    """

    def __init__(self, cause: Exception):
        super().__init__(f'{type(cause).__name__}: {cause}')
        self.cause = cause


#: Grade title, looks like 'Písemná práce (Kapitola 3) (12.03.2021, Jan Novák)'.
#: The description can hold parentheses too, so only the last group counts.
GRADE_DETAILS_EXP = re.compile(
    '(?P<description>.*) \\((?P<date>\\d{2}\\.\\d{2}\\.\\d{4}), (?P<teacher>.*)\\)$', re.DOTALL)

#: Subject row name, looks like 'Matematika (M)' or just 'Matematika'. Short names are ASCII only.
SUBJECT_NAME_EXP = re.compile('(?P<full>.*?)(?:\\s*\\((?P<short>\\w{1,4})\\))?$', re.ASCII)

RECEIVE_DATE_FORMAT = '%d.%m.%Y'

#: Final grades are plain unsigned numbers
FINAL_GRADE_EXP = re.compile('\\d+', re.ASCII)


def parse_grades_page(html: str) -> GradesPage:
    """
    Parses the grades table.
    The subject of every grade is taken from the table row it is in.

    :param html: A page fetched from :py:const:`JecnaPy.urls.GRADES`
    :return: The :py:class:`GradesPage`
    :raises ParseError: When anything in the page is not where it should be
    """
    try:
        page = BeautifulSoup(html, 'html5lib')
        builder = GradesPage.builder()
        behaviour = None

        for row in page.select('.score > tbody > tr'):
            # Header column with the subject name
            subject_tag = _require(row.find('th'), 'subject header')
            # First body column with subject parts and grades (or commendations in the behaviour row)
            main_column = _require(row.find('td'), 'main column')

            subject_name = parse_subject_name(_text(subject_tag))
            final_grade_tag = row.select_one('.scoreFinal')

            if subject_name.full == Behaviour.SUBJECT_NAME:
                if behaviour is not None:
                    raise ValueError("Found a second behaviour row")
                final_grade_tag = _require(final_grade_tag, 'behaviour final grade')
                behaviour = Behaviour(parse_behaviour_notifications(main_column),
                                      parse_final_grade(final_grade_tag, subject_name))
            else:
                final_grade = None if final_grade_tag is None else parse_final_grade(final_grade_tag, subject_name)
                builder.add_subject(Subject(subject_name,
                                            parse_subject_grades(main_column, subject_name),
                                            final_grade))

        if behaviour is not None:
            builder.set_behaviour(behaviour)
        result = builder.build()
    except Exception as e:
        log.warning(f'Failed to parse the grades page ({type(e).__name__}: {e})')
        raise ParseError(e) from e

    log.debug(f'Parsed {len(result)} subjects')
    return result


def parse_subject_grades(column: Tag, subject_name: Name) -> Subject.Grades:
    """
    Parses grades, grouping them by the subject part heading them.

    :param column: The main column of a subject row
    :param subject_name: Name of the subject in the row
    :return: The subject's grades
    """
    builder = Subject.Grades.builder()
    subject_part = None  # The grades belong to the last subject part seen

    for tag in column.find_all(recursive=False):
        if 'subjectPart' in tag.get('class', []):
            # Subject part label without its colon
            subject_part = _text(tag)[:-1]
        elif tag.name == 'a':
            builder.add_grade(subject_part, parse_grade(tag, subject_name))

    return builder.build()


def parse_behaviour_notifications(column: Tag) -> list:
    """
    Parses commendations and reprimands out of the behaviour row.

    :param column: The main column of the behaviour row
    :return: List of :py:class:`Behaviour.Notification`
    """
    notifications = []
    for link in column.select('span > a'):
        icon = _require(link.select_one('.sprite-icon-16'), 'notification icon')
        # tick = good, cross = bad
        if 'sprite-icon-tick-16' in icon.get('class', []):
            notification_type = Behaviour.NotificationType.GOOD
        else:
            notification_type = Behaviour.NotificationType.BAD
        message = _text(_require(link.select_one('.label'), 'notification label'))
        notifications.append(Behaviour.Notification(notification_type, message))
    return notifications


def parse_final_grade(tag: Tag, subject_name: Name) -> FinalGrade:
    text = _text(tag)
    if FINAL_GRADE_EXP.fullmatch(text) is None:
        raise ValueError(f"Invalid final grade {text!r}")
    return FinalGrade(int(text), subject_name)


def parse_grade(tag: Tag, subject_name: Name) -> Grade:
    """
    Parses a grade link. Its title holds the details, such as 'Description (dd.MM.yyyy, Teacher)'.
    Grades whose title lacks the details only carry their value and weight.

    :param tag: The grade's ``a`` tag
    :param subject_name: Name of the subject the grade is in
    :return: The :py:class:`Grade`
    """
    value_char = _text(_require(tag.select_one('.value'), 'grade value'))[0]
    small = 'scoreSmall' in tag.get('class', [])

    details = parse_grade_title(tag.get('title', ''))
    if details is None:
        return Grade.from_value_char(value_char, small)

    description, receive_date, teacher = details
    return Grade.from_value_char(value_char, small, subject_name, teacher, description, receive_date)


def parse_grade_title(title: str):
    """
    Parses the details of a grade out of its title

    :param title: Raw title
    :return: ``description, receive_date, teacher`` tuple or ``None`` if the title has no details
    """
    match = GRADE_DETAILS_EXP.match(title)
    if match is None:
        return None
    receive_date = datetime.strptime(match.group('date'), RECEIVE_DATE_FORMAT).date()
    return match.group('description'), receive_date, match.group('teacher')


def parse_subject_name(name: str) -> Name:
    """
    Parses subject names in the 'name (short)' format, with the short part being optional.

    :param name: Raw name
    :return: The :py:class:`Name`
    """
    match = SUBJECT_NAME_EXP.match(name)
    return Name(match.group('full'), match.group('short'))


def _text(tag: Tag) -> str:
    # Text with whitespace collapsed the way browsers render it
    return ' '.join(tag.get_text().split())


def _require(tag, what: str):
    if tag is None:
        raise LookupError(f"Couldn't find the {what}")
    return tag
