import os
import unittest
from datetime import date

from JecnaPy import parser
from JecnaPy.data import Name, Grade, FinalGrade, Behaviour

SNAPSHOTS = os.path.join(os.path.dirname(__file__), 'snapshots')


def read_snapshot(name):
    with open(os.path.join(SNAPSHOTS, name), mode='r', encoding='utf-8') as page:
        return page.read()


def grades_table(*rows):
    return '<html><body><table class="score"><tbody>' + ''.join(rows) + '</tbody></table></body></html>'


BEHAVIOUR_ROW = '<tr><th>Chování</th><td></td><td><span class="scoreFinal">1</span></td></tr>'


class GradesPageParsing(unittest.TestCase):

    def test_grades_page_parsing(self):
        """
        | Tests :py:func:`JecnaPy.parser.parse_grades_page` against a :py:const:`JecnaPy.urls.GRADES` page snapshot.
        | Asserts that every subject, its grades and the behaviour are found.
        """
        page = parser.parse_grades_page(read_snapshot('grades.html'))
        self.assertEqual(page.subject_names, [Name('Český jazyk a literatura'),
                                              Name('Matematika'),
                                              Name('Fyzika (doplňková)')])

        czech = page['Český jazyk a literatura']
        self.assertEqual(czech.name.short, 'CJL')
        self.assertEqual(czech.grades.subject_parts, ['Literatura', 'Mluvnice'])
        self.assertEqual(list(czech.grades['Literatura']), [
            Grade(1, False, czech.name, 'Mgr. Jana Nováková', 'Čtenářský deník', date(2021, 10, 5)),
            Grade(3, True, czech.name, 'Mgr. Jana Nováková', 'Test (kapitola 3)', date(2021, 10, 19))])
        self.assertEqual(list(czech.grades['Mluvnice']), [
            Grade(0, False, czech.name, 'Mgr. Jana Nováková', 'Diktát', date(2021, 11, 2))])
        self.assertEqual(czech.final_grade, FinalGrade(2, Name('Český jazyk a literatura')))

        maths = page.get_subject_by_name(Name('Matematika', 'M'))
        self.assertEqual(maths.name.short, 'M')
        self.assertEqual(maths.grades.subject_parts, [None])
        self.assertEqual(list(maths.grades[None]), [
            Grade(1, True, maths.name, 'Novák', 'Za aktivitu', date(2021, 3, 12)),
            Grade(4, False)])
        self.assertIsNone(maths.final_grade)

        physics = page['Fyzika (doplňková)']
        self.assertEqual(physics.name.short, 'FYZ')
        self.assertEqual(len(physics.grades), 0)
        self.assertIsNone(physics.final_grade)

        self.assertIsNone(page['Chování'])
        self.assertEqual(page.behaviour.notifications, (
            Behaviour.Notification(Behaviour.NotificationType.GOOD, 'Pochvala třídního učitele'),
            Behaviour.Notification(Behaviour.NotificationType.BAD, 'Napomenutí třídního učitele')))
        self.assertEqual(page.behaviour.final_grade, FinalGrade(1, Name('Chování')))

    def test_grades_page_parsing_is_repeatable(self):
        html = read_snapshot('grades.html')
        self.assertEqual(parser.parse_grades_page(html), parser.parse_grades_page(html))

    def test_behaviour_only_page(self):
        page = parser.parse_grades_page(grades_table(BEHAVIOUR_ROW))
        self.assertEqual(len(page), 0)
        self.assertEqual(page.behaviour.notifications, ())

    def test_missing_behaviour(self):
        html = grades_table('<tr><th>Matematika (M)</th><td></td></tr>')
        with self.assertRaises(parser.ParseError) as context:
            parser.parse_grades_page(html)
        self.assertIsInstance(context.exception.cause, RuntimeError)

    def test_duplicate_behaviour(self):
        with self.assertRaises(parser.ParseError):
            parser.parse_grades_page(grades_table(BEHAVIOUR_ROW, BEHAVIOUR_ROW))

    def test_behaviour_without_final_grade(self):
        with self.assertRaises(parser.ParseError) as context:
            parser.parse_grades_page(grades_table('<tr><th>Chování</th><td></td></tr>'))
        self.assertIsInstance(context.exception.cause, LookupError)

    def test_illegal_grade_value(self):
        """
        | A single grade with an unknown value spoils the whole page.
        """
        html = grades_table(
            '<tr><th>Matematika (M)</th><td>'
            '<a class="score" title="Test (12.03.2021, Novák)"><span class="value">7</span></a>'
            '</td></tr>',
            BEHAVIOUR_ROW)
        with self.assertRaises(parser.ParseError) as context:
            parser.parse_grades_page(html)
        self.assertIsInstance(context.exception.cause, ValueError)

    def test_malformed_date(self):
        html = grades_table(
            '<tr><th>Matematika (M)</th><td>'
            '<a class="score" title="Test (31.02.2021, Novák)"><span class="value">2</span></a>'
            '</td></tr>',
            BEHAVIOUR_ROW)
        with self.assertRaises(parser.ParseError):
            parser.parse_grades_page(html)

    def test_non_numeric_final_grade(self):
        html = grades_table(
            '<tr><th>Matematika (M)</th><td></td><td><a class="scoreFinal">?</a></td></tr>',
            BEHAVIOUR_ROW)
        with self.assertRaises(parser.ParseError) as context:
            parser.parse_grades_page(html)
        self.assertIsInstance(context.exception.cause, ValueError)

    def test_row_without_header(self):
        with self.assertRaises(parser.ParseError):
            parser.parse_grades_page(grades_table('<tr><td></td></tr>', BEHAVIOUR_ROW))

    def test_page_without_table(self):
        with self.assertRaises(parser.ParseError):
            parser.parse_grades_page('<html><body><p>Přihlášení</p></body></html>')

    def test_grades_before_first_subject_part(self):
        html = grades_table(
            '<tr><th>Matematika (M)</th><td>'
            '<a class="score" title="Za aktivitu (12.03.2021, Novák)"><span class="value">1</span></a>'
            '<span class="subjectPart">Testy:</span>'
            '<a class="score scoreSmall" title="Test (19.03.2021, Novák)"><span class="value">2</span></a>'
            '<a class="score"><span class="value">3</span></a>'
            '</td></tr>',
            BEHAVIOUR_ROW)
        grades = parser.parse_grades_page(html)['Matematika'].grades
        self.assertEqual(grades.subject_parts, [None, 'Testy'])
        self.assertEqual([grade.value for grade in grades[None]], [1])
        self.assertEqual([(grade.value, grade.small) for grade in grades['Testy']], [(2, True), (3, False)])

    def test_grade_without_value(self):
        html = grades_table(
            '<tr><th>Matematika (M)</th><td>'
            '<a class="score" title="Test (12.03.2021, Novák)"><span class="employee">Nvk</span></a>'
            '</td></tr>',
            BEHAVIOUR_ROW)
        with self.assertRaises(parser.ParseError) as context:
            parser.parse_grades_page(html)
        self.assertIsInstance(context.exception.cause, LookupError)

    def test_notification_without_icon(self):
        html = grades_table(
            '<tr><th>Chování</th><td>'
            '<span class="textRow"><a href="/record"><span class="label">Pochvala</span></a></span>'
            '</td><td><span class="scoreFinal">1</span></td></tr>')
        with self.assertRaises(parser.ParseError) as context:
            parser.parse_grades_page(html)
        self.assertIsInstance(context.exception.cause, LookupError)

    def test_notification_without_label(self):
        html = grades_table(
            '<tr><th>Chování</th><td>'
            '<span class="textRow"><a href="/record"><span class="sprite-icon-16 sprite-icon-tick-16"></span></a></span>'
            '</td><td><span class="scoreFinal">1</span></td></tr>')
        with self.assertRaises(parser.ParseError) as context:
            parser.parse_grades_page(html)
        self.assertIsInstance(context.exception.cause, LookupError)

    def test_final_grade_with_separator(self):
        for final_grade in ('1_0', '+2', '-1', '1.0'):
            html = grades_table(
                f'<tr><th>Matematika (M)</th><td></td><td><a class="scoreFinal">{final_grade}</a></td></tr>',
                BEHAVIOUR_ROW)
            with self.assertRaises(parser.ParseError) as context:
                parser.parse_grades_page(html)
            self.assertIsInstance(context.exception.cause, ValueError)


class TextParsing(unittest.TestCase):

    def test_subject_name_parsing(self):
        name = parser.parse_subject_name('Matematika (MAT)')
        self.assertEqual((name.full, name.short), ('Matematika', 'MAT'))

        name = parser.parse_subject_name('Český jazyk a literatura')
        self.assertEqual((name.full, name.short), ('Český jazyk a literatura', None))

        name = parser.parse_subject_name('Fyzika (doplňková) (FYZ)')
        self.assertEqual((name.full, name.short), ('Fyzika (doplňková)', 'FYZ'))

        # Too long to be a short name
        name = parser.parse_subject_name('Fyzika (doplňková)')
        self.assertEqual((name.full, name.short), ('Fyzika (doplňková)', None))

        # Short names are ASCII only
        name = parser.parse_subject_name('Český jazyk a literatura (ČJL)')
        self.assertEqual((name.full, name.short), ('Český jazyk a literatura (ČJL)', None))

    def test_grade_title_parsing(self):
        self.assertEqual(parser.parse_grade_title('Za aktivitu (12.03.2021, Novák)'),
                         ('Za aktivitu', date(2021, 3, 12), 'Novák'))
        self.assertEqual(parser.parse_grade_title('Písemka (opravná) (01.06.2022, Ing. Petr Svoboda, Ph.D.)'),
                         ('Písemka (opravná)', date(2022, 6, 1), 'Ing. Petr Svoboda, Ph.D.'))

    def test_grade_title_without_details(self):
        self.assertIsNone(parser.parse_grade_title('Za aktivitu'))
        self.assertIsNone(parser.parse_grade_title('Za aktivitu (Novák)'))
        self.assertIsNone(parser.parse_grade_title(''))


if __name__ == '__main__':
    unittest.main()
