#: Base URL
ROOT = 'https://www.spsejecna.cz'

#: Login form target. Takes the ``user`` and ``pass`` POST fields.
LOGIN = '/user/login'

#: Logout link, invalidates the session cookie
LOGOUT = '/user/logout'

#: Grades table of the logged in student. Accepts the school year and half parameters.
GRADES = '/score/student'

#: Passing records (attendance) of the logged in student. Accepts the school year and month parameters.
ATTENDANCES = '/absence/passing-student'

#: Query parameter selecting a school year
SCHOOL_YEAR_PARAM = 'schoolYearId'

#: Query parameter selecting a half of a school year
SCHOOL_YEAR_HALF_PARAM = 'schoolYearHalfId'

#: Query parameter selecting a month of a school year
MONTH_PARAM = 'schoolYearPartMonthId'

#: The school year id is its first calendar year minus this
SCHOOL_YEAR_ID_OFFSET = 2006

#: Ids of the first and second half of a school year
FIRST_HALF_ID = 60
SECOND_HALF_ID = 61
