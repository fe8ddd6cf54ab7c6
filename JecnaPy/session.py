import os
from datetime import datetime, timedelta
from threading import Semaphore
from time import sleep

import requests
from http.cookiejar import LWPCookieJar
import logging

from . import urls
from . import config

log = logging.getLogger(__name__)
__active_sessions__ = []
__auth_lock__ = Semaphore()

http_headers = {'user-agent': 'Mozilla/5.0 (X11; Linux x86_64; rv:1.0) Gecko/20100101 JecnaPy'}


class AuthenticationFailure(Exception):
    pass


class Session:
    """
    A session behaves like a browser session, maintaining (some) state across requests.

    :param username: Login name. Taken from :py:const:`JecnaPy.config.JECNA_CREDENTIALS` if omitted.
    :param password: Password. Taken from :py:const:`JecnaPy.config.JECNA_CREDENTIALS` if omitted.
    :param cookies: File to keep the cookies in
    """

    def __init__(self, username: str = None, password: str = None, cookies: str = None):
        if cookies is None:
            cookies = config.COOKIE_FILE
        log.debug('Creating session (Cookie file:{})'.format(cookies))
        for session in __active_sessions__:
            if session.__cookie_file__ == cookies:
                raise Exception("Attempted to share a cookie file")

        if username is None or password is None:
            credentials = config.JECNA_CREDENTIALS
            if credentials is None:
                raise AuthenticationFailure("No credentials were given nor configured")
            username = credentials['USERNAME']
            password = credentials['PASSWORD']

        self.__cookie_file__ = cookies
        self.__username__ = username
        self.__password__ = password
        self.authenticated = False

        cookie_jar = LWPCookieJar(cookies)
        if os.path.exists(cookies):
            cookie_jar.load(ignore_discard=True)
        else:
            cookie_jar.save(ignore_discard=True)
            log.debug('Created empty cookie file')

        self.__requests_session__ = requests.Session()
        self.__requests_session__.cookies = cookie_jar
        __active_sessions__.append(self)
        self.__last__authentication = None

    def save(self):
        """
        Saves cookies to disk for reuse
        """
        self.__requests_session__.cookies.save(ignore_discard=True)

    def authenticate(self):
        """
        Sets up auth cookies for this session
        """
        __auth_lock__.acquire()
        try:
            time_limit = datetime.now() - timedelta(minutes=config.AUTH_VALIDITY_MINUTES)
            if self.__last__authentication is None or self.__last__authentication < time_limit:
                log.info("Requesting auth")
                # The login form only accepts sessions which already visited the page
                self.__request__('GET', urls.ROOT)
                response = self.__request__(
                    'POST',
                    urls.ROOT + urls.LOGIN,
                    data={'user': self.__username__, 'pass': self.__password__})
                log.info("Response for auth received")
                if 'name="pass"' in response.text:
                    self.authenticated = False
                    log.warning(f'Login refused for {self.__username__}')
                    raise AuthenticationFailure("Authentication failed")
                self.authenticated = True
                log.info('Successfully authenticated')
                self.save()
            self.__last__authentication = datetime.now()
        finally:
            __auth_lock__.release()

    def __request__(self, method: str, url: str, **kwargs) -> requests.Response:
        attempt = 0
        while True:
            try:
                return self.__requests_session__.request(
                    method, url, headers=http_headers, timeout=config.REQUEST_TIMEOUT, **kwargs)
            except requests.exceptions.Timeout:
                attempt += 1
                if attempt > config.REQUEST_RETRIES:
                    raise
                log.warning(f"Request timed out: {url}")
                sleep(config.RETRY_DELAY)

    def get(self, path: str, params: {str: str} = None) -> requests.Response:
        """
        Fetches a page using an HTTP GET method using the current session attributes

        :param path: Path of the page, relative to :py:const:`JecnaPy.urls.ROOT`
        :param params: Query parameters
        :return: Request response
        """
        log.debug(f'Fetching: {path} with params {params}')
        self.authenticate()
        return self.__request__('GET', urls.ROOT + path, params=params)

    def fetch_page(self, path: str, params: {str: str} = None) -> str:
        """
        Fetches the HTML of a page

        :param path: Path of the page, relative to :py:const:`JecnaPy.urls.ROOT`
        :param params: Query parameters
        :return: Page body
        :raises requests.HTTPError: When the server doesn't return the page
        """
        response = self.get(path, params=params)
        response.raise_for_status()
        return response.text

    def close(self):
        if self in __active_sessions__:
            __active_sessions__.remove(self)
        self.__requests_session__.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
