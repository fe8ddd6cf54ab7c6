import json
import os

AUTH_VALIDITY_MINUTES = 15  # sessions expire server side, re-login after this
REQUEST_TIMEOUT = 30
REQUEST_RETRIES = 3
RETRY_DELAY = 5
COOKIE_FILE = os.getcwd() + '/cookies'

JECNA_CREDENTIALS = None

if 'CONFIG' in os.environ:
    CONFIG_PATH = os.environ['CONFIG']
    assert os.path.isfile(CONFIG_PATH)

    with open(CONFIG_PATH) as file:
        locals().update(json.load(file))
