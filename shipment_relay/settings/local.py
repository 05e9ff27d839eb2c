from shipment_relay.settings.base import *

DEBUG = True

ALLOWED_HOSTS += [
    # Built-in alias to reach the host machine running Docker Desktop from inside a container:
    'host.docker.internal',
    'localhost',
    # Tunnels used to receive carrier and shop webhooks on a laptop.
    '.ngrok-free.app',
]

REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] += (
    'rest_framework.renderers.BrowsableAPIRenderer',
)

LOGGING = get_logger_config(debug=DEBUG)

# InPost sandbox
INPOST_API_URL = 'https://sandbox-api-shipx-pl.easypack24.net'

#####################################################################
# Lastly, see if the developer has any local overrides.
if os.path.isfile(join(dirname(abspath(__file__)), 'private.py')):
    from .private import *  # pylint: disable=import-error
