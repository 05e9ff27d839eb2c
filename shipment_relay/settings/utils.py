import platform
import sys
from os import environ

from django.core.exceptions import ImproperlyConfigured


def get_env_setting(setting):
    """ Get the environment setting or raise exception """
    try:
        return environ[setting]
    except KeyError as exc:
        raise ImproperlyConfigured(f"Set the [{setting}] env variable!") from exc


def get_logger_config(logging_env="no_env",
                      debug=False,
                      service_variant='shipment-relay',
                      format_string=''):
    """
    Return the logging config dictionary for the relay. Assign the result to
    the LOGGING var in your settings.

    Relay modules log through the root logger's console handler;
    `requests` and `urllib3` are kept at WARNING.
    """
    hostname = platform.node().split(".")[0]
    syslog_format = (
        f"[service_variant={service_variant}]"
        f"[%(name)s][env:{logging_env}] %(levelname)s "
        f"[{hostname}  %(process)d] [ip %(remoteip)s] [%(filename)s:%(lineno)d] "
        "- %(message)s"
    )

    handlers = ['console']

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': format_string or '%(asctime)s %(levelname)s [%(name)s] %(message)s',
            },
            'syslog_format': {'format': syslog_format},
        },
        'filters': {
            'userid_context': {
                '()': 'edx_django_utils.logging.UserIdFilter',
            },
            'remoteip_context': {
                '()': 'edx_django_utils.logging.RemoteIpFilter',
            },
            'skip_health_check': {
                '()': 'django.utils.log.CallbackFilter',
                # Space before the path forces the match to be from the root of the service.
                'callback': lambda record: ' /health' not in record.getMessage()
            }
        },
        'handlers': {
            'console': {
                'level': 'DEBUG' if debug else 'INFO',
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'filters': ['userid_context', 'remoteip_context', 'skip_health_check'],
                'stream': sys.stdout,
            },
        },
        'loggers': {
            'django': {
                'handlers': handlers,
                'propagate': False,
                'level': 'INFO'
            },
            'django.request': {
                'handlers': handlers,
                'propagate': False,
                'level': 'WARNING'
            },
            'requests': {
                'handlers': handlers,
                'propagate': False,
                'level': 'WARNING'
            },
            'urllib3': {
                'handlers': handlers,
                'propagate': False,
                'level': 'WARNING'
            },
            '': {
                'handlers': handlers,
                'level': 'DEBUG',
                'propagate': False
            },
        }
    }
