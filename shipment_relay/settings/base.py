import os
from os.path import abspath, dirname, join

from shipment_relay.settings.utils import get_logger_config

# PATH vars
PROJECT_ROOT = join(abspath(dirname(__file__)), "..")


def root(*path_fragments):
    return join(abspath(PROJECT_ROOT), *path_fragments)


# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get('SHIPMENT_RELAY_SECRET_KEY', 'insecure-secret-key')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = False

ALLOWED_HOSTS = []

# Application definition

INSTALLED_APPS = (
    'django.contrib.auth',
    'django.contrib.contenttypes',
)

THIRD_PARTY_APPS = (
    'rest_framework',
)

PROJECT_APPS = (
    'shipment_relay.apps.core.apps.CoreConfig',
    'shipment_relay.apps.shopify.apps.ShopifyConfig',
    'shipment_relay.apps.inpost.apps.InPostConfig',
)

INSTALLED_APPS += THIRD_PARTY_APPS
INSTALLED_APPS += PROJECT_APPS

MIDDLEWARE = (
    # Resets RequestCache utility for added safety.
    'edx_django_utils.cache.middleware.RequestCacheMiddleware',

    # Monitoring middleware should be immediately after RequestCacheMiddleware
    'edx_django_utils.monitoring.DeploymentMonitoringMiddleware',  # python and django version

    'django.middleware.common.CommonMiddleware',
)

ROOT_URLCONF = 'shipment_relay.urls'

# The relay keeps no state of its own; every fact is read live from Shopify and InPost.
# Django's auth app still wants a database to exist, so an in-memory one is enough.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

# Internationalization
# https://docs.djangoproject.com/en/dev/topics/i18n/

LANGUAGE_CODE = 'en-us'

TIME_ZONE = 'UTC'

USE_I18N = False

USE_TZ = True

# DRF CONFIGURATION
REST_FRAMEWORK = {
    'EXCEPTION_HANDLER': 'shipment_relay.apps.core.middleware.log_drf_exceptions',
    # Webhook views declare their own authentication.
    'DEFAULT_AUTHENTICATION_CLASSES': (),
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.AllowAny',
    ),
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'DEFAULT_PARSER_CLASSES': (
        'rest_framework.parsers.JSONParser',
    ),
    'UNAUTHENTICATED_USER': None,
}
# END DRF CONFIGURATION

# Set up logging for development use (logging to stdout)
LOGGING = get_logger_config(debug=DEBUG)

#####################################################################
# Shipment Relay Signal Configuration
#
# The keys are instances of CoordinatorSignal in any installed app
# and the values are Django signal receiver functions from any
# installed app to be called when the given signal is dispatched.
# These mappings are bound and enforced in
# core.apps.CoreConfig.ready() which is run on Django startup.
#####################################################################
RELAY_SIGNALS = {
    'shipment_relay.apps.inpost.signals.shipment_label_created_signal': [
        'shipment_relay.apps.shopify.signals.shipment_label_created_put_order_on_hold',
    ],
    'shipment_relay.apps.inpost.signals.shipment_ready_for_fulfillment_signal': [
        'shipment_relay.apps.shopify.signals.shipment_ready_for_fulfillment_mark_order_fulfilled',
    ],
}

# Default timeouts for requests
# (See https://docs.python-requests.org/en/master/user/advanced/#timeouts for more info.)
REQUEST_CONNECT_TIMEOUT_SECONDS = 3.05
REQUEST_READ_TIMEOUT_SECONDS = 5

# SHOPIFY CONFIGURATION
SHOPIFY_SHOP_DOMAIN = os.environ.get('SHOPIFY_SHOP_DOMAIN', 'replace-me.myshopify.com')
SHOPIFY_API_VERSION = '2024-04'
SHOPIFY_ACCESS_TOKEN = os.environ.get('SHOPIFY_ACCESS_TOKEN', 'replace-me')
# Shared secret Shopify signs webhook bodies with.
SHOPIFY_WEBHOOK_SECRET = os.environ.get('SHOPIFY_WEBHOOK_SECRET', 'replace-me')

# Sent with the fulfillment-order hold request.
SHOPIFY_HOLD_REASON = 'other'
SHOPIFY_HOLD_REASON_NOTES = 'Awaiting carrier pickup'

# Carrier name recorded on fulfillments.
SHOPIFY_TRACKING_COMPANY = 'InPost'

# What to do when a fulfillment order reports no supported actions at all.
# 'attempt': treat capability data as unavailable and issue the call anyway.
# 'abort': treat it as "nothing is allowed" and refuse.
SHOPIFY_EMPTY_CAPABILITIES_POLICY = 'attempt'
# END SHOPIFY CONFIGURATION

# INPOST CONFIGURATION
INPOST_API_URL = 'https://api-shipx-pl.easypack24.net'
INPOST_API_TOKEN = os.environ.get('INPOST_API_TOKEN', 'replace-me')
# Optional shared token expected on incoming InPost webhooks. Empty disables the check.
INPOST_WEBHOOK_TOKEN = os.environ.get('INPOST_WEBHOOK_TOKEN', '')

# Shipment statuses meaning a label was created and the order should wait.
INPOST_HOLD_STATUSES = (
    'created',
    'confirmed',
)
# Shipment statuses that trigger the fulfillment flow.
INPOST_FULFILL_STATUSES = (
    'adopted_at_sorting_center',
)
# Tracking statuses at which the parcel is in the carrier's network.
INPOST_READY_STATUSES = (
    'adopted_at_source_branch',
    'adopted_at_sorting_center',
    'sent_from_sorting_center',
    'sent_from_source_branch',
    'adopted_at_target_branch',
    'out_for_delivery',
    'ready_to_pickup',
    'delivered',
)
# END INPOST CONFIGURATION
