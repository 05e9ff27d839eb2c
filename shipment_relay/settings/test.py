from shipment_relay.settings.base import *

# IN-MEMORY TEST DATABASE
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
        'USER': '',
        'PASSWORD': '',
        'HOST': '',
        'PORT': '',
    },
}
# END IN-MEMORY TEST DATABASE

SHOPIFY_SHOP_DOMAIN = 'test-shop.myshopify.com'
SHOPIFY_ACCESS_TOKEN = 'shpat_test_token'
SHOPIFY_WEBHOOK_SECRET = 'shopify-test-secret'

INPOST_API_URL = 'https://inpost.testserver.com'
INPOST_API_TOKEN = 'inpost-test-token'
INPOST_WEBHOOK_TOKEN = ''

SHOPIFY_EMPTY_CAPABILITIES_POLICY = 'attempt'
