from shipment_relay.settings.base import *
from shipment_relay.settings.utils import get_env_setting

ALLOWED_HOSTS = get_env_setting('SHIPMENT_RELAY_ALLOWED_HOSTS').split(',')

SECRET_KEY = get_env_setting('SHIPMENT_RELAY_SECRET_KEY')

SHOPIFY_SHOP_DOMAIN = get_env_setting('SHOPIFY_SHOP_DOMAIN')
SHOPIFY_ACCESS_TOKEN = get_env_setting('SHOPIFY_ACCESS_TOKEN')
SHOPIFY_WEBHOOK_SECRET = get_env_setting('SHOPIFY_WEBHOOK_SECRET')
SHOPIFY_EMPTY_CAPABILITIES_POLICY = os.environ.get(
    'SHOPIFY_EMPTY_CAPABILITIES_POLICY', SHOPIFY_EMPTY_CAPABILITIES_POLICY
)

INPOST_API_TOKEN = get_env_setting('INPOST_API_TOKEN')

LOGGING = get_logger_config(logging_env='production', debug=DEBUG)
