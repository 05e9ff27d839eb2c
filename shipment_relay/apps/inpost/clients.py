"""
API client for the InPost ShipX API.
"""
import logging
from typing import NamedTuple, Optional

from django.conf import settings
from requests.exceptions import RequestException

from shipment_relay.apps.core.clients import BaseSessionClient, urljoin_directory

logger = logging.getLogger(__name__)


class Readiness(NamedTuple):
    """Whether a parcel is in the carrier's network, and the tracking number the carrier reports for it."""
    is_ready: bool
    tracking_number: Optional[str]


def readiness_from_tracking(tracking, fallback_tracking_number=None) -> Readiness:
    """
    Judge a ShipX tracking object against settings.INPOST_READY_STATUSES.

    Args:
        tracking (dict): Body of `GET /v1/tracking/{number}`, or None.
        fallback_tracking_number (str): Used when the carrier does not echo a tracking number back.
    """
    if not tracking:
        return Readiness(False, None)

    tracking_number = tracking.get('tracking_number') or fallback_tracking_number
    is_ready = tracking.get('status') in settings.INPOST_READY_STATUSES
    return Readiness(is_ready, str(tracking_number) if tracking_number else None)


class InPostAPIClient(BaseSessionClient):
    """
    API client for calls to InPost ShipX using an organization API token.

    Lookups never raise: any failure is logged and reported as "nothing found".
    """

    @property
    def default_headers(self):
        return {
            **super().default_headers,
            'Authorization': f'Bearer {settings.INPOST_API_TOKEN}',
        }

    @property
    def api_tracking_base_url(self):
        """
        Base URL for the ShipX tracking endpoint.
        """
        return urljoin_directory(settings.INPOST_API_URL, '/v1/tracking/')

    @property
    def api_shipments_base_url(self):
        """
        Base URL for the ShipX shipments endpoint.
        """
        return urljoin_directory(settings.INPOST_API_URL, '/v1/shipments/')

    def get(self, url, log_context=''):
        """
        Send a GET request to ShipX.

        Returns:
            dict: The JSON response, or None if the request failed in any way.
        """
        try:
            response = self.session.get(url, timeout=self.normal_timeout)
            response.raise_for_status()
            body = response.json()
        except RequestException as exc:
            self.log_request_exception(f"[InPostAPIClient.get] GET {url} {log_context}", logger, exc)
            return None
        except ValueError as exc:
            logger.error(f"[InPostAPIClient.get] GET {url} returned a body that is not JSON {log_context}: {exc}")
            return None

        if not isinstance(body, dict):
            logger.error(f"[InPostAPIClient.get] GET {url} returned an unexpected body {log_context}: {body}")
            return None
        return body

    def get_tracking(self, tracking_or_shipment_ref) -> Optional[dict]:
        """
        Fetch the tracking history of a parcel.

        Args:
            tracking_or_shipment_ref (str): Tracking number, or shipment id where ShipX accepts it.
        """
        return self.get(
            urljoin_directory(self.api_tracking_base_url, str(tracking_or_shipment_ref)),
            log_context=f'| ref: {tracking_or_shipment_ref}',
        )

    def get_shipment(self, shipment_id) -> Optional[dict]:
        """
        Fetch a shipment by its ShipX id.
        """
        return self.get(
            urljoin_directory(self.api_shipments_base_url, str(shipment_id)),
            log_context=f'| shipment_id: {shipment_id}',
        )

    def resolve_order_reference(self, shipment_id) -> Optional[str]:
        """
        Return the order name the shop stored as the shipment's `reference`, if any.
        """
        shipment = self.get_shipment(shipment_id)
        if not shipment:
            return None

        reference = shipment.get('reference')
        if reference is None or not str(reference).strip():
            logger.warning(f"[InPostAPIClient.resolve_order_reference] Shipment [{shipment_id}] has no reference.")
            return None
        return str(reference).strip()

    def check_readiness(self, tracking_or_shipment_ref, fallback_tracking_number=None) -> Readiness:
        """
        Ask ShipX whether the parcel has entered the sorting network.

        Args:
            tracking_or_shipment_ref: Tracking number, or ShipX shipment id.
            fallback_tracking_number (str): Reported when ShipX does not echo a tracking number; never a shipment id.

        Returns:
            Readiness: `(False, None)` if the lookup failed.
        """
        readiness = readiness_from_tracking(
            self.get_tracking(tracking_or_shipment_ref),
            fallback_tracking_number=fallback_tracking_number,
        )
        logger.info(
            f"[InPostAPIClient.check_readiness] Parcel [{tracking_or_shipment_ref}] ready: {readiness.is_ready}, "
            f"tracking number: {readiness.tracking_number}."
        )
        return readiness
