"""Comprobador remoto: nif.pt.

Implementación:
- Consulta `https://www.nif.pt/?q=<nif>` con una única petición GET.
- Parsea el HTML y delega la clasificación en `core.services.classifier`.

Notas:
- Es scraping: no hay contrato formal con el sitio. Cualquier fallo de red,
  status no exitoso o cambio de markup se degrada a `RemoteStatus.UNKNOWN`.
- Sin reintentos: un intento fallido es definitivo para esa invocación.
"""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import httpx

from adapters.html_document import parse_html
from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import RemoteStatus
from core.interfaces.checker import NifStatusChecker
from core.services.classifier import classify_document

logger = logging.getLogger(__name__)


class NifPtChecker(NifStatusChecker):
    def __init__(
        self,
        settings: AppSettings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def build_url(self, nif: str) -> str:
        return f"{self._settings.lookup_base_url}/?{urlencode({'q': nif})}"

    def check(self, nif: str) -> RemoteStatus:
        url = self.build_url(nif)
        logger.info("Querying URL: %s", url)

        try:
            if self._client is not None:
                response = self._client.get(url)
            else:
                with build_client(self._settings) as client:
                    response = client.get(url)
            # El body ya se leyó en `get`; `.text` solo decodifica.
            html = response.text
        except httpx.HTTPError as exc:
            logger.error("Error making request to %s: %s", url, exc)
            return RemoteStatus.UNKNOWN

        if not response.is_success:
            logger.warning("Request failed with status: %s", response.status_code)
            return RemoteStatus.UNKNOWN

        status = classify_document(parse_html(html))
        logger.info("NIF %s classified as %s", nif, status.value)
        return status


def check_nif_status(nif: str, settings: AppSettings | None = None) -> RemoteStatus:
    """Atajo funcional: una consulta con un cliente efímero."""

    return NifPtChecker(settings).check(nif)
