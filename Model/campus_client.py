# Model/campus_client.py
"""
HTTP access to the campus path server.

    GET /getBuildings             -> {"BAG": "Bagley Hall", ...}
    GET /getPath?src=..&dst=..    -> {"path": [{"start": {...}, "end": {...}, "cost": ...}, ...]}

Calls block, so the controller runs them on the worker pool.
"""
from __future__ import annotations
import logging
from typing import Any, Dict

import requests

from .errors import PayloadDecodeError, TransportError
from .geometry import BuildingMap, PathStructure
from .payloads import decode_buildings, decode_path

logger = logging.getLogger(__name__)


class CampusClient:
    def __init__(self, base_url: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def get_buildings(self) -> BuildingMap:
        return decode_buildings(self._get_json("/getBuildings"))

    def get_path(self, src: str, dst: str) -> PathStructure:
        return decode_path(self._get_json("/getPath", {"src": src, "dst": dst}))

    def _get_json(self, endpoint: str, params: Dict[str, str] | None = None) -> Any:
        url = self.base_url + endpoint
        logger.debug(f"GET {url} params={params}")
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"Could not reach the path server: {e}") from e

        if response.status_code != 200:
            logger.warning(f"GET {url} answered {response.status_code}")
            raise TransportError("The request could not be processed.")

        try:
            return response.json()
        except ValueError as e:
            raise PayloadDecodeError(f"Server sent invalid JSON: {e}") from e
