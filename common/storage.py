"""
HTTP client for the Google Apps Script web app that stores match results.

The web app exposes a single URL and distinguishes operations with an
`action` query parameter. Both operations are plain GET requests (a POST with
a JSON body would trigger a CORS preflight the script cannot answer):

    GET <url>?action=getMatches              -> {"success": true, "data": [...]}
    GET <url>?action=addMatch&data=<json>    -> {"success": true, ...}

Neither method raises on network or payload problems. Reads degrade to an
empty list and writes to `False`; the details go to the `mtglog.storage`
logger. There is no retry and no caching between calls.
"""

from __future__ import annotations
import json
import logging
from typing import Any, List, Optional

import requests

from common.constants import ACTION_ADD, ACTION_GET, DEFAULT_TIMEOUT
from models.match_model import MatchRecord

logger = logging.getLogger("mtglog.storage")


class AppsScriptClient:
    def __init__(
        self,
        url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.url = url
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, params: dict) -> Any:
        resp = self.session.get(self.url, params=params, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def fetch_all(self) -> List[MatchRecord]:
        """Return every stored record, or [] when the read fails for any reason."""
        logger.debug("Fetching matches from %s", self.url)
        try:
            body = self._get({"action": ACTION_GET})
        except (requests.RequestException, ValueError) as exc:
            # ValueError covers undecodable JSON bodies
            logger.error("Error fetching matches: %s", exc)
            return []

        if not isinstance(body, dict) or body.get("success") is not True or not isinstance(body.get("data"), list):
            logger.warning("Unexpected data format from Apps Script: %r", body)
            return []

        records: List[MatchRecord] = []
        for row in body["data"]:
            try:
                records.append(MatchRecord.from_payload(row))
            except ValueError as exc:
                logger.warning("Skipping malformed row %r: %s", row, exc)
        logger.debug("Fetched %d matches", len(records))
        return records

    def append(self, record: MatchRecord) -> bool:
        """Store one record. True only if the script answers `success: true`."""
        payload = record.to_payload()
        logger.debug("Sending match to Apps Script: %s", payload)
        try:
            body = self._get({"action": ACTION_ADD, "data": json.dumps(payload)})
        except (requests.RequestException, ValueError) as exc:
            logger.error("Error appending match: %s", exc)
            return False

        logger.debug("Apps Script response: %r", body)
        if not isinstance(body, dict):
            logger.warning("Unexpected append response: %r", body)
            return False
        return body.get("success") is True
