"""Firestore-backed key-value store.

Each key is one document at ``/devices/{device_id}/settings/{key}``
holding ``{"values": [...]}``.  Lets favorites and badge tracking follow a
device identity across reinstalls.
"""

from __future__ import annotations

import logging
from typing import Any

from avgeek.persistence.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class FirestoreKeyValueStore(KeyValueStore):
    def __init__(self, client: Any, device_id: str):
        self._client = client
        self._device_id = device_id

    @classmethod
    def from_default_credentials(cls, device_id: str) -> "FirestoreKeyValueStore":
        """Build a store on a google-cloud-firestore ``Client``.

        Uses Application Default Credentials (ADC).
        """
        from google.cloud import firestore

        logger.info("Using Google Cloud Firestore for device %s", device_id)
        return cls(firestore.Client(), device_id)

    def _doc_ref(self, key: str):
        return (
            self._client.collection("devices")
            .document(self._device_id)
            .collection("settings")
            .document(key)
        )

    def get_strings(self, key: str) -> list[str] | None:
        doc = self._doc_ref(key).get()
        if not doc.exists:
            return None
        values = doc.to_dict().get("values")
        if not isinstance(values, list):
            logger.warning("Ignoring malformed settings document %s", key)
            return None
        return [str(v) for v in values]

    def set_strings(self, key: str, values: list[str]) -> None:
        self._doc_ref(key).set({"values": list(values)})
