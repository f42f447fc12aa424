"""Pairing URI encoding.

`openclaw://connect?host=<h>&port=<p>&token=<t>&mode=<mesh|local>`
"""

from __future__ import annotations

from urllib.parse import urlencode

from core.config import PAIRING_SCHEME
from core.domain.models import ConnectionCandidate, PairingDescriptor


def encode_descriptor(descriptor: PairingDescriptor) -> str:
    query = urlencode(
        {
            "host": descriptor.host,
            "port": str(descriptor.port),
            "token": descriptor.token,
            "mode": descriptor.mode.value,
        }
    )
    return f"{PAIRING_SCHEME}://connect?{query}"


def encode(candidate: ConnectionCandidate, token: str) -> str:
    return encode_descriptor(PairingDescriptor.from_candidate(candidate, token))
