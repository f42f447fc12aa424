"""Local interface enumeration (psutil)."""

from __future__ import annotations

import ipaddress
import socket

import psutil

from core.domain.models import InterfaceAddress


def _is_internal(address: str) -> bool:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return False


class PsutilInterfaces:
    """Addresses from `psutil.net_if_addrs()`, kept in the order psutil reports."""

    def addresses(self) -> list[InterfaceAddress]:
        try:
            table = psutil.net_if_addrs()
        except (psutil.Error, OSError):
            return []

        out: list[InterfaceAddress] = []
        for name, entries in table.items():
            for entry in entries:
                if entry.family == socket.AF_INET:
                    family = "IPv4"
                elif entry.family == socket.AF_INET6:
                    family = "IPv6"
                else:
                    continue
                out.append(
                    InterfaceAddress(
                        name=name,
                        address=entry.address,
                        family=family,
                        internal=_is_internal(entry.address),
                    )
                )
        return out
