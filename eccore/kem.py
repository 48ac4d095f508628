"""Key encapsulation mechanism interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

__all__ = [
    "KemError",
    "EncappedKey",
    "Encapsulator",
    "Decapsulator",
    "AuthDecapsulator",
]


class KemError(Exception):
    """Opaque failure of encapsulation or decapsulation.

    It carries no detail so that nothing about private keys leaks through it.
    """

    def __init__(self) -> None:
        super().__init__("error encapsulating or decapsulating")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, KemError)

    def __hash__(self) -> int:
        return hash(KemError)


class EncappedKey(ABC):
    """An encapsulated key: in essence a bag of bytes.

    Subclasses set ``secret_size`` to the length of the shared secret the
    scheme produces.
    """

    secret_size: ClassVar[int]

    @abstractmethod
    def __bytes__(self) -> bytes:
        """Return the wire encoding of the encapsulated key."""


EK = TypeVar("EK", bound=EncappedKey)


class Encapsulator(ABC, Generic[EK]):
    """Something that encapsulates fresh shared secrets.

    For unauthenticated encapsulation the object carries no state; for
    authenticated encapsulation it is the sender's private key.
    """

    @abstractmethod
    def try_encap(self, csprng: Any, recip_pubkey: Any) -> tuple[EK, bytes]:
        """Return an encapsulated key and the shared secret, or raise KemError."""


class Decapsulator(ABC, Generic[EK]):
    """A private key able to recover a shared secret."""

    @abstractmethod
    def try_decap(self, encapped_key: EK) -> bytes:
        """Return the shared secret, or raise KemError."""


class AuthDecapsulator(ABC, Generic[EK]):
    """A private key able to recover a secret bound to a sender's identity."""

    @abstractmethod
    def try_auth_decap(self, encapped_key: EK, sender_pubkey: Any) -> bytes:
        """Return the shared secret bound to ``sender_pubkey``, or raise KemError."""