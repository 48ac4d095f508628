import hashlib
import random

import pytest

from eccore.kem import (
    AuthDecapsulator,
    Decapsulator,
    EncappedKey,
    Encapsulator,
    KemError,
)

P = 2**127 - 1
G = 3
WIDTH = 16


class _Encapped(EncappedKey):
    secret_size = 32

    def __init__(self, value: int) -> None:
        self.value = value

    def __bytes__(self) -> bytes:
        return self.value.to_bytes(WIDTH, "big")

    @classmethod
    def from_bytes(cls, data: bytes) -> "_Encapped":
        if len(data) != WIDTH:
            raise KemError()
        return cls(int.from_bytes(data, "big"))


def _kdf(*parts: int) -> bytes:
    h = hashlib.sha256()
    for part in parts:
        h.update(part.to_bytes(WIDTH, "big"))
    return h.digest()


class _Anon(Encapsulator):
    def try_encap(self, csprng, recip_pubkey):
        eph = csprng.randrange(2, P - 1)
        return _Encapped(pow(G, eph, P)), _kdf(pow(recip_pubkey, eph, P))


class _Sender(Encapsulator):
    def __init__(self, secret: int) -> None:
        self.secret = secret
        self.public = pow(G, secret, P)

    def try_encap(self, csprng, recip_pubkey):
        eph = csprng.randrange(2, P - 1)
        return (
            _Encapped(pow(G, eph, P)),
            _kdf(pow(recip_pubkey, eph, P), pow(recip_pubkey, self.secret, P)),
        )


class _Recipient(Decapsulator, AuthDecapsulator):
    def __init__(self, secret: int) -> None:
        self.secret = secret
        self.public = pow(G, secret, P)

    def try_decap(self, encapped_key):
        if not 1 < encapped_key.value < P:
            raise KemError()
        return _kdf(pow(encapped_key.value, self.secret, P))

    def try_auth_decap(self, encapped_key, sender_pubkey):
        if not 1 < encapped_key.value < P:
            raise KemError()
        return _kdf(
            pow(encapped_key.value, self.secret, P),
            pow(sender_pubkey, self.secret, P),
        )


@pytest.fixture
def rng():
    return random.Random(1234)


def test_error_message():
    assert str(KemError()) == "error encapsulating or decapsulating"


def test_errors_compare_equal():
    assert KemError() == KemError()
    assert len({KemError(), KemError()}) == 1


def test_abstract_interfaces_cannot_be_instantiated():
    for cls in (EncappedKey, Encapsulator, Decapsulator, AuthDecapsulator):
        with pytest.raises(TypeError):
            cls()


def test_unauthenticated_round_trip(rng):
    recipient = _Recipient(987654321)
    ek, secret = _Anon().try_encap(rng, recipient.public)
    assert len(secret) == _Encapped.secret_size
    assert recipient.try_decap(ek) == secret
    with pytest.raises(KemError) as excinfo:
        recipient.try_decap(_Encapped(P))
    assert excinfo.value == KemError()


def test_encapped_key_bytes_round_trip(rng):
    recipient = _Recipient(42424242)
    ek, secret = _Anon().try_encap(rng, recipient.public)
    restored = _Encapped.from_bytes(bytes(ek))
    assert bytes(restored) == bytes(ek)
    assert recipient.try_decap(restored) == secret
    with pytest.raises(KemError) as excinfo:
        _Encapped.from_bytes(bytes(ek)[1:])
    assert str(excinfo.value) == str(KemError())


def test_authenticated_round_trip(rng):
    sender = _Sender(1111111)
    recipient = _Recipient(2222222)
    ek, secret = sender.try_encap(rng, recipient.public)
    assert recipient.try_auth_decap(ek, sender.public) == secret
    with pytest.raises(KemError) as excinfo:
        recipient.try_auth_decap(_Encapped(1), sender.public)
    assert excinfo.value == KemError()


def test_authenticated_wrong_sender_differs(rng):
    sender = _Sender(1111111)
    impostor = _Sender(3333333)
    recipient = _Recipient(2222222)
    ek, secret = sender.try_encap(rng, recipient.public)
    assert recipient.try_auth_decap(ek, impostor.public) != secret
    assert recipient.try_decap(ek) != secret
    with pytest.raises(KemError) as excinfo:
        recipient.try_auth_decap(_Encapped(0), impostor.public)
    assert excinfo.value == KemError()


def test_wrong_recipient_gets_other_secret(rng):
    recipient = _Recipient(555)
    other = _Recipient(777)
    ek, secret = _Anon().try_encap(rng, recipient.public)
    assert other.try_decap(ek) != secret
    with pytest.raises(KemError) as excinfo:
        other.try_decap(_Encapped(P + 1))
    assert excinfo.value == KemError()


def test_invalid_encapped_key_raises():
    recipient = _Recipient(555)
    with pytest.raises(KemError) as decap_info:
        recipient.try_decap(_Encapped(0))
    assert decap_info.value == KemError()
    with pytest.raises(KemError) as parse_info:
        _Encapped.from_bytes(b"\x00" * 3)
    assert str(parse_info.value) == str(KemError())