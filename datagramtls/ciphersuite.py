"""TLS cipher suites supported for DTLS, as registered with the IANA."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional


class CipherSuiteID(IntEnum):
    """Identifier of a cipher suite; unknown 16-bit values are accepted."""

    TLS_ECDHE_ECDSA_WITH_AES_128_CCM = 0xC0AC
    TLS_ECDHE_ECDSA_WITH_AES_128_CCM_8 = 0xC0AE
    TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256 = 0xC02B
    TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 = 0xC02F
    TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA = 0xC00A
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA = 0xC014
    TLS_PSK_WITH_AES_128_CCM = 0xC0A4
    TLS_PSK_WITH_AES_128_CCM_8 = 0xC0A8
    TLS_PSK_WITH_AES_128_GCM_SHA256 = 0x00A8
    TLS_PSK_WITH_AES_128_CBC_SHA256 = 0x00AE

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFFFF:
            member = int.__new__(cls, value)
            member._name_ = None
            member._value_ = value
            return member
        return None

    def __str__(self) -> str:
        if self._name_ is None:
            return f"unknown({int(self)})"
        return self._name_


class AuthenticationType(IntEnum):
    """How the peers authenticate during the handshake."""

    CERTIFICATE = 1
    PRE_SHARED_KEY = 2
    ANONYMOUS = 3


class ClientCertificateType(IntEnum):
    """Kind of certificate a cipher suite exchanges."""

    NONE = 0
    RSA_SIGN = 1
    ECDSA_SIGN = 64


HashFunc = Callable[[], "hashlib._Hash"]


@dataclass(frozen=True)
class CipherSuite:
    """Static description of a cipher suite and its key-block layout."""

    id: CipherSuiteID
    certificate_type: ClientCertificateType
    authentication_type: AuthenticationType
    mac_key_length: int
    write_key_length: int
    iv_length: int
    tag_length: Optional[int] = None
    mac_hash: Optional[HashFunc] = field(default=None, compare=False)
    hash_func: HashFunc = field(default=hashlib.sha256, compare=False)

    def __str__(self) -> str:
        return str(self.id)


def _ccm(suite_id, cert_type, psk, tag_length):
    auth = AuthenticationType.PRE_SHARED_KEY if psk else AuthenticationType.CERTIFICATE
    return CipherSuite(suite_id, cert_type, auth, 0, 16, 4, tag_length=tag_length)


def _gcm(suite_id, cert_type, auth):
    return CipherSuite(suite_id, cert_type, auth, 0, 16, 4)


def _ecdhe_cbc(suite_id, cert_type):
    return CipherSuite(
        suite_id, cert_type, AuthenticationType.CERTIFICATE, 20, 32, 16, mac_hash=hashlib.sha1
    )


_SUITES = (
    _ccm(CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_128_CCM, ClientCertificateType.ECDSA_SIGN, False, 16),
    _ccm(CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_128_CCM_8, ClientCertificateType.ECDSA_SIGN, False, 8),
    _gcm(
        CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256,
        ClientCertificateType.ECDSA_SIGN,
        AuthenticationType.CERTIFICATE,
    ),
    _gcm(
        CipherSuiteID.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256,
        ClientCertificateType.RSA_SIGN,
        AuthenticationType.CERTIFICATE,
    ),
    _ecdhe_cbc(CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA, ClientCertificateType.ECDSA_SIGN),
    _ecdhe_cbc(CipherSuiteID.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA, ClientCertificateType.RSA_SIGN),
    _ccm(CipherSuiteID.TLS_PSK_WITH_AES_128_CCM, ClientCertificateType.NONE, True, 16),
    _ccm(CipherSuiteID.TLS_PSK_WITH_AES_128_CCM_8, ClientCertificateType.NONE, True, 8),
    _gcm(
        CipherSuiteID.TLS_PSK_WITH_AES_128_GCM_SHA256,
        ClientCertificateType.NONE,
        AuthenticationType.PRE_SHARED_KEY,
    ),
    CipherSuite(
        CipherSuiteID.TLS_PSK_WITH_AES_128_CBC_SHA256,
        ClientCertificateType.NONE,
        AuthenticationType.PRE_SHARED_KEY,
        32,
        16,
        16,
        mac_hash=hashlib.sha256,
    ),
)

_BY_ID = {suite.id: suite for suite in _SUITES}


def cipher_suite_for_id(suite_id: int) -> Optional[CipherSuite]:
    """Return the supported cipher suite with this identifier, or None."""
    return _BY_ID.get(int(suite_id))


def supported_cipher_suites() -> list[CipherSuite]:
    """Return every supported cipher suite."""
    return list(_SUITES)