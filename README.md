# datagramtls

Pieces of a DTLS 1.2 implementation, usable on their own and without any
third-party dependencies.

## What is inside

- `datagramtls.ciphersuite`: the supported cipher suites. `CipherSuiteID`
  names each IANA identifier (other 16-bit values are accepted and print as
  `unknown(<n>)`), `AuthenticationType` and `ClientCertificateType` describe
  how a suite authenticates, and `CipherSuite` is a frozen record of a suite's
  certificate type, authentication type, MAC key, write key and IV lengths,
  CCM tag length, MAC hash and PRF hash. `cipher_suite_for_id()` returns the
  suite for an identifier or `None`; `supported_cipher_suites()` lists them all.
- `datagramtls.fragment_buffer`: `FragmentBuffer.push()` accepts one DTLS
  record. It returns `False` for records that are not handshakes, and raises
  `FragmentBufferError` for records too short to parse. `pop()` returns the
  next complete handshake message, with a rebuilt unfragmented header, and the
  epoch of its record, or `(None, 0)` while the message is incomplete.
  Fragments may arrive out of order, and one record may hold several messages.
- `datagramtls.handshake_cache`: `HandshakeCache` keeps raw handshake
  messages. `push()` refuses a second message with the same sequence number
  from the same side. `PullRule` selects messages by `HandshakeType`, epoch and
  sender. `pull()` returns, for each rule, the matching `CacheItem` with the
  highest sequence number, or `None`. `pull_and_merge()` joins their data, and
  `session_hash()` hashes the transcript from ClientHello to ClientKeyExchange,
  plus any extra bytes, for Extended Master Secret.
- `datagramtls.handshaker`: `HandshakeState`, the states of the handshake
  retransmission state machine, whose names print as `Preparing`, `Sending`
  and so on. `peer_role()` returns `"client"` or `"server"`, and
  `write_key_log()` writes a secret in the NSS key log format to a binary
  stream.
- `datagramtls.dpipe`: `pipe()` returns two connected in-memory
  `DatagramConn` ends that keep message boundaries. Closing one end does not
  close the other. Deadlines are absolute `time.monotonic()` values. A read on a
  closed end raises `EOFError`, a write on a closed end raises
  `BrokenPipeError`, and a deadline that has passed raises `TimeoutError`.
- `datagramtls.closer`: `Closer`, a one-shot shutdown signal. A closer made
  with a parent closes when the parent does. It can be used as a context
  manager.
- `datagramtls.util`: 24-bit and 48-bit big-endian integer helpers.

## What it does not do

There is no record encryption or decryption and no key derivation:
`CipherSuite` only describes a suite. The package also has no DTLS
connection, listener or handshake driver that sends and receives flights.
`HandshakeState` names the states, but nothing here runs them.

## Install

```
pip install .
```

## Examples

Reassembling a handshake message from a record:

```python
from datagramtls.fragment_buffer import FragmentBuffer

record = bytes.fromhex(
    "16feff000000000000000000" "0f"      # record header
    "030000030000000000000003" "feff00"  # handshake header and body
)
buffer = FragmentBuffer()
assert buffer.push(record)
message, epoch = buffer.pop()
assert message == bytes.fromhex("030000030000000000000003feff00")
assert epoch == 0
```

Hashing the handshake transcript for Extended Master Secret:

```python
import hashlib
from datagramtls.handshake_cache import HandshakeCache, HandshakeType

cache = HandshakeCache()
cache.push(b"\x00", 0, 0, HandshakeType.CLIENT_HELLO, True)
cache.push(b"\x01", 0, 1, HandshakeType.SERVER_HELLO, False)
digest = cache.session_hash(hashlib.sha256, 0)
```

Looking up a cipher suite:

```python
from datagramtls.ciphersuite import CipherSuiteID, cipher_suite_for_id

suite = cipher_suite_for_id(0xC02B)
assert suite.id is CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256
assert cipher_suite_for_id(0x1234) is None
```

An in-memory datagram pipe:

```python
from datagramtls.dpipe import pipe

a, b = pipe()
a.write(b"\x01\x02")
assert b.read(4) == b"\x01\x02"
```

Writing a key log line:

```python
import io
from datagramtls.handshaker import write_key_log

log = io.BytesIO()
write_key_log(log, "CLIENT_RANDOM", b"\xaa\xbb\xcc", b"\xdd\xee\xff")
assert log.getvalue() == b"CLIENT_RANDOM aabbcc ddeeff\n"
```

## Running the tests

```
pip install ".[test]"
pytest
```