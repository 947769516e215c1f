"""Hashing, HMAC, Base64, random data and AES helpers."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import secrets

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

AES_BLOCK_SIZE = 16
GCM_NONCE_SIZE = 12
_AES_KEY_SIZES = (16, 24, 32)


class CryptoError(ValueError):
    """Raised when data cannot be decoded, encrypted or decrypted."""


def _to_bytes(data: str | bytes) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _digest_hex(name: str, data: str | bytes) -> str:
    return hashlib.new(name, _to_bytes(data)).hexdigest()


def md5_hex(data: str | bytes) -> str:
    """Return the hex MD5 digest of text or bytes."""
    return _digest_hex("md5", data)


def sha1_hex(data: str | bytes) -> str:
    """Return the hex SHA-1 digest of text or bytes."""
    return _digest_hex("sha1", data)


def sha256_hex(data: str | bytes) -> str:
    """Return the hex SHA-256 digest of text or bytes."""
    return _digest_hex("sha256", data)


def sha512_hex(data: str | bytes) -> str:
    """Return the hex SHA-512 digest of text or bytes."""
    return _digest_hex("sha512", data)


def hmac_sha256(data: str | bytes, key: str | bytes) -> str:
    """Return the hex HMAC-SHA256 of data under key."""
    return hmac.new(_to_bytes(key), _to_bytes(data), hashlib.sha256).hexdigest()


def hmac_sha1(data: str | bytes, key: str | bytes) -> str:
    """Return the hex HMAC-SHA1 of data under key."""
    return hmac.new(_to_bytes(key), _to_bytes(data), hashlib.sha1).hexdigest()


def encode_base64(data: bytes) -> str:
    """Encode bytes with the standard, padded Base64 alphabet."""
    return base64.b64encode(data).decode("ascii")


def decode_base64(data: str | bytes) -> bytes:
    """Decode standard, padded Base64."""
    try:
        return base64.b64decode(_to_bytes(data), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CryptoError(f"invalid base64 data: {exc}") from exc


def encode_urlsafe_base64(data: bytes) -> str:
    """Encode bytes with the URL-safe, padded Base64 alphabet."""
    return base64.urlsafe_b64encode(data).decode("ascii")


def decode_urlsafe_base64(data: str | bytes) -> bytes:
    """Decode URL-safe, padded Base64."""
    try:
        return base64.b64decode(_to_bytes(data), altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise CryptoError(f"invalid base64 data: {exc}") from exc


def random_bytes(length: int) -> bytes:
    """Return length cryptographically random bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    return secrets.token_bytes(length)


def random_hex(length: int) -> str:
    """Return a random hex string of length characters (rounded down to even)."""
    return random_bytes(length // 2).hex()


def _check_key(key: bytes) -> bytes:
    key = bytes(key)
    if len(key) not in _AES_KEY_SIZES:
        raise CryptoError(f"invalid AES key size {len(key)}")
    return key


def _pkcs7_pad(data: bytes, block_size: int) -> bytes:
    padding = block_size - len(data) % block_size
    return data + bytes([padding]) * padding


def _pkcs7_unpad(data: bytes) -> bytes:
    if not data:
        raise CryptoError("data is empty")
    padding = data[-1]
    if padding > len(data):
        raise CryptoError("invalid padding")
    if any(b != padding for b in data[len(data) - padding:]):
        raise CryptoError("invalid padding")
    return data[: len(data) - padding]


def aes_encrypt(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt with AES-CBC and PKCS#7 padding; the random IV is prepended."""
    key = _check_key(key)
    iv = secrets.token_bytes(AES_BLOCK_SIZE)
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    padded = _pkcs7_pad(bytes(plaintext), AES_BLOCK_SIZE)
    return iv + encryptor.update(padded) + encryptor.finalize()


def aes_decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """Decrypt data produced by aes_encrypt."""
    ciphertext = bytes(ciphertext)
    if len(ciphertext) < AES_BLOCK_SIZE:
        raise CryptoError("ciphertext too short")
    key = _check_key(key)
    iv, body = ciphertext[:AES_BLOCK_SIZE], ciphertext[AES_BLOCK_SIZE:]
    if len(body) % AES_BLOCK_SIZE:
        raise CryptoError("ciphertext is not a multiple of the block size")
    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    plain = decryptor.update(body) + decryptor.finalize()
    return _pkcs7_unpad(plain)


def aes_gcm_encrypt(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt and authenticate with AES-GCM; the 12-byte nonce is prepended."""
    key = _check_key(key)
    nonce = secrets.token_bytes(GCM_NONCE_SIZE)
    return nonce + AESGCM(key).encrypt(nonce, bytes(plaintext), None)


def aes_gcm_decrypt(ciphertext: bytes, key: bytes) -> bytes:
    """Verify and decrypt data produced by aes_gcm_encrypt."""
    ciphertext = bytes(ciphertext)
    if len(ciphertext) < GCM_NONCE_SIZE:
        raise CryptoError("ciphertext too short")
    key = _check_key(key)
    nonce, body = ciphertext[:GCM_NONCE_SIZE], ciphertext[GCM_NONCE_SIZE:]
    try:
        return AESGCM(key).decrypt(nonce, body, None)
    except InvalidTag as exc:
        raise CryptoError("decryption failed: message authentication failed") from exc