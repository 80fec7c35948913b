import hashlib
import hmac
import struct

import pytest
from Cryptodome.Hash import SHA1, SHA256, SHA512
from Cryptodome.Protocol.KDF import PBKDF2

from pbkdf2vault.exceptions import UnsupportedAlgorithm
from pbkdf2vault.kdf_core import derive, derive_hex


# RFC 6070 PBKDF2-HMAC-SHA1 test vectors
RFC6070_VECTORS = [
    (b"password", b"salt", 1, 20, "0c60c80f961f0e71f3a9b524af6012062fe037a6"),
    (b"password", b"salt", 2, 20, "ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957"),
    (b"password", b"salt", 4096, 20, "4b007901b765489abead49d926f721d065a429c1"),
    (b"passwordPASSWORDpassword", b"saltSALTsaltSALTsaltSALTsaltSALTsalt", 4096, 25,
     "3d2eec4fe41c849b80c8d83662c0e44a8b291a964cf2f07038"),
    (b"pass\x00word", b"sa\x00lt", 4096, 16, "56fa6aa75548099dcc37d7f03425e0c3"),
]


@pytest.mark.parametrize("password,salt,iterations,length,expected", RFC6070_VECTORS)
def test_rfc6070_sha1_vectors(password, salt, iterations, length, expected):
    assert derive("sha1", password, salt, iterations, length).hex() == expected


def test_sha256_known_vectors():
    assert derive_hex("sha256", "password", "salt", 1, 32) == (
        "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b"
    )
    assert derive_hex("sha256", "password", "salt", 2, 32) == (
        "ae4d0c95af6b46d32d0adff928f06dd02a303f8ef3c251dfd6e2d85a95474c43"
    )


@pytest.mark.parametrize("algorithm", ["sha1", "sha224", "sha256", "sha384", "sha512"])
@pytest.mark.parametrize("length", [1, 20, 32, 64, 100])
def test_matches_hashlib(algorithm, length):
    expected = hashlib.pbkdf2_hmac(algorithm, b"correct horse", b"battery staple", 17, length)
    assert derive(algorithm, "correct horse", "battery staple", 17, length) == expected


@pytest.mark.parametrize("algorithm,hash_module", [("sha1", SHA1), ("sha256", SHA256), ("sha512", SHA512)])
def test_matches_pycryptodome(algorithm, hash_module):
    expected = PBKDF2("s3cret", b"NaCl", dkLen=70, count=50, hmac_hash_module=hash_module)
    assert derive(algorithm, "s3cret", b"NaCl", 50, 70) == expected


def test_single_iteration_is_first_hmac_block():
    # One iteration means T_1 = U_1 with no further accumulation
    expected = hmac.new(b"password", b"salt" + struct.pack(">I", 1), hashlib.sha256).digest()
    assert derive("sha256", "password", "salt", 1, 32) == expected


def test_multi_block_output_length_and_prefix():
    long_key = derive("sha1", "password", "salt", 3, 50)
    assert len(long_key) == 50
    # Blocks are independent of the requested length
    assert derive("sha1", "password", "salt", 3, 20) == long_key[:20]


def test_deterministic():
    first = derive("sha256", "hunter2", "pepper", 100, 32)
    second = derive("sha256", "hunter2", "pepper", 100, 32)
    assert first == second


def test_every_input_changes_output():
    base = derive("sha256", "hunter2", "pepper", 100, 32)
    assert derive("sha256", "hunter3", "pepper", 100, 32) != base
    assert derive("sha256", "hunter2", "peppers", 100, 32) != base
    assert derive("sha256", "hunter2", "pepper", 101, 32) != base
    assert derive("sha512", "hunter2", "pepper", 100, 32) != base
    assert derive("sha256", "hunter2", "pepper", 100, 31) != base


def test_str_and_bytes_inputs_agree():
    assert derive("sha256", "pässword", "salt", 5, 32) == derive(
        "sha256", "pässword".encode("utf-8"), b"salt", 5, 32
    )


def test_zero_length_key():
    assert derive("sha256", "password", "salt", 10, 0) == b""


def test_hyphenated_algorithm_names():
    assert derive("SHA-256", "password", "salt", 2, 32) == derive("sha256", "password", "salt", 2, 32)
    assert derive(" Sha-1 ", "password", "salt", 1, 20).hex() == RFC6070_VECTORS[0][4]


def test_unsupported_algorithm_fails_fast():
    with pytest.raises(UnsupportedAlgorithm) as excinfo:
        derive("whirlpool-9000", "password", "salt", 1, 20)
    assert excinfo.value.algorithm == "whirlpool-9000"


@pytest.mark.parametrize("iterations", [0, -1, 1.5, True])
def test_invalid_iterations(iterations):
    with pytest.raises(ValueError):
        derive("sha256", "password", "salt", iterations, 32)


def test_negative_key_length():
    with pytest.raises(ValueError):
        derive("sha256", "password", "salt", 1, -1)


def test_key_length_over_rfc_limit():
    # (2^32 - 1) * hLen is the largest allowed; this asks for one block more
    with pytest.raises(ValueError, match="too long"):
        derive("sha1", "p", "s", 1, 2 ** 32 * 20)
    with pytest.raises(ValueError, match="too long"):
        derive("sha256", "p", "s", 1, (2 ** 32 - 1) * 32 + 1)
