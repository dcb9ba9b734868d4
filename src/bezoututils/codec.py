"""Serialization of Bezout results to DER and PEM.

A result is encoded as the ASN.1 structure

    BezoutCoefficients ::= SEQUENCE {
        s    INTEGER,
        t    INTEGER,
        gcd  INTEGER }

in DER, and armoured as PEM for storage in text files.

Typical usage example:

    export_result("result.pem", solve(240, 46))
    res = import_result("result.pem")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import pathlib
import textwrap

from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.codec.native import encoder as localize
from pyasn1.type import namedtype
from pyasn1.type import univ

from bezoututils.eea import BezoutResult

PEM_HEADER = "-----BEGIN BEZOUT COEFFICIENTS-----"
PEM_FOOTER = "-----END BEZOUT COEFFICIENTS-----"


class BezoutCoefficients(univ.Sequence):
    """ASN.1 wire form of a `BezoutResult`."""
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("s", univ.Integer()),
        namedtype.NamedType("t", univ.Integer()),
        namedtype.NamedType("gcd", univ.Integer()),
    )


def to_der(result: BezoutResult) -> bytes:
    """DER-encodes a result.

    Args:
        result: The result to encode.

    Returns:
        The DER encoding of the `BezoutCoefficients` sequence.
    """
    payload = BezoutCoefficients()
    payload["s"] = result.s
    payload["t"] = result.t
    payload["gcd"] = result.gcd
    return encoder.encode(payload)


def from_der(data: bytes) -> BezoutResult:
    """Decodes a DER-encoded result.

    Args:
        data: The DER encoding of a `BezoutCoefficients` sequence.

    Returns:
        The decoded result.

    Raises:
        ValueError: If there is trailing data, or the gcd is negative.
        pyasn1.error.PyAsn1Error: If `data` is not valid DER for the structure.
    """
    decoded, rest = decoder.decode(data, asn1Spec=BezoutCoefficients())
    if rest:
        raise ValueError(f"{len(rest)} bytes of trailing data after BezoutCoefficients")
    native = localize.encode(decoded)
    if native["gcd"] < 0:
        raise ValueError("Decoded gcd is negative.")
    return BezoutResult(native["s"], native["t"], native["gcd"])


def export_result(file: pathlib.Path, result: BezoutResult) -> None:
    """Writes a result to a PEM file, base64 wrapped at 64 characters.

    Args:
        file: The file to write.
        result: The result to store.
    """
    body = textwrap.wrap(base64.b64encode(to_der(result)).decode("ascii"), 64)
    pathlib.Path(file).write_text("\n".join([PEM_HEADER, *body, PEM_FOOTER]) + "\n", encoding="ascii")


def import_result(file: pathlib.Path) -> BezoutResult:
    """Reads a result from a PEM file written by `export_result()`.

    Args:
        file: The file to read.

    Returns:
        The stored result.

    Raises:
        IOError: If the PEM armour is missing or broken.
        binascii.Error: If the body is not valid base64.
        pyasn1.error.PyAsn1Error: If the payload is not a valid `BezoutCoefficients` encoding.
    """
    lines = [line.strip() for line in pathlib.Path(file).read_text(encoding="ascii").splitlines()]
    if not lines or lines[0] != PEM_HEADER:
        raise IOError(f"PEM file does not start with {PEM_HEADER}")
    try:
        end = lines.index(PEM_FOOTER)
    except ValueError:
        raise IOError(f"PEM file does not contain footer: {PEM_FOOTER}") from None
    return from_der(base64.b64decode("".join(lines[1:end])))
