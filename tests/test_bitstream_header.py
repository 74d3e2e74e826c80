from __future__ import annotations
import gzip
import struct

import pytest

from hifcodec.bitstream import (
    HEADER_SIZE, HifHeader, pack_header, unpack_header,
    read_bitstream, write_bitstream, write_stream, read_stream,
)
from hifcore.errors import DecodeFormatError, InputNotFoundError, WriteFailureError


def test_header_roundtrip_and_fixed_little_endian():
    b = pack_header(640, 480)
    assert len(b) == HEADER_SIZE == 8
    # ordre des octets figé LE, indépendant de l'hôte
    assert b == struct.pack("<II", 640, 480)
    assert b[:4] == bytes([0x80, 0x02, 0x00, 0x00])
    assert unpack_header(b) == HifHeader(640, 480)


@pytest.mark.parametrize("n", [0, 1, 7])
def test_header_truncated_raises(n):
    with pytest.raises(DecodeFormatError):
        unpack_header(b"\x01" * n)


def test_header_zero_area_rejected():
    with pytest.raises(DecodeFormatError):
        unpack_header(struct.pack("<II", 0, 5))


def test_header_out_of_u32_range():
    with pytest.raises(ValueError):
        pack_header(2**32, 1)


def test_stream_framing_roundtrip():
    hdr = HifHeader(2, 1)
    blob = write_stream(hdr, bytes([1, 2, 3, 4, 5, 6]))
    h2, pixels = read_stream(blob)
    assert h2 == hdr
    assert pixels == bytes([1, 2, 3, 4, 5, 6])
    assert h2.to_dict() == {"width": 2, "height": 1}
    assert HifHeader.from_dict(h2.to_dict()) == h2


def test_write_then_read_bitstream_atomic(tmp_path):
    out = tmp_path / "img.hif"
    write_bitstream(b"\x01\x00\x00\x00\x01\x00\x00\x00abc", out)
    assert read_bitstream(out) == b"\x01\x00\x00\x00\x01\x00\x00\x00abc"
    # pas de fichier temporaire résiduel
    assert not (tmp_path / "img.hif.tmp").exists()


def test_read_bitstream_gz_is_transparent(tmp_path):
    raw = struct.pack("<II", 1, 1) + b"\x10\x20\x30"
    p = tmp_path / "img.hif.gz"
    p.write_bytes(gzip.compress(raw))
    assert read_bitstream(p) == raw


def test_read_bitstream_bad_gz(tmp_path):
    p = tmp_path / "img.hif.gz"
    p.write_bytes(b"not gzip at all")
    with pytest.raises(DecodeFormatError):
        read_bitstream(p)


def test_read_bitstream_missing(tmp_path):
    with pytest.raises(InputNotFoundError):
        read_bitstream(tmp_path / "absent.hif")
    # reste attrapable comme erreur standard
    with pytest.raises(FileNotFoundError):
        read_bitstream(tmp_path / "absent.hif")


def test_write_bitstream_failure(tmp_path):
    with pytest.raises(WriteFailureError):
        write_bitstream(b"x", tmp_path / "no" / "such" / "dir" / "img.hif")
