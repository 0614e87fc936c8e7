# tests/test_causes.py

import pytest

from deathday.causes import DEFAULT_CAUSES, load_causes
from deathday.core.errors import CausesFileError, EmptyCausesError


def test_default_causes():
    assert len(DEFAULT_CAUSES) == 14
    assert DEFAULT_CAUSES[0] == "cars"
    assert DEFAULT_CAUSES[-1] == "weapons"
    assert len(set(DEFAULT_CAUSES)) == len(DEFAULT_CAUSES)

def test_load_causes_trims_and_drops_blanks(tmp_path):
    f = tmp_path / "reasons.txt"
    f.write_text("  sharks \n\n\t\nlightning\r\n  falling piano\n", encoding="utf-8")
    assert load_causes(f) == ["sharks", "lightning", "falling piano"]
    assert load_causes(str(f)) == ["sharks", "lightning", "falling piano"]

    # Windows editors often prepend a byte-order mark
    bom = tmp_path / "bom.txt"
    bom.write_bytes(b"\xef\xbb\xbfsharks\r\nlightning\r\n")
    assert load_causes(bom) == ["sharks", "lightning"]

def test_load_causes_empty_file(tmp_path):
    f = tmp_path / "empty.txt"
    f.write_text("   \n\n  \n", encoding="utf-8")
    with pytest.raises(EmptyCausesError):
        load_causes(f)

def test_load_causes_missing_file(tmp_path):
    with pytest.raises(CausesFileError) as exc_info:
        load_causes(tmp_path / "nope.txt")
    assert isinstance(exc_info.value.__cause__, OSError)
    assert not isinstance(exc_info.value, EmptyCausesError)

def test_load_causes_bad_encoding(tmp_path):
    f = tmp_path / "latin1.txt"
    f.write_bytes(b"caf\xe9\n")
    with pytest.raises(CausesFileError):
        load_causes(f)
