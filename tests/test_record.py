# This source code is part of the Fastastream package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import dataclasses
import pytest
from fastastream import Code, CodeRecord, Metadata


def test_replace_symbol():
    record = CodeRecord(Code("A", 5), Metadata(["seq1"], ["note"], True, False))
    replaced = record.replace_symbol("G")
    assert replaced.symbol == "G"
    assert replaced.position == 5
    assert replaced.metadata is record.metadata
    # The original record is not affected
    assert record.symbol == "A"
    assert record.code.replace_symbol("T") == Code("T", 5)


@pytest.mark.parametrize("symbol, exception", [
    ("", ValueError),
    ("AC", ValueError),
    (b"A", TypeError),
    (1, TypeError),
])
def test_invalid_symbol(symbol, exception):
    with pytest.raises(exception):
        Code(symbol, 0)


def test_non_alphabet_symbol():
    """
    Codes are not validated against any sequence alphabet.
    """
    assert Code("*", 0).symbol == "*"
    assert Code("x", 0).symbol == "x"


def test_immutability():
    record = CodeRecord(Code("A", 0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.code = Code("C", 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.code.position = 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.metadata.description_changed = True


def test_metadata_freezes_lists():
    descriptions = ["seq1"]
    metadata = Metadata(descriptions, ["note"], True, True)
    descriptions.append("seq2")
    assert metadata.descriptions == ("seq1",)
    assert metadata.comments == ("note",)
    assert metadata.changed


def test_default_metadata():
    record = CodeRecord(Code("A", 0))
    assert record.descriptions == ()
    assert record.comments == ()
    assert not record.description_changed
    assert not record.comment_changed
    assert not record.metadata.changed
