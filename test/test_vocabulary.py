# test/test_vocabulary.py

import pytest

from subwordlib.vocabulary import Subword, Vocabulary, UNK_TOKEN


def test_from_pieces_assigns_positions():
    vocab = Vocabulary.from_pieces([("ab", 0.4), ("a", 0.3), (UNK_TOKEN, 0.001)])

    assert [sw.id for sw in vocab] == [0, 1, 2]
    assert vocab.pieces() == ["ab", "a", UNK_TOKEN]
    assert vocab.unk_id == 2
    assert "ab" in vocab
    assert "b" not in vocab


def test_duplicate_ids_rejected():
    with pytest.raises(ValueError):
        Vocabulary([Subword(id=0, piece="a"), Subword(id=0, piece="b")])


def test_empty_piece_rejected():
    with pytest.raises(ValueError):
        Subword(id=0, piece="")


def test_duplicate_text_lookups():
    vocab = Vocabulary.from_pieces([("x", 0.5), ("x", 0.2), (UNK_TOKEN, 0.001)])

    # piece -> id keeps the last entry, prefix matching the first
    assert vocab.piece_to_id["x"] == 1
    assert vocab.longest_prefix("xy") == (0, 1)


def test_longest_prefix():
    vocab = Vocabulary.from_pieces([("a", 0.1), ("abc", 0.1), ("ab", 0.1)])

    assert vocab.longest_prefix("abcd") == (1, 3)
    assert vocab.longest_prefix("abx") == (2, 2)
    assert vocab.longest_prefix("zab") is None
    assert vocab.longest_prefix("zab", start=1) == (2, 2)
    assert vocab.longest_prefix("") is None


def test_vocabulary_is_read_only():
    vocab = Vocabulary.from_pieces([("a", 1.0)])
    with pytest.raises(AttributeError):
        vocab[0].piece = "b"
    with pytest.raises(TypeError):
        vocab[0] = Subword(id=0, piece="b")


def test_to_dict_and_len():
    vocab = Vocabulary.from_pieces([("a", 0.5), ("b", 0.5)])
    assert vocab.to_dict() == {"a": 0, "b": 1}
    assert len(vocab) == 2
    assert vocab.unk_id is None
