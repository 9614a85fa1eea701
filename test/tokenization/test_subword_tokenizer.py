import pytest
import torch

from subwordlib.tokenization.subword_tokenizer import (
    MissingUnknownTokenError,
    SubwordTokenizer,
    decode,
    encode,
)
from subwordlib.vocabulary import Subword, Vocabulary


TEXT = "hello elephants\nwhere do elephants live?"


@pytest.fixture
def small_vocab():
    return Vocabulary([
        Subword(id=0, piece="ab"),
        Subword(id=1, piece="a"),
        Subword(id=2, piece="<unk>"),
    ])


@pytest.fixture(scope="module")
def tokenizer():
    return SubwordTokenizer.train(TEXT.splitlines(), vocab_size=8)


def _scan_encode(text, vocabulary):
    """Reference: scan the whole vocabulary at every position."""
    ids, remaining = [], text
    while remaining:
        match, match_id, length = "", vocabulary.unk_id, 1
        for sw in vocabulary:
            if remaining.startswith(sw.piece) and len(sw.piece) > len(match):
                match, match_id, length = sw.piece, sw.id, len(sw.piece)
        ids.append(match_id)
        remaining = remaining[length:]
    return ids


def test_longest_match_then_fallback(small_vocab):
    assert encode("abc", small_vocab) == [0, 2]


def test_decode_uses_registered_piece_text(small_vocab):
    # the fallback id decodes to "<unk>", not the original character
    assert decode([0, 2], small_vocab) == "ab<unk>"


def test_single_char_match(small_vocab):
    assert encode("aab", small_vocab) == [1, 0]


def test_empty_text(small_vocab):
    assert encode("", small_vocab) == []
    assert decode([], small_vocab) == ""


def test_unknown_ids_are_dropped(small_vocab):
    assert decode([0, 99, -1, 1], small_vocab) == "aba"


def test_missing_unk_is_reported_when_fallback_is_needed():
    vocab = Vocabulary.from_pieces([("a", 0.5), ("b", 0.5)])
    with pytest.raises(MissingUnknownTokenError):
        encode("abc", vocab)
    # also a ValueError for callers that do not know the subclass
    with pytest.raises(ValueError):
        encode("c", vocab)


def test_missing_unk_is_fine_without_fallback():
    vocab = Vocabulary.from_pieces([("a", 0.5), ("b", 0.5)])
    assert encode("", vocab) == []
    assert encode("ba", vocab) == [1, 0]


def test_equal_length_ties_take_first_in_vocab_order():
    vocab = Vocabulary.from_pieces([("x", 0.1), ("ab", 0.2), ("ab", 0.3), ("<unk>", 0.001)])
    assert encode("abab", vocab) == [1, 1]


def test_literal_unk_in_text_matches_first_unk_entry():
    vocab = Vocabulary.from_pieces([("<unk>", 0.5), ("a", 0.5), ("<unk>", 0.001)])
    assert encode("<unk>a?", vocab) == [0, 1, 2]


@pytest.mark.parametrize(
    "text",
    [
        "hello",
        "hello elephants",
        "where elephants live?",
        "Elephants live in Africa and Asia.",
        "doelephants",
    ],
)
def test_index_matches_full_scan(tokenizer, text):
    assert tokenizer.encode(text) == _scan_encode(text, tokenizer.vocabulary)


@pytest.mark.parametrize("text", ["hello", "zzz", "where do elephants live?", "a b\tc"])
def test_token_count_bounds(tokenizer, text):
    ids = tokenizer.encode(text)
    assert 0 < len(ids) <= len(text)
    assert all(isinstance(i, int) for i in ids)


def test_roundtrip_is_not_lossless(tokenizer):
    text = "hello elephants"
    decoded = tokenizer.decode(tokenizer.encode(text))
    assert isinstance(decoded, str)
    # the space is not a vocabulary piece, so it comes back as "<unk>"
    assert decoded != text
    assert "<unk>" in decoded


def test_tokenizer_attributes(tokenizer):
    assert tokenizer.model_type == "unigram"
    # 5 distinct words fit under the target, plus <unk>
    assert tokenizer.vocab_size == len(tokenizer.vocabulary) == 6
    assert tokenizer.unk_id == 5
    assert tokenizer.id_to_token[tokenizer.unk_id] == "<unk>"
    assert tokenizer.vocab["<unk>"] == tokenizer.unk_id


def test_encode_tensor(small_vocab):
    tok = SubwordTokenizer(small_vocab)
    ids = tok.encode_tensor("abc")

    assert ids.dtype == torch.long
    assert torch.equal(ids, torch.tensor([0, 2]))
    assert tok.decode(ids) == "ab<unk>"
