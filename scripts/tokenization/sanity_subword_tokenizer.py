## subwordlib/scripts/tokenization/sanity_subword_tokenizer.py
"""
Manual sanity check for SubwordTokenizer.
Run directly, NOT via pytest.
"""
from subwordlib.tokenization.subword_tokenizer import SubwordTokenizer

TEXT = "hello elephants\nwhere do elephants live?\nelephants live in africa"

tok = SubwordTokenizer.train(TEXT.splitlines(), vocab_size=6)

print("Vocab size:", tok.vocab_size)
for sw in tok.vocabulary:
    print(f"  {sw.id:>3}  {sw.probability:.4f}  {sw.piece!r}")

tests = [
    "hello",
    "hello elephants",
    "where elephants live?",
    "Elephants live in Africa and Asia.",
]

for t in tests:
    ids = tok.encode(t)
    decoded = tok.decode(ids)
    print("----")
    print("INPUT   :", t)
    print("IDS     :", ids)
    print("DECODED :", decoded)
