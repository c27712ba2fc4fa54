"""Arabic text normalization for pattern comparison.

Normalization rules:
- Case folding, character by character. A character whose lower-case form
  expands to more than one character is kept as is, so output length always
  equals input length.
- Alef variants `أ إ آ` fold to bare alef `ا`.
- Alef maksura `ى` folds to ya `ي`.
- Ta marbuta `ة` folds to ha `ه`.

Determinism:
    Pure and total. `normalize(normalize(s)) == normalize(s)` for every input.
"""

VARIANT_FOLDING = str.maketrans({
    "أ": "ا",
    "إ": "ا",
    "آ": "ا",
    "ى": "ي",
    "ة": "ه",
})


def _fold_case(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def normalize(text: str) -> str:
    """Return the canonical comparison form of `text`."""
    if not text:
        return ""
    return "".join(_fold_case(c) for c in text).translate(VARIANT_FOLDING)
