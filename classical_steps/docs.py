"""
Cipher documentation records
============================
Static reference text shown next to each animation, keyed by cipher id.
The generators never read this; the UI passes it straight through.

Dependencies: pydantic >= 2.5
"""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CipherDocumentation(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    historical_background: str
    core_concept: str
    encryption_steps: Tuple[str, ...]
    decryption_overview: str
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    modern_relevance: str


DOCUMENTATION: Dict[str, CipherDocumentation] = {
    "scytale": CipherDocumentation(
        id="scytale",
        name="Scytale Cipher",
        historical_background=(
            "Spartan commanders of the 7th century BCE wound a leather strip around a "
            "wooden rod and wrote the message along its length. Unwound, the strip "
            "showed a jumble of letters; only a rod of the same diameter lined them "
            "up again."
        ),
        core_concept=(
            "A transposition cipher. Letters are written in rows around the rod and "
            "read off in columns. The rod diameter, i.e. the number of columns, is "
            "the key."
        ),
        encryption_steps=(
            "Choose the number of columns (the rod diameter)",
            "Write the plaintext row by row into the grid",
            "Pad the last row with filler letters",
            "Read the grid column by column to form the ciphertext",
        ),
        decryption_overview=(
            "Fill a grid of the same shape column by column with the ciphertext, "
            "then read it row by row."
        ),
        strengths=(
            "Needs nothing but a stick and a strip of leather",
            "Fast to encrypt and decrypt",
        ),
        weaknesses=(
            "Tiny key space: a handful of plausible diameters",
            "Letter frequencies are unchanged",
            "Trial and error with different rods breaks it quickly",
        ),
        modern_relevance=(
            "Shows the core idea of transposition that reappears in every "
            "permutation layer of modern block ciphers."
        ),
    ),
    "route": CipherDocumentation(
        id="route",
        name="Route Cipher",
        historical_background=(
            "Union telegraphers relied on route ciphers during the American Civil "
            "War. They could be applied quickly in the field and held up well against "
            "interception."
        ),
        core_concept=(
            "Write the plaintext into a grid row by row, then read it out along a "
            "fixed path such as a spiral. Grid width and route together form the key."
        ),
        encryption_steps=(
            "Write the plaintext into a rectangular grid row by row",
            "Pick the route: here a clockwise spiral from the top-left corner",
            "Read the letters in route order",
        ),
        decryption_overview=(
            "Place the ciphertext letters into an empty grid along the same route, "
            "then read the grid row by row."
        ),
        strengths=(
            "Many possible routes and grid shapes",
            "Easy to apply by hand",
        ),
        weaknesses=(
            "Message length hints at the grid dimensions",
            "Only a few routes are practical",
            "No substitution: plaintext letters appear unchanged",
        ),
        modern_relevance=(
            "Non-linear read orders survive in data shuffling and the permutation "
            "steps of block cipher designs."
        ),
    ),
    "columnar": CipherDocumentation(
        id="columnar",
        name="Columnar Transposition Cipher",
        historical_background=(
            "Widely used in both World Wars. The German ADFGVX cipher combined it "
            "with a substitution stage, and diplomatic services kept using variants "
            "well into the 20th century."
        ),
        core_concept=(
            "Write the plaintext under a keyword, number the keyword letters "
            "alphabetically and read the columns out in that order."
        ),
        encryption_steps=(
            "Number the keyword letters alphabetically, left to right for repeats",
            "Write the plaintext into rows under the keyword",
            "Pad the last row if necessary",
            "Read the columns in numbered order",
        ),
        decryption_overview=(
            "Work out the column height from the ciphertext length, fill the columns "
            "in keyword order, then read the rows."
        ),
        strengths=(
            "Flexible keyword-based key space",
            "Can be applied twice (double transposition)",
        ),
        weaknesses=(
            "Vulnerable to anagramming",
            "Letter frequencies are unchanged",
            "Short messages leak the keyword length",
        ),
        modern_relevance=(
            "Permutation boxes in DES-era ciphers apply the same column reordering "
            "idea at the bit level."
        ),
    ),
    "bacon": CipherDocumentation(
        id="bacon",
        name="Bacon's Cipher",
        historical_background=(
            "Francis Bacon described the cipher around 1605 as a way to hide a "
            "message inside an innocent-looking text using two typefaces."
        ),
        core_concept=(
            "Every letter becomes a five-symbol group of A's and B's. The groups can "
            "then be hidden in a carrier by any two-way visual difference."
        ),
        encryption_steps=(
            "Replace each letter with its five-symbol code",
            "Choose a carrier text at least five times as long",
            "Mark the carrier's letters as A or B with a visual variation",
        ),
        decryption_overview=(
            "Recover the A/B sequence, cut it into groups of five and look each "
            "group up in the table."
        ),
        strengths=(
            "Hides the existence of the message",
            "Any two distinguishable styles can carry it",
        ),
        weaknesses=(
            "Carrier must be five times longer than the message",
            "24-letter alphabet: I/J and U/V collide",
            "The visual variation can be spotted",
        ),
        modern_relevance=(
            "An early binary encoding of text and a direct ancestor of digital "
            "watermarking and other steganographic channels."
        ),
    ),
    "feistel": CipherDocumentation(
        id="feistel",
        name="Feistel Network",
        historical_background=(
            "Horst Feistel designed the structure at IBM in the early 1970s for the "
            "Lucifer cipher. It became the backbone of DES in 1977."
        ),
        core_concept=(
            "Split the block into halves. Each round mixes one half with a keyed "
            "function of the other and swaps them. Decryption is the same process "
            "with the round keys reversed."
        ),
        encryption_steps=(
            "Split the block into left (L) and right (R) halves",
            "Compute F(R, K) and combine it with L",
            "Swap the halves",
            "Repeat for every round, then join L and R",
        ),
        decryption_overview=(
            "Run the rounds with the keys in reverse order, undoing the combination "
            "step. The round function itself never has to be inverted."
        ),
        strengths=(
            "Encryption and decryption share one structure",
            "The round function need not be invertible",
        ),
        weaknesses=(
            "Needs many rounds for real security",
            "Each round only transforms half the data",
            "Security rests on the key schedule",
        ),
        modern_relevance=(
            "DES, Blowfish and Camellia are Feistel networks, and the idea still "
            "shapes new block cipher designs."
        ),
    ),
}


def get_documentation(cipher_id: str) -> CipherDocumentation:
    try:
        return DOCUMENTATION[cipher_id]
    except KeyError:
        raise ValueError(f"No documentation for cipher {cipher_id!r}.") from None
