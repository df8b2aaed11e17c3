"""
classical_steps — step-by-step traces for five classical ciphers
================================================================
An educational engine behind a cipher visualizer. Each generator turns
(text, key, mode) into an ordered list of immutable Steps that a renderer
can animate, plus the final result.

Ciphers:
    scytale   Scytale rod transposition       key: column count
    route     Spiral route transposition      key: column count
    columnar  Columnar transposition          key: keyword
    bacon     Bacon's biliteral cipher        key: (none)
    feistel   Toy 4-round Feistel network     key: letters

Usage:
    from classical_steps import generate_steps
    run = generate_steps("columnar", "ATTACKATDAWN", "ZEBRA", "encrypt")
    run.result          # "CAXTTXTANADXAKW"
    run.steps[0]        # Step(description=..., visual_data=TextView(...))

None of these ciphers offers real security.
"""

__version__ = "1.0.0"

from .ciphers.scytale  import ScytaleCipher
from .ciphers.route    import RouteCipher
from .ciphers.columnar import ColumnarCipher, column_order
from .ciphers.bacon    import BaconCipher
from .ciphers.feistel  import FeistelCipher
from .alphabet         import normalize, normalize_letters, normalize_binary
from .steps            import Step, CipherRun, PLACEHOLDER
from .playback         import PlaybackSequencer
from .docs             import CipherDocumentation, get_documentation

CIPHERS = {
    "scytale":  ScytaleCipher,
    "route":    RouteCipher,
    "columnar": ColumnarCipher,
    "bacon":    BaconCipher,
    "feistel":  FeistelCipher,
}


def get_cipher(cipher_id: str, **options):
    """Instantiate the generator for `cipher_id`; options go to its constructor."""
    try:
        cls = CIPHERS[cipher_id]
    except KeyError:
        raise ValueError(
            f"Unknown cipher {cipher_id!r}; expected one of {', '.join(CIPHERS)}."
        ) from None
    return cls(**options)


def generate_steps(cipher_id: str, text: str, key=None, mode: str = "encrypt") -> CipherRun:
    return get_cipher(cipher_id).generate_steps(text, key, mode)


__all__ = [
    "ScytaleCipher",
    "RouteCipher",
    "ColumnarCipher",
    "BaconCipher",
    "FeistelCipher",
    "column_order",
    "normalize",
    "normalize_letters",
    "normalize_binary",
    "Step",
    "CipherRun",
    "PLACEHOLDER",
    "PlaybackSequencer",
    "CipherDocumentation",
    "get_documentation",
    "CIPHERS",
    "get_cipher",
    "generate_steps",
]
