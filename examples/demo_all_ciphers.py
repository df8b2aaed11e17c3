"""
classical_steps — Live Demo: All Five Ciphers
=============================================
Run:  python examples/demo_all_ciphers.py

Encrypts and decrypts the classic example message for every cipher and
prints the animation trace the visualizer would play, step by step.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_steps import PlaybackSequencer, generate_steps, get_documentation

LINE = "═" * 70

EXAMPLES = [
    ("scytale",  "HELLOSPARTANS", "4"),
    ("route",    "MEETMEATDAWN",  "4"),
    ("columnar", "ATTACKATDAWN",  "ZEBRA"),
    ("bacon",    "HELLO",         None),
    ("feistel",  "SECURITY",      "CRYPTO"),
]


def header(cipher_id):
    doc = get_documentation(cipher_id)
    print(f"\n{LINE}")
    print(f"  {doc.name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def play(run):
    """Drive a sequencer by hand, one tick per printed step."""
    player = PlaybackSequencer(run, scheduler=lambda interval, callback: _NoTimer())
    player.play()
    while True:
        step = player.current_step
        print(f"     {player.current_index + 1:>3}. [{step.visual_data.type:<8}] {step.description}")
        if not player.tick():
            step = player.current_step
            print(f"     {player.current_index + 1:>3}. [{step.visual_data.type:<8}] {step.description}")
            break


class _NoTimer:
    def cancel(self):
        pass


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{LINE}")
    print("  classical_steps — Five Classical Ciphers, Step by Step")
    print(LINE)

    for cipher_id, plaintext, key in EXAMPLES:
        header(cipher_id)
        t0  = time.perf_counter()
        enc = generate_steps(cipher_id, plaintext, key, "encrypt")
        dec = generate_steps(cipher_id, enc.result, key, "decrypt")
        elapsed = time.perf_counter() - t0
        ok("Plaintext",  plaintext)
        ok("Key",        key or "(none)")
        ok("Ciphertext", enc.result)
        ok("Decrypted",  dec.result)
        ok("Steps",      f"{len(enc)} encrypt / {len(dec)} decrypt")
        ok("Generated",  f"{elapsed*1000:.2f} ms")
        print()
        play(enc)

    print(f"\n{LINE}")
    print("  ALL CIPHERS COMPLETE")
    print("  Educational only: none of these ciphers is secure.")
    print(LINE + "\n")
