import sys
import argparse
from abc import ABC, abstractmethod
from typing import List, Optional

__version__ = "1.0"

ALPHABET_SIZE = 26
DEFAULT_SHIFT = 3

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  FRAMEWORK: Abstract Base Class & Registry
# ==========================================

class Cipher(ABC):
    """Abstract base class that all ciphers must implement."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The command-line name for this cipher."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description for help text."""
        pass

    @abstractmethod
    def encrypt(self, text: str) -> str:
        pass

    @abstractmethod
    def decrypt(self, text: str) -> str:
        pass

CIPHER_REGISTRY = {}

def register_cipher(cls):
    """Decorator to register cipher classes by name."""
    CIPHER_REGISTRY[cls.name] = cls
    return cls

# ==========================================
#  TEXT HELPERS
# ==========================================

def is_ascii_letter(c: str) -> bool:
    return 'A' <= c <= 'Z' or 'a' <= c <= 'z'

def normalize(text: str) -> str:
    """Drop everything that is not an ASCII letter and upper-case the rest."""
    return "".join(c.upper() for c in text if is_ascii_letter(c))

def shift_char(c: str, k: int) -> str:
    """
    Rotate an uppercase letter by k positions, wrapping around the alphabet.

    k may be any integer. Python's % already returns a value in [0, 26)
    for a positive modulus, so negative and oversized shifts need no
    extra handling. Passing anything other than 'A'..'Z' is unsupported.
    """
    position = (ord(c) - ord('A') + k) % ALPHABET_SIZE
    return chr(ord('A') + position)

# ==========================================
#  METHOD: Caesar (fixed-shift substitution)
# ==========================================

@register_cipher
class CaesarCipher(Cipher):
    name = "caesar"
    description = "Fixed-shift letter substitution. Strips non-letters and upper-cases on encrypt."

    def __init__(self, shift: int):
        self._offset = shift

    @property
    def offset(self) -> int:
        return self._offset

    def __repr__(self):
        return f"{type(self).__name__}(shift={self._offset})"

    def encrypt(self, text: str) -> str:
        return "".join(shift_char(c, self._offset) for c in normalize(text))

    def decrypt(self, text: str) -> str:
        # Ciphertext is expected to be normalized already (as produced by encrypt).
        return "".join(shift_char(c, -self._offset) for c in text)

# ==========================================
#  CLI LOGIC
# ==========================================

def list_ciphers():
    """Print all available ciphers."""
    print("\nAvailable Ciphers:")
    print("=" * 60)
    for name, cipher_cls in CIPHER_REGISTRY.items():
        print(f"  {name:<12} {cipher_cls.description}")
    print("=" * 60)
    print(f"\nTotal: {len(CIPHER_REGISTRY)} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="caesar-cipher",
        description=f"Caesar Cipher Suite v{__version__}",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {k:<12}: {v.description}" for k, v in CIPHER_REGISTRY.items())
    parser.add_argument("-m", "--method", choices=list(CIPHER_REGISTRY.keys()), default="caesar",
                        help=f"Select cipher algorithm (default: caesar).\n{method_help}")

    # Main action group
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

    parser.add_argument("-s", "--shift", type=int, default=DEFAULT_SHIFT, metavar="N",
                        help=f"Rotation amount, any integer (default: {DEFAULT_SHIFT}).")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv: Optional[List[str]] = None):
    global VERBOSE

    args = build_parser().parse_args(argv)
    VERBOSE = args.verbose

    if args.list:
        list_ciphers()
        return

    # 1. READ INPUT
    source_text = read_source(args)

    # 2. TRANSFORM
    cipher = CIPHER_REGISTRY[args.method](args.shift)
    log_info(f"Using {cipher!r}")

    if args.encrypt:
        result = cipher.encrypt(source_text)
        dropped = len(source_text) - len(result)
        if dropped:
            log_info(f"Dropped {dropped} non-letter character(s) during normalization.")
    else:
        clean_text = source_text.strip()
        if any(not 'A' <= c <= 'Z' for c in clean_text):
            log_warn("Ciphertext contains characters outside A-Z. Decrypting as-is; output is unspecified.")
        result = cipher.decrypt(clean_text)

    # 3. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
                f.write("\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
    else:
        print(result)

if __name__ == "__main__":
    main()
