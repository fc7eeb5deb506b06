import logging
import random
from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any, TypeVar

from app.core.config import get_settings
from app.core.exceptions import InvalidKeyError
from app.models.schemas import CipherFamily, CipherType, FenceLayout
from app.services.engines.base import CipherEngine, DecryptionResult
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reachable_rails(length: int, rails: int) -> int:
    """Rails the walk can touch; those past the last symbol stay empty."""
    return min(rails, max(length, 1))


def rail_sequence(length: int, rails: int) -> Iterator[int]:
    """
    Yield the zig-zag rail index of each of ``length`` positions.

    The walk starts on rail 0 heading down, bounces off rail 0 and rail
    ``rails - 1``, and stops after exactly ``length`` positions whether or
    not the bottom rail was reached.

    Example with 4 rails: 0 1 2 3 2 1 0 1 2 3 ...
    """
    rails = _reachable_rails(length, rails)
    rail = 0
    direction = 1  # 1 = down, -1 = up

    for _ in range(length):
        yield rail

        if rails == 1:
            continue

        # Change direction at top or bottom
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1

        rail += direction


def rail_lengths(length: int, rails: int, pad: bool = False) -> list[int]:
    """
    Count how many of ``length`` symbols land on each rail.

    Only reachable rails are counted unless ``pad`` is set, in which case
    the list is filled out with zeros to ``rails`` entries.
    """
    counts = [0] * _reachable_rails(length, rails)
    for rail in rail_sequence(length, rails):
        counts[rail] += 1
    if pad:
        counts.extend([0] * (rails - len(counts)))
    return counts


def validate_rails(key: Any) -> int:
    """Return ``key`` as a rail count or raise InvalidKeyError."""
    if isinstance(key, bool) or not isinstance(key, int):
        raise InvalidKeyError(key, "rails must be an integer")
    if key < 1:
        raise InvalidKeyError(key, "rails must be >= 1")
    return key


def _rebuild(original: Sequence[T], symbols: list[T]) -> Sequence[T]:
    """Give ``symbols`` back in the container type of ``original``."""
    if isinstance(original, str):
        return "".join(symbols)
    if isinstance(original, (bytes, bytearray)):
        return type(original)(symbols)
    if isinstance(original, tuple):
        return tuple(symbols)
    return symbols


def encrypt(text: Sequence[T], key: int) -> Sequence[T]:
    """
    Encrypt ``text`` with a rail fence of ``key`` rails.

    Symbols are scattered onto rails along the zig-zag, then the rails are
    read off top to bottom.

    Raises:
        InvalidKeyError: if ``key`` is not an integer >= 1
    """
    rails = validate_rails(key)

    fence: list[list[T]] = [[] for _ in range(_reachable_rails(len(text), rails))]
    for symbol, rail in zip(text, rail_sequence(len(text), rails)):
        fence[rail].append(symbol)

    return _rebuild(text, [symbol for row in fence for symbol in row])


def decrypt(cipher_text: Sequence[T], key: int) -> Sequence[T]:
    """
    Decrypt ``cipher_text`` produced by :func:`encrypt` with ``key`` rails.

    Any sequence decodes; only the key is validated.

    Raises:
        InvalidKeyError: if ``key`` is not an integer >= 1
    """
    rails = validate_rails(key)
    n = len(cipher_text)

    # Split ciphertext into rails
    fence: list[deque[T]] = []
    idx = 0
    for count in rail_lengths(n, rails):
        fence.append(deque(cipher_text[idx:idx + count]))
        idx += count

    # Read off in zigzag pattern
    result = [fence[rail].popleft() for rail in rail_sequence(n, rails)]

    return _rebuild(cipher_text, result)


def render_fence(text: str, rails: int, fill: str = ".") -> list[str]:
    """
    Draw ``text`` as it sits on the fence, one string per rail.

    render_fence("WEAREDISCOVERED", 3):
        W...E...C...R..
        .E.R.D.S.O.E.E.
        ..A...I...V...D
    """
    rails = validate_rails(rails)
    grid = [[fill] * len(text) for _ in range(rails)]
    for column, (char, rail) in enumerate(zip(text, rail_sequence(len(text), rails))):
        grid[rail][column] = char
    return ["".join(row) for row in grid]


@EngineRegistry.register
class RailFenceEngine(CipherEngine):
    """
    Rail Fence cipher engine.

    The Rail Fence cipher writes the plaintext in a zigzag pattern across
    a number of "rails" (rows), then reads off each rail in order to
    produce the ciphertext.

    Example with 3 rails:
    Plaintext: REDDITCOMRDAILYPROGRAMMER

    R . . . I . . . M . . . I . . . R . . . A . . . R
    . E . D . T . O . R . A . L . P . O . R . M . E .
    . . D . . . C . . . D . . . Y . . . G . . . M . .

    Read off rows: RIMIRAR + EDTORALPORME + DCDYGM
    """

    name = "Rail Fence Cipher"
    cipher_type = CipherType.RAIL_FENCE
    cipher_family = CipherFamily.TRANSPOSITION
    description = (
        "A transposition cipher that writes plaintext in a zigzag pattern "
        "across multiple 'rails' (rows), then reads each rail in sequence. "
        "The number of rails is the key."
    )

    def encrypt(
        self,
        plaintext: str,
        key: int | str | dict[str, Any],
    ) -> str:
        """Encrypt using the specified number of rails."""
        rails = self._parse_key(key)
        logger.debug("Rail fence encrypt: rails=%d length=%d", rails, len(plaintext))
        return encrypt(plaintext, rails)

    def decrypt_with_key(
        self,
        ciphertext: str,
        key: int | str | dict[str, Any],
    ) -> DecryptionResult:
        """Decrypt with a known number of rails."""
        rails = self._parse_key(key)
        logger.debug("Rail fence decrypt: rails=%d length=%d", rails, len(ciphertext))

        plaintext = decrypt(ciphertext, rails)

        return DecryptionResult(
            plaintext=plaintext,
            key=str(rails),
            confidence=1.0,
            explanation=self.explain(ciphertext, plaintext, rails),
        )

    def fence(self, text: str, key: int | str | dict[str, Any]) -> FenceLayout:
        """
        Lay ``text`` out on the fence without reading it off.

        Every rail is drawn, so the rail count is capped by the
        ``max_fence_rails`` setting.
        """
        rails = self._parse_key(key)
        max_rails = get_settings().max_fence_rails
        if rails > max_rails:
            logger.warning("Rejected fence layout with %d rails", rails)
            raise InvalidKeyError(rails, f"fence layout supports at most {max_rails} rails")

        return FenceLayout(
            rails=rails,
            rail_lengths=rail_lengths(len(text), rails, pad=True),
            rows=render_fence(text, rails),
            ciphertext=encrypt(text, rails),
        )

    def generate_random_key(self) -> str:
        """Generate a random number of rails within the configured range."""
        settings = get_settings()
        return str(random.randint(settings.random_key_min_rails, settings.random_key_max_rails))

    def validate_key(self, key: int | str | dict[str, Any]) -> bool:
        """Validate that key is a valid number of rails."""
        try:
            self._parse_key(key)
        except InvalidKeyError:
            return False
        return True

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: int | str | dict[str, Any],
    ) -> str:
        """Generate human-readable explanation."""
        rails = self._parse_key(key)
        counts = rail_lengths(len(ciphertext), rails)

        return (
            f"Rail Fence cipher with {rails} rails. "
            f"The plaintext is written in a zigzag pattern across {rails} rows, "
            f"then each row is read in sequence to form the ciphertext. "
            f"Rail lengths: {', '.join(str(c) for c in counts)}. "
            f"Decryption cuts the ciphertext into rails of those lengths and "
            f"reads them back along the zigzag."
        )

    def _parse_key(self, key: int | str | dict[str, Any]) -> int:
        """Parse key to number of rails."""
        raw = key
        if isinstance(key, dict):
            key = key.get("rails", key.get("key"))
        if isinstance(key, str):
            try:
                key = int(key.strip())
            except ValueError:
                logger.warning("Rejected rail fence key %r", raw)
                raise InvalidKeyError(raw, "rails must be an integer") from None
        try:
            return validate_rails(key)
        except InvalidKeyError:
            logger.warning("Rejected rail fence key %r", raw)
            raise
