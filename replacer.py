from dataclasses import dataclass
from collections import Counter
from boundaries import tokenize
from variants import CaseStyle, generate_variants
import io, logging, re

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


class InvalidIdentifierError(ValueError):
    pass


@dataclass(frozen=True)
class PatternTable:
    patterns: tuple[str, ...]
    replacements: tuple[str, ...]
    labels: tuple[str, ...]

    def __post_init__(self):
        if not len(self.patterns) == len(self.replacements) == len(self.labels):
            raise ValueError("Patterns, replacements and labels must have the same length")

    def __len__(self):
        return len(self.patterns)

    def rows(self):
        return zip(self.labels, self.patterns, self.replacements)


def _tokens_of(identifier: str, role: str) -> list[str]:
    try:
        identifier.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidIdentifierError(f"The {role} identifier is not valid UTF-8: {e}") from e

    tokens = tokenize(identifier)

    if not tokens:
        raise InvalidIdentifierError(f"The {role} identifier {identifier!r} has no words in it")

    return tokens


def build_pattern_table(search: str, replacement: str) -> PatternTable:
    search_tokens = _tokens_of(search, "search")
    replacement_tokens = _tokens_of(replacement, "replacement")
    log.debug("Tokens: %s -> %s", search_tokens, replacement_tokens)

    table = PatternTable(
        patterns=(search, *generate_variants(search_tokens)),
        replacements=(replacement, *generate_variants(replacement_tokens)),
        labels=('literal', *(style.label for style in CaseStyle)),
    )

    for label, old, new in table.rows():
        log.debug("%-13s %s -> %s", label, old, new)

    return table


class StreamReplacer:
    def __init__(self, table: PatternTable, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size < 1:
            raise ValueError("chunk_size must be positive")

        self._chunk_size = chunk_size
        self._lookup: dict[bytes, bytes] = {}

        # The lowest row holding a spelling decides what it becomes
        for old, new in zip(table.patterns, table.replacements):
            self._lookup.setdefault(old.encode('utf-8'), new.encode('utf-8'))

        # Alternation tries longer patterns first, so the leftmost match is also the longest
        alternatives = sorted(self._lookup, key=len, reverse=True)
        self._pattern = re.compile(b'|'.join(re.escape(a) for a in alternatives))
        self._longest = len(alternatives[0])
        self.replacements_made: Counter[str] = Counter()

    def _replace_buffer(self, buffer: bytes, sink, final: bool) -> bytes:
        # Only positions where the longest pattern fits entirely are decided
        safe = len(buffer) if final else len(buffer) - self._longest + 1
        position = 0
        output = []

        for match in self._pattern.finditer(buffer):
            if match.start() >= safe:
                break

            found = match.group(0)
            output += [buffer[position:match.start()], self._lookup[found]]
            self.replacements_made[found.decode('utf-8')] += 1
            position = match.end()

        keep = max(position, safe)
        output.append(buffer[position:keep])
        sink.write(b''.join(output))
        sink.flush()

        return buffer[keep:]

    def replace_stream(self, source, sink) -> int:
        """
        Copy the binary stream source into sink, replacing every match. Returns
        how many replacements were made.
        """
        before = sum(self.replacements_made.values())
        pending = b''

        # read1 returns whatever is available instead of waiting for a full chunk
        read = getattr(source, 'read1', source.read)

        while chunk := read(self._chunk_size):
            pending = self._replace_buffer(pending + chunk, sink, final=False)

        self._replace_buffer(pending, sink, final=True)

        total = sum(self.replacements_made.values()) - before
        log.debug("Stream done, %d replacements", total)

        return total


def replace_stream(source, sink, table: PatternTable, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    return StreamReplacer(table, chunk_size).replace_stream(source, sink)


def replace_text(text: str, table: PatternTable) -> str:
    sink = io.BytesIO()
    replace_stream(io.BytesIO(text.encode('utf-8')), sink, table)

    return sink.getvalue().decode('utf-8')
