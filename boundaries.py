import enum, functools
import regex

SEPARATORS = ('_', '-')
RE_GRAPHEME = regex.compile(r'\X')


class CharClass(enum.Enum):
    UPPER = enum.auto()
    LOWER = enum.auto()  # lowercase letters, digits and anything else without case
    SEPARATOR = enum.auto()


class ScanState(enum.Enum):
    AT_BOUNDARY = enum.auto()
    INSIDE_RUN = enum.auto()


def graphemes(text: str) -> list[str]:
    return RE_GRAPHEME.findall(text)


@functools.cache
def classify(cluster: str) -> CharClass:
    if cluster in SEPARATORS:
        return CharClass.SEPARATOR
    elif cluster[0].isupper() or cluster[0].istitle():
        return CharClass.UPPER
    else:
        return CharClass.LOWER


def _starts_word(previous, current, following):
    if current is not CharClass.UPPER:
        return False

    if previous is not CharClass.UPPER:
        return True

    # Last capital of an acronym run opens the next word: HTTP|Verb
    return following is CharClass.LOWER


def find_boundary_indices(identifier: str) -> list[int]:
    """
    Offsets where a new token begins, always starting with 0 and ending with
    len(identifier). Each separator gets bracketed by its own pair of offsets:

        camelCase     -> [0, 5, 9]
        snake_case    -> [0, 5, 6, 10]
        CONSTANT_CASE -> [0, 8, 9, 13]
    """
    clusters = graphemes(identifier)
    classes = [classify(c) for c in clusters]
    indices = [0]
    state = ScanState.AT_BOUNDARY
    offset = 0

    for i, cluster in enumerate(clusters):
        current = classes[i]
        previous = classes[i - 1] if i > 0 else None
        following = classes[i + 1] if i + 1 < len(classes) else None

        if current is CharClass.SEPARATOR:
            if state is ScanState.INSIDE_RUN:
                indices.append(offset)

            indices.append(offset + len(cluster))
            state = ScanState.AT_BOUNDARY

        elif state is ScanState.INSIDE_RUN and _starts_word(previous, current, following):
            indices.append(offset)

        else:
            state = ScanState.INSIDE_RUN

        offset += len(cluster)

    if indices[-1] != offset:
        indices.append(offset)

    return indices

detect_boundaries = find_boundary_indices


def tokenize(identifier: str) -> list[str]:
    indices = find_boundary_indices(identifier)
    tokens = [identifier[start:end] for start, end in zip(indices, indices[1:])]

    return [t for t in tokens if t not in SEPARATORS]
