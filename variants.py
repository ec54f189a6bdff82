from dataclasses import dataclass
from boundaries import graphemes
import enum


class StrategyConfigError(ValueError):
    pass


class Capitalize(enum.Flag):
    FIRST_TOKEN = enum.auto()      # first letter of the first token
    OTHER_TOKENS = enum.auto()     # first letter of every token after the first
    EVERY_CHARACTER = enum.auto()
    NO_CHARACTER = enum.auto()


@dataclass(frozen=True)
class Strategy:
    rule: Capitalize
    joiner: str = ''

    def __post_init__(self):
        if not self.rule:
            raise StrategyConfigError("A strategy needs at least one capitalization rule")

        if Capitalize.NO_CHARACTER in self.rule and self.rule != Capitalize.NO_CHARACTER:
            raise StrategyConfigError(
                f"NO_CHARACTER cannot be combined with other rules (got {self.rule})"
            )

    def capitalizes(self, token_index: int, cluster_index: int) -> bool:
        if Capitalize.EVERY_CHARACTER in self.rule:
            return True

        if cluster_index != 0:
            return False

        if token_index == 0:
            return Capitalize.FIRST_TOKEN in self.rule
        else:
            return Capitalize.OTHER_TOKENS in self.rule


class CaseStyle(enum.Enum):
    """The supported conventions, in the order their variants are generated."""

    CAMEL = ('camelCase', Strategy(Capitalize.OTHER_TOKENS))
    PASCAL = ('PascalCase', Strategy(Capitalize.FIRST_TOKEN | Capitalize.OTHER_TOKENS))
    SNAKE = ('snake_case', Strategy(Capitalize.NO_CHARACTER, '_'))
    KEBAB = ('kebab-case', Strategy(Capitalize.NO_CHARACTER, '-'))
    TITLE = ('Title_Case', Strategy(Capitalize.FIRST_TOKEN | Capitalize.OTHER_TOKENS, '_'))
    CONSTANT = ('CONSTANT_CASE', Strategy(Capitalize.EVERY_CHARACTER, '_'))

    def __init__(self, label: str, strategy: Strategy):
        self.label = label
        self.strategy = strategy


def render(tokens: list[str], strategy: Strategy) -> str:
    words = []

    for i, token in enumerate(tokens):
        clusters = [
            c.upper() if strategy.capitalizes(i, j) else c.lower()
            for j, c in enumerate(graphemes(token))
        ]
        words.append(''.join(clusters))

    return strategy.joiner.join(words)


def generate_variants(tokens: list[str]) -> list[str]:
    """
    Spell the tokens in every CaseStyle. The casing of the tokens themselves
    doesn't matter:

        ['all', 'cases', 'covered'] -> allCasesCovered, AllCasesCovered,
        all_cases_covered, all-cases-covered, All_Cases_Covered, ALL_CASES_COVERED
    """
    return [render(tokens, style.strategy) for style in CaseStyle]
