"""Search-term filter builder.

Terms are kept as literal patterns and matched with plain substring tests,
so quotes, spaces, ``$`` and regex metacharacters never need escaping.
"""

from typing import Iterable

from todoview.models import Polarity, SearchPredicate, SearchRule

NEGATION_MARKER = "-"


def parse_term(term: str) -> SearchRule:
    """Turn one raw search term into a rule.

    A leading ``-`` negates the rest of the term. A lone ``-`` has nothing
    to negate and is searched for literally.
    """
    if term.startswith(NEGATION_MARKER) and len(term) > len(NEGATION_MARKER):
        return SearchRule(Polarity.EXCLUDE, term[len(NEGATION_MARKER):])
    return SearchRule(Polarity.INCLUDE, term)


def build_predicate(terms: Iterable[str]) -> SearchPredicate:
    """Compose search terms left-to-right into one AND predicate."""
    return SearchPredicate(tuple(parse_term(term) for term in terms))
