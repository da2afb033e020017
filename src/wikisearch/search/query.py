"""Query resolution and boolean query evaluation.

`search` is the only place the search core touches the term index: it looks a
single term up and wraps the counts as a `ResultSet`.

`evaluate_query` understands a small boolean language on top of that:

    java AND programming
    java OR python NOT snake
    (java | python) -coffee
    java programming            # adjacent terms imply AND

`NOT` is binary ("and not"): there is no universe of documents to complement
against, so `a NOT b` is `a - b`. `AND`/`NOT` bind tighter than `OR`.
"""

from __future__ import annotations

import logging
import operator
import re
from typing import Callable, Dict, List

from wikisearch.exceptions import QuerySyntaxError
from wikisearch.index.base import TermIndex

from .result_set import ResultSet

logger = logging.getLogger(__name__)

_OPERATOR_ALIASES = {
    "AND": "AND",
    "&": "AND",
    "OR": "OR",
    "|": "OR",
    "NOT": "NOT",
    "-": "NOT",
}
_PRECEDENCE = {"OR": 1, "AND": 2, "NOT": 2}
_COMBINE: Dict[str, Callable[[ResultSet, ResultSet], ResultSet]] = {
    "AND": operator.and_,
    "OR": operator.or_,
    "NOT": operator.sub,
}
_PARENS = ("(", ")")
_TRIM_PUNCT = re.compile(r"^[^\w]+|[^\w]+$")
_EXCLUDE_PREFIX = re.compile(r"^-\w")


def search(term: str, index: TermIndex) -> ResultSet:
    """Look `term` up in `index` and wrap the counts as a new ResultSet.

    Lookup errors propagate to the caller unchanged.
    """
    counts = index.get_counts(term)
    logger.debug("Term %r matched %d documents", term, len(counts))
    return ResultSet(counts)


# --------------------------------------------------------------------------- #
#  Parsing                                                                    #
# --------------------------------------------------------------------------- #
def normalize_term(raw: str) -> str:
    """Lower-case a term and strip surrounding punctuation, as the index stores it."""
    return _TRIM_PUNCT.sub("", raw.lower())


def _tokenize(text: str) -> List[str]:
    spaced = text.replace("(", " ( ").replace(")", " ) ")
    tokens: List[str] = []
    for raw in spaced.split():
        op = _OPERATOR_ALIASES.get(raw.upper())
        if op:
            tokens.append(op)
            continue
        if raw in _PARENS:
            tokens.append(raw)
            continue
        # "-term" excludes the term, same as "NOT term"
        if _EXCLUDE_PREFIX.match(raw):
            tokens.append("NOT")
            raw = raw[1:]
        term = normalize_term(raw)
        if term:
            tokens.append(term)
    return tokens


def _is_operand(token: str) -> bool:
    return token not in _PRECEDENCE and token not in _PARENS


def _normalize(tokens: List[str]) -> List[str]:
    """Fold `AND NOT` into `NOT` and insert the implicit AND between adjacent operands."""
    out: List[str] = []
    for token in tokens:
        if token == "NOT" and out and out[-1] == "AND":
            out[-1] = "NOT"
            continue
        if out and (token == "(" or _is_operand(token)):
            if out[-1] == ")" or _is_operand(out[-1]):
                out.append("AND")
        out.append(token)
    return out


def parse_query(text: str) -> List[str]:
    """Parse a boolean query into postfix (RPN) tokens.

    Raises `QuerySyntaxError` on a missing operand or unbalanced parentheses.
    An empty or punctuation-only query parses to an empty list.
    """
    tokens = _normalize(_tokenize(text or ""))
    output: List[str] = []
    stack: List[str] = []
    expect_operand = True
    for token in tokens:
        if token == "(":
            stack.append(token)
        elif token == ")":
            if expect_operand:
                raise QuerySyntaxError(f"Expected a term before ')' in query: {text!r}")
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise QuerySyntaxError(f"Unmatched ')' in query: {text!r}")
            stack.pop()
        elif token in _PRECEDENCE:
            if expect_operand:
                raise QuerySyntaxError(f"Operator {token} is missing its left operand: {text!r}")
            while stack and stack[-1] != "(" and _PRECEDENCE[stack[-1]] >= _PRECEDENCE[token]:
                output.append(stack.pop())
            stack.append(token)
            expect_operand = True
        else:
            output.append(token)
            expect_operand = False

    if tokens and expect_operand:
        raise QuerySyntaxError(f"Query ends with a dangling operator: {text!r}")
    while stack:
        op = stack.pop()
        if op == "(":
            raise QuerySyntaxError(f"Unmatched '(' in query: {text!r}")
        output.append(op)
    return output


# --------------------------------------------------------------------------- #
#  Evaluation                                                                 #
# --------------------------------------------------------------------------- #
def evaluate_query(text: str, index: TermIndex) -> ResultSet:
    """Evaluate a boolean query against `index`.

    Each distinct term is looked up once. An empty query yields an empty ResultSet.
    """
    rpn = parse_query(text)
    if not rpn:
        return ResultSet.empty()

    resolved: Dict[str, ResultSet] = {}
    stack: List[ResultSet] = []
    for token in rpn:
        combine = _COMBINE.get(token)
        if combine is not None:
            right = stack.pop()
            left = stack.pop()
            stack.append(combine(left, right))
            continue
        if token not in resolved:
            resolved[token] = search(token, index)
        stack.append(resolved[token])
    return stack[0]
