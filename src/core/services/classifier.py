"""Marker-based classification of nif.pt result pages.

The registry exposes no API, so the status is inferred from which styled
blocks appear in the returned HTML. Rules are evaluated in a fixed priority
order and the first match wins; a page that matches nothing (including
markup drift upstream) degrades to `RemoteStatus.UNKNOWN`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from core.domain.models import RemoteStatus
from core.interfaces.document import DocumentNode

logger = logging.getLogger(__name__)

ERROR_BLOCK_SELECTOR = ".alert-message.error.block-message"
SUCCESS_BLOCK_SELECTOR = ".alert-message.success.block-message"
SEARCH_RESULTS_SELECTOR = "#search-results"
SEARCH_TITLE_SELECTOR = ".search-title"
BIG_NIF_SELECTOR = ".big-nif"

UNKNOWN_ENTITY_PHRASE = (
    "O NIF indicado é válido mas não conseguimos determinar a entidade associada."
)


@dataclass(frozen=True)
class MarkerRule:
    """A single (predicate, status) pair of the priority table."""

    name: str
    predicate: Callable[[DocumentNode], bool]
    status: RemoteStatus


def has_error_marker(document: DocumentNode) -> bool:
    return document.select_first(ERROR_BLOCK_SELECTOR) is not None


def has_unknown_entity_marker(document: DocumentNode) -> bool:
    """Success block whose text says the entity could not be determined.

    A success block without that sentence does not match, so evaluation
    continues with the next rules.
    """

    success = document.select_first(SUCCESS_BLOCK_SELECTOR)
    if success is None:
        return False
    if UNKNOWN_ENTITY_PHRASE in success.text():
        return True
    logger.debug("Success block present without unknown-entity phrase; continuing")
    return False


def has_multiple_results_marker(document: DocumentNode) -> bool:
    results = document.select_first(SEARCH_RESULTS_SELECTOR)
    if results is None:
        return False
    return results.select_first(SEARCH_TITLE_SELECTOR) is not None


def has_known_entity_marker(document: DocumentNode) -> bool:
    return (
        document.select_first(BIG_NIF_SELECTOR) is not None
        and document.select_first(SEARCH_TITLE_SELECTOR) is not None
    )


DEFAULT_RULES: tuple[MarkerRule, ...] = (
    MarkerRule("error", has_error_marker, RemoteStatus.ERROR),
    MarkerRule("unknown_entity", has_unknown_entity_marker, RemoteStatus.VALID_UNKNOWN),
    MarkerRule("multiple_results", has_multiple_results_marker, RemoteStatus.MULTIPLE_RESULTS),
    MarkerRule("known_entity", has_known_entity_marker, RemoteStatus.VALID_KNOWN),
)


def classify_document(
    document: DocumentNode,
    rules: Sequence[MarkerRule] = DEFAULT_RULES,
) -> RemoteStatus:
    """Return the status of the first matching rule, or `UNKNOWN`."""

    for rule in rules:
        if rule.predicate(document):
            logger.debug("Marker rule %r matched", rule.name)
            return rule.status
    return RemoteStatus.UNKNOWN
