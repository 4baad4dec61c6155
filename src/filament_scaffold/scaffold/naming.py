"""Name helpers: studly casing, plural/singular class names, resource base names."""

from __future__ import annotations

import re

from filament_scaffold.scaffold.inflector import pluralize, singularize

NAMESPACE_SEPARATOR = "\\"
DEFAULT_BASE_NAME = "Resource"
RESOURCE_SUFFIX = "Resource"

_WORD_SPLIT = re.compile(r"[\s\-_]+")
_LAST_STUDLY_WORD = re.compile(r"[A-Z]?[^A-Z]*$")
_TRIM_CHARS = "/\\ \t\r\n"


def studly(value: str) -> str:
    """Convert ``sales-owner`` / ``sales_owner`` / ``sales owner`` to ``SalesOwner``.

    Only the first letter of each word is upper-cased; the rest of the word
    is kept as typed, so ``invoiceItem`` becomes ``InvoiceItem``.
    """
    words = _WORD_SPLIT.split(value.strip())
    return "".join(w[:1].upper() + w[1:] for w in words if w)


def _split_last_word(value: str) -> tuple[str, str]:
    match = _LAST_STUDLY_WORD.search(value)
    if match is None or not match.group(0):
        return "", value
    return value[: match.start()], match.group(0)


def plural_studly(value: str) -> str:
    """Pluralize the last word of a studly-cased name (``SalesPerson`` -> ``SalesPeople``)."""
    head, last = _split_last_word(value)
    return head + pluralize(last)


def singular(value: str) -> str:
    """Singularize the last word of a studly-cased name (``InvoiceItems`` -> ``InvoiceItem``)."""
    head, last = _split_last_word(value)
    return head + singularize(last)


def class_basename(fqn: str) -> str:
    """Return the class name without its namespace."""
    return fqn.replace("/", NAMESPACE_SEPARATOR).rstrip(NAMESPACE_SEPARATOR).rsplit(
        NAMESPACE_SEPARATOR, 1,
    )[-1]


def namespace_of(fqn: str) -> str:
    """Return everything before the last namespace separator."""
    if NAMESPACE_SEPARATOR not in fqn:
        return ""
    return fqn.rsplit(NAMESPACE_SEPARATOR, 1)[0]


def join_namespace(*parts: str) -> str:
    """Join namespace fragments, dropping empty ones and stray separators."""
    cleaned = [p.strip(NAMESPACE_SEPARATOR) for p in parts]
    return NAMESPACE_SEPARATOR.join(p for p in cleaned if p)


def normalize_resource_base_name(resource_name: str) -> str:
    """Turn a user-supplied resource name into a singular studly base name.

    ``"sales/owner"`` -> ``"Owner"``, ``"OwnerResource"`` -> ``"Owner"``,
    ``"/"`` -> ``"Resource"``.  Never raises.
    """
    normalized = resource_name.strip(_TRIM_CHARS).replace("/", NAMESPACE_SEPARATOR)
    base = studly(normalized.rsplit(NAMESPACE_SEPARATOR, 1)[-1])
    if base.endswith(RESOURCE_SUFFIX):
        base = base[: -len(RESOURCE_SUFFIX)]
    if not base:
        return DEFAULT_BASE_NAME
    return singular(base)
