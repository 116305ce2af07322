"""
Index schemas — field sets, suggester and the three demo indexes.

  sql-customers   relational fields, CORS limited to one origin
  storage-users   table storage fields
  sql-blob-index  relational fields, fed by both blob and SQL indexers
"""

from __future__ import annotations

from azure.search.documents.indexes.models import (
    CorsOptions,
    SearchField,
    SearchFieldDataType,
    SearchIndex,
    SearchSuggester,
)

SQL_INDEX_NAME = "sql-customers"
STORAGE_INDEX_NAME = "storage-users"
COMBINED_INDEX_NAME = "sql-blob-index"

ANALYZER = "en.microsoft"
SUGGESTER_NAME = "fieldSuggester"
SUGGESTER_FIELDS = ["FirstName", "LastName"]
SQL_ALLOWED_ORIGINS = ["192.168.1.1"]

# Searchable string columns shared by both field sets, in column order
_TEXT_FIELDS = [
    "NameStyle",
    "Title",
    "FirstName",
    "MiddleName",
    "LastName",
    "Suffix",
    "CompanyName",
    "SalesPerson",
    "EmailAddress",
    "Phone",
]


class SchemaValidationError(ValueError):
    """Raised when an index schema breaks a local invariant."""


def _key_field(name: str) -> SearchField:
    return SearchField(
        name=name,
        type=SearchFieldDataType.String,
        key=True,
        searchable=True,
        analyzer_name=ANALYZER,
    )


def _text_field(name: str) -> SearchField:
    return SearchField(
        name=name,
        type=SearchFieldDataType.String,
        searchable=True,
        filterable=False,
        hidden=False,
        facetable=True,
        sortable=True,
        analyzer_name=ANALYZER,
    )


def _modified_date_field() -> SearchField:
    return SearchField(
        name="ModifiedDate",
        type=SearchFieldDataType.DateTimeOffset,
        searchable=False,
        filterable=False,
        hidden=False,
        facetable=True,
        sortable=True,
    )


def sql_fields() -> list[SearchField]:
    """Fields for documents crawled from SalesLT.Customer (plus blob content)."""
    return (
        [_key_field("CustomerID"), _modified_date_field()]
        + [_text_field(n) for n in _TEXT_FIELDS]
        + [_text_field("content")]
    )


def storage_fields() -> list[SearchField]:
    """Fields for rows crawled from the 'users' table; keyed by the table row key."""
    return [_key_field("Key"), _modified_date_field()] + [_text_field(n) for n in _TEXT_FIELDS]


def field_suggester() -> SearchSuggester:
    # Only one suggester per index; search mode is always analyzingInfixMatching
    return SearchSuggester(name=SUGGESTER_NAME, source_fields=list(SUGGESTER_FIELDS))


def sql_customers_index() -> SearchIndex:
    return SearchIndex(
        name=SQL_INDEX_NAME,
        fields=sql_fields(),
        suggesters=[field_suggester()],
        cors_options=CorsOptions(allowed_origins=list(SQL_ALLOWED_ORIGINS)),
    )


def storage_users_index() -> SearchIndex:
    return SearchIndex(
        name=STORAGE_INDEX_NAME,
        fields=storage_fields(),
        suggesters=[field_suggester()],
    )


def sql_blob_index() -> SearchIndex:
    return SearchIndex(
        name=COMBINED_INDEX_NAME,
        fields=sql_fields(),
        suggesters=[field_suggester()],
    )


def validate_index_schema(index: SearchIndex) -> None:
    """Check the invariants the service would otherwise reject mid-run.

    Raises SchemaValidationError if the index does not have exactly one key
    field, repeats a field name, carries more than one suggester, or has a
    suggester referring to an unknown field.
    """
    fields = index.fields or []

    keys = [f.name for f in fields if f.key]
    if len(keys) != 1:
        raise SchemaValidationError(
            f"Index '{index.name}' must have exactly one key field, found {len(keys)}"
            + (f": {', '.join(keys)}" if keys else "")
        )

    seen: set[str] = set()
    for f in fields:
        if f.name in seen:
            raise SchemaValidationError(f"Index '{index.name}' has duplicate field '{f.name}'")
        seen.add(f.name)

    suggesters = index.suggesters or []
    if len(suggesters) > 1:
        raise SchemaValidationError(
            f"Index '{index.name}' has {len(suggesters)} suggesters; at most one is allowed"
        )
    for s in suggesters:
        unknown = [name for name in s.source_fields if name not in seen]
        if unknown:
            raise SchemaValidationError(
                f"Suggester '{s.name}' on index '{index.name}' refers to unknown fields: "
                f"{', '.join(unknown)}"
            )
