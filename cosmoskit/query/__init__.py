"""Query specification and paginated iteration."""

from .sql_query_spec import SqlParameter, SqlQuerySpec, to_query_spec
from .query_iterator import QueryIterator

__all__ = ["QueryIterator", "SqlParameter", "SqlQuerySpec", "to_query_spec"]
