"""
Query families.

Each family is built from one query_all_by_* function and exposes the
query_all_by_*, query_by_*, get_all_by_*, get_by_*, find_all_by_* and
find_by_* variants.
"""

from . import alt_text, display_value, label_text, placeholder_text, role, test_id, text, title

QUERY_SETS = (
    role.queries,
    label_text.queries,
    placeholder_text.queries,
    text.queries,
    display_value.queries,
    alt_text.queries,
    title.queries,
    test_id.queries,
)

query_all_by_label_text = label_text.queries.query_all
query_by_label_text = label_text.queries.query_by
get_all_by_label_text = label_text.queries.get_all
get_by_label_text = label_text.queries.get_by
find_all_by_label_text = label_text.queries.find_all
find_by_label_text = label_text.queries.find_by

query_all_by_placeholder_text = placeholder_text.queries.query_all
query_by_placeholder_text = placeholder_text.queries.query_by
get_all_by_placeholder_text = placeholder_text.queries.get_all
get_by_placeholder_text = placeholder_text.queries.get_by
find_all_by_placeholder_text = placeholder_text.queries.find_all
find_by_placeholder_text = placeholder_text.queries.find_by

query_all_by_text = text.queries.query_all
query_by_text = text.queries.query_by
get_all_by_text = text.queries.get_all
get_by_text = text.queries.get_by
find_all_by_text = text.queries.find_all
find_by_text = text.queries.find_by

query_all_by_alt_text = alt_text.queries.query_all
query_by_alt_text = alt_text.queries.query_by
get_all_by_alt_text = alt_text.queries.get_all
get_by_alt_text = alt_text.queries.get_by
find_all_by_alt_text = alt_text.queries.find_all
find_by_alt_text = alt_text.queries.find_by

query_all_by_title = title.queries.query_all
query_by_title = title.queries.query_by
get_all_by_title = title.queries.get_all
get_by_title = title.queries.get_by
find_all_by_title = title.queries.find_all
find_by_title = title.queries.find_by

query_all_by_display_value = display_value.queries.query_all
query_by_display_value = display_value.queries.query_by
get_all_by_display_value = display_value.queries.get_all
get_by_display_value = display_value.queries.get_by
find_all_by_display_value = display_value.queries.find_all
find_by_display_value = display_value.queries.find_by

query_all_by_role = role.queries.query_all
query_by_role = role.queries.query_by
get_all_by_role = role.queries.get_all
get_by_role = role.queries.get_by
find_all_by_role = role.queries.find_all
find_by_role = role.queries.find_by

query_all_by_test_id = test_id.queries.query_all
query_by_test_id = test_id.queries.query_by
get_all_by_test_id = test_id.queries.get_all
get_by_test_id = test_id.queries.get_by
find_all_by_test_id = test_id.queries.find_all
find_by_test_id = test_id.queries.find_by

__all__ = [
    "QUERY_SETS",
    "query_all_by_label_text",
    "query_by_label_text",
    "get_all_by_label_text",
    "get_by_label_text",
    "find_all_by_label_text",
    "find_by_label_text",
    "query_all_by_placeholder_text",
    "query_by_placeholder_text",
    "get_all_by_placeholder_text",
    "get_by_placeholder_text",
    "find_all_by_placeholder_text",
    "find_by_placeholder_text",
    "query_all_by_text",
    "query_by_text",
    "get_all_by_text",
    "get_by_text",
    "find_all_by_text",
    "find_by_text",
    "query_all_by_alt_text",
    "query_by_alt_text",
    "get_all_by_alt_text",
    "get_by_alt_text",
    "find_all_by_alt_text",
    "find_by_alt_text",
    "query_all_by_title",
    "query_by_title",
    "get_all_by_title",
    "get_by_title",
    "find_all_by_title",
    "find_by_title",
    "query_all_by_display_value",
    "query_by_display_value",
    "get_all_by_display_value",
    "get_by_display_value",
    "find_all_by_display_value",
    "find_by_display_value",
    "query_all_by_role",
    "query_by_role",
    "get_all_by_role",
    "get_by_role",
    "find_all_by_role",
    "find_by_role",
    "query_all_by_test_id",
    "query_by_test_id",
    "get_all_by_test_id",
    "get_by_test_id",
    "find_all_by_test_id",
    "find_by_test_id",
]
