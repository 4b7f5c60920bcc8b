"""
Search Clause Builder
Free-text search expanded into an OR of per-field substring predicates
"""
from typing import Dict, Iterable, Optional

from domain.enums import DEFAULT_SEARCH_FIELDS, SearchField
from domain.value_objects.predicates import COMPANY_NAME, Contains, Predicate, any_of


SEARCH_FIELD_PATHS: Dict[SearchField, str] = {
    SearchField.JOB_TITLE: "job_title",
    SearchField.COMPANY_NAME: COMPANY_NAME,
    SearchField.PERSONAL_NOTES: "personal_notes",
    SearchField.JOB_DESCRIPTION: "job_description",
    SearchField.REQUIREMENTS: "requirements",
    SearchField.LOCATION: "location",
}


def build_search_clause(
    search: Optional[str],
    fields: Optional[Iterable[SearchField]] = None
) -> Optional[Predicate]:
    """
    Build the search disjunction

    Args:
        search: Search term; absent or blank means no clause
        fields: Fields to look into; empty or None means the defaults
            (job title, company name, personal notes)

    Returns:
        A predicate to AND with the other filters, or None
    """
    if search is None or not search.strip():
        return None

    selected = list(dict.fromkeys(fields or ())) or list(DEFAULT_SEARCH_FIELDS)
    return any_of(*(Contains(SEARCH_FIELD_PATHS[f], search) for f in selected))
