"""Job application query engine: filters, sorting, pagination, facets and stats"""

from ..query_params import collect_query_params
from .facets import FacetAggregator, FilterOptions, Option
from .filter_compiler import build_list_predicate, compile_filters
from .normalizer import (
    normalize_facet_selection,
    normalize_filters,
    normalize_list_query,
)
from .query_service import JobApplicationDetail, JobApplicationPage, JobApplicationQueryService
from .search_clause import build_search_clause
from .sort_resolver import parse_sort, resolve_sort
from .stats import ApplicationStats, StatsAggregator, success_rate

__all__ = [
    "FacetAggregator",
    "FilterOptions",
    "Option",
    "build_list_predicate",
    "compile_filters",
    "collect_query_params",
    "normalize_facet_selection",
    "normalize_filters",
    "normalize_list_query",
    "JobApplicationDetail",
    "JobApplicationPage",
    "JobApplicationQueryService",
    "build_search_clause",
    "parse_sort",
    "resolve_sort",
    "ApplicationStats",
    "StatsAggregator",
    "success_rate",
]
