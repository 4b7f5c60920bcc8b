"""
Tests for sort resolution and search clause building
"""
import pytest

from application.services.job_applications.search_clause import build_search_clause
from application.services.job_applications.sort_resolver import parse_sort, resolve_sort
from core.exceptions import ValidationException
from domain.enums import SearchField, SortDirection, SortField
from domain.value_objects import SortInstruction, SortSpec
from domain.value_objects.predicates import Contains, Or


class TestSortResolver:
    """Test public sort keys -> attribute paths"""

    def test_default_is_newest_first(self):
        assert resolve_sort(SortSpec()) == SortInstruction("created_at", SortDirection.DESC)

    def test_company_name_is_virtual_key(self):
        """Test companyName sorts through the related company"""
        instruction = resolve_sort(SortSpec(SortField.COMPANY_NAME, SortDirection.ASC))
        assert instruction.path == "company.name"
        assert not instruction.descending

    @pytest.mark.parametrize("key,path", [
        ("appliedDate", "applied_date"),
        ("jobTitle", "job_title"),
        ("priority", "priority"),
        ("salaryMin", "salary_min"),
        ("salaryMax", "salary_max"),
    ])
    def test_own_fields(self, key, path):
        assert resolve_sort(key).path == path

    def test_unknown_key(self):
        with pytest.raises(ValidationException) as exc_info:
            parse_sort("salary")
        assert "sortBy" in exc_info.value.errors

    def test_unknown_direction(self):
        with pytest.raises(ValidationException) as exc_info:
            parse_sort("createdAt", "sideways")
        assert "sortOrder" in exc_info.value.errors


class TestSearchClause:
    """Test free-text search expansion"""

    def test_absent_or_blank(self):
        assert build_search_clause(None) is None
        assert build_search_clause("  ") is None

    def test_default_fields(self):
        """Test job title, company name and personal notes are searched"""
        assert build_search_clause("react") == Or((
            Contains("job_title", "react"),
            Contains("company.name", "react"),
            Contains("personal_notes", "react"),
        ))

    def test_explicit_fields_deduplicated(self):
        clause = build_search_clause(
            "go", [SearchField.REQUIREMENTS, SearchField.LOCATION, SearchField.REQUIREMENTS]
        )
        assert clause == Or((Contains("requirements", "go"), Contains("location", "go")))

    def test_single_field_is_not_wrapped(self):
        assert build_search_clause("go", [SearchField.JOB_TITLE]) == Contains("job_title", "go")

    def test_empty_field_list_uses_defaults(self):
        assert build_search_clause("go", []) == build_search_clause("go")
