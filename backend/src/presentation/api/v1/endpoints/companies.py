"""
Company Endpoints
Read API over the shared company directory: paged listing and autocomplete
"""
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from application.services.companies import (
    CompanyQueryService,
    normalize_company_query,
    normalize_suggestion_query,
)
from application.services.query_params import collect_query_params
from presentation.api.v1.container import get_company_service
from presentation.api.v1.dependencies import get_current_user_id
from presentation.api.v1.schemas.common import (
    ErrorResponse,
    OffsetPaginationResponse,
    PaginationResponse,
)
from presentation.api.v1.schemas.companies import (
    CompanyListData,
    CompanyListItemResponse,
    CompanyListResponse,
    CompanySuggestionResponse,
    CompanySuggestionsData,
    CompanySuggestionsResponse,
)


router = APIRouter()


@router.get(
    "/companies",
    response_model=CompanyListResponse,
    responses={400: {"model": ErrorResponse}},
)
async def list_companies(
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    service: CompanyQueryService = Depends(get_company_service)
):
    """Companies matching ?search= on name, industry or location"""
    query = normalize_company_query(collect_query_params(request.query_params.multi_items()))

    page = await service.list_companies(user_id, query)

    return CompanyListResponse(
        data=CompanyListData(
            companies=[CompanyListItemResponse.model_validate(c) for c in page.companies],
            pagination=PaginationResponse.model_validate(page.pagination),
        )
    )


@router.get(
    "/companies/suggestions",
    response_model=CompanySuggestionsResponse,
    responses={400: {"model": ErrorResponse}},
)
async def suggest_companies(
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    service: CompanyQueryService = Depends(get_company_service)
):
    """Autocomplete: companies whose name contains ?q=, paged by offset/limit"""
    query = normalize_suggestion_query(collect_query_params(request.query_params.multi_items()))

    result = await service.suggest(user_id, query)

    return CompanySuggestionsResponse(
        data=CompanySuggestionsData(
            suggestions=[CompanySuggestionResponse.model_validate(c) for c in result.suggestions],
            pagination=OffsetPaginationResponse.model_validate(result.pagination),
        )
    )
