"""
Job Application Endpoints
Read API: filtered listing, single application, filter options and dashboard stats

Query strings accept repeated keys and the ``key[]=`` array convention,
e.g. ``?status[]=APPLIED&status[]=OFFER&sortBy=companyName&sortOrder=asc``.
"""
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from application.services.job_applications import (
    JobApplicationQueryService,
    collect_query_params,
    normalize_facet_selection,
    normalize_list_query,
)
from presentation.api.v1.container import get_query_service
from presentation.api.v1.dependencies import get_current_user_id
from presentation.api.v1.schemas.common import ErrorResponse, PaginationResponse
from presentation.api.v1.schemas.job_applications import (
    FilterOptionsData,
    FilterOptionsResponse,
    JobApplicationDetailData,
    JobApplicationDetailResponse,
    JobApplicationListData,
    JobApplicationListResponse,
    JobApplicationResponse,
    JobApplicationWithNotesResponse,
    NoteResponse,
    StatsData,
    StatsResponse,
)


router = APIRouter()


@router.get(
    "/job-applications",
    response_model=JobApplicationListResponse,
    responses={400: {"model": ErrorResponse}},
)
async def list_job_applications(
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    service: JobApplicationQueryService = Depends(get_query_service)
):
    """List the current user's job applications (filter, search, sort, paginate)"""
    raw = collect_query_params(request.query_params.multi_items())
    query = normalize_list_query(raw, user_id)

    page = await service.list_applications(query)

    return JobApplicationListResponse(
        data=JobApplicationListData(
            job_applications=[
                JobApplicationResponse.model_validate(app) for app in page.job_applications
            ],
            pagination=PaginationResponse.model_validate(page.pagination),
        )
    )


@router.get(
    "/job-applications/filter-options",
    response_model=FilterOptionsResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
async def get_filter_options(
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    service: JobApplicationQueryService = Depends(get_query_service)
):
    """Values available for each filter control, scoped to the current user"""
    raw = collect_query_params(request.query_params.multi_items())
    selection = normalize_facet_selection(raw)

    options = await service.get_filter_options(user_id, selection)

    return FilterOptionsResponse(data=FilterOptionsData.model_validate(options))


@router.get("/job-applications/stats", response_model=StatsResponse)
async def get_stats(
    user_id: UUID = Depends(get_current_user_id),
    service: JobApplicationQueryService = Depends(get_query_service)
):
    """Dashboard statistics for the current user"""
    stats = await service.get_stats(user_id)
    return StatsResponse(data=StatsData.model_validate(stats))


# Declared last so /filter-options and /stats are matched first
@router.get(
    "/job-applications/{application_id}",
    response_model=JobApplicationDetailResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_job_application(
    application_id: UUID,
    user_id: UUID = Depends(get_current_user_id),
    service: JobApplicationQueryService = Depends(get_query_service)
):
    """One of the current user's applications with its notes"""
    detail = await service.get_application(user_id, application_id)

    job_application = JobApplicationWithNotesResponse.model_validate(detail.job_application)
    job_application = job_application.model_copy(
        update={"notes": [NoteResponse.model_validate(note) for note in detail.notes]}
    )
    return JobApplicationDetailResponse(
        data=JobApplicationDetailData(job_application=job_application)
    )
