from fastapi import APIRouter, Depends, Query

from ... import schemas
from ...services.upstream import UpstreamClient, get_upstream_client

router = APIRouter()


@router.get("/project", response_model=schemas.ProjectInfo)
def upstream_project(project_number: str = Query(..., min_length=1),
                     client: UpstreamClient = Depends(get_upstream_client)):
    """Project lookup; falls back to a mock pad when the upstream API fails"""
    return client.get_project_by_number(project_number)


@router.get("/well", response_model=schemas.WellInfo)
def upstream_well(well_id: str = Query(..., min_length=1),
                  client: UpstreamClient = Depends(get_upstream_client)):
    return client.get_well_info(well_id)


@router.get("/completion-design", response_model=schemas.CompletionDesign)
def upstream_completion_design(well_id: str = Query(..., min_length=1),
                               client: UpstreamClient = Depends(get_upstream_client)):
    return client.get_completion_design(well_id)
