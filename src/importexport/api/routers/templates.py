"""Template CRUD and template data endpoints."""

from fastapi import APIRouter, Depends, Query, Response

from importexport.api.deps import (
    get_template_service,
    get_object_data,
    get_format_data,
    get_user_id,
)
from importexport.api.schemas import (
    TemplateCreateRequest,
    TemplateUpdateRequest,
    TemplateDeleteRequest,
    TemplateResponse,
    TemplateListResponse,
    TemplateDataPayload,
)
from importexport.services import (
    TemplateService,
    TemplateDataService,
    TemplateCreate,
    TemplateUpdate,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListResponse)
def list_templates(
    object_type: str = Query(..., min_length=1),
    service: TemplateService = Depends(get_template_service),
):
    """List the templates of an object type, ordered by name."""
    templates = service.list_templates(object_type)
    return TemplateListResponse(
        templates=[TemplateResponse.model_validate(t) for t in templates],
        count=len(templates),
    )


@router.post("", response_model=TemplateResponse, status_code=201)
def create_template(
    data: TemplateCreateRequest,
    service: TemplateService = Depends(get_template_service),
    user_id: int = Depends(get_user_id),
):
    """Create a template; the name must be unique for its object type."""
    template_id = service.add(
        TemplateCreate(
            kind=data.kind,
            object_type=data.object_type,
            format_type=data.format_type,
            name=data.name,
            validity=data.validity,
            comment=data.comment,
        ),
        user_id=user_id,
    )
    return TemplateResponse.model_validate(service.get(template_id))


@router.post("/batch-delete", status_code=204)
def delete_templates(
    data: TemplateDeleteRequest,
    service: TemplateService = Depends(get_template_service),
):
    """Delete several templates together with their data."""
    service.delete(data.template_ids)
    return Response(status_code=204)


@router.get("/{template_id}", response_model=TemplateResponse)
def get_template(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
):
    """Get a single template."""
    return TemplateResponse.model_validate(service.get(template_id))


@router.put("/{template_id}", response_model=TemplateResponse)
def update_template(
    template_id: int,
    data: TemplateUpdateRequest,
    service: TemplateService = Depends(get_template_service),
    user_id: int = Depends(get_user_id),
):
    """Rename a template or change its validity or comment."""
    template = service.update(
        template_id,
        TemplateUpdate(name=data.name, validity=data.validity, comment=data.comment),
        user_id=user_id,
    )
    return TemplateResponse.model_validate(template)


@router.delete("/{template_id}", status_code=204)
def delete_template(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
):
    """Delete a template together with its data."""
    service.get(template_id)
    service.delete(template_id)
    return Response(status_code=204)


@router.get("/{template_id}/object-data", response_model=TemplateDataPayload)
def get_object_data_of_template(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
    object_data: TemplateDataService = Depends(get_object_data),
):
    """Object backend configuration of a template."""
    service.get(template_id)
    return TemplateDataPayload(data=object_data.get_all(template_id))


@router.put("/{template_id}/object-data", response_model=TemplateDataPayload)
def save_object_data_of_template(
    template_id: int,
    payload: TemplateDataPayload,
    service: TemplateService = Depends(get_template_service),
    object_data: TemplateDataService = Depends(get_object_data),
):
    """Replace the object backend configuration of a template."""
    service.get(template_id)
    object_data.save_all(template_id, payload.data)
    return TemplateDataPayload(data=object_data.get_all(template_id))


@router.get("/{template_id}/format-data", response_model=TemplateDataPayload)
def get_format_data_of_template(
    template_id: int,
    service: TemplateService = Depends(get_template_service),
    format_data: TemplateDataService = Depends(get_format_data),
):
    """Format backend configuration of a template."""
    service.get(template_id)
    return TemplateDataPayload(data=format_data.get_all(template_id))


@router.put("/{template_id}/format-data", response_model=TemplateDataPayload)
def save_format_data_of_template(
    template_id: int,
    payload: TemplateDataPayload,
    service: TemplateService = Depends(get_template_service),
    format_data: TemplateDataService = Depends(get_format_data),
):
    """Replace the format backend configuration of a template."""
    service.get(template_id)
    format_data.save_all(template_id, payload.data)
    return TemplateDataPayload(data=format_data.get_all(template_id))
