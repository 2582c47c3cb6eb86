from fastapi import APIRouter, Depends
from starlette import status

from lms.application.layout.use_cases.layout_use_case import LayoutUseCase
from lms.core import container
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.common.schemas import SuccessResponse
from lms.infrastructure.identity.dependencies import AdminUser
from lms.infrastructure.layout.schemas import LayoutEnvelope, LayoutRequest, LayoutResponse

router = APIRouter(tags=["layout"])


def _layout_fields(data: LayoutRequest) -> dict:
    fields = data.model_dump(exclude={"type"})
    # Lists stay None when omitted so edits can tell "not sent" from "empty"
    return {key: value for key, value in fields.items() if key in data.model_fields_set}


@router.post("/create-layout", status_code=status.HTTP_201_CREATED)
async def create_layout(
    data: LayoutRequest,
    _: AdminUser,
    use_case: LayoutUseCase = Depends(inject_use_case(container.layout_use_case)),
) -> SuccessResponse:
    """Create the Banner, Faq, Category or Layout block; one block per type."""
    message = use_case.create_layout(data.type, **_layout_fields(data))
    return SuccessResponse(message=message)


@router.put("/edit-layout")
async def edit_layout(
    data: LayoutRequest,
    _: AdminUser,
    use_case: LayoutUseCase = Depends(inject_use_case(container.layout_use_case)),
) -> SuccessResponse:
    message = use_case.edit_layout(data.type, **_layout_fields(data))
    return SuccessResponse(message=message)


@router.get("/get-layout/{layout_type}")
async def get_layout(
    layout_type: str,
    use_case: LayoutUseCase = Depends(inject_use_case(container.layout_use_case)),
) -> LayoutEnvelope:
    layout = use_case.get_layout(layout_type)
    return LayoutEnvelope(layout=LayoutResponse.model_validate(layout))
