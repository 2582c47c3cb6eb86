import logging

from fastapi import APIRouter, Depends

from lms.application.identity.use_cases.update_user_use_case import UpdateUserUseCase
from lms.application.identity.use_cases.user_admin_use_case import UserAdminUseCase
from lms.core import container
from lms.infrastructure.common.di import inject_use_case
from lms.infrastructure.common.schemas import SuccessResponse
from lms.infrastructure.identity.dependencies import AdminUser, CurrentUser
from lms.infrastructure.identity.schemas import (
    AvatarUpdateRequest,
    PasswordUpdateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserRoleUpdateRequest,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.get("/me")
async def get_me(
    current_user: CurrentUser,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserEnvelope:
    """Get the current user's profile information."""
    user = use_case.get_user(current_user.id)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.put("/update-user-info")
async def update_user_info(
    data: UserUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserEnvelope:
    user = use_case.update_info(current_user.id, name=data.name, email=data.email)
    return UserEnvelope(message="User info updated successfully", user=UserResponse.model_validate(user))


@router.put("/update-user-password")
async def update_user_password(
    data: PasswordUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserEnvelope:
    user = use_case.update_password(current_user.id, data.old_password, data.new_password)
    return UserEnvelope(
        message="Password updated successfully", user=UserResponse.model_validate(user)
    )


@router.put("/update-avatar")
async def update_avatar(
    data: AvatarUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateUserUseCase = Depends(inject_use_case(container.update_user_use_case)),
) -> UserEnvelope:
    """Replace the profile picture with a base64 data URL image."""
    user = use_case.update_avatar(current_user.id, data.avatar)
    return UserEnvelope(message="Avatar updated successfully", user=UserResponse.model_validate(user))


@router.get("/get-all-users")
async def get_all_users(
    _: AdminUser,
    use_case: UserAdminUseCase = Depends(inject_use_case(container.user_admin_use_case)),
) -> UserListResponse:
    users = use_case.list_users()
    return UserListResponse(users=[UserResponse.model_validate(user) for user in users])


@router.put("/update-user-role")
async def update_user_role(
    data: UserRoleUpdateRequest,
    _: AdminUser,
    use_case: UserAdminUseCase = Depends(inject_use_case(container.user_admin_use_case)),
) -> UserEnvelope:
    user = use_case.update_role(data.id, data.role)
    return UserEnvelope(message="User role updated successfully", user=UserResponse.model_validate(user))


@router.delete("/delete-user/{user_id}")
async def delete_user(
    user_id: int,
    _: AdminUser,
    use_case: UserAdminUseCase = Depends(inject_use_case(container.user_admin_use_case)),
) -> SuccessResponse:
    use_case.delete_user(user_id)
    return SuccessResponse(message="User deleted successfully")
