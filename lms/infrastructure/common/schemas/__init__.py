from .response_wrappers import ApiModel, ErrorResponse, MediaAsset, SuccessResponse
from .settings_schemas import AppSettingsResponse

__all__ = [
    "ApiModel",
    "AppSettingsResponse",
    "ErrorResponse",
    "MediaAsset",
    "SuccessResponse",
]
