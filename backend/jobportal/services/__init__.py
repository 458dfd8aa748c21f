from jobportal.services.accounts import (
    ProfileUpdate,
    RegistrationData,
    UploadedFile,
    authenticate,
    register_account,
    update_profile,
)

__all__ = [
    "ProfileUpdate",
    "RegistrationData",
    "UploadedFile",
    "authenticate",
    "register_account",
    "update_profile",
]
