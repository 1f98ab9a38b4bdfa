"""
Path Reference Router - Endpoint for copying ``@path#Lx-y`` references.
"""

from fastapi import APIRouter, HTTPException, status

from src.application.dtos.path_reference_dtos import (
    PathReferenceRequest,
    PathReferenceResponse,
)
from src.domain.exceptions.domain_exceptions import (
    InvalidFilePathError,
    InvalidSelectionError,
)
from src.presentation.api.dependencies import CopyPathReferenceUseCaseDep

router = APIRouter(prefix="/path-reference", tags=["path-reference"])


@router.post(
    "",
    response_model=PathReferenceResponse,
    summary="Copy a path reference",
    description="Format the project-relative path of a file, with the selected "
    "line range, and copy it to the clipboard.",
)
async def copy_path_reference(
    request: PathReferenceRequest,
    use_case: CopyPathReferenceUseCaseDep,
):
    """Copy a path reference.

    This endpoint:
    1. Resolves the project-relative path
    2. Converts the selection offsets into 1-based line numbers
    3. Copies the reference to the clipboard when asked to
    """
    try:
        return await use_case.execute(request)
    except (InvalidFilePathError, InvalidSelectionError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
