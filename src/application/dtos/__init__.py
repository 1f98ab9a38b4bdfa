from .path_reference_dtos import PathReferenceRequest, PathReferenceResponse
from .record_dtos import SessionRecordDTO, records_to_json
from .session_dtos import SessionInfoDTO, SessionListResponse

__all__ = [
    "PathReferenceRequest",
    "PathReferenceResponse",
    "SessionRecordDTO",
    "records_to_json",
    "SessionInfoDTO",
    "SessionListResponse",
]
