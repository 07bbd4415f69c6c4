from .patch import (
    AIPatchError,
    MalformedResponse,
    PatchProposal,
    TransportFailure,
    changed_keys,
    describe_changes,
    merge_props,
    parse_completion,
)
from .transport import (
    PRESET_PROMPTS,
    CompletionRequest,
    CompletionResponse,
    CompletionTransport,
    request_patch,
)
