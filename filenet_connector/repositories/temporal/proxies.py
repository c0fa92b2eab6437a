"""
Workflow-side proxy for DocumentOperations.

Used *inside* Temporal workflows: each operation executes the matching
activity on a connector worker, so workflow code stays deterministic.
"""

from filenet_connector.repositories.document import DocumentOperations

from .activity_names import DOCUMENT_OPERATIONS_ACTIVITY_BASE
from .decorators import temporal_workflow_proxy


@temporal_workflow_proxy(
    DOCUMENT_OPERATIONS_ACTIVITY_BASE,
    default_timeout_seconds=60,
    timeouts={"get_content": 300, "create": 300, "update": 300},
)
class WorkflowDocumentOperationsProxy(DocumentOperations):
    """DocumentOperations implementation that calls connector activities."""

    @property
    def is_workflow_context_aware(self) -> bool:
        return True
