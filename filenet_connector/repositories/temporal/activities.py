"""
Temporal activity wrappers for the FileNet document operations.

These classes should only be imported by workers: they pull in the HTTP
client, which has no place inside the workflow sandbox.
"""

from filenet_connector.repositories.ecm.document import (
    FileNetDocumentOperations,
)

from .activity_names import DOCUMENT_OPERATIONS_ACTIVITY_BASE
from .decorators import temporal_activity_registration


@temporal_activity_registration(DOCUMENT_OPERATIONS_ACTIVITY_BASE)
class TemporalFileNetDocumentOperations(FileNetDocumentOperations):
    """FileNetDocumentOperations whose operations are Temporal activities.

    Activities are named ``filenet.document_operations.<operation>`` and
    take the same arguments as the operations, the serialized workflow
    variables included.
    """

    pass
