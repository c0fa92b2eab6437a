"""
FileNet ECM connector for workflow engines.

Creates, reads, updates and deletes documents in a FileNet ECM repository
on behalf of workflow jobs, attributing every ECM call to the effective
user identity of the job.
"""

__version__ = "0.1.0"
