"""
Editing session.

Holds the single current-snapshot reference for one editing session. Every
change goes through apply(), which swaps the reference for the snapshot the
mutation returns.
"""

from typing import Any, Callable

from vitae.contexts.editing.resume_data_structure import ResumeDocument, new_document

Mutation = Callable[..., ResumeDocument]


class EditingSession:
    """
    Current-snapshot holder for a caller that edits a résumé over time.

    Async workflows read self.document before awaiting and apply their result
    to whatever self.document is once they resume, so edits made while a
    request was in flight are kept.

    Attributes:
        document: The current snapshot
        revision: Number of snapshot replacements so far
    """

    def __init__(self, document: ResumeDocument = None):
        self.document = document if document is not None else new_document()
        self.revision = 0

    def apply(self, mutation: Mutation, *args: Any, **kwargs: Any) -> ResumeDocument:
        """
        Run a mutation against the current snapshot and keep its result.

        Args:
            mutation: Function of (doc, *args, **kwargs) returning the next snapshot
            *args, **kwargs: Passed through to the mutation

        Returns:
            The new current snapshot
        """
        updated = mutation(self.document, *args, **kwargs)
        if updated is not self.document:
            self.document = updated
            self.revision += 1
        return self.document
