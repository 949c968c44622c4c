"""Uploads and attachments."""

import mimetypes

from zendesk_client._internal.resource import Resource
from zendesk_client.exceptions import ZendeskValidationError
from zendesk_client.models.attachments import Attachment, Upload

DOCS = "ticketing/tickets/ticket-attachments/"


class AttachmentsResource(Resource):
    def upload(
        self,
        file_name: str,
        data: bytes,
        *,
        content_type: str | None = None,
        token: str | None = None,
    ) -> Upload:
        """Upload a file to attach to a ticket comment.

        Args:
            file_name: Name shown on the attachment.
            data: Raw file contents.
            content_type: MIME type; guessed from the file name when omitted.
            token: Token of a previous upload to add this file to.

        Returns:
            The upload; pass its `token` in TicketCommentRequest.uploads.
        """
        if not file_name:
            raise ZendeskValidationError("file_name is required")
        params = {"filename": file_name}
        if token:
            params["token"] = token
        content_type = content_type or mimetypes.guess_type(file_name)[0] or "application/binary"

        response = self._action(
            "POST",
            "uploads.json",
            doc=DOCS + "#upload-files",
            expected=(201,),
            params=params,
            content=data,
            headers={"Content-Type": content_type},
        )
        return self._decode(response, "upload", Upload)

    def get(self, attachment_id: int) -> Attachment | None:
        """Fetch attachment metadata, or None if it does not exist."""
        return self._fetch(f"attachments/{attachment_id}.json", "attachment", Attachment, doc=DOCS + "#show-attachment")

    def delete_upload(self, token: str) -> None:
        """Discard an upload that has not been attached to a comment yet."""
        self._remove(f"uploads/{token}.json", doc=DOCS + "#delete-upload")
