"""Label print route: raw ZPL in, rendered document written to disk."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from zpl_emulator.core.dependencies import get_print_service
from zpl_emulator.services.print_service import LabelPrintService

router = APIRouter()


@router.post(
    "",
    summary="Print a label",
    description=(
        "Accepts a raw ZPL label description as the request body, renders it to PDF "
        "through the rendering service and stores the document in the configured "
        "output directory. Responds 200 on success and 500 on any failure."
    ),
    responses={
        200: {"description": "Label rendered and stored"},
        500: {"description": "Label could not be rendered or stored"},
    },
)
async def print_label(
    request: Request,
    service: Annotated[LabelPrintService, Depends(get_print_service)],
) -> Response:
    """Run the print pipeline for the request body."""
    payload = await request.body()
    await service.handle(payload)
    return Response(status_code=200)
