from fastapi import Request
from app.core.storage import MemStorage
from app.services.export_service import SpreadsheetExporter


def get_storage(request: Request) -> MemStorage:
    """Store owned by the running application."""
    return request.app.state.storage


def get_spreadsheet_exporter(request: Request) -> SpreadsheetExporter:
    return request.app.state.spreadsheet_exporter
