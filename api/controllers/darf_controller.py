"""DARF upload controller"""

from flask import Blueprint, request

from ..models import PaymentRecordSchema
from ..services import DarfService
from ..utils.helpers import ResponseBuilder, RequestHelper
from ..utils.logger import get_api_logger


def create_darf_controller(darf_service: DarfService) -> Blueprint:
    """Create DARF parsing controller"""

    bp = Blueprint('darfs', __name__, url_prefix='/api/darfs')
    logger = get_api_logger()
    record_schema = PaymentRecordSchema(many=True)

    @bp.route('/parse', methods=['POST'])
    def parse_darfs():
        """Extract DARF slips from an uploaded PDF"""
        logger.info("DARF parse request received", extra=RequestHelper.log_context("parse"))

        records = darf_service.parse_upload(request.files.get('file'))

        return ResponseBuilder.success(
            data={
                "darfs": record_schema.dump(records),
                "count": len(records)
            },
            message="PDF processado com sucesso"
        ), 200

    return bp
