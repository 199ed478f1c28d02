"""Remittance file controller"""

from io import BytesIO

from flask import Blueprint, request, send_file

from ..models import REMITTANCE_MIMETYPE, RemittanceRequestSchema
from ..services import RemittanceService
from ..utils.helpers import RequestHelper
from ..utils.logger import get_api_logger


def create_remittance_controller(remittance_service: RemittanceService) -> Blueprint:

    bp = Blueprint('remittance', __name__, url_prefix='/api/remittance')
    logger = get_api_logger()
    request_schema = RemittanceRequestSchema()

    @bp.route('/generate', methods=['POST'])
    def generate_remittance():
        """Build the CNAB 240 file and return it as a download"""
        logger.info("Remittance generation requested", extra=RequestHelper.log_context("generate"))

        payload = request_schema.load(request.get_json(silent=True) or {})
        remittance = remittance_service.generate(payload["company"], payload["darfs"])

        response = send_file(
            BytesIO(remittance.to_bytes()),
            mimetype=REMITTANCE_MIMETYPE,
            as_attachment=True,
            download_name=remittance.filename
        )
        response.headers["X-Record-Count"] = str(remittance.record_count)
        return response

    return bp
