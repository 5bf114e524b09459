import logging

from core.exceptions import NotFoundError
from core.resources import ResourceService
from .models import Certificate
from .serializers import CertificateWriteSerializer
from .utils import generate_certificate_id

logger = logging.getLogger(__name__)

NOT_FOUND_OR_INVALID = 'Certificate not found or invalid'


class CertificateService(ResourceService):
    model = Certificate
    create_serializer_class = CertificateWriteSerializer
    update_serializer_class = CertificateWriteSerializer
    unique_field = 'certificate_id'
    unique_label = 'certificateId'

    def prepare_create(self, values):
        if not values.get('certificate_id'):
            values['certificate_id'] = generate_certificate_id(values['course_name'])
            logger.info(f"Generated certificate id {values['certificate_id']}")
        return values

    def verify_by_certificate_id(self, certificate_id):
        """The certificate if it exists and is valid.

        Missing and revoked certificates raise the same NotFoundError.
        """
        certificate = self.list().filter(certificate_id=certificate_id, is_valid=True).first()
        if certificate is None:
            raise NotFoundError(NOT_FOUND_OR_INVALID)
        return certificate
