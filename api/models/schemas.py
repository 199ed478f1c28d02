"""Data schemas and validation models"""

import re
import uuid
from marshmallow import Schema, fields, validate, post_load, EXCLUDE

from data.models import CompanyProfile, PaymentRecord


class DigitsField(fields.String):
    """String field that keeps only digits on load."""

    def _deserialize(self, value, attr, data, **kwargs):
        value = super()._deserialize(value, attr, data, **kwargs)
        return re.sub(r'\D', '', value)


class CompanyProfileSchema(Schema):

    class Meta:
        unknown = EXCLUDE

    bank = fields.String(load_default="", allow_none=True)
    agency = fields.String(load_default="", allow_none=True)
    agency_digit = fields.String(load_default="", allow_none=True)
    account = fields.String(load_default="", allow_none=True)
    account_digit = fields.String(load_default="", allow_none=True)
    agreement = fields.String(load_default="", allow_none=True)
    company_name = fields.String(
        load_default="",
        allow_none=True,
        validate=validate.Length(max=100)
    )
    cnpj = fields.String(load_default="", allow_none=True)

    @post_load
    def make_profile(self, data, **kwargs):
        return CompanyProfile.from_dict(data)


class PaymentRecordSchema(Schema):

    class Meta:
        unknown = EXCLUDE

    id = fields.String(load_default=lambda: str(uuid.uuid4()))
    name = fields.String(load_default="")
    period = fields.String(load_default="")
    cnpj = DigitsField(load_default="")
    revenue_code = fields.String(load_default="")
    reference_number = fields.String(load_default="")
    due_date = fields.String(load_default="")

    principal = fields.Float(load_default=0.0, validate=validate.Range(min=0, error="Valor não pode ser negativo"))
    fine = fields.Float(load_default=0.0, validate=validate.Range(min=0, error="Valor não pode ser negativo"))
    interest = fields.Float(load_default=0.0, validate=validate.Range(min=0, error="Valor não pode ser negativo"))
    total = fields.Float(load_default=0.0, validate=validate.Range(min=0, error="Valor não pode ser negativo"))

    @post_load
    def make_record(self, data, **kwargs):
        return PaymentRecord(**data)


class RemittanceRequestSchema(Schema):

    class Meta:
        unknown = EXCLUDE

    company = fields.Nested(
        CompanyProfileSchema,
        required=True,
        error_messages={
            "required": "Dados da empresa são obrigatórios"
        }
    )

    darfs = fields.List(fields.Nested(PaymentRecordSchema), load_default=list)
