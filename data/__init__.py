from .models import PaymentRecord, CompanyProfile

__all__ = ['PaymentRecord', 'CompanyProfile']
