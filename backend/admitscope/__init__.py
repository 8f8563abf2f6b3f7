"""AdmitScope: applicant scoring and admission probability engine."""

__version__ = "1.0.0"
