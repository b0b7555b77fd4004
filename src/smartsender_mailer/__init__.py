"""
smartsender_mailer – SmartSender transactional email adapter.

Import path convention::

    from smartsender_mailer.application.email import EmailContent, EmailIdentity
    from smartsender_mailer.adapters.smartsender import SmartSenderMailer, SmartSenderSettings
    from smartsender_mailer.kernel.errors import EmailError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
