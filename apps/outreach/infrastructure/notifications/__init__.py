from .outreach_mailer import OutreachMailer

__all__ = ['OutreachMailer']
