"""Response encoders for Entra External ID and Azure AD B2C user-flow webhooks."""

__version__ = "0.1.0"
